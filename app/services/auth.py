from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from app.database import get_db
from app.exceptions import AuthenticationError
from app.models.user import User
import logging
import os
from dotenv import load_dotenv
import warnings

# Suppress the bcrypt warning
warnings.filterwarnings("ignore", ".*bcrypt version.*")
warnings.filterwarnings("ignore", ".*trapped.*error reading bcrypt version.*")
warnings.filterwarnings("ignore", ".*AttributeError.*__about__.*")

load_dotenv()

logger = logging.getLogger(__name__)

# Security configuration
SECRET_KEY = os.getenv("SECRET_KEY", "caminante-dev-secret")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(
    os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
)  # 1 hora por defecto

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=12,
)
# auto_error=False para responder 401 con nuestro propio formato de error
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """Identidad verificada que viaja en el token: id y rol."""

    id: int
    role: str


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt


def create_user_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    return create_access_token(
        data={"sub": str(user.id), "role": user.role}, expires_delta=expires_delta
    )


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    user = get_user_by_email(db, email)
    if not user:
        logger.warning("Login rejected: unknown email %s", email)
        return None

    if not verify_password(password, user.hashed_password):
        logger.warning("Login rejected: wrong password for user %s", user.id)
        return None

    logger.info("User %s authenticated", user.id)
    return user


def decode_access_token(token: str) -> CurrentUser:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        subject = payload.get("sub")
        role = payload.get("role")
        if subject is None or role is None:
            raise AuthenticationError("Token inválido")
        return CurrentUser(id=int(subject), role=role)
    except (JWTError, ValueError):
        raise AuthenticationError("Token inválido")


def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)
) -> CurrentUser:
    if not token:
        raise AuthenticationError("Token requerido")
    token_user = decode_access_token(token)

    # El token puede sobrevivir a un usuario borrado; el rol vigente es el de la base
    user = db.query(User).filter(User.id == token_user.id).first()
    if user is None:
        logger.warning("Token for deleted user %s rejected", token_user.id)
        raise AuthenticationError("Token inválido")
    return CurrentUser(id=user.id, role=user.role)
