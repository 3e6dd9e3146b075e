from sqlalchemy.orm import Session
from app.enums.user_role import UserRole
from app.models.user import User
from app.services.auth import get_password_hash
from dotenv import load_dotenv
import logging
import os

load_dotenv()

logger = logging.getLogger(__name__)


def create_initial_admin(db: Session):
    """
    Crea el usuario admin inicial si la tabla de usuarios está vacía.
    """
    if db.query(User).count() > 0:
        logger.info("Ya existen usuarios, no se crea el admin inicial.")
        return None

    email = os.getenv("ADMIN_EMAIL")
    password = os.getenv("ADMIN_PASSWORD")
    if not email or not password:
        logger.warning(
            "ADMIN_EMAIL/ADMIN_PASSWORD no configurados, no se crea el admin inicial."
        )
        return None

    db_user = User(
        name=os.getenv("ADMIN_NAME", "admin"),
        email=email,
        hashed_password=get_password_hash(password),
        role=UserRole.ADMIN.value,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info(f"Admin creado: {email}")
    return db_user
