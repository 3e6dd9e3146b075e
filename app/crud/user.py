from sqlalchemy import update
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from app.enums.user_role import UserRole
from app.models.seat import Seat
from app.models.user import User
from app.schemas.user import UserCreate
from app.services.auth import get_password_hash

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_users(db: Session, skip: int = 0, limit: int = 100) -> List[User]:
    return db.query(User).order_by(User.id).offset(skip).limit(limit).all()


def create_user(
    db: Session, user: UserCreate, role: UserRole = UserRole.USUARIO
) -> User:
    db_user = User(
        name=user.name,
        email=user.email,
        hashed_password=get_password_hash(user.password),
        role=role.value,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def update_password(db: Session, user_id: int, password: str) -> Optional[User]:
    db_user = get_user(db, user_id)
    if not db_user:
        return None

    db_user.hashed_password = get_password_hash(password)
    db.commit()
    db.refresh(db_user)
    return db_user


def update_role(db: Session, user_id: int, role: UserRole) -> Optional[User]:
    db_user = get_user(db, user_id)
    if not db_user:
        return None

    db_user.role = role.value
    db.commit()
    db.refresh(db_user)
    logger.info("User %s role changed to %s", user_id, role.value)
    return db_user


def delete_user(db: Session, user_id: int) -> bool:
    db_user = get_user(db, user_id)
    if not db_user:
        return False

    # Liberar sus asientos en la misma transacción que borra al usuario
    released = db.execute(
        update(Seat)
        .where(Seat.user_id == user_id)
        .values(occupied=False, user_id=None)
        .execution_options(synchronize_session=False)
    ).rowcount
    db.delete(db_user)
    db.commit()
    logger.info("User %s deleted, %s seats released", user_id, released)
    return True
