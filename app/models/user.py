from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from app.database import Base
from app.enums.user_role import UserRole
from datetime import datetime


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default=UserRole.USUARIO.value)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Asientos que el usuario tiene reservados
    seats = relationship("Seat", back_populates="user", passive_deletes=True)
