from sqlalchemy import Column, Integer, String, DateTime, Numeric, JSON
from sqlalchemy.orm import relationship
from app.database import Base
from datetime import datetime


class Route(Base):
    __tablename__ = "routes"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    destination = Column(String, nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    schedules = Column(JSON, nullable=False, default=list)
    map_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    seats = relationship("Seat", back_populates="route", cascade="all, delete-orphan")
