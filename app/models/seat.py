from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Integer,
    and_,
    false,
    or_,
    true,
)
from sqlalchemy.orm import relationship
from app.database import Base


class Seat(Base):
    __tablename__ = "seats"

    route_id = Column(
        Integer, ForeignKey("routes.id", ondelete="CASCADE"), primary_key=True
    )
    row = Column(Integer, primary_key=True, autoincrement=False)
    column = Column(Integer, primary_key=True, autoincrement=False)
    occupied = Column(Boolean, nullable=False, default=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)

    __table_args__ = (
        # Un asiento libre nunca tiene ocupante y uno ocupado siempre lo tiene
        CheckConstraint(
            or_(
                and_(occupied == false(), user_id.is_(None)),
                and_(occupied == true(), user_id.isnot(None)),
            ),
            name="ck_seats_occupant_matches_flag",
        ),
        CheckConstraint(and_(row >= 1, column >= 1), name="ck_seats_position"),
        {"extend_existing": True},
    )

    # Relationships
    route = relationship("Route", back_populates="seats")
    user = relationship("User", back_populates="seats")

    @property
    def label(self) -> str:
        return f"{self.row}-{self.column}"
