from pydantic import BaseModel, Field
from typing import Dict, List


class SeatPosition(BaseModel):
    row: int = Field(..., ge=1)
    column: int = Field(..., ge=1)


class SeatMapResponse(BaseModel):
    message: str
    route_id: int
    seats: Dict[str, bool]


class Reservation(BaseModel):
    user_id: int
    route_id: int
    row: int
    column: int
    destination: str
    price: float

    class Config:
        from_attributes = True


class ReservationResponse(BaseModel):
    message: str
    reservation: Reservation


class ReservationsResponse(BaseModel):
    message: str
    reservations: List[Reservation]
