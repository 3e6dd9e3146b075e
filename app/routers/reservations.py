from fastapi import APIRouter, Depends

from app.schemas.seat import ReservationsResponse
from app.services.auth import CurrentUser, get_current_user
from app.services.seat_reservation import SeatReservationService, get_seat_service

router = APIRouter()


@router.get("", response_model=ReservationsResponse)
def read_my_reservations(
    service: SeatReservationService = Depends(get_seat_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    return {
        "message": "Reservas obtenidas correctamente",
        "reservations": service.list_my_reservations(current_user.id),
    }


@router.delete("/{route_id}/{row}/{column}")
def cancel_reservation(
    route_id: int,
    row: int,
    column: int,
    service: SeatReservationService = Depends(get_seat_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    service.cancel(route_id, row, column, current_user.id)
    return {
        "message": "Reserva cancelada correctamente",
        "route_id": route_id,
        "row": row,
        "column": column,
    }
