"""
Borrado de rutas frente a reservas confirmadas en otra sesión
"""
import pytest

from app.crud import route as route_crud
from app.exceptions import ConflictError
from app.models.route import Route
from app.models.seat import Seat
from app.services.seat_reservation import SeatReservationService


def test_delete_route_refuses_when_seat_was_reserved_after_loading(
    file_session_factory,
):
    admin_db = file_session_factory()
    passenger_db = file_session_factory()
    try:
        # El admin ve la ruta con todos los asientos libres
        route = route_crud.get_route(admin_db, 1)
        assert not any(seat.occupied for seat in route.seats)

        SeatReservationService(passenger_db).reserve(1, 1, 1, 7)

        with pytest.raises(ConflictError):
            route_crud.delete_route(admin_db, 1)
    finally:
        admin_db.close()
        passenger_db.close()

    db = file_session_factory()
    try:
        assert db.query(Route).filter_by(id=1).count() == 1
        assert db.query(Seat).filter_by(route_id=1).count() == 4
        reservations = SeatReservationService(db).list_my_reservations(7)
        assert [(r.route_id, r.row, r.column) for r in reservations] == [(1, 1, 1)]
    finally:
        db.close()


def test_delete_route_with_only_free_seats(file_session_factory):
    admin_db = file_session_factory()
    try:
        route = route_crud.get_route(admin_db, 1)
        assert len(route.seats) == 4

        assert route_crud.delete_route(admin_db, 1) is True
        assert route_crud.delete_route(admin_db, 1) is False
    finally:
        admin_db.close()

    db = file_session_factory()
    try:
        assert db.query(Route).count() == 0
        assert db.query(Seat).count() == 0
    finally:
        db.close()
