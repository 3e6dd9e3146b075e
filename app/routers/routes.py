from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.crud import route as crud
from app.exceptions import NotFoundError
from app.schemas.route import RouteCreate, RouteResponse, RouteUpdate
from app.schemas.seat import ReservationResponse, SeatMapResponse, SeatPosition
from app.services.auth import CurrentUser, get_current_user
from app.services.permissions import require_admin
from app.services.seat_reservation import SeatReservationService, get_seat_service

router = APIRouter()


@router.get("")
def read_routes(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    routes = crud.get_routes(db, skip=skip, limit=limit)
    return {
        "message": "Rutas obtenidas correctamente",
        "routes": [RouteResponse.model_validate(route) for route in routes],
    }


@router.post("", status_code=status.HTTP_201_CREATED)
def create_route(
    route: RouteCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    db_route = crud.create_route(db=db, route=route)
    return {
        "message": "Ruta creada correctamente",
        "route": RouteResponse.model_validate(db_route),
    }


@router.get("/{route_id}")
def read_route(
    route_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    db_route = crud.get_route(db, route_id=route_id)
    if db_route is None:
        raise NotFoundError("Ruta no encontrada")
    return {
        "message": "Ruta obtenida correctamente",
        "route": RouteResponse.model_validate(db_route),
    }


@router.put("/{route_id}")
def update_route(
    route_id: int,
    route: RouteUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    db_route = crud.update_route(db=db, route_id=route_id, route=route)
    if db_route is None:
        raise NotFoundError("Ruta no encontrada")
    return {
        "message": "Ruta actualizada correctamente",
        "route": RouteResponse.model_validate(db_route),
    }


@router.delete("/{route_id}")
def delete_route(
    route_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    # No se borran rutas con pasajeros: delete_route responde 409 en ese caso
    if not crud.delete_route(db=db, route_id=route_id):
        raise NotFoundError("Ruta no encontrada")
    return {"message": "Ruta eliminada correctamente"}


@router.get("/{route_id}/seats", response_model=SeatMapResponse)
def read_seats(
    route_id: int,
    service: SeatReservationService = Depends(get_seat_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    return {
        "message": "Asientos obtenidos correctamente",
        "route_id": route_id,
        "seats": service.list_seats(route_id),
    }


@router.post("/{route_id}/seats/reserve", response_model=ReservationResponse)
def reserve_seat(
    route_id: int,
    position: SeatPosition,
    service: SeatReservationService = Depends(get_seat_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    reservation = service.reserve(
        route_id, position.row, position.column, current_user.id
    )
    return {"message": "Asiento reservado correctamente", "reservation": reservation}
