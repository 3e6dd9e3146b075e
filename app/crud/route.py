from sqlalchemy import delete, false
from sqlalchemy.orm import Session
from typing import List, Optional
import logging
import os

from app.exceptions import ConflictError
from app.models.route import Route
from app.models.seat import Seat
from app.schemas.route import RouteCreate, RouteUpdate

logger = logging.getLogger(__name__)

DEFAULT_SEAT_ROWS = int(os.getenv("SEAT_ROWS", "10"))
DEFAULT_SEAT_COLUMNS = int(os.getenv("SEAT_COLUMNS", "4"))


def get_route(db: Session, route_id: int) -> Optional[Route]:
    return db.query(Route).filter(Route.id == route_id).first()


def get_routes(db: Session, skip: int = 0, limit: int = 100) -> List[Route]:
    return db.query(Route).order_by(Route.id).offset(skip).limit(limit).all()


def create_route(db: Session, route: RouteCreate) -> Route:
    """
    Crea una ruta junto con su grilla de asientos, todos libres.

    Args:
        db: Sesión de base de datos
        route: Datos de la ruta; rows/columns definen la grilla

    Returns:
        La ruta creada
    """
    rows = route.rows or DEFAULT_SEAT_ROWS
    columns = route.columns or DEFAULT_SEAT_COLUMNS

    db_route = Route(**route.model_dump(exclude={"rows", "columns"}))
    db_route.seats = [
        Seat(row=row, column=column, occupied=False)
        for row in range(1, rows + 1)
        for column in range(1, columns + 1)
    ]
    db.add(db_route)
    db.commit()
    db.refresh(db_route)
    logger.info(
        "Route %s created with %s seats (%sx%s)",
        db_route.id,
        rows * columns,
        rows,
        columns,
    )
    return db_route


def update_route(db: Session, route_id: int, route: RouteUpdate) -> Optional[Route]:
    db_route = get_route(db, route_id)
    if not db_route:
        return None

    update_data = route.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        # Solo el mapa admite quedar vacío
        if value is None and field != "map_url":
            continue
        setattr(db_route, field, value)

    db.commit()
    db.refresh(db_route)
    return db_route


def delete_route(db: Session, route_id: int) -> bool:
    """
    Borra una ruta y sus asientos libres en una sola transacción.

    Primero se borran solo los asientos libres; si queda alguno es porque está
    reservado y la ruta no se borra.

    Raises:
        ConflictError: la ruta tiene asientos reservados
    """
    # Bloqueo de la fila de la ruta mientras se decide el borrado
    db_route = (
        db.query(Route).filter(Route.id == route_id).with_for_update().first()
    )
    if not db_route:
        return False

    db.execute(
        delete(Seat)
        .where(Seat.route_id == route_id, Seat.occupied == false())
        .execution_options(synchronize_session="fetch")
    )
    remaining = db.query(Seat).filter(Seat.route_id == route_id).count()
    if remaining > 0:
        db.rollback()
        logger.info(
            "Route %s not deleted: %s seats still reserved", route_id, remaining
        )
        raise ConflictError("La ruta tiene asientos reservados")

    # La colección de asientos en memoria puede estar desactualizada
    db.expire(db_route, ["seats"])
    db.delete(db_route)
    db.commit()
    logger.info("Route %s deleted", route_id)
    return True
