"""
Servicio de reserva de asientos.

Es el único escritor de la ocupación de asientos. Reservar y cancelar se
expresan como un único UPDATE condicional (compare-and-swap sobre la fila del
asiento) y se decide el resultado por la cantidad de filas afectadas, de modo
que dos pedidos simultáneos sobre el mismo asiento nunca ganan ambos.
"""
from typing import Dict, List
import logging

from fastapi import Depends
from sqlalchemy import false, true, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.exceptions import (
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from app.models.route import Route
from app.models.seat import Seat
from app.schemas.seat import Reservation

logger = logging.getLogger(__name__)


def _validate_position(row, column) -> None:
    for name, value in (("fila", row), ("columna", column)):
        if value is None:
            raise ValidationError(f"Falta la {name} del asiento")
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValidationError(f"La {name} del asiento es inválida")


class SeatReservationService:
    def __init__(self, db: Session):
        self.db = db

    def _get_seat(self, route_id: int, row: int, column: int):
        return (
            self.db.query(Seat)
            .filter(
                Seat.route_id == route_id,
                Seat.row == row,
                Seat.column == column,
            )
            .first()
        )

    def list_seats(self, route_id: int) -> Dict[str, bool]:
        """
        Devuelve la ocupación de todos los asientos de una ruta.

        Las claves tienen el formato "fila-columna".
        """
        seats = (
            self.db.query(Seat.row, Seat.column, Seat.occupied)
            .filter(Seat.route_id == route_id)
            .order_by(Seat.row, Seat.column)
            .all()
        )
        if not seats:
            raise NotFoundError("No hay asientos para esta ruta")
        return {f"{seat.row}-{seat.column}": bool(seat.occupied) for seat in seats}

    def reserve(self, route_id: int, row: int, column: int, user_id: int) -> Reservation:
        """
        Ocupa un asiento libre a nombre del usuario.

        Raises:
            ValidationError: fila o columna faltante o inválida
            NotFoundError: el asiento no existe
            ConflictError: el asiento ya estaba ocupado
            StoreError: falla de la base de datos
        """
        _validate_position(row, column)

        statement = (
            update(Seat)
            .where(
                Seat.route_id == route_id,
                Seat.row == row,
                Seat.column == column,
                Seat.occupied == false(),
            )
            .values(occupied=True, user_id=user_id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.db.execute(statement)
            if result.rowcount != 1:
                self.db.rollback()
                if self._get_seat(route_id, row, column) is None:
                    raise NotFoundError("Asiento no encontrado")
                logger.info(
                    "Seat %s-%s on route %s already taken (user %s)",
                    row,
                    column,
                    route_id,
                    user_id,
                )
                raise ConflictError("El asiento ya está ocupado")

            # Datos de la ruta leídos en la misma transacción que ocupa el asiento
            route = (
                self.db.query(Route.destination, Route.price)
                .filter(Route.id == route_id)
                .one()
            )
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Error reserving seat %s-%s on route %s", row, column, route_id)
            raise StoreError("Error al reservar el asiento") from exc

        logger.info(
            "Seat %s-%s on route %s reserved by user %s", row, column, route_id, user_id
        )
        return Reservation(
            user_id=user_id,
            route_id=route_id,
            row=row,
            column=column,
            destination=route.destination,
            price=route.price,
        )

    def cancel(self, route_id: int, row: int, column: int, user_id: int) -> None:
        """
        Libera un asiento reservado por el usuario.

        Si el asiento no existe, está libre o pertenece a otro usuario se
        responde igual (NotFoundError) para no revelar quién lo ocupa.
        """
        _validate_position(row, column)

        statement = (
            update(Seat)
            .where(
                Seat.route_id == route_id,
                Seat.row == row,
                Seat.column == column,
                Seat.user_id == user_id,
                Seat.occupied == true(),
            )
            .values(occupied=False, user_id=None)
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.db.execute(statement)
            if result.rowcount != 1:
                self.db.rollback()
                raise NotFoundError("Reserva no encontrada")
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Error cancelling seat %s-%s on route %s", row, column, route_id)
            raise StoreError("Error al cancelar la reserva") from exc

        logger.info(
            "Seat %s-%s on route %s released by user %s", row, column, route_id, user_id
        )

    def list_my_reservations(self, user_id: int) -> List[Reservation]:
        results = (
            self.db.query(
                Seat.user_id,
                Seat.route_id,
                Seat.row,
                Seat.column,
                Route.destination,
                Route.price,
            )
            .join(Route, Route.id == Seat.route_id)
            .filter(Seat.user_id == user_id, Seat.occupied == true())
            .order_by(Seat.route_id, Seat.row, Seat.column)
            .all()
        )
        return [Reservation(**result._mapping) for result in results]


def get_seat_service(db: Session = Depends(get_db)) -> SeatReservationService:
    return SeatReservationService(db)
