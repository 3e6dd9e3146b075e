"""
Tests HTTP de asientos y reservas
"""
from sqlalchemy import Update
from sqlalchemy.exc import OperationalError

from app.crud import user as crud_user
from app.services.seat_reservation import SeatReservationService
from tests.conftest import auth_headers


def test_seat_endpoints_require_token(client, sample_route):
    assert client.get(f"/routes/{sample_route.id}/seats").status_code == 401
    assert client.get("/my-reservations").status_code == 401

    response = client.post(
        f"/routes/{sample_route.id}/seats/reserve", json={"row": 1, "column": 1}
    )
    assert response.status_code == 401
    assert response.json() == {"message": "Token requerido"}


def test_invalid_token_is_rejected(client, sample_route):
    response = client.get(
        f"/routes/{sample_route.id}/seats",
        headers={"Authorization": "Bearer not-a-token"},
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Token inválido"


def test_list_seats(client, sample_route, passenger):
    response = client.get(
        f"/routes/{sample_route.id}/seats", headers=auth_headers(passenger)
    )

    assert response.status_code == 200
    body = response.json()
    assert body["route_id"] == sample_route.id
    assert len(body["seats"]) == 12
    assert body["seats"]["2-3"] is False


def test_list_seats_unknown_route(client, sample_route, passenger):
    response = client.get("/routes/999/seats", headers=auth_headers(passenger))

    assert response.status_code == 404


def test_reserve_and_conflict(client, sample_route, passenger, other_passenger):
    url = f"/routes/{sample_route.id}/seats/reserve"

    response = client.post(
        url, json={"row": 2, "column": 3}, headers=auth_headers(passenger)
    )
    assert response.status_code == 200
    reservation = response.json()["reservation"]
    assert reservation["user_id"] == passenger.id
    assert reservation["destination"] == "Cusco"

    response = client.post(
        url, json={"row": 2, "column": 3}, headers=auth_headers(other_passenger)
    )
    assert response.status_code == 409
    assert response.json()["message"] == "El asiento ya está ocupado"

    seats = client.get(
        f"/routes/{sample_route.id}/seats", headers=auth_headers(other_passenger)
    ).json()["seats"]
    assert seats["2-3"] is True


def test_reserve_unknown_seat(client, sample_route, passenger):
    response = client.post(
        f"/routes/{sample_route.id}/seats/reserve",
        json={"row": 10, "column": 1},
        headers=auth_headers(passenger),
    )

    assert response.status_code == 404


def test_reserve_malformed_body(client, sample_route, passenger):
    url = f"/routes/{sample_route.id}/seats/reserve"
    headers = auth_headers(passenger)

    for body in ({"row": 1}, {"row": "a", "column": 1}, {"row": 0, "column": 1}, {}):
        response = client.post(url, json=body, headers=headers)
        assert response.status_code == 400
        assert "message" in response.json()


def test_my_reservations_and_cancel(client, sample_route, passenger):
    headers = auth_headers(passenger)
    assert client.get("/my-reservations", headers=headers).json()["reservations"] == []

    client.post(
        f"/routes/{sample_route.id}/seats/reserve",
        json={"row": 1, "column": 2},
        headers=headers,
    )
    reservations = client.get("/my-reservations", headers=headers).json()[
        "reservations"
    ]
    assert len(reservations) == 1
    assert reservations[0]["route_id"] == sample_route.id
    assert (reservations[0]["row"], reservations[0]["column"]) == (1, 2)
    assert reservations[0]["price"] == 45.5

    response = client.delete(
        f"/my-reservations/{sample_route.id}/1/2", headers=headers
    )
    assert response.status_code == 200
    assert client.get("/my-reservations", headers=headers).json()["reservations"] == []


def test_cancel_someone_elses_reservation_is_not_found(
    client, sample_route, passenger, other_passenger
):
    client.post(
        f"/routes/{sample_route.id}/seats/reserve",
        json={"row": 3, "column": 3},
        headers=auth_headers(passenger),
    )

    response = client.delete(
        f"/my-reservations/{sample_route.id}/3/3",
        headers=auth_headers(other_passenger),
    )

    assert response.status_code == 404
    seats = client.get(
        f"/routes/{sample_route.id}/seats", headers=auth_headers(passenger)
    ).json()["seats"]
    assert seats["3-3"] is True


def test_cancel_with_malformed_path(client, sample_route, passenger):
    response = client.delete(
        f"/my-reservations/{sample_route.id}/x/1", headers=auth_headers(passenger)
    )

    assert response.status_code == 400


def test_token_of_deleted_user_cannot_reserve(client, db, sample_route, passenger):
    headers = auth_headers(passenger)
    crud_user.delete_user(db, passenger.id)

    response = client.post(
        f"/routes/{sample_route.id}/seats/reserve",
        json={"row": 1, "column": 1},
        headers=headers,
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Token inválido"}
    seats = SeatReservationService(db).list_seats(sample_route.id)
    assert seats["1-1"] is False


def test_store_failure_answers_500_with_message(
    client, db, sample_route, passenger, monkeypatch
):
    original_execute = db.execute

    def execute(statement, *args, **kwargs):
        if isinstance(statement, Update):
            raise OperationalError(str(statement), {}, Exception("disk I/O error"))
        return original_execute(statement, *args, **kwargs)

    monkeypatch.setattr(db, "execute", execute)

    response = client.post(
        f"/routes/{sample_route.id}/seats/reserve",
        json={"row": 1, "column": 1},
        headers=auth_headers(passenger),
    )

    assert response.status_code == 500
    assert response.json() == {"message": "Error al reservar el asiento"}
    monkeypatch.undo()
    assert SeatReservationService(db).list_seats(sample_route.id)["1-1"] is False
