"""
HTTP-level tests: wire names, status codes and error bodies.
"""
import logging
from datetime import date, timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.hotels.repository import get_hotel_repository
from app.main import app

pytestmark = pytest.mark.asyncio


def in_days(days: int) -> str:
    return (date.today() + timedelta(days=days)).isoformat()


@pytest_asyncio.fixture
async def catalog(client):
    """One active hotel with a 100.00 room type and ten rooms a night for days 10..12."""
    hotel = await client.post("/api/hotels", json={
        "nombre": "Hotel Ritz Madrid",
        "direccion": "Plaza de la Lealtad, 5, Madrid",
        "categoria": 5,
    })
    room_type = await client.post("/api/roomtypes", json={
        "nombre": "Double Room",
        "precioBase": 100.0,
        "hotelId": hotel.json()["id"],
    })
    ids = {"hotelId": hotel.json()["id"], "roomTypeId": room_type.json()["id"]}
    await client.post("/api/inventory/bulk", json={
        **ids, "fechaInicio": in_days(10), "fechaFin": in_days(13), "cantidadTotal": 10,
    })
    return ids


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "backoffice"}


async def test_unexpected_error_is_logged_and_hidden(caplog):
    class BrokenHotelRepository:
        async def list_all(self):
            raise RuntimeError("connection to db-primary:5432 reset")

    app.dependency_overrides[get_hotel_repository] = lambda: BrokenHotelRepository()
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        with caplog.at_level(logging.ERROR, logger="app.main"):
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get("/api/hotels")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert "Unhandled error on GET /api/hotels" in caplog.text
    assert "db-primary" in caplog.text


class TestHotelsApi:

    async def test_create_and_fetch(self, client):
        response = await client.post("/api/hotels", json={
            "nombre": "Hotel AC Malaga", "direccion": "Calle Cortina del Muelle, 1", "categoria": 4,
        })

        assert response.status_code == 201
        body = response.json()
        assert body["nombre"] == "Hotel AC Malaga"
        assert body["estado"] is True
        assert body["roomTypes"] == []

        fetched = await client.get(f"/api/hotels/{body['id']}")
        assert fetched.json()["categoria"] == 4

    async def test_invalid_category(self, client):
        response = await client.post("/api/hotels", json={"nombre": "Hotel", "direccion": "Street", "categoria": 9})

        assert response.status_code == 422

    async def test_unknown_hotel(self, client):
        response = await client.get("/api/hotels/999")

        assert response.status_code == 404
        assert response.json() == {"detail": "Hotel with id 999 not found."}

    async def test_paged(self, client, catalog):
        response = await client.get("/api/hotels/paged", params={"pageNumber": 1, "pageSize": 5, "searchTerm": "ritz"})

        body = response.json()
        assert response.status_code == 200
        assert body["totalCount"] == 1
        assert body["totalPages"] == 1
        assert body["hasNextPage"] is False
        assert body["items"][0]["roomTypes"][0]["precioBase"] == 100.0

    async def test_bad_page_number(self, client):
        response = await client.get("/api/hotels/paged", params={"pageNumber": 0})

        assert response.status_code == 400

    async def test_delete(self, client):
        created = await client.post("/api/hotels", json={"nombre": "Hotel", "direccion": "Street", "categoria": 3})

        response = await client.delete(f"/api/hotels/{created.json()['id']}")

        assert response.status_code == 204
        assert (await client.get(f"/api/hotels/{created.json()['id']}")).status_code == 404

    async def test_delete_with_inventory_is_a_conflict(self, client, catalog):
        hotel = await client.delete(f"/api/hotels/{catalog['hotelId']}")
        room_type = await client.delete(f"/api/roomtypes/{catalog['roomTypeId']}")

        assert hotel.status_code == 409
        assert hotel.json() == {"detail": "Hotel still has inventory or reservations; deactivate it instead."}
        assert room_type.status_code == 409
        assert (await client.get(f"/api/hotels/{catalog['hotelId']}")).status_code == 200


class TestRoomTypesApi:

    async def test_room_type_carries_hotel_name(self, client, catalog):
        response = await client.get(f"/api/roomtypes/{catalog['roomTypeId']}")

        assert response.json()["hotelNombre"] == "Hotel Ritz Madrid"

    async def test_assign_to_unknown_hotel(self, client, catalog):
        response = await client.post("/api/roomtypes/assign-to-hotel", json={
            "hotelId": 999, "roomTypeIds": [catalog["roomTypeId"]],
        })

        assert response.status_code == 404


class TestInventoryApi:

    async def test_range_uses_ledger_names(self, client, catalog):
        response = await client.get(
            f"/api/inventory/hotel/{catalog['hotelId']}/roomtype/{catalog['roomTypeId']}",
            params={"fechaInicio": in_days(10), "fechaFin": in_days(12)},
        )

        rows = response.json()
        assert [row["fecha"] for row in rows] == [in_days(10), in_days(11), in_days(12)]
        assert rows[0]["cantidadTotal"] == 10
        assert rows[0]["cantidadReservada"] == 0
        assert rows[0]["cantidadDisponible"] == 10

    async def test_range_rejects_reversed_dates(self, client, catalog):
        response = await client.get(
            f"/api/inventory/hotel/{catalog['hotelId']}/roomtype/{catalog['roomTypeId']}",
            params={"fechaInicio": in_days(12), "fechaFin": in_days(10)},
        )

        assert response.status_code == 400

    async def test_duplicate_day(self, client, catalog):
        response = await client.post("/api/inventory", json={**catalog, "fecha": in_days(10), "cantidadTotal": 5})

        assert response.status_code == 409

    async def test_override_cannot_reserve_more_than_total(self, client, catalog):
        created = await client.post("/api/inventory", json={**catalog, "fecha": in_days(20), "cantidadTotal": 5})
        assert created.status_code == 201

        response = await client.put(
            f"/api/inventory/{created.json()['id']}",
            json={"cantidadTotal": 5, "cantidadReservada": 6},
        )

        assert response.status_code == 409

    async def test_check_availability(self, client, catalog):
        response = await client.post("/api/inventory/check-availability", json={
            **catalog, "fechaInicio": in_days(10), "fechaFin": in_days(13), "cantidadHabitaciones": 10,
        })

        body = response.json()
        assert body["available"] is True
        assert len(body["inventoryDetails"]) == 3

    async def test_check_availability_rejects_empty_range(self, client, catalog):
        response = await client.post("/api/inventory/check-availability", json={
            **catalog, "fechaInicio": in_days(10), "fechaFin": in_days(10), "cantidadHabitaciones": 1,
        })

        assert response.status_code == 400


class TestReservationsApi:

    async def test_create(self, client, catalog):
        response = await client.post("/api/reservations", json={
            **catalog,
            "huespedNombre": "Maria Gonzalez",
            "fechaEntrada": f"{in_days(10)}T15:30:00",
            "fechaSalida": in_days(13),
            "cantidadHabitaciones": 2,
        })

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        reservation = body["reservation"]
        assert reservation["montoTotal"] == 600.0
        assert reservation["estado"] == "Confirmed"
        assert reservation["noches"] == 3
        assert reservation["fechaEntrada"] == in_days(10)

        ledger = await client.get(
            f"/api/inventory/hotel/{catalog['hotelId']}/roomtype/{catalog['roomTypeId']}",
            params={"fechaInicio": in_days(10), "fechaFin": in_days(12)},
        )
        assert [row["cantidadReservada"] for row in ledger.json()] == [2, 2, 2]

    async def test_business_failure_is_400_with_result_body(self, client, catalog):
        response = await client.post("/api/reservations", json={
            **catalog,
            "huespedNombre": "Maria Gonzalez",
            "fechaEntrada": in_days(10),
            "fechaSalida": in_days(13),
            "cantidadHabitaciones": 11,
        })

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "No availability for the selected dates",
            "reservation": None,
        }

    async def test_status_and_cancel(self, client, catalog):
        created = await client.post("/api/reservations", json={
            **catalog, "huespedNombre": "Luis Torres", "fechaEntrada": in_days(10), "fechaSalida": in_days(11),
        })
        reservation_id = created.json()["reservation"]["id"]

        completed = await client.patch(f"/api/reservations/{reservation_id}/status", json={"estado": "Completed"})
        assert completed.json()["estado"] == "Completed"

        invalid = await client.patch(f"/api/reservations/{reservation_id}/status", json={"estado": "Lost"})
        assert invalid.status_code == 422

        cancelled = await client.post(f"/api/reservations/{reservation_id}/cancel")
        assert cancelled.json() == {"message": "Reservation cancelled successfully"}
        assert (await client.get(f"/api/reservations/{reservation_id}")).json()["estado"] == "Cancelled"

    async def test_unknown_reservation(self, client):
        assert (await client.get("/api/reservations/999")).status_code == 404
        assert (await client.post("/api/reservations/999/cancel")).status_code == 404
