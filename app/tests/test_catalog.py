"""
Testes do catálogo de serviços e barbeiros.
"""
import pytest

from app.repositories.barbers_repo import list_active_barbers
from app.repositories.services_repo import list_active_services
from app.domain.enums import StoreError
from app.services.catalog import (
    NO_BARBERS,
    NO_SERVICES,
    format_barbers,
    format_price,
    format_services,
)


def _seed(db):
    with db.connection() as conn:
        conn.execute("INSERT INTO barbers(name, specialty, is_active) VALUES(?, ?, 1)", ("Juan", "Fades"))
        conn.execute("INSERT INTO barbers(name, specialty, is_active) VALUES(?, ?, 1)", ("Pedro", None))
        conn.execute("INSERT INTO barbers(name, specialty, is_active) VALUES(?, ?, 0)", ("Luis", None))
        conn.execute(
            "INSERT INTO services(name, description, price_cents, is_active) VALUES(?, ?, ?, 1)",
            ("Corte", "Máquina y tijera", 15000),
        )
        conn.execute(
            "INSERT INTO services(name, description, price_cents, is_active) VALUES(?, ?, ?, 1)",
            ("Barba", None, None),
        )
        conn.commit()


def test_list_active_barbers(db):
    _seed(db)
    result = list_active_barbers(db)
    assert result.ok
    assert [b["name"] for b in result.value] == ["Juan", "Pedro"]


def test_list_active_services(db):
    _seed(db)
    result = list_active_services(db)
    assert [s["name"] for s in result.value] == ["Corte", "Barba"]
    assert result.value[0]["price_cents"] == 15000


def test_catalog_storage_fault_returns_empty_list(db):
    db.close()

    barbers = list_active_barbers(db)
    services = list_active_services(db)

    assert barbers.value == [] and barbers.error == StoreError.STORAGE
    assert services.value == [] and services.error == StoreError.STORAGE


@pytest.mark.parametrize("cents, expected", [(15000, "$150"), (12550, "$125.50"), (None, "N/A")])
def test_format_price(cents, expected):
    assert format_price(cents) == expected


def test_format_services():
    text = format_services([
        {"name": "Corte", "description": "Máquina y tijera", "price_cents": 15000},
        {"name": "", "description": None, "price_cents": None},
    ])

    assert text.startswith("*📋 SERVICIOS DISPONIBLES*")
    assert "1. *Corte*\n   Máquina y tijera\n   💰 Precio: $150" in text
    assert "2. *Sin nombre*\n   💰 Precio: N/A" in text


def test_format_barbers():
    text = format_barbers([{"name": "Juan", "specialty": "Fades"}, {"name": "Pedro"}])

    assert text.startswith("*👨‍💼 NUESTROS BARBEROS*")
    assert "1. *Juan*\n   Fades" in text
    assert text.endswith("2. *Pedro*")


def test_format_empty_catalog():
    assert format_services([]) == NO_SERVICES
    assert format_barbers([]) == NO_BARBERS


def test_catalog_routes(client):
    _seed(client.app.state.db)

    services = client.get("/catalog/services")
    assert services.status_code == 200
    assert [s["name"] for s in services.json()["items"]] == ["Corte", "Barba"]
    assert "SERVICIOS DISPONIBLES" in services.json()["message"]

    barbers = client.get("/catalog/barbers")
    assert barbers.status_code == 200
    assert len(barbers.json()["items"]) == 2


def test_catalog_routes_empty(client):
    response = client.get("/catalog/barbers")
    assert response.status_code == 200
    assert response.json() == {"items": [], "message": NO_BARBERS}
