from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

import database
from Models import Address, Customer, Employee, Role


@pytest.fixture()
def db(tmp_path):
    database.init_db(f"sqlite:///{tmp_path/'test.db'}")
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()
        database.close_db()


@pytest.fixture()
def client(tmp_path, monkeypatch):
    import main

    # Settings are read once at import; each test gets its own database
    monkeypatch.setattr(
        main, "settings",
        replace(main.settings, database_url=f"sqlite:///{tmp_path/'api.db'}", environment="test"),
    )

    with TestClient(main.app) as c:
        yield c


def make_customer(name="Ali Khan", nic="200012345678", city="Colombo"):
    return Customer(
        name=name,
        nic=nic,
        email=f"{name.split()[0].lower()}@example.com",
        phone_number="0712345678",
        address=Address(house_no="12", street="Main Street", city=city),
    )


def make_employee(username="jperera", name="Jayantha Perera", nic="851234567V", role=Role.CLERK):
    return Employee(
        name=name,
        nic=nic,
        email=f"{username}@example.com",
        phone_number="0771234567",
        role=role,
        username=username,
        address=Address(house_no="4A", street="Lake Road", city="Kandy"),
    )
