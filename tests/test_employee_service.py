"""Tests for the employee directory and role lookup."""
import pytest
from sqlalchemy import exc

from Models import Address, Employee, InvalidRoleError, Role
from Services.employee_service import EmployeeService

from conftest import make_employee


@pytest.mark.parametrize("text, expected", [
    ("Manager", Role.MANAGER),
    ("manager", Role.MANAGER),
    ("CLERK", Role.CLERK),
    ("dElIvErY", Role.DELIVERY),
    ("admin", Role.ADMIN),
])
def test_role_parse_ignores_case(text, expected):
    assert Role.parse(text) is expected


@pytest.mark.parametrize("text", ["superuser", "", "Manager ", "Managers", None])
def test_role_parse_rejects_unknown(text):
    with pytest.raises(InvalidRoleError):
        Role.parse(text)


def test_add_hashes_password(db):
    service = EmployeeService(db)

    employee = service.add(make_employee(), "Str0ng!pass")

    assert employee.employee_id is not None
    assert employee.address.address_id == employee.address_id
    assert (employee.address.house_no, employee.address.street, employee.address.city) == (
        "4A", "Lake Road", "Kandy"
    )
    assert employee.password != "Str0ng!pass"
    assert service.verify_password(employee, "Str0ng!pass")
    assert not service.verify_password(employee, "wrong")


def test_duplicate_username_is_rejected(db):
    service = EmployeeService(db)
    service.add(make_employee(username="kamal"), "pw1")

    with pytest.raises(exc.IntegrityError):
        service.add(make_employee(username="kamal", nic="000"), "pw2")
    db.rollback()

    assert len(service.get_all()) == 1


def test_update_role_normalizes_text(db):
    service = EmployeeService(db)
    employee = service.add(make_employee(role=Role.CLERK), "pw")

    updated = service.update_role(employee.employee_id, "manager")

    assert updated.role is Role.MANAGER
    assert service.get_by_id(employee.employee_id).role is Role.MANAGER


def test_update_role_invalid_leaves_role_unchanged(db):
    service = EmployeeService(db)
    employee = service.add(make_employee(role=Role.DELIVERY), "pw")

    with pytest.raises(InvalidRoleError):
        service.update_role(employee.employee_id, "superuser")

    db.expire_all()
    assert service.get_by_id(employee.employee_id).role is Role.DELIVERY


def test_update_role_missing_employee_returns_none(db):
    assert EmployeeService(db).update_role(12, "Admin") is None


def test_update_password_stores_fresh_salted_hash(db):
    service = EmployeeService(db)
    employee = service.add(make_employee(), "secret1")
    first_hash = employee.password

    updated = service.update_password(employee.employee_id, "secret1")

    assert updated.password != "secret1"
    assert updated.password != first_hash
    assert service.verify_password(updated, "secret1")


def test_update_password_missing_employee_returns_none(db):
    assert EmployeeService(db).update_password(3, "secret1") is None


def test_delete_removes_employee_but_keeps_address(db):
    service = EmployeeService(db)
    employee = service.add(make_employee(), "pw")
    employee_id = employee.employee_id

    assert service.delete(employee_id) is True

    assert service.get_by_id(employee_id) is None
    assert db.query(Employee).count() == 0
    assert db.query(Address).count() == 1


def test_delete_unknown_id_is_noop(db):
    assert EmployeeService(db).delete(555) is False


def test_search_by_name_or_nic(db):
    service = EmployeeService(db)
    service.add(make_employee(username="a", name="Ali Khan", nic="111111111V"), "pw")
    service.add(make_employee(username="b", name="Sam Ali", nic="222222222V"), "pw")
    service.add(make_employee(username="c", name="Ruwan Dias", nic="333333333V"), "pw")

    assert [e.username for e in service.search("ALI")] == ["a", "b"]
    assert [e.username for e in service.search("3333")] == ["c"]


def test_field_updates_and_missing_ids(db):
    service = EmployeeService(db)
    employee = service.add(make_employee(), "pw")
    eid = employee.employee_id

    assert service.update_name(eid, "J. Perera").name == "J. Perera"
    assert service.update_nic(eid, "199912345678").nic == "199912345678"
    assert service.update_phone(eid, "0711111111").phone_number == "0711111111"
    assert service.update_email(eid, "jp@example.com").email == "jp@example.com"

    assert service.update_name(999, "x") is None
    assert service.update_nic(999, "x") is None
    assert service.update_phone(999, "x") is None
    assert service.update_email(999, "x") is None


def test_update_address_in_place(db):
    service = EmployeeService(db)
    employee = service.add(make_employee(), "pw")

    updated = service.update_address(employee.employee_id, "7", "Temple Road", "Matara")

    assert updated.address_id == employee.address_id
    assert updated.address.city == "Matara"
    assert db.query(Address).count() == 1
    assert service.update_address(999, "1", "x", "y") is None
    assert db.query(Address).count() == 1


def test_update_address_without_owned_address_creates_none(db):
    service = EmployeeService(db)
    employee = service.add(make_employee(), "pw")
    employee.address = None
    db.commit()

    updated = service.update_address(employee.employee_id, "1", "New Street", "Jaffna")

    assert updated.address_id is None
    assert db.query(Address).count() == 1
