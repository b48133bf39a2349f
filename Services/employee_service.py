# Services/employee_service.py
import logging
from typing import List, Optional

from sqlalchemy import delete, or_
from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

from Models import Address, Employee, Role
from Services.address_store import AddressStore

logger = logging.getLogger(__name__)


class EmployeeService:
    """
    Employee directory.

    Passwords are hashed with a fresh salt on every write and only the hash
    is stored. Lookups by id return None when no employee exists.
    """

    def __init__(self, db: Session):
        self.db = db
        self.addresses = AddressStore(db)

    def add(self, employee: Employee, password: str) -> Employee:
        address = self.addresses.save(employee.address or Address())
        employee.address = address
        employee.address_id = address.address_id
        employee.password = generate_password_hash(password)
        self.db.add(employee)
        self.db.commit()
        self.db.refresh(employee)
        logger.info("Added employee %s (username=%s)", employee.employee_id, employee.username)
        return employee

    def get_all(self) -> List[Employee]:
        return self.db.query(Employee).order_by(Employee.employee_id).all()

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.db.get(Employee, employee_id)

    def delete(self, employee_id: int) -> bool:
        """
        Remove the employee row. The owned address row is left in place.
        Returns False when no employee had this id.
        """
        result = self.db.execute(delete(Employee).where(Employee.employee_id == employee_id))
        self.db.commit()
        deleted = result.rowcount > 0
        logger.info("Deleted employee %s (matched=%s)", employee_id, deleted)
        return deleted

    def search(self, text: str) -> List[Employee]:
        return (
            self.db.query(Employee)
            .filter(or_(
                Employee.name.icontains(text, autoescape=True),
                Employee.nic.icontains(text, autoescape=True),
            ))
            .order_by(Employee.employee_id)
            .all()
        )

    def update_role(self, employee_id: int, role_text: str) -> Optional[Employee]:
        """
        Set the role from free text such as "manager" or "CLERK".

        Raises InvalidRoleError if the text names no role; the stored role
        is left unchanged in that case.
        """
        employee = self.get_by_id(employee_id)
        if employee is None:
            return None
        role = Role.parse(role_text)
        employee.role = role
        self.db.commit()
        self.db.refresh(employee)
        logger.info("Employee %s role set to %s", employee_id, role.value)
        return employee

    def update_password(self, employee_id: int, password: str) -> Optional[Employee]:
        employee = self.get_by_id(employee_id)
        if employee is None:
            return None
        employee.password = generate_password_hash(password)
        self.db.commit()
        self.db.refresh(employee)
        logger.info("Employee %s password changed", employee_id)
        return employee

    def verify_password(self, employee: Employee, password: str) -> bool:
        if not employee.password:
            return False
        return check_password_hash(employee.password, password)

    def update_address(
        self,
        employee_id: int,
        house_no: Optional[str],
        street: Optional[str],
        city: Optional[str],
    ) -> Optional[Employee]:
        employee = self.get_by_id(employee_id)
        if employee is None:
            return None

        address = self.addresses.get(employee.address_id)
        if address is None:
            # No owned address to overwrite
            return employee
        address.house_no = house_no
        address.street = street
        address.city = city
        self.addresses.save(address)

        self.db.commit()
        self.db.refresh(employee)
        return employee

    def update_name(self, employee_id: int, name: str) -> Optional[Employee]:
        return self._update_field(employee_id, "name", name)

    def update_nic(self, employee_id: int, nic: str) -> Optional[Employee]:
        return self._update_field(employee_id, "nic", nic)

    def update_phone(self, employee_id: int, phone_number: str) -> Optional[Employee]:
        return self._update_field(employee_id, "phone_number", phone_number)

    def update_email(self, employee_id: int, email: str) -> Optional[Employee]:
        return self._update_field(employee_id, "email", email)

    def _update_field(self, employee_id: int, field: str, value) -> Optional[Employee]:
        employee = self.get_by_id(employee_id)
        if employee is None:
            return None
        setattr(employee, field, value)
        self.db.commit()
        self.db.refresh(employee)
        return employee
