# Models/employee.py
import enum

from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from .base import Base


class InvalidRoleError(ValueError):
    """Raised when text does not name one of the employee roles."""

    def __init__(self, value):
        self.value = value
        allowed = ", ".join(role.value for role in Role)
        super().__init__(f"Invalid role {value!r}; expected one of: {allowed}")


class Role(str, enum.Enum):
    MANAGER = "Manager"
    CLERK = "Clerk"
    DELIVERY = "Delivery"
    ADMIN = "Admin"

    @classmethod
    def parse(cls, text):
        """Case-insensitive lookup of a role by its display value."""
        try:
            return _ROLE_LOOKUP[text.lower()]
        except (KeyError, AttributeError):
            raise InvalidRoleError(text) from None


_ROLE_LOOKUP = {role.value.lower(): role for role in Role}


class Employee(Base):
    __tablename__ = 'employee'

    # Primary identifiers
    employee_id = Column(Integer, primary_key=True, index=True)
    nic = Column(String(255), nullable=True, index=True)

    # Personal information
    name = Column(String(255), nullable=True, index=True)
    phone_number = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)

    # Owned address
    address_id = Column(Integer, ForeignKey('address.address_id'), nullable=True)
    address = relationship("Address", lazy="joined")

    # Account
    role = Column(
        Enum(Role, name="employee_role", native_enum=False,
             values_callable=lambda roles: [r.value for r in roles]),
        nullable=True,
    )
    username = Column(String(255), unique=True, nullable=True)
    password = Column(String(255), nullable=True)  # salted hash only

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Employee {self.name} ({self.username})>"
