# Models/__init__.py
from .base import Base
from .address import Address
from .customer import Customer
from .employee import Employee, InvalidRoleError, Role

# List all models for easy access and database initialization
__all__ = [
    'Base',
    'Address',
    'Customer',
    'Employee',
    'InvalidRoleError',
    'Role',
]
