# Services/employee_router.py
from fastapi import APIRouter, HTTPException, Depends, Query, status
from sqlalchemy import exc
from sqlalchemy.orm import Session
from pydantic import constr, field_validator
from typing import List, Optional
from datetime import datetime
from Models import Address, Employee, InvalidRoleError, Role
from Services.employee_service import EmployeeService
from Services.schemas import AddressBase, AddressResponse, CamelModel
from database import get_db

router = APIRouter(
    responses={404: {"description": "Employee not found"}}
)

class EmployeeBase(CamelModel):
    """
    Common employee attributes.

    Attributes:
        nic: National identity card number
        name: Full name
        phone_number: Contact phone number
        email: Contact email address
        role: One of Manager, Clerk, Delivery, Admin (any letter case on input)
        username: Login name, unique across employees
    """
    nic: Optional[constr(max_length=255)] = None
    name: Optional[constr(max_length=255)] = None
    phone_number: Optional[constr(max_length=255)] = None
    email: Optional[constr(max_length=255)] = None
    role: Optional[Role] = None
    username: Optional[constr(max_length=255)] = None

    @field_validator("role", mode="before")
    @classmethod
    def parse_role(cls, value):
        if value is None or isinstance(value, Role):
            return value
        return Role.parse(value)

class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee; the password is hashed before storage."""
    address: AddressBase
    password: constr(min_length=1)

class EmployeeResponse(EmployeeBase):
    """Employee as returned to clients. Never carries the password hash."""
    employee_id: int
    address: Optional[AddressResponse] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    return EmployeeService(db)

def found(employee: Optional[Employee]) -> Employee:
    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found"
        )
    return employee

@router.post("/add-employee",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new employee",
    responses={409: {"description": "Username already taken"}}
)
def add_employee(
    employee: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service)
):
    db_employee = Employee(
        **employee.model_dump(exclude={"address", "password"}),
        address=Address(**employee.address.model_dump())
    )
    try:
        return service.add(db_employee, employee.password)
    except exc.IntegrityError:
        service.db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already registered"
        )

@router.get("/get-employee", response_model=List[EmployeeResponse])
def list_employees(service: EmployeeService = Depends(get_employee_service)):
    return service.get_all()

@router.get("/get-employee/{employee_id}", response_model=EmployeeResponse)
def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service)
):
    return found(service.get_by_id(employee_id))

@router.delete("/delete-employee/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an employee",
    description="Permanently removes the employee. Unknown ids are ignored."
)
def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service)
):
    service.delete(employee_id)
    return None

@router.get("/search-employee", response_model=List[EmployeeResponse])
def search_employees(
    search: str = Query(..., description="Text matched against name and NIC"),
    service: EmployeeService = Depends(get_employee_service)
):
    return service.search(search)

@router.put("/update-employee-Role/{employee_id}",
    response_model=EmployeeResponse,
    responses={400: {"description": "Role is not one of Manager, Clerk, Delivery, Admin"}}
)
def update_employee_role(
    employee_id: int,
    role: str = Query(..., alias="Role"),
    service: EmployeeService = Depends(get_employee_service)
):
    try:
        employee = service.update_role(employee_id, role)
    except InvalidRoleError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return found(employee)

@router.put("/update-employee-Address/{employee_id}", response_model=EmployeeResponse)
def update_employee_address(
    employee_id: int,
    address: AddressBase,
    service: EmployeeService = Depends(get_employee_service)
):
    return found(service.update_address(
        employee_id, address.house_no, address.street, address.city
    ))

@router.put("/update-employee-Phone/{employee_id}", response_model=EmployeeResponse)
def update_employee_phone(
    employee_id: int,
    phone: str = Query(..., max_length=255),
    service: EmployeeService = Depends(get_employee_service)
):
    return found(service.update_phone(employee_id, phone))

@router.put("/update-employee-Email/{employee_id}", response_model=EmployeeResponse)
def update_employee_email(
    employee_id: int,
    email: str = Query(..., max_length=255),
    service: EmployeeService = Depends(get_employee_service)
):
    return found(service.update_email(employee_id, email))

@router.put("/update-employee-Password/{employee_id}", response_model=EmployeeResponse)
def update_employee_password(
    employee_id: int,
    password: str = Query(..., min_length=1),
    service: EmployeeService = Depends(get_employee_service)
):
    return found(service.update_password(employee_id, password))

@router.put("/update-employee-Name/{employee_id}", response_model=EmployeeResponse)
def update_employee_name(
    employee_id: int,
    name: str = Query(..., max_length=255),
    service: EmployeeService = Depends(get_employee_service)
):
    return found(service.update_name(employee_id, name))

@router.put("/update-employee-Nic/{employee_id}", response_model=EmployeeResponse)
def update_employee_nic(
    employee_id: int,
    new_nic: str = Query(..., alias="newNic", max_length=255),
    service: EmployeeService = Depends(get_employee_service)
):
    return found(service.update_nic(employee_id, new_nic))
