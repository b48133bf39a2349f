# Services/customer_router.py
from fastapi import APIRouter, HTTPException, Depends, Query, status
from sqlalchemy.orm import Session
from pydantic import Field, constr
from typing import List, Optional
from datetime import date, datetime
from Models import Address, Customer
from Services.customer_service import CustomerService
from Services.schemas import AddressBase, AddressResponse, CamelModel
from database import get_db

router = APIRouter(
    responses={404: {"description": "Customer not found"}}
)

# Pydantic models
class CustomerBase(CamelModel):
    nic: Optional[constr(max_length=255)] = None
    name: Optional[constr(max_length=255)] = None
    email: Optional[constr(max_length=255)] = None
    phone_number: Optional[constr(max_length=255)] = None
    first_date_deal: Optional[date] = None
    last_date_deal: Optional[date] = None

class CustomerCreate(CustomerBase):
    address: AddressBase

class CustomerResponse(CustomerBase):
    customer_id: int
    address: Optional[AddressResponse] = None
    is_deleted: bool = Field(alias="deleted")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

# Dependencies
def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(db)

def found(customer: Optional[Customer]) -> Customer:
    if customer is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found"
        )
    return customer

# API Endpoints
@router.post("/add-Customer", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def add_customer(
    customer: CustomerCreate,
    service: CustomerService = Depends(get_customer_service)
):
    db_customer = Customer(
        **customer.model_dump(exclude={"address"}),
        address=Address(**customer.address.model_dump())
    )
    return service.add(db_customer)

@router.get("/all-Customers", response_model=List[CustomerResponse])
def list_customers(service: CustomerService = Depends(get_customer_service)):
    return service.get_all()

@router.get("/Customer/{customer_id}", response_model=CustomerResponse)
def get_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service)
):
    return found(service.get_by_id(customer_id))

@router.delete("/delete-Customer/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service)
):
    """Soft-delete: the customer stays readable with deleted=true."""
    service.soft_delete(customer_id)
    return None

@router.get("/search-Customer", response_model=List[CustomerResponse])
def search_customers(
    search: str = Query(..., description="Text matched against name and NIC"),
    service: CustomerService = Depends(get_customer_service)
):
    return service.search(search)

@router.put("/update-Customer-name/{customer_id}", response_model=CustomerResponse)
def update_customer_name(
    customer_id: int,
    name: str = Query(..., max_length=255),
    service: CustomerService = Depends(get_customer_service)
):
    return found(service.update_name(customer_id, name))

@router.put("/update-Customer-Nic/{customer_id}", response_model=CustomerResponse)
def update_customer_nic(
    customer_id: int,
    new_nic: str = Query(..., alias="newNic", max_length=255),
    service: CustomerService = Depends(get_customer_service)
):
    return found(service.update_nic(customer_id, new_nic))

@router.put("/update-Customer-email/{customer_id}", response_model=CustomerResponse)
def update_customer_email(
    customer_id: int,
    email: str = Query(..., max_length=255),
    service: CustomerService = Depends(get_customer_service)
):
    return found(service.update_email(customer_id, email))

@router.put("/update-Customer-phone/{customer_id}", response_model=CustomerResponse)
def update_customer_phone(
    customer_id: int,
    phone_number: str = Query(..., alias="phoneNumber", max_length=255),
    service: CustomerService = Depends(get_customer_service)
):
    return found(service.update_phone(customer_id, phone_number))

@router.put("/update-Customer-fristdealdate/{customer_id}", response_model=CustomerResponse)
def update_customer_first_deal_date(
    customer_id: int,
    first_deal_date: date = Query(..., alias="fristDealDate", description="yyyy-MM-dd"),
    service: CustomerService = Depends(get_customer_service)
):
    return found(service.update_first_deal_date(customer_id, first_deal_date))

@router.put("/update-Customer-lastdealdate/{customer_id}", response_model=CustomerResponse)
def update_customer_last_deal_date(
    customer_id: int,
    last_deal_date: date = Query(..., alias="lastDealDate", description="yyyy-MM-dd"),
    service: CustomerService = Depends(get_customer_service)
):
    return found(service.update_last_deal_date(customer_id, last_deal_date))

@router.put("/update-Customer-address/{customer_id}", response_model=CustomerResponse)
def update_customer_address(
    customer_id: int,
    address: AddressBase,
    service: CustomerService = Depends(get_customer_service)
):
    return found(service.update_address(
        customer_id, address.house_no, address.street, address.city
    ))

@router.get("/get-Active-Customer-Count", response_model=int)
def get_active_customer_count(service: CustomerService = Depends(get_customer_service)):
    return service.active_count()
