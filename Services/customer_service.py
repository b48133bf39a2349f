# Services/customer_service.py
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import or_, update
from sqlalchemy.orm import Session

from Models import Address, Customer
from Services.address_store import AddressStore

logger = logging.getLogger(__name__)


class CustomerService:
    """
    Customer directory.

    Holds no state beyond the injected session. Lookups by id return None
    when no customer exists; soft-deleted customers are still returned by
    get_all(), get_by_id() and search().
    """

    def __init__(self, db: Session):
        self.db = db
        self.addresses = AddressStore(db)

    def add(self, customer: Customer) -> Customer:
        """Persist the customer's address, then the customer, in one transaction."""
        address = self.addresses.save(customer.address or Address())
        customer.address = address
        customer.address_id = address.address_id
        customer.is_deleted = False
        self.db.add(customer)
        self.db.commit()
        self.db.refresh(customer)
        logger.info("Added customer %s (address %s)", customer.customer_id, address.address_id)
        return customer

    def get_all(self) -> List[Customer]:
        return self.db.query(Customer).order_by(Customer.customer_id).all()

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        return self.db.get(Customer, customer_id)

    def soft_delete(self, customer_id: int) -> bool:
        """
        Mark the customer deleted with a single UPDATE statement.

        Returns True if a row matched. An unknown id is not an error, and
        repeating the call leaves the flag set.
        """
        result = self.db.execute(
            update(Customer)
            .where(Customer.customer_id == customer_id)
            .values(is_deleted=True)
        )
        self.db.commit()
        matched = result.rowcount > 0
        logger.info("Soft-deleted customer %s (matched=%s)", customer_id, matched)
        return matched

    def search(self, text: str) -> List[Customer]:
        """Customers whose name or NIC contains text, ignoring case."""
        return (
            self.db.query(Customer)
            .filter(or_(
                Customer.name.icontains(text, autoescape=True),
                Customer.nic.icontains(text, autoescape=True),
            ))
            .order_by(Customer.customer_id)
            .all()
        )

    def update_name(self, customer_id: int, name: str) -> Optional[Customer]:
        return self._update_field(customer_id, "name", name)

    def update_nic(self, customer_id: int, nic: str) -> Optional[Customer]:
        return self._update_field(customer_id, "nic", nic)

    def update_email(self, customer_id: int, email: str) -> Optional[Customer]:
        return self._update_field(customer_id, "email", email)

    def update_phone(self, customer_id: int, phone_number: str) -> Optional[Customer]:
        return self._update_field(customer_id, "phone_number", phone_number)

    def update_first_deal_date(self, customer_id: int, deal_date: date) -> Optional[Customer]:
        return self._update_field(customer_id, "first_date_deal", deal_date)

    def update_last_deal_date(self, customer_id: int, deal_date: date) -> Optional[Customer]:
        return self._update_field(customer_id, "last_date_deal", deal_date)

    def update_address(
        self,
        customer_id: int,
        house_no: Optional[str],
        street: Optional[str],
        city: Optional[str],
    ) -> Optional[Customer]:
        """
        Overwrite the fields of the customer's existing address in place.

        Never creates an address row: a customer without an owned address
        is returned unchanged.
        """
        customer = self.get_by_id(customer_id)
        if customer is None:
            return None

        address = self.addresses.get(customer.address_id)
        if address is None:
            return customer
        address.house_no = house_no
        address.street = street
        address.city = city
        self.addresses.save(address)

        self.db.commit()
        self.db.refresh(customer)
        return customer

    def active_count(self) -> int:
        return self.db.query(Customer).filter(Customer.is_deleted == False).count()  # noqa: E712

    def _update_field(self, customer_id: int, field: str, value) -> Optional[Customer]:
        customer = self.get_by_id(customer_id)
        if customer is None:
            return None
        setattr(customer, field, value)
        self.db.commit()
        self.db.refresh(customer)
        return customer
