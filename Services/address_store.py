# Services/address_store.py
from typing import Optional

from sqlalchemy.orm import Session

from Models import Address


class AddressStore:
    """
    Persistence for owned addresses.

    Addresses are only written through their owner's directory; the store
    never commits, so an address write shares the owner's transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def save(self, address: Address) -> Address:
        """Persist the address and return it with its generated id."""
        self.db.add(address)
        self.db.flush()
        return address

    def get(self, address_id: Optional[int]) -> Optional[Address]:
        if address_id is None:
            return None
        return self.db.get(Address, address_id)
