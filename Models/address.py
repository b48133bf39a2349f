# Models/address.py
from sqlalchemy import Column, Integer, String
from .base import Base

class Address(Base):
    __tablename__ = 'address'

    # Owned by exactly one customer or employee
    address_id = Column(Integer, primary_key=True, index=True)
    house_no = Column(String(255), nullable=True)
    street = Column(String(255), nullable=True)
    city = Column(String(255), nullable=True)

    def __repr__(self):
        return f"<Address {self.house_no}, {self.street}, {self.city}>"
