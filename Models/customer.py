# Models/customer.py
from sqlalchemy import Column, Integer, String, Date, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from .base import Base

class Customer(Base):
    __tablename__ = 'customer'

    # Primary identifiers
    customer_id = Column(Integer, primary_key=True, index=True)
    nic = Column(String(255), nullable=True, index=True)

    # Personal information
    name = Column(String(255), nullable=True, index=True)
    email = Column(String(255), nullable=True)
    phone_number = Column(String(255), nullable=True)

    # Owned address
    address_id = Column(Integer, ForeignKey('address.address_id'), nullable=True)
    address = relationship("Address", lazy="joined")

    # Deal history
    first_date_deal = Column(Date, nullable=True)
    last_date_deal = Column(Date, nullable=True)

    # Soft delete flag
    is_deleted = Column(Boolean, nullable=False, default=False)

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Customer {self.name} ({self.nic})>"
