"""Customer model with an embedded postal address."""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import composite, relationship

from models.base import Base


@dataclass
class Address:
    """Postal address, embedded by customers and suppliers."""
    street: Optional[str]
    city: Optional[str]
    postal_code: Optional[str]


class Customer(Base):
    """Customer placing orders."""

    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)
    code = Column(String(10), nullable=False, unique=True, info={'natural_id': True})
    name = Column(String(100), nullable=False)
    street = Column(String(200))
    city = Column(String(100))
    postal_code = Column(String(20))

    address = composite(Address, street, city, postal_code)

    # Relationships
    orders = relationship("Order", back_populates="customer", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Customer(id={self.id}, code='{self.code}')>"
