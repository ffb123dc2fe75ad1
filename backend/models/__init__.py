"""Sample mapped models published through the metadata endpoint."""

from models.base import Base
from models.customer import Address, Customer
from models.order import Order, OrderDetail, OrderStatus
from models.product import Category, Product, Supplier
from models.employee import Employee, Manager
from models.document import Document, Person

__all__ = [
    'Base',
    'Address',
    'Customer',
    'Order',
    'OrderDetail',
    'OrderStatus',
    'Category',
    'Product',
    'Supplier',
    'Employee',
    'Manager',
    'Document',
    'Person'
]
