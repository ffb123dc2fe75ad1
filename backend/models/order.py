"""Order and order line models."""

import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, Numeric
from sqlalchemy.orm import relationship

from models.base import Base


class OrderStatus(enum.Enum):
    PENDING = 'pending'
    SHIPPED = 'shipped'
    DELIVERED = 'delivered'
    CANCELLED = 'cancelled'


class Order(Base):
    """Order placed by a customer, versioned for optimistic concurrency."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False)
    status = Column(Enum(OrderStatus), nullable=False, default=OrderStatus.PENDING)
    ordered_at = Column(DateTime(timezone=True), nullable=False)
    row_version = Column(Integer, nullable=False)

    # Relationships
    customer = relationship("Customer", back_populates="orders")
    details = relationship("OrderDetail", back_populates="order", cascade="all, delete-orphan")

    __mapper_args__ = {"version_id_col": row_version}

    def __repr__(self):
        return f"<Order(id={self.id}, customer_id={self.customer_id})>"


class OrderDetail(Base):
    """Order line, keyed by order and product."""

    __tablename__ = "order_details"

    order_id = Column(Integer, ForeignKey("orders.id"), primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)

    # Relationships
    order = relationship("Order", back_populates="details")
    product = relationship("Product")

    def __repr__(self):
        return f"<OrderDetail(order_id={self.order_id}, product_id={self.product_id})>"
