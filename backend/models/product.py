"""Product catalogue models."""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import composite, relationship

from models.base import Base
from models.customer import Address

product_categories = Table(
    "product_categories",
    Base.metadata,
    Column("product_id", ForeignKey("products.id"), primary_key=True),
    Column("category_id", ForeignKey("categories.id"), primary_key=True),
)


class Supplier(Base):
    """Supplier of products."""

    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    street = Column(String(200))
    city = Column(String(100))
    postal_code = Column(String(20))

    address = composite(Address, street, city, postal_code)

    # Relationships
    products = relationship("Product", back_populates="supplier")


class Product(Base):
    """Product sold in order lines."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    sku = Column(String(20), nullable=False, unique=True)
    name = Column(String(100), nullable=False)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"))

    # Relationships
    supplier = relationship("Supplier", back_populates="products")
    categories = relationship("Category", secondary=product_categories, back_populates="products")

    def __repr__(self):
        return f"<Product(id={self.id}, sku='{self.sku}')>"


class Category(Base):
    """Product category."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String(50), nullable=False)

    # Relationships
    products = relationship("Product", secondary=product_categories, back_populates="categories")
