"""Employee hierarchy, mapped single-table with a discriminator column."""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from models.base import Base


class Employee(Base):
    """Employee, optionally reporting to another employee."""

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    kind = Column(String(20), nullable=False)
    reports_to_id = Column(Integer, ForeignKey("employees.id"))

    # Relationships
    reports_to = relationship("Employee", remote_side=[id], back_populates="reports")
    reports = relationship("Employee", back_populates="reports_to")

    __mapper_args__ = {"polymorphic_on": kind, "polymorphic_identity": "employee"}


class Manager(Employee):
    """Employee with a budget."""

    budget = Column(Numeric(12, 2))

    __mapper_args__ = {"polymorphic_identity": "manager"}
