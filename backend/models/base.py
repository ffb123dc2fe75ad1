"""Declarative base shared by the sample models."""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
