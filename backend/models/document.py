"""Documents with an author and an optional reviewer."""

import uuid

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from models.base import Base


class Person(Base):
    __tablename__ = "people"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)

    # Relationships
    authored_documents = relationship("Document", back_populates="author",
                                      foreign_keys="Document.author_id")
    reviewed_documents = relationship("Document", back_populates="reviewer",
                                      foreign_keys="Document.reviewer_id")


class Document(Base):
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    author_id = Column(String(36), ForeignKey("people.id"), nullable=False)
    reviewer_id = Column(String(36), ForeignKey("people.id"))

    # Relationships
    author = relationship("Person", back_populates="authored_documents", foreign_keys=[author_id])
    reviewer = relationship("Person", back_populates="reviewed_documents", foreign_keys=[reviewer_id])

    def __repr__(self):
        return f"<Document(id={self.id}, title='{self.title}')>"
