"""
SQLAlchemy Models for Database
==============================

Schema for the document pipeline:
- Uploaded documents with processing status
- One structured fact record per processed document

Supports both PostgreSQL and SQLite via SQLAlchemy.
"""

import uuid
from datetime import datetime
from typing import Any, Dict

from sqlalchemy import (
    Column, String, Text, Integer, Float, DateTime, Enum, ForeignKey, JSON, Index
)
from sqlalchemy.orm import relationship, declarative_base

from ..facts import ADDITIONAL_INFO_KEY, FACT_FIELDS
from ..schemas import DocumentStatus

Base = declarative_base()


def generate_uuid():
    return str(uuid.uuid4())


def _iso(value):
    return value.isoformat() if value else None


class Document(Base):
    """Uploaded legal document"""
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, default=generate_uuid)

    # File info
    file_name = Column(String(255), nullable=False)  # Generated storage name
    original_name = Column(String(255), nullable=False)
    file_type = Column(String(16), nullable=False)  # ".pdf", ".docx", ...
    file_size = Column(Integer, nullable=False)
    uploaded_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Processing status
    status = Column(Enum(DocumentStatus), default=DocumentStatus.UPLOADED, nullable=False)
    extracted_text = Column(Text, nullable=True)
    processing_error = Column(Text, nullable=True)

    # Classification
    document_type = Column(String(100), nullable=True)
    category = Column(String(100), nullable=True)
    confidence = Column(Float, nullable=True)

    __table_args__ = (
        Index("ix_document_uploaded_at", "uploaded_at"),
    )

    facts = relationship(
        "FactRecord",
        back_populates="document",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class FactRecord(Base):
    """Structured case facts extracted from a document"""
    __tablename__ = "fact_records"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    document_id = Column(
        String(36),
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    # FACT_FIELDS key -> value or None
    fields = Column(JSON, default=dict, nullable=False)
    # Facts outside the schema, plus saved clarifications
    additional_info = Column(JSON, default=dict, nullable=False)

    extracted_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    document = relationship("Document", back_populates="facts")

    def field_values(self) -> Dict[str, Any]:
        """Every schema field, None where unknown"""
        stored = self.fields or {}
        return {key: stored.get(key) for key in FACT_FIELDS}

    def to_dict(self) -> Dict[str, Any]:
        """Flat camelCase view used by the API"""
        data: Dict[str, Any] = {
            "id": self.id,
            "documentId": self.document_id,
        }
        data.update(self.field_values())
        data[ADDITIONAL_INFO_KEY] = dict(self.additional_info or {})
        data["extractedAt"] = _iso(self.extracted_at)
        data["updatedAt"] = _iso(self.updated_at)
        return data
