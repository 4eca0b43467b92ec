"""
Repository Helpers
==================

CRUD for documents and fact records, shared by the API and the
processing jobs. Callers own the session and the commit.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.orm import Session

from .models import Document, FactRecord
from ..errors import DocumentNotFound, FactRecordNotFound
from ..facts import ADDITIONAL_INFO_KEY, FACT_FIELDS, coerce_fact_value, is_fact_field
from ..schemas import DocumentStatus

logger = logging.getLogger(__name__)

CLARIFICATIONS_KEY = "clarifications"


# =============================================================================
# Documents
# =============================================================================

def create_document(
    db: Session,
    file_name: str,
    original_name: str,
    file_type: str,
    file_size: int,
) -> Document:
    doc = Document(
        file_name=file_name,
        original_name=original_name,
        file_type=file_type,
        file_size=file_size,
        status=DocumentStatus.UPLOADED,
    )
    db.add(doc)
    db.flush()
    return doc


def get_document(db: Session, document_id: str) -> Document:
    doc = db.get(Document, document_id)
    if doc is None:
        raise DocumentNotFound(document_id)
    return doc


def list_documents(db: Session) -> List[Document]:
    """Newest first"""
    return (
        db.query(Document)
        .order_by(Document.uploaded_at.desc(), Document.id)
        .all()
    )


def delete_document(db: Session, document_id: str) -> Document:
    """Delete the record and its fact record; the caller removes the bytes"""
    doc = get_document(db, document_id)
    db.delete(doc)
    db.flush()
    return doc


# =============================================================================
# Status transitions
# =============================================================================

def mark_processing(db: Session, document_id: str, restart: bool = False) -> Document:
    """
    uploaded -> processing.

    restart=True re-enters processing from any state and discards the
    previous outcome (text, classification, error, fact record).
    """
    doc = get_document(db, document_id)
    if restart:
        if doc.facts is not None:
            db.delete(doc.facts)
            doc.facts = None
        doc.extracted_text = None
        doc.document_type = None
        doc.category = None
        doc.confidence = None
    doc.status = DocumentStatus.PROCESSING
    doc.processing_error = None
    db.flush()
    return doc


def mark_processed(
    db: Session,
    document_id: str,
    extracted_text: str,
    fields: Mapping[str, Optional[str]],
    additional_info: Mapping[str, Any],
    document_type: Optional[str] = None,
    category: Optional[str] = None,
    confidence: Optional[float] = None,
) -> FactRecord:
    """processing -> processed, creating the document's fact record"""
    doc = get_document(db, document_id)

    record = FactRecord(
        document_id=doc.id,
        fields={key: fields.get(key) for key in FACT_FIELDS},
        additional_info=dict(additional_info),
    )
    db.add(record)

    doc.extracted_text = extracted_text
    doc.document_type = document_type
    doc.category = category
    doc.confidence = confidence
    doc.status = DocumentStatus.PROCESSED
    doc.processing_error = None
    db.flush()
    return record


def mark_error(db: Session, document_id: str, message: str) -> Document:
    """processing -> error; an errored document has no fact record"""
    doc = get_document(db, document_id)
    if doc.facts is not None:
        db.delete(doc.facts)
        doc.facts = None
    doc.status = DocumentStatus.ERROR
    doc.processing_error = message or "Processing failed"
    db.flush()
    return doc


def fail_interrupted(db: Session, message: str) -> int:
    """processing -> error for every document whose job did not survive a restart"""
    stuck = db.query(Document).filter(Document.status == DocumentStatus.PROCESSING).all()
    for doc in stuck:
        mark_error(db, doc.id, message)
    return len(stuck)


# =============================================================================
# Fact records
# =============================================================================

def get_facts(db: Session, facts_id: str) -> FactRecord:
    record = db.get(FactRecord, facts_id)
    if record is None:
        raise FactRecordNotFound(facts_id)
    return record


def get_facts_for_document(db: Session, document_id: str) -> FactRecord:
    record = db.query(FactRecord).filter(FactRecord.document_id == document_id).first()
    if record is None:
        raise FactRecordNotFound(document_id)
    return record


def resolve_facts(db: Session, facts_or_document_id: str) -> FactRecord:
    """Look up by fact record id, then by document id"""
    record = db.get(FactRecord, facts_or_document_id)
    if record is None:
        record = db.query(FactRecord).filter(
            FactRecord.document_id == facts_or_document_id
        ).first()
    if record is None:
        raise FactRecordNotFound(facts_or_document_id)
    return record


def update_facts(db: Session, facts_id: str, changes: Mapping[str, Any]) -> FactRecord:
    """
    Partial update: only supplied keys change.

    Schema keys are set (None clears a value); additionalInfo entries are
    merged key by key. Other keys raise ValueError.
    """
    unknown = [k for k in changes if k != ADDITIONAL_INFO_KEY and not is_fact_field(k)]
    if unknown:
        raise ValueError(f"Unknown fact fields: {', '.join(sorted(unknown))}")

    record = get_facts(db, facts_id)

    fields = dict(record.fields or {})
    for key, value in changes.items():
        if key != ADDITIONAL_INFO_KEY:
            fields[key] = coerce_fact_value(value)
    record.fields = fields

    extra = changes.get(ADDITIONAL_INFO_KEY)
    if extra:
        merged = dict(record.additional_info or {})
        merged.update(extra)
        record.additional_info = merged

    record.updated_at = datetime.utcnow()
    db.flush()
    return record


def append_clarifications(
    db: Session,
    document_id: str,
    history: List[Dict[str, str]],
) -> FactRecord:
    """Store answered questions under additional_info["clarifications"]"""
    record = get_facts_for_document(db, document_id)
    info = dict(record.additional_info or {})
    info[CLARIFICATIONS_KEY] = list(info.get(CLARIFICATIONS_KEY) or []) + list(history)
    record.additional_info = info
    record.updated_at = datetime.utcnow()
    db.flush()
    logger.info(f"Saved {len(history)} clarification answers for document {document_id}")
    return record
