"""
Job Tasks
=========

Document processing pipeline:

    uploaded -> processing -> extract text -> classify + extract facts
             -> processed (fact record created)
             -> error (message stored verbatim)

Every failure is caught here and recorded on the document, so a
document never stays in processing after its task ends.
"""

import asyncio
import logging
from datetime import datetime
from typing import Any, Dict

from ..db import repository
from ..db.session import get_db_session
from ..errors import DocumentNotFound

logger = logging.getLogger(__name__)

CANCELLED_MESSAGE = "Processing cancelled"
INTERRUPTED_MESSAGE = "Processing interrupted by a service restart; reprocess the document"


def _error_message(error: Exception) -> str:
    message = str(error).strip()
    return message or error.__class__.__name__


async def process_document(document_id: str, services, restart: bool = False) -> Dict[str, Any]:
    """
    Run the pipeline for one document.

    Args:
        document_id: Document ID in database
        services: ServiceContainer with dispatcher, classifier and extractor
        restart: Re-run a document that was already processed or failed

    Returns:
        Dict with the final status
    """
    start_time = datetime.utcnow()

    try:
        with get_db_session() as db:
            doc = repository.mark_processing(db, document_id, restart=restart)
            file_path = str(services.upload_path(doc.file_name))
            file_type = doc.file_type
    except DocumentNotFound:
        logger.warning(f"Document {document_id} was deleted before processing started")
        return {"document_id": document_id, "status": "missing"}

    try:
        logger.info(f"Processing document {document_id} ({file_type})")

        text = await services.dispatcher.extract(file_path, file_type)

        classification, facts = await asyncio.gather(
            services.classifier.classify(text),
            services.extractor.extract_facts(text),
        )

        with get_db_session() as db:
            record = repository.mark_processed(
                db,
                document_id,
                extracted_text=text,
                fields=facts.fields,
                additional_info=facts.additional_info,
                document_type=classification.type,
                category=classification.category,
                confidence=classification.confidence,
            )
            facts_id = record.id

        elapsed_ms = (datetime.utcnow() - start_time).total_seconds() * 1000
        logger.info(f"Document {document_id} processed in {elapsed_ms:.0f}ms")

        return {
            "document_id": document_id,
            "status": "processed",
            "facts_id": facts_id,
            "text_length": len(text),
            "elapsed_ms": elapsed_ms,
        }

    except asyncio.CancelledError:
        logger.warning(f"Processing cancelled for document {document_id}")
        try:
            with get_db_session() as db:
                repository.mark_error(db, document_id, CANCELLED_MESSAGE)
        except DocumentNotFound:
            logger.warning(f"Document {document_id} was deleted during processing")
        raise

    except Exception as e:
        logger.exception(f"Failed to process document {document_id}")
        message = _error_message(e)

        try:
            with get_db_session() as db:
                repository.mark_error(db, document_id, message)
        except DocumentNotFound:
            logger.warning(f"Document {document_id} was deleted during processing")
            return {"document_id": document_id, "status": "missing"}

        return {"document_id": document_id, "status": "error", "error": message}


def recover_interrupted() -> int:
    """
    Fail documents left in processing by a previous run.

    Jobs live in memory only, so nothing resumes them after a restart.
    Call once at startup before accepting new jobs.
    """
    with get_db_session() as db:
        count = repository.fail_interrupted(db, INTERRUPTED_MESSAGE)
    if count:
        logger.warning(f"Marked {count} interrupted document(s) as errored")
    return count
