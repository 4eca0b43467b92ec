"""
Legal Document Generation API
=============================

FastAPI endpoints for document upload, fact extraction, clarification and
template-based document generation.

Documents:
- POST   /documents                    - Upload files (multipart "files")
- GET    /documents                    - List documents, newest first
- GET    /documents/{id}               - Get document
- DELETE /documents/{id}               - Delete document, bytes and facts
- POST   /documents/{id}/reprocess     - Run the pipeline again
- GET    /documents/{id}/facts         - Get extracted facts
- PATCH  /facts/{id}                   - Edit extracted facts

Templates & generation:
- GET    /templates                    - List templates (?type=&category=)
- GET    /templates/filters            - Known types and categories
- GET    /templates/{id}               - Get template
- POST   /documents/generate           - Render template with facts
- POST   /documents/generate/download  - Same, as a text/plain attachment

Clarifications:
- POST   /documents/{id}/clarifications - Open a session, get questions
- POST   /clarifications/{sid}/answers  - Record an answer
- GET    /clarifications/{sid}          - Answer history
- POST   /clarifications/{sid}/save     - Save answers into the facts

Run with:
    uvicorn docgen_lite.api:app --host 0.0.0.0 --port 8000
"""

import asyncio
import logging
import uuid
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from fastapi import Body, Depends, FastAPI, File, HTTPException, Query, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.orm import Session

from . import __version__
from .config import get_settings
from .db import repository
from .db.session import get_db, init_db
from .errors import (
    DocgenError,
    ExtractionServiceError,
    MalformedResponseError,
    NotFoundError,
    UnsupportedFileType,
)
from .facts import ADDITIONAL_INFO_KEY, is_fact_field
from .ingest import normalize_file_type
from .jobs import QueueClosedError, process_document, recover_interrupted
from .llm import ClarificationSession, suggest_answers
from .schemas import (
    ClarificationHistoryResponse,
    ClarificationQuestion,
    ClarificationSessionResponse,
    DocumentListResponse,
    DocumentOut,
    DocumentResponse,
    DocumentStatus,
    ErrorResponse,
    FactsResponse,
    GenerateRequest,
    GenerateResponse,
    HealthResponse,
    MessageResponse,
    QuestionAnswer,
    TemplateListResponse,
    TemplateOut,
    TemplateResponse,
    ValidationOut,
)
from .services import ServiceContainer, build_services
from .templates import LegalTemplate, RenderedDocument, render, template_fields

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan & dependencies
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open services on startup, release OCR / HTTP resources on shutdown"""
    settings = get_settings()
    logger.info(f"Starting Legal Document Generation Service v{settings.service_version}")
    logger.info(f"LLM Mode: {settings.llm_mode.value}")
    for warning in settings.validate_llm_config():
        logger.warning(warning)

    init_db()
    recover_interrupted()
    services = build_services(settings)
    await services.open()
    app.state.services = services
    try:
        yield
    finally:
        await services.close()
        logger.info("Legal Document Generation Service stopped")


def get_services(request: Request) -> ServiceContainer:
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise HTTPException(status_code=503, detail="Service is starting up")
    return services


# =============================================================================
# FastAPI App
# =============================================================================

app = FastAPI(
    title="Legal Document Generation Service",
    description="Legal document intake, fact extraction and template-based document generation",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

CORS_ALLOW_ORIGINS = get_settings().cors_origins()
logger.info(f"CORS allow origins: {CORS_ALLOW_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# Exception handlers
# =============================================================================

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(UnsupportedFileType)
async def unsupported_file_handler(request: Request, exc: UnsupportedFileType):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(ExtractionServiceError)
@app.exception_handler(MalformedResponseError)
async def ai_service_handler(request: Request, exc: DocgenError):
    logger.error(f"AI service error on {request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(QueueClosedError)
async def queue_closed_handler(request: Request, exc: QueueClosedError):
    return JSONResponse(status_code=503, content={"detail": "Service is shutting down"})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler - always return valid JSON"""
    logger.error("Unhandled exception on %s: %s", request.url.path, exc.__class__.__name__)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error": exc.__class__.__name__},
    )


# =============================================================================
# Health
# =============================================================================

@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(request: Request):
    """Health check endpoint"""
    settings = get_settings()
    services = getattr(request.app.state, "services", None)
    ocr_engine = services.dispatcher.ocr_engine_name if services else None
    return HealthResponse(
        status="healthy",
        version=settings.service_version,
        llm_mode=settings.llm_mode,
        ocr_engine=ocr_engine or settings.ocr_mode,
        timestamp=datetime.now(),
    )


# =============================================================================
# Documents
# =============================================================================

def _document_out(doc) -> DocumentOut:
    return DocumentOut.model_validate(doc)


def _schedule(services: ServiceContainer, document_id: str, restart: bool = False):
    services.job_queue.submit(
        document_id,
        lambda: process_document(document_id, services, restart=restart),
    )


@app.post(
    "/documents",
    response_model=DocumentListResponse,
    tags=["Documents"],
    summary="Upload legal documents for processing",
    responses={400: {"model": ErrorResponse, "description": "Invalid upload"}},
)
async def upload_documents(
    files: Optional[List[UploadFile]] = File(default=None),
    db: Session = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    """
    Upload one or more documents.

    All files are checked before anything is stored: an unsupported type or
    an oversize file rejects the whole request. Processing starts in the
    background; poll GET /documents/{id} for the status.
    """
    if not files:
        raise HTTPException(status_code=400, detail="No files uploaded")

    settings = services.settings
    allowed = {normalize_file_type(ext) for ext in settings.allowed_extensions}

    accepted = []
    for up in files:
        original_name = Path(up.filename or "").name
        if not original_name:
            raise HTTPException(status_code=400, detail="Uploaded file has no name")

        ext = normalize_file_type(Path(original_name).suffix)
        if ext not in allowed:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid file type: {original_name}. Allowed: {', '.join(sorted(allowed))}",
            )

        data = await up.read()
        if len(data) > settings.max_upload_bytes:
            raise HTTPException(
                status_code=400,
                detail=f"File too large: {original_name} (limit {settings.max_upload_bytes} bytes)",
            )
        accepted.append((original_name, ext, data))

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)

    documents = []
    for original_name, ext, data in accepted:
        file_name = f"{uuid.uuid4().hex}{ext}"
        await asyncio.to_thread(services.upload_path(file_name).write_bytes, data)
        documents.append(repository.create_document(
            db,
            file_name=file_name,
            original_name=original_name,
            file_type=ext,
            file_size=len(data),
        ))
    db.commit()

    for doc in documents:
        _schedule(services, doc.id)

    logger.info(f"Uploaded {len(documents)} documents")
    return DocumentListResponse(documents=[_document_out(d) for d in documents])


@app.get("/documents", response_model=DocumentListResponse, tags=["Documents"])
async def list_documents(db: Session = Depends(get_db)):
    docs = repository.list_documents(db)
    return DocumentListResponse(documents=[_document_out(d) for d in docs])


@app.get("/documents/{document_id}", response_model=DocumentResponse, tags=["Documents"])
async def get_document(document_id: str, db: Session = Depends(get_db)):
    return DocumentResponse(document=_document_out(repository.get_document(db, document_id)))


@app.delete("/documents/{document_id}", response_model=MessageResponse, tags=["Documents"])
async def delete_document(
    document_id: str,
    db: Session = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    doc = repository.delete_document(db, document_id)
    file_path = services.upload_path(doc.file_name)
    db.commit()

    await asyncio.to_thread(file_path.unlink, missing_ok=True)
    services.clarifications.drop_document(document_id)

    logger.info(f"Deleted document {document_id}")
    return MessageResponse(message="Document deleted successfully")


@app.post(
    "/documents/{document_id}/reprocess",
    response_model=DocumentResponse,
    status_code=202,
    tags=["Documents"],
)
async def reprocess_document(
    document_id: str,
    db: Session = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    """Queue the pipeline again; runs after any job already queued for this document"""
    doc = repository.get_document(db, document_id)
    _schedule(services, doc.id, restart=True)
    return DocumentResponse(document=_document_out(doc))


# =============================================================================
# Facts
# =============================================================================

@app.get("/documents/{document_id}/facts", response_model=FactsResponse, tags=["Facts"])
async def get_document_facts(document_id: str, db: Session = Depends(get_db)):
    record = repository.get_facts_for_document(db, document_id)
    return FactsResponse(facts=record.to_dict())


def _validate_fact_patch(changes: Dict[str, Any]) -> None:
    unknown = sorted(k for k in changes if k != ADDITIONAL_INFO_KEY and not is_fact_field(k))
    if unknown:
        raise HTTPException(status_code=422, detail=f"Unknown fact fields: {', '.join(unknown)}")

    for key, value in changes.items():
        if key == ADDITIONAL_INFO_KEY:
            if value is not None and not isinstance(value, dict):
                raise HTTPException(status_code=422, detail="additionalInfo must be an object")
        elif value is not None and not isinstance(value, (str, int, float)):
            raise HTTPException(status_code=422, detail=f"Fact {key} must be a string or null")


@app.patch("/facts/{facts_id}", response_model=FactsResponse, tags=["Facts"])
async def update_facts(
    facts_id: str,
    changes: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
):
    """Partial update: only the supplied fields change"""
    _validate_fact_patch(changes)
    record = repository.update_facts(db, facts_id, changes)
    db.commit()
    return FactsResponse(facts=record.to_dict())


# =============================================================================
# Templates & generation
# =============================================================================

def _template_out(template: LegalTemplate) -> TemplateOut:
    return TemplateOut(**template.to_dict())


@app.get("/templates", response_model=TemplateListResponse, tags=["Templates"])
async def list_templates(
    template_type: Optional[str] = Query(default=None, alias="type"),
    category: Optional[str] = Query(default=None),
    services: ServiceContainer = Depends(get_services),
):
    templates = services.catalog.find(type=template_type, category=category)
    return TemplateListResponse(templates=[_template_out(t) for t in templates])


@app.get("/templates/filters", tags=["Templates"])
async def template_filters(services: ServiceContainer = Depends(get_services)):
    return {
        "types": services.catalog.types(),
        "categories": services.catalog.categories(),
    }


@app.get("/templates/{template_id}", response_model=TemplateResponse, tags=["Templates"])
async def get_template(template_id: str, services: ServiceContainer = Depends(get_services)):
    return TemplateResponse(template=_template_out(services.catalog.get(template_id)))


def _render_request(
    request: GenerateRequest,
    db: Session,
    services: ServiceContainer,
) -> Tuple[LegalTemplate, RenderedDocument]:
    template = services.catalog.get(request.template_id)
    record = repository.resolve_facts(db, request.facts_id)
    values = template_fields(record.field_values(), record.additional_info)
    return template, render(template, values)


@app.post("/documents/generate", response_model=GenerateResponse, tags=["Generation"])
async def generate_document(
    request: GenerateRequest,
    db: Session = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    """
    Fill a template with stored facts.

    Missing required fields do not fail the request: they are listed in
    validation.missingFields and rendered as [NOT PROVIDED].
    """
    template, rendered = _render_request(request, db, services)
    logger.info(
        f"Generated {template.id}: valid={rendered.validation.is_valid} "
        f"missing={len(rendered.validation.missing_fields)}"
    )
    return GenerateResponse(
        document=rendered.document,
        validation=ValidationOut(
            is_valid=rendered.validation.is_valid,
            missing_fields=list(rendered.validation.missing_fields),
        ),
        template=_template_out(template),
    )


@app.post("/documents/generate/download", response_class=PlainTextResponse, tags=["Generation"])
async def download_generated_document(
    request: GenerateRequest,
    db: Session = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    template, rendered = _render_request(request, db, services)
    return PlainTextResponse(
        rendered.document,
        headers={"Content-Disposition": f'attachment; filename="{template.id}.txt"'},
    )


# =============================================================================
# Clarifications
# =============================================================================

def _history_response(session: ClarificationSession) -> ClarificationHistoryResponse:
    return ClarificationHistoryResponse(
        session_id=session.id,
        document_id=session.document_id,
        history=[QuestionAnswer(**qa) for qa in session.history_dicts()],
    )


@app.post(
    "/documents/{document_id}/clarifications",
    response_model=ClarificationSessionResponse,
    status_code=201,
    tags=["Clarifications"],
    responses={502: {"model": ErrorResponse, "description": "AI service failed"}},
)
async def open_clarification_session(
    document_id: str,
    db: Session = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    """Ask follow-up questions about a processed document"""
    doc = repository.get_document(db, document_id)
    if doc.status != DocumentStatus.PROCESSED:
        raise HTTPException(
            status_code=409,
            detail=f"Document is {doc.status.value}; clarifications need a processed document",
        )

    record = repository.get_facts_for_document(db, document_id)
    extracted = {k: v for k, v in record.field_values().items() if v is not None}
    if record.additional_info:
        extracted[ADDITIONAL_INFO_KEY] = record.additional_info

    document_type = doc.document_type or "unknown"
    confidence = doc.confidence if doc.confidence is not None else 0.0

    clarifier = services.new_clarifier()
    questions = await clarifier.generate_questions(document_type, confidence, extracted)

    session = services.clarifications.add(ClarificationSession(
        document_id=document_id,
        document_type=document_type,
        confidence=confidence,
        clarifier=clarifier,
        questions=questions,
    ))

    return ClarificationSessionResponse(
        session_id=session.id,
        document_id=document_id,
        document_type=document_type,
        confidence=confidence,
        question_count=len(questions),
        questions=[
            ClarificationQuestion(question=q, suggestions=suggest_answers(q))
            for q in questions
        ],
    )


@app.post(
    "/clarifications/{session_id}/answers",
    response_model=ClarificationHistoryResponse,
    tags=["Clarifications"],
)
async def answer_clarification(
    session_id: str,
    answer: QuestionAnswer,
    services: ServiceContainer = Depends(get_services),
):
    session = services.clarifications.get(session_id)
    session.clarifier.add_qa(answer.question, answer.answer)
    return _history_response(session)


@app.get(
    "/clarifications/{session_id}",
    response_model=ClarificationHistoryResponse,
    tags=["Clarifications"],
)
async def get_clarification_history(
    session_id: str,
    services: ServiceContainer = Depends(get_services),
):
    return _history_response(services.clarifications.get(session_id))


@app.post(
    "/clarifications/{session_id}/save",
    response_model=FactsResponse,
    tags=["Clarifications"],
)
async def save_clarifications(
    session_id: str,
    db: Session = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    """Store the answers in the fact record and close the session"""
    session = services.clarifications.get(session_id)
    record = repository.append_clarifications(db, session.document_id, session.history_dicts())
    db.commit()
    services.clarifications.close(session_id)
    return FactsResponse(facts=record.to_dict())


# =============================================================================
# Main (for direct execution)
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "docgen_lite.api:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
