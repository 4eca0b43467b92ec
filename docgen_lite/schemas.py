"""
Pydantic Schemas for Legal Document Generation Service
======================================================

Request/response models for the HTTP API.

JSON uses camelCase keys (templateId, isValid, missingFields, ...) so the
field names line up with template placeholders and the web client.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from enum import Enum
from datetime import datetime


# =============================================================================
# ENUMS
# =============================================================================

class LLMMode(str, Enum):
    """AI provider used for analysis"""
    NONE = "none"
    OPENAI = "openai"
    OPENROUTER = "openrouter"
    GEMINI = "gemini"


class DocumentStatus(str, Enum):
    """
    Processing lifecycle of an uploaded file.

    uploaded -> processing -> processed | error
    """
    UPLOADED = "uploaded"
    PROCESSING = "processing"
    PROCESSED = "processed"
    ERROR = "error"


# =============================================================================
# BASE
# =============================================================================

class CamelModel(BaseModel):
    """Model serialized with camelCase aliases"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =============================================================================
# DOCUMENTS
# =============================================================================

class DocumentOut(CamelModel):
    """Uploaded file record"""
    id: str
    file_name: str
    original_name: str
    file_type: str
    file_size: int
    uploaded_at: datetime
    status: DocumentStatus
    extracted_text: Optional[str] = None
    processing_error: Optional[str] = None
    document_type: Optional[str] = None
    category: Optional[str] = None
    confidence: Optional[float] = None


class DocumentListResponse(CamelModel):
    documents: List[DocumentOut]


class DocumentResponse(CamelModel):
    document: DocumentOut


class MessageResponse(CamelModel):
    message: str


# =============================================================================
# FACTS
# =============================================================================

class FactsResponse(BaseModel):
    """
    Structured fact record.

    `facts` is flat: id, documentId, every schema field, additionalInfo,
    extractedAt, updatedAt.
    """
    facts: Dict[str, Any]


# =============================================================================
# TEMPLATES
# =============================================================================

class TemplateOut(CamelModel):
    id: str
    name: str
    type: str
    category: str
    template: str = Field(description="Template body with {{placeholders}}")
    required_fields: List[str]


class TemplateListResponse(CamelModel):
    templates: List[TemplateOut]


class TemplateResponse(CamelModel):
    template: TemplateOut


class ValidationOut(CamelModel):
    is_valid: bool
    missing_fields: List[str]


class GenerateRequest(CamelModel):
    template_id: str = Field(min_length=1)
    # Fact record id; a document id is accepted too
    facts_id: str = Field(min_length=1)


class GenerateResponse(CamelModel):
    document: str
    validation: ValidationOut
    template: TemplateOut


# =============================================================================
# CLARIFICATIONS
# =============================================================================

class ClarificationQuestion(CamelModel):
    question: str
    suggestions: Optional[List[str]] = None


class QuestionAnswer(CamelModel):
    question: str = Field(min_length=1)
    answer: str


class ClarificationSessionResponse(CamelModel):
    session_id: str
    document_id: str
    document_type: str
    confidence: float
    question_count: int
    questions: List[ClarificationQuestion]


class ClarificationHistoryResponse(CamelModel):
    session_id: str
    document_id: str
    history: List[QuestionAnswer]


# =============================================================================
# SYSTEM
# =============================================================================

class HealthResponse(CamelModel):
    status: str
    version: str
    llm_mode: LLMMode
    ocr_engine: Optional[str] = None
    timestamp: datetime


class ErrorResponse(BaseModel):
    detail: str
