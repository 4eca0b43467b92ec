"""
Error Taxonomy
==============

Exceptions raised by the extraction, analysis and generation pipeline.

Incomplete template data is not an error: it is reported as a
ValidationResult with is_valid=False.
"""

from typing import Optional


class DocgenError(Exception):
    """Base exception for the service"""


# --- Text extraction -------------------------------------------------------

class UnsupportedFileType(DocgenError):
    """File extension has no extraction route"""

    def __init__(self, file_type: str):
        self.file_type = file_type
        super().__init__(f"Unsupported file type: {file_type}")


class ExtractionFailure(DocgenError):
    """OCR / PDF / DOCX engine failed on a specific file"""

    def __init__(self, message: str, file_path: Optional[str] = None):
        self.file_path = file_path
        if file_path:
            message = f"{message} (file: {file_path})"
        super().__init__(message)


class OCRNotAvailableError(ExtractionFailure):
    """No OCR engine is configured"""


# --- AI service ------------------------------------------------------------

class ExtractionServiceError(DocgenError):
    """AI service returned no usable content"""


class MalformedResponseError(DocgenError):
    """AI service content is not the expected JSON structure"""


# --- Lookups ---------------------------------------------------------------

class NotFoundError(DocgenError):
    """Base for lookups that map to HTTP 404"""


class DocumentNotFound(NotFoundError):
    def __init__(self, document_id: str):
        self.document_id = document_id
        super().__init__(f"Document not found: {document_id}")


class FactRecordNotFound(NotFoundError):
    def __init__(self, facts_id: str):
        self.facts_id = facts_id
        super().__init__(f"Extracted information not found: {facts_id}")


class TemplateNotFound(NotFoundError):
    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(f"Template not found: {template_id}")


class ClarificationSessionNotFound(NotFoundError):
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Clarification session not found: {session_id}")
