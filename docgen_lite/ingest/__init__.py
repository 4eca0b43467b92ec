"""
Ingest Pipeline
===============

Raw text extraction from uploaded legal documents: OCR for images,
pypdf for PDFs, python-docx for Word files.
"""

from .base import ParseResult, DocumentParser, clean_text
from .docx import DOCXParser
from .pdf import PDFTextParser
from .ocr import OCREngine, TesseractOCR, NullOCR, get_ocr_engine
from .dispatcher import (
    TextExtractionDispatcher,
    normalize_file_type,
    SUPPORTED_EXTENSIONS,
    IMAGE_EXTENSIONS,
)

__all__ = [
    # Base types
    "ParseResult", "DocumentParser", "clean_text",
    # Parsers
    "DOCXParser", "PDFTextParser",
    # OCR
    "OCREngine", "TesseractOCR", "NullOCR", "get_ocr_engine",
    # Dispatcher
    "TextExtractionDispatcher", "normalize_file_type", "SUPPORTED_EXTENSIONS", "IMAGE_EXTENSIONS",
]
