"""
Legal Document Generation Service
=================================

A small service for:
1. Extracting text from uploaded legal documents (PDF, DOCX, images via OCR)
2. Deriving structured case facts with an AI text-analysis service
3. Asking clarifying questions when extraction confidence is low
4. Filling legal document templates and validating required fields
"""

__version__ = "1.0.0"
