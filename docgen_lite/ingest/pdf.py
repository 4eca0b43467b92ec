"""
PDF Text Parser
===============

Parser for PDFs with an embedded text layer. Uses pypdf.
"""

import io
import logging
from typing import List

from pypdf import PdfReader

from .base import DocumentParser, ParseResult, clean_text
from ..errors import ExtractionFailure

logger = logging.getLogger(__name__)


class PDFTextParser(DocumentParser):
    """
    PDF text parser.

    Scanned PDFs without a text layer yield empty text; the metadata flag
    `is_scanned` marks them.
    """

    @property
    def supported_extensions(self) -> List[str]:
        return [".pdf"]

    def parse(self, data: bytes, filename: str = None) -> ParseResult:
        """Parse PDF file"""
        try:
            reader = PdfReader(io.BytesIO(data))
        except Exception as e:
            raise ExtractionFailure(f"Failed to read PDF: {e}")

        page_texts = []
        for page_no, page in enumerate(reader.pages, start=1):
            try:
                page_text = page.extract_text() or ""
            except Exception as e:
                logger.warning(f"PDF page {page_no} text extraction failed: {e}")
                page_text = ""
            page_texts.append(clean_text(page_text))

        full_text = "\n\n".join(t for t in page_texts if t)

        metadata = {
            "page_count": len(page_texts),
            "is_scanned": len(full_text) < 100 and len(page_texts) > 0,
        }

        try:
            if reader.metadata and reader.metadata.title:
                metadata["title"] = reader.metadata.title
        except Exception:
            pass

        return ParseResult(
            full_text=full_text,
            page_count=len(page_texts),
            metadata=metadata,
        )
