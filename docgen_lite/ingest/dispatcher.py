"""
Text Extraction Dispatcher
==========================

Routes an uploaded file to the right text engine by its extension:

    .jpg .jpeg .png  -> OCR engine
    .pdf             -> PDF text parser
    .docx            -> DOCX parser
    .doc             -> ExtractionFailure (legacy binary Word)

The dispatcher owns the OCR engine. The engine is created and opened on
first image, once, even with concurrent callers, and released on close().
Blocking engine calls run in worker threads under a bounded semaphore.
"""

import asyncio
import logging
from pathlib import Path
from typing import Callable, Optional

from .base import DocumentParser, clean_text
from .docx import DOCXParser
from .ocr import OCREngine, get_ocr_engine
from .pdf import PDFTextParser
from ..config import Settings, get_settings
from ..errors import ExtractionFailure, UnsupportedFileType

logger = logging.getLogger(__name__)


IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png")
LEGACY_WORD_EXTENSIONS = (".doc",)
SUPPORTED_EXTENSIONS = IMAGE_EXTENSIONS + (".pdf", ".docx") + LEGACY_WORD_EXTENSIONS


def normalize_file_type(file_type: str) -> str:
    """'PDF', 'pdf', '.Pdf' -> '.pdf'"""
    ext = (file_type or "").strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


class TextExtractionDispatcher:
    """
    Extract raw text from a stored upload.

    Usage:
        async with TextExtractionDispatcher(settings) as dispatcher:
            text = await dispatcher.extract("/uploads/ab12.pdf", ".pdf")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        ocr_factory: Optional[Callable[[], OCREngine]] = None,
        pdf_parser: Optional[DocumentParser] = None,
        docx_parser: Optional[DocumentParser] = None,
    ):
        self.settings = settings or get_settings()
        self._ocr_factory = ocr_factory or (lambda: get_ocr_engine(self.settings))
        self._ocr: Optional[OCREngine] = None
        self._ocr_lock = asyncio.Lock()
        self._semaphore = asyncio.Semaphore(max(1, self.settings.extraction_max_concurrency))
        self._parsers = {
            ".pdf": pdf_parser or PDFTextParser(),
            ".docx": docx_parser or DOCXParser(),
        }

    @property
    def ocr_engine_name(self) -> Optional[str]:
        """Name of the opened OCR engine, None before first image"""
        return self._ocr.name if self._ocr else None

    async def open(self):
        # OCR is opened on first use; nothing to acquire up front
        logger.debug("Text extraction dispatcher ready")

    async def close(self):
        async with self._ocr_lock:
            if self._ocr is not None:
                engine, self._ocr = self._ocr, None
                await asyncio.to_thread(engine.close)
                logger.info(f"OCR engine released: {engine.name}")

    async def __aenter__(self) -> "TextExtractionDispatcher":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def _get_ocr(self) -> OCREngine:
        async with self._ocr_lock:
            if self._ocr is None:
                engine = self._ocr_factory()
                await asyncio.to_thread(engine.open)
                self._ocr = engine
                logger.info(f"OCR engine opened: {engine.name}")
            return self._ocr

    async def _run(self, fn, *args):
        async with self._semaphore:
            return await asyncio.to_thread(fn, *args)

    async def extract(self, file_path: str, file_type: str) -> str:
        """
        Extract trimmed text from a stored file.

        Args:
            file_path: Path of the stored upload
            file_type: Extension, with or without the leading dot

        Returns:
            Cleaned text, possibly empty

        Raises:
            UnsupportedFileType: Extension has no route (no engine touched)
            ExtractionFailure: Engine failed; carries file_path
        """
        ext = normalize_file_type(file_type)
        if ext not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFileType(file_type)

        if ext in LEGACY_WORD_EXTENSIONS:
            raise ExtractionFailure(
                "Legacy Word (.doc) files cannot be read; save the file as .docx and upload again",
                file_path,
            )

        try:
            data = await asyncio.to_thread(Path(file_path).read_bytes)
        except OSError as e:
            raise ExtractionFailure(f"Cannot read file: {e}", file_path) from e

        try:
            if ext in IMAGE_EXTENSIONS:
                engine = await self._get_ocr()
                raw_text = await self._run(engine.recognize, data)
            else:
                result = await self._run(self._parsers[ext].parse, data, file_path)
                raw_text = result.full_text
                if result.metadata.get("is_scanned"):
                    logger.warning(f"PDF has little or no text layer: {file_path}")
        except ExtractionFailure as e:
            if e.file_path:
                raise
            raise type(e)(str(e), file_path) from e
        except Exception as e:
            raise ExtractionFailure(f"{ext} extraction failed: {e}", file_path) from e

        text = clean_text(raw_text or "")
        logger.info(f"Extracted {len(text)} chars from {ext} file")
        return text
