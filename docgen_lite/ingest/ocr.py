"""
OCR Adapter
===========

OCR support for scanned documents and photographed pages.

Engines hold a process-wide handle: open() acquires it, close() releases
it, recognize() runs on an opened engine. recognize() is blocking and is
called from a worker thread by the dispatcher.
"""

import io
import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..config import Settings, get_settings
from ..errors import ExtractionFailure, OCRNotAvailableError

logger = logging.getLogger(__name__)


class OCREngine(ABC):
    """
    Abstract base class for OCR engines.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """OCR engine name"""
        pass

    @abstractmethod
    def open(self) -> None:
        """Acquire the engine handle"""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the engine handle"""
        pass

    @abstractmethod
    def recognize(self, image_data: bytes) -> str:
        """
        Recognize text in a single image.

        Args:
            image_data: Encoded image bytes (PNG / JPEG)

        Returns:
            Raw recognized text
        """
        pass


class TesseractOCR(OCREngine):
    """
    Tesseract OCR implementation.

    Requires the tesseract binary: apt-get install tesseract-ocr
    """

    def __init__(self, language: str = "eng"):
        self.language = language
        self._pytesseract = None

    @property
    def name(self) -> str:
        return "tesseract"

    @property
    def is_open(self) -> bool:
        return self._pytesseract is not None

    def open(self) -> None:
        if self._pytesseract is not None:
            return

        import pytesseract

        try:
            version = pytesseract.get_tesseract_version()
        except Exception as e:
            raise OCRNotAvailableError(f"Tesseract OCR is not available: {e}")

        logger.info(f"Tesseract OCR ready: version={version} lang={self.language}")
        self._pytesseract = pytesseract

    def close(self) -> None:
        self._pytesseract = None

    def recognize(self, image_data: bytes) -> str:
        """Process a single image with Tesseract"""
        if self._pytesseract is None:
            raise OCRNotAvailableError("Tesseract OCR engine is not open")

        from PIL import Image, UnidentifiedImageError

        try:
            image = Image.open(io.BytesIO(image_data))
        except UnidentifiedImageError as e:
            raise ExtractionFailure(f"Unreadable image: {e}")

        try:
            # Automatic page segmentation
            return self._pytesseract.image_to_string(
                image,
                lang=self.language,
                config='--psm 3'
            )
        except Exception as e:
            raise ExtractionFailure(f"Tesseract OCR failed: {e}")
        finally:
            image.close()


class NullOCR(OCREngine):
    """Placeholder engine used when OCR is disabled"""

    @property
    def name(self) -> str:
        return "none"

    def open(self) -> None:
        logger.warning("OCR is disabled (OCR_MODE=none); image uploads will fail to process")

    def close(self) -> None:
        pass

    def recognize(self, image_data: bytes) -> str:
        raise OCRNotAvailableError("OCR is disabled (OCR_MODE=none)")


def get_ocr_engine(settings: Optional[Settings] = None) -> OCREngine:
    """
    Build the configured OCR engine (not yet opened).

    OCR_MODE:
        auto / tesseract -> TesseractOCR
        none -> NullOCR
    """
    settings = settings or get_settings()
    mode = (settings.ocr_mode or "auto").strip().lower()

    if mode == "none":
        return NullOCR()

    if mode not in ("auto", "tesseract"):
        logger.warning(f"Unknown OCR_MODE={mode!r}, using tesseract")

    return TesseractOCR(language=settings.ocr_language)
