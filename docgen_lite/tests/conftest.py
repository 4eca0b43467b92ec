"""
Shared test doubles and fixtures
================================

- FakeLLMClient: scripted AI responses routed by prompt kind
- FakeOCREngine: counts open/close/recognize calls
- settings / database / services fixtures over a tmp directory
"""

import json
import time
import threading
from typing import Any, Dict, List, Optional

import pytest

from docgen_lite.config import Settings
from docgen_lite.db.session import init_db, reset_engine
from docgen_lite.ingest import TextExtractionDispatcher
from docgen_lite.ingest.ocr import OCREngine
from docgen_lite.llm import DocumentClassifier, StructuredExtractor
from docgen_lite.llm_client import LLMResponse
from docgen_lite.schemas import LLMMode
from docgen_lite.services import ServiceContainer
from docgen_lite.templates import TemplateCatalog


# =============================================================================
# Fakes
# =============================================================================

class FakeLLMClient:
    """
    Stand-in for LLMClient.

    Replies are chosen by prompt kind: "classify", "extract" or "clarify".
    A reply may be a string (content), None (service failure) or an
    Exception instance (raised from generate).
    """

    def __init__(self, replies: Optional[Dict[str, Any]] = None):
        self.replies: Dict[str, Any] = dict(replies or {})
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    @property
    def enabled(self) -> bool:
        return True

    @staticmethod
    def kind_of(prompt: str, system_prompt: Optional[str]) -> str:
        if system_prompt and "legal document analysis expert" in system_prompt:
            return "extract"
        if "clarifying questions" in prompt:
            return "clarify"
        return "classify"

    async def open(self):
        pass

    async def close(self):
        self.closed = True

    async def generate(self, prompt, system_prompt=None, json_mode=False,
                       max_tokens=1024, temperature=0.1, model=None) -> LLMResponse:
        kind = self.kind_of(prompt, system_prompt)
        self.calls.append({
            "kind": kind,
            "prompt": prompt,
            "system_prompt": system_prompt,
            "json_mode": json_mode,
            "temperature": temperature,
            "model": model,
        })
        reply = self.replies.get(kind, "")
        if isinstance(reply, Exception):
            raise reply
        if reply is None:
            return LLMResponse.failure("fake", "service unavailable")
        if isinstance(reply, dict):
            reply = json.dumps(reply)
        return LLMResponse(content=reply, model=model or "fake")

    def calls_of(self, kind: str) -> List[Dict[str, Any]]:
        return [c for c in self.calls if c["kind"] == kind]


class FakeOCREngine(OCREngine):
    """OCR engine that returns fixed text and counts lifecycle calls"""

    def __init__(self, text: str = "SCANNED TEXT", open_delay: float = 0.0):
        self.text = text
        self.open_delay = open_delay
        self.open_calls = 0
        self.close_calls = 0
        self.recognize_calls = 0
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "fake"

    def open(self) -> None:
        if self.open_delay:
            time.sleep(self.open_delay)
        with self._lock:
            self.open_calls += 1

    def close(self) -> None:
        with self._lock:
            self.close_calls += 1

    def recognize(self, image_data: bytes) -> str:
        with self._lock:
            self.recognize_calls += 1
        return f"  {self.text}  \n\n\n"


class CountingFactory:
    """OCR factory that records every engine it builds"""

    def __init__(self, **engine_kwargs):
        self.engine_kwargs = engine_kwargs
        self.engines: List[FakeOCREngine] = []

    def __call__(self) -> FakeOCREngine:
        engine = FakeOCREngine(**self.engine_kwargs)
        self.engines.append(engine)
        return engine


# =============================================================================
# Fixtures
# =============================================================================

CLASSIFICATION_REPLY = {"type": "motion", "category": "civil", "confidence": 0.92}

EXTRACTION_REPLY = {
    "caseNumber": "24-CV-100",
    "court": "Hennepin County",
    "petitionerName": "Jane Doe",
    "respondentName": "John Doe",
    "attorneyName": None,
    "additionalInfo": {"hearingRoom": "Courtroom 1655"},
}


@pytest.fixture
def settings(tmp_path):
    return Settings(
        llm_mode=LLMMode.OPENAI,
        openai_api_key="test-key",
        upload_dir=str(tmp_path / "uploads"),
        ocr_mode="none",
    )


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Fresh SQLite database per test"""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    reset_engine()
    init_db()
    yield
    reset_engine()


@pytest.fixture
def fake_llm():
    return FakeLLMClient({
        "classify": CLASSIFICATION_REPLY,
        "extract": EXTRACTION_REPLY,
        "clarify": "1. What is the filing date?\n\n2. Which jurisdiction applies?\n3. Who is the judge?",
    })


@pytest.fixture
def ocr_factory():
    return CountingFactory(text="ORDER FOR PROTECTION")


@pytest.fixture
def services(settings, fake_llm, ocr_factory):
    return ServiceContainer(
        settings=settings,
        dispatcher=TextExtractionDispatcher(settings, ocr_factory=ocr_factory),
        llm_client=fake_llm,
        classifier=DocumentClassifier(fake_llm),
        extractor=StructuredExtractor(fake_llm),
        catalog=TemplateCatalog(),
    )
