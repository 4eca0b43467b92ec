"""
Service Container
=================

Builds and owns the long-lived pipeline collaborators:

- TextExtractionDispatcher (owns the OCR engine)
- LLMClient (owns the HTTP connection pool)
- DocumentClassifier / StructuredExtractor on top of the client
- TemplateCatalog
- DocumentJobQueue
- ClarificationSessionStore

open() / close() bracket the application lifetime.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config import Settings, get_settings
from .ingest import TextExtractionDispatcher
from .jobs.queue import DocumentJobQueue
from .llm import Clarifier, ClarificationSessionStore, DocumentClassifier, StructuredExtractor
from .llm_client import LLMClient
from .schemas import LLMMode
from .templates import TemplateCatalog, get_catalog

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    settings: Settings
    dispatcher: TextExtractionDispatcher
    llm_client: LLMClient
    classifier: DocumentClassifier
    extractor: StructuredExtractor
    catalog: TemplateCatalog
    job_queue: DocumentJobQueue = field(default_factory=DocumentJobQueue)
    clarifications: ClarificationSessionStore = field(default_factory=ClarificationSessionStore)
    clarifier_model: Optional[str] = None

    def upload_path(self, file_name: str) -> Path:
        return Path(self.settings.upload_dir) / file_name

    def new_clarifier(self) -> Clarifier:
        return Clarifier(self.llm_client, model=self.clarifier_model)

    async def open(self):
        Path(self.settings.upload_dir).mkdir(parents=True, exist_ok=True)
        await self.dispatcher.open()
        await self.llm_client.open()
        logger.info(
            f"Services ready: llm_mode={self.settings.llm_mode.value} "
            f"templates={len(self.catalog)} upload_dir={self.settings.upload_dir}"
        )

    async def close(self):
        await self.job_queue.shutdown()
        await self.dispatcher.close()
        await self.llm_client.close()
        logger.info("Services closed")


def build_services(settings: Optional[Settings] = None) -> ServiceContainer:
    """Wire the production services from settings"""
    settings = settings or get_settings()
    client = LLMClient(settings)

    # The cheaper clarifier model name is only meaningful for OpenAI
    clarifier_model = settings.clarifier_model if settings.llm_mode == LLMMode.OPENAI else None

    return ServiceContainer(
        settings=settings,
        dispatcher=TextExtractionDispatcher(settings),
        llm_client=client,
        classifier=DocumentClassifier(client),
        extractor=StructuredExtractor(client),
        catalog=get_catalog(),
        clarifier_model=clarifier_model,
    )
