"""
Background Jobs
===============

Document processing runs as asyncio tasks, serialized per document id.
"""

from .queue import DocumentJobQueue, QueueClosedError
from .tasks import process_document, recover_interrupted

__all__ = [
    "DocumentJobQueue",
    "QueueClosedError",
    "process_document",
    "recover_interrupted",
]
