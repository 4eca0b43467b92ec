"""
Job Queue Management
====================

In-process asyncio queue for document processing.

- submit() starts one task per call and returns immediately
- Jobs for the same document id run one at a time, in submission order
- Jobs for different documents run concurrently
- Running tasks are tracked until done, so they are never dropped
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Set

logger = logging.getLogger(__name__)


JobFn = Callable[[], Awaitable[Any]]


class QueueClosedError(RuntimeError):
    """Job submitted after shutdown()"""


class DocumentJobQueue:
    """
    Per-document serialized job runner.

    Usage:
        queue = DocumentJobQueue()
        queue.submit(doc_id, lambda: process_document(doc_id, services))
        await queue.wait(doc_id)
    """

    def __init__(self):
        self._locks: Dict[str, asyncio.Lock] = {}
        self._tasks: Dict[str, Set[asyncio.Task]] = {}
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def pending_count(self) -> int:
        return sum(1 for tasks in self._tasks.values() for t in tasks if not t.done())

    def submit(self, document_id: str, job: JobFn) -> asyncio.Task:
        """Schedule job for document_id; must be called from the event loop"""
        if self._closed:
            raise QueueClosedError("Job queue is shut down")

        lock = self._locks.setdefault(document_id, asyncio.Lock())
        task = asyncio.create_task(
            self._run(document_id, lock, job),
            name=f"process-document-{document_id}",
        )
        self._tasks.setdefault(document_id, set()).add(task)
        task.add_done_callback(lambda t: self._on_done(document_id, t))

        logger.info(f"Queued processing job for document {document_id}")
        return task

    async def _run(self, document_id: str, lock: asyncio.Lock, job: JobFn) -> Optional[Any]:
        async with lock:
            try:
                return await job()
            except asyncio.CancelledError:
                logger.warning(f"Processing job cancelled for document {document_id}")
                raise
            except Exception:
                # Jobs record their own failures; this only keeps the loop clean
                logger.exception(f"Processing job crashed for document {document_id}")
                return None

    def _on_done(self, document_id: str, task: asyncio.Task) -> None:
        tasks = self._tasks.get(document_id)
        if tasks is None:
            return
        tasks.discard(task)
        if not tasks:
            del self._tasks[document_id]
            self._locks.pop(document_id, None)

    def is_running(self, document_id: str) -> bool:
        return any(not t.done() for t in self._tasks.get(document_id, ()))

    async def wait(self, document_id: str) -> None:
        """Wait for every job currently queued for document_id"""
        tasks = list(self._tasks.get(document_id, ()))
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def join(self) -> None:
        """Wait for every queued job"""
        tasks = [t for group in self._tasks.values() for t in group]
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def shutdown(self, cancel: bool = False) -> None:
        """
        Stop accepting jobs and wait for the running ones.

        cancel=True cancels instead of waiting; cancelled documents are
        marked as errored and can be reprocessed.
        """
        self._closed = True
        tasks = [t for group in self._tasks.values() for t in group]
        if cancel:
            for task in tasks:
                task.cancel()
        if tasks:
            logger.info(f"Job queue shutdown: {'cancelling' if cancel else 'waiting for'} {len(tasks)} jobs")
            await asyncio.gather(*tasks, return_exceptions=True)
