"""Application export – background export jobs with polling.

A job snapshots the records it exports, so a failed or cancelled job can be
retried with exactly the same rows.
"""
from __future__ import annotations

import asyncio
import dataclasses
import uuid
from collections.abc import Iterable
from datetime import datetime
from enum import Enum
from typing import Any

from catalog_query.application.export.export_service import ExportService
from catalog_query.application.export.request import ColumnDef, ExportFormat, ExportRequest, rows_from
from catalog_query.application.i18n import DEFAULT_LOCALE
from catalog_query.kernel.errors import NotFoundError
from catalog_query.kernel.time import Clock, SystemClock
from catalog_query.observability.logging import get_logger

__all__ = ["ExportJob", "ExportJobManager", "JobStatus"]

logger = get_logger(__name__)


class JobStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


_ACTIVE = frozenset({JobStatus.PENDING, JobStatus.PROCESSING})
_RETRYABLE = frozenset({JobStatus.FAILED, JobStatus.CANCELLED})


@dataclasses.dataclass
class ExportJob:
    id: str
    filename: str
    format: ExportFormat
    created_at: datetime
    status: JobStatus = JobStatus.PENDING
    attempts: int = 0
    completed_at: datetime | None = None
    result: bytes | None = None
    error: str | None = None

    @property
    def is_finished(self) -> bool:
        return self.status not in _ACTIVE


@dataclasses.dataclass(frozen=True)
class _JobSpec:
    records: tuple[Any, ...]
    columns: tuple[ColumnDef, ...]
    format: ExportFormat
    filename: str
    locale: str

    def request(self) -> ExportRequest:
        return ExportRequest(
            columns=list(self.columns),
            rows=rows_from(self.records),
            format=self.format,
            filename=self.filename,
            locale=self.locale,
        )


class ExportJobManager:
    """Runs exports as asyncio tasks and exposes their state for polling.

    Must be used from inside a running event loop.
    """

    def __init__(self, service: ExportService | None = None, *, clock: Clock | None = None) -> None:
        self._service = service or ExportService()
        self._clock: Clock = clock or SystemClock()
        self._jobs: dict[str, ExportJob] = {}
        self._specs: dict[str, _JobSpec] = {}
        self._tasks: dict[str, asyncio.Task[None]] = {}

    def start(
        self,
        records: Iterable[Any],
        columns: Iterable[ColumnDef],
        format: ExportFormat,  # noqa: A002
        *,
        filename: str = "export",
        locale: str = DEFAULT_LOCALE,
    ) -> ExportJob:
        job = ExportJob(
            id=f"export_{uuid.uuid4().hex[:12]}",
            filename=filename,
            format=format,
            created_at=self._clock.now(),
        )
        self._jobs[job.id] = job
        self._specs[job.id] = _JobSpec(tuple(records), tuple(columns), format, filename, locale)
        self._schedule(job)
        logger.info("export.job.started", job_id=job.id, format=format, rows=len(self._specs[job.id].records))
        return job

    def _schedule(self, job: ExportJob) -> None:
        loop = asyncio.get_running_loop()
        self._tasks[job.id] = loop.create_task(self._run(job))

    async def _run(self, job: ExportJob) -> None:
        job.status = JobStatus.PROCESSING
        job.attempts += 1
        try:
            job.result = await self._service.export(self._specs[job.id].request())
        except asyncio.CancelledError:
            job.status = JobStatus.CANCELLED
            raise
        except Exception as exc:  # noqa: BLE001 - recorded on the job for the poller
            job.status = JobStatus.FAILED
            job.error = str(exc)
            logger.exception("export.job.failed", job_id=job.id, attempt=job.attempts)
            return
        job.status = JobStatus.COMPLETED
        job.completed_at = self._clock.now()
        logger.info("export.job.completed", job_id=job.id, size=len(job.result))

    def get(self, job_id: str) -> ExportJob:
        try:
            return self._jobs[job_id]
        except KeyError:
            raise NotFoundError("export job", job_id) from None

    def jobs(self) -> list[ExportJob]:
        return list(self._jobs.values())

    def cancel(self, job_id: str) -> bool:
        """Cancel a pending or running job; returns ``False`` if already finished."""
        job = self.get(job_id)
        if job.status not in _ACTIVE:
            return False
        self._tasks[job_id].cancel()
        job.status = JobStatus.CANCELLED
        logger.info("export.job.cancelled", job_id=job_id)
        return True

    def retry(self, job_id: str) -> bool:
        """Re-run a failed or cancelled job; returns ``False`` for other states."""
        job = self.get(job_id)
        if job.status not in _RETRYABLE:
            return False
        job.status = JobStatus.PENDING
        job.error = None
        job.result = None
        self._schedule(job)
        logger.info("export.job.retried", job_id=job_id)
        return True

    async def wait(self, job_id: str) -> ExportJob:
        """Block until the job's current attempt finishes, then return it."""
        job = self.get(job_id)
        await asyncio.wait({self._tasks[job_id]})
        return job

    def discard(self, job_id: str) -> bool:
        """Forget a finished job with its snapshot and result; ``False`` while still active."""
        job = self.get(job_id)
        if not job.is_finished:
            return False
        del self._jobs[job_id]
        self._specs.pop(job_id, None)
        self._tasks.pop(job_id, None)
        logger.debug("export.job.discarded", job_id=job_id, status=job.status.value)
        return True

    def prune(self) -> int:
        """Discard every finished job and return how many were dropped."""
        finished = [job.id for job in self._jobs.values() if job.is_finished]
        for job_id in finished:
            self.discard(job_id)
        return len(finished)
