"""Application export – RemoteExportOrchestrator.

A run submits one job, then polls it at a fixed interval until the producer
reports content, the poll budget runs out, or a non-transient error occurs::

    CREATED ──submit──▶ POLLING ──has_content──▶ READY
       │                  │ ├──budget spent────▶ TIMED_OUT
       └──missing id──────┴─┴──remote error────▶ FAILED

Every iteration of the poll loop charges one attempt, including iterations
whose re-fetch failed with a :class:`TransientNetworkError`. Such errors are
the only ones absorbed; they can lead to READY or TIMED_OUT, never FAILED.
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

from mp_exports.application.export.config import ExportConfigResolver, ExportRunConfig
from mp_exports.application.export.job import ExportJob, ExportRun, JobState
from mp_exports.application.export.outcome import Outcome
from mp_exports.application.export.persister import Artifact, ArtifactPersister
from mp_exports.application.export.ports import NotificationSink, RemoteProducer, TelemetrySink
from mp_exports.application.export.request import ExportRequest
from mp_exports.kernel.errors import (
    BaseError,
    MissingJobIdError,
    PersistenceError,
    PollTimeoutError,
    RemoteError,
    TransientNetworkError,
)
from mp_exports.kernel.time import Clock, SystemClock
from mp_exports.observability.logging import get_logger

__all__ = ["RemoteExportOrchestrator"]

logger = get_logger(__name__)

Sleep = Callable[[float], Awaitable[Any]]

EXPORT_SUCCEEDED = "export succeeded"
EXPORT_FAILED = "export failed"


class RemoteExportOrchestrator:
    """Drives remote export runs. Holds no per-run state; runs may overlap."""

    def __init__(
        self,
        producer: RemoteProducer,
        persister: ArtifactPersister,
        notifications: NotificationSink,
        telemetry: TelemetrySink,
        *,
        resolver: ExportConfigResolver | None = None,
        clock: Clock | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        self._producer = producer
        self._resolver = resolver
        self._persister = persister
        self._notifications = notifications
        self._telemetry = telemetry
        self._clock = clock or SystemClock()
        self._sleep = sleep or asyncio.sleep

    async def run(self, request: ExportRequest, config: ExportRunConfig | None = None) -> Outcome:
        """Execute one run to its terminal state and return its outcome.

        Without *config* the run resolves its own through the resolver given
        at construction. A failed resolution ends the run like any other error.
        """
        resolver = self._resolver
        if config is None and resolver is None:
            raise ValueError("run() needs a config when no resolver is configured")
        run = ExportRun(request=request, config=config, started_at=self._clock.monotonic())
        self._notifications.on_start()
        try:
            if run.config is None and resolver is not None:
                run.config = await resolver.resolve(request)
            job = await self.submit(run)
            await self._poll_until_ready(run, job)
        except BaseError as exc:
            return self._finish(run, exc)
        except Exception as exc:  # noqa: BLE001 – a misbehaving producer still ends the run
            return self._finish(
                run, RemoteError(service="export-producer", message=repr(exc), cause=exc)
            )
        return self._finish(run, None)

    async def submit(self, run: ExportRun) -> ExportJob:
        request = run.request
        expires_after = run.config.expiry.expires_at(self._clock.now()).isoformat()
        job = await self._producer.create_job(
            request.format, request.target, request.context, expires_after
        )
        if not job.id:
            raise MissingJobIdError()
        run.job = job
        run.state = JobState.POLLING
        logger.info(
            "export.submitted",
            job_id=job.id,
            export_format=request.format.value,
            expires_after=expires_after,
            max_attempts=run.config.budget.max_attempts,
        )
        return job

    async def poll(self, job: ExportJob) -> ExportJob:
        if not job.id:
            raise MissingJobIdError("Cannot poll an export job without an id")
        return await self._producer.get_job(job.id)

    async def download(self, job: ExportJob) -> Artifact:
        """Fetch a finished job's content and hand it to the persister."""
        if not job.id:
            raise MissingJobIdError("Cannot download an export job without an id")
        content = await self._producer.download_content(job.id)
        artifact = Artifact(
            content=content,
            filename=job.filename or f"export-{job.id}",
            media_type=job.format.value,
        )
        try:
            self._persister.persist(artifact)
        except Exception as exc:  # noqa: BLE001
            raise PersistenceError(artifact.filename, f"Export failed: {exc}", cause=exc) from exc
        return artifact

    async def _poll_until_ready(self, run: ExportRun, job: ExportJob) -> None:
        budget = run.config.budget
        backoff = budget.backoff()
        while run.attempts < budget.max_attempts:
            run.attempts += 1

            if job.has_content:
                if run.config.persist_locally:
                    await self.download(job)
                return

            await self._sleep(backoff.compute(run.attempts))
            try:
                job = await self.poll(job)
            except TransientNetworkError as exc:
                logger.warning(
                    "export.transient_error",
                    job_id=job.id,
                    attempt=run.attempts,
                    max_attempts=budget.max_attempts,
                    error=exc.message,
                )
                continue
            run.job = job
            logger.debug("export.poll", job_id=job.id, attempt=run.attempts, has_content=job.has_content)

        raise PollTimeoutError(attempts=run.attempts)

    def _finish(self, run: ExportRun, error: BaseError | None) -> Outcome:
        total_time_ms = max(0.0, (self._clock.monotonic() - run.started_at) * 1000)
        job_id = run.job.id if run.job is not None else None
        properties = {**run.request.tracking_properties(), "total_time_ms": total_time_ms}
        log = logger.bind(job_id=job_id, attempts=run.attempts, total_time_ms=total_time_ms)

        if error is None:
            run.state = JobState.READY
            log.info("export.ready", persisted=run.config.persist_locally)
            self._telemetry.record(EXPORT_SUCCEEDED, properties)
            self._notifications.on_success()
            return Outcome.success(attempts=run.attempts, job_id=job_id, total_time_ms=total_time_ms)

        if isinstance(error, PollTimeoutError):
            run.state = JobState.TIMED_OUT
            log.warning("export.timed_out")
            outcome = Outcome.timeout(
                error, attempts=run.attempts, job_id=job_id, total_time_ms=total_time_ms
            )
        else:
            run.state = JobState.FAILED
            log.error("export.failed", reason=error.code, detail=error.message)
            outcome = Outcome.failure(
                error, attempts=run.attempts, job_id=job_id, total_time_ms=total_time_ms
            )
        self._telemetry.record(EXPORT_FAILED, properties)
        self._notifications.on_error(error.message)
        return outcome
