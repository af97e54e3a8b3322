"""
Worker pool that executes batches concurrently against a shared engine.

One feeder task pushes batch descriptors into a bounded queue and then one
stop sentinel per worker. A fixed number of worker tasks pull descriptors,
each running its batch inside its own transaction with its own random
stream. A failed batch rolls back only itself; the worker logs the failure
and keeps pulling. Batch failures never stop the run; it reports the first
error after every worker has drained. Cancelling the run, or a worker task
dying, cancels the feeder and every remaining worker.
"""

import asyncio
import logging
import random
import time
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from catalog_datagen.generators.batching import BatchDescriptor
from catalog_datagen.generators.progress import ProgressSink, null_progress
from catalog_datagen.shared.exceptions import BatchExecutionError

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 20
DEFAULT_QUEUE_SIZE = 100

# Generates, builds and executes one batch; returns rows the store reports written
BatchHandler = Callable[[AsyncConnection, BatchDescriptor, random.Random], Awaitable[int]]

_STOP = None


class DispatchState(str, Enum):
    IDLE = "idle"
    DISPATCHING = "dispatching"
    DRAINING = "draining"
    DONE = "done"


@dataclass
class DispatchResult:
    """Aggregated outcome of one dispatch run."""

    completed: int = 0
    rows_written: int = 0
    committed_batches: int = 0
    failed_batches: int = 0
    first_error: BatchExecutionError | None = None

    @property
    def ok(self) -> bool:
        return self.first_error is None


def worker_seed(worker_id: int, base_seed: int | None = None) -> int:
    """
    Seed for a worker's random stream.

    With no base seed the wall clock is used, so streams differ per run;
    the worker index keeps streams distinct within a run.
    """
    base = time.time_ns() if base_seed is None else base_seed
    return base * 1_000_003 + worker_id


class BatchDispatcher:
    """
    Fixed-size asyncio worker pool over a bounded batch queue.

    Args:
        engine: Shared async engine; each batch checks out a connection
        workers: Number of worker tasks
        queue_size: Capacity of the batch queue (feeder backpressure)
        seed: Optional base seed for reproducible worker streams
        progress: Sink advanced by the record count of each committed batch
        label: Name used in log messages
    """

    def __init__(
        self,
        engine: AsyncEngine,
        workers: int = DEFAULT_WORKERS,
        queue_size: int = DEFAULT_QUEUE_SIZE,
        seed: int | None = None,
        progress: ProgressSink | None = None,
        label: str = "batches",
    ):
        if workers <= 0:
            raise ValueError(f"workers must be > 0, got {workers}")
        if queue_size <= 0:
            raise ValueError(f"queue_size must be > 0, got {queue_size}")

        self.engine = engine
        self.workers = workers
        self.queue_size = queue_size
        self.seed = seed
        self.progress = progress or null_progress
        self.label = label
        self.state = DispatchState.IDLE

        self._lock = asyncio.Lock()
        self._result = DispatchResult()
        self._source_error: Exception | None = None

    async def run(
        self,
        batches: Iterable[BatchDescriptor],
        handler: BatchHandler,
    ) -> DispatchResult:
        """
        Execute every batch and wait for all workers to drain.

        Args:
            batches: Batch descriptors, consumed lazily by the feeder
            handler: Coroutine run once per batch inside its transaction

        Returns:
            DispatchResult with record and batch counts and the first error
        """
        if self.state in (DispatchState.DISPATCHING, DispatchState.DRAINING):
            raise RuntimeError(f"Dispatcher for {self.label} is already running")

        self._result = DispatchResult()
        self._source_error = None
        queue: asyncio.Queue[BatchDescriptor | None] = asyncio.Queue(maxsize=self.queue_size)

        self.state = DispatchState.DISPATCHING
        logger.debug(f"Dispatching {self.label} to {self.workers} workers")

        worker_tasks = [
            asyncio.create_task(self._worker(worker_id, queue, handler))
            for worker_id in range(self.workers)
        ]
        feeder_task = asyncio.create_task(self._feed(batches, queue))
        tasks = [feeder_task, *worker_tasks]

        try:
            await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            # A crashed task or a cancelled run stops every remaining task
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            self.state = DispatchState.DONE

        for task in tasks:
            if not task.cancelled() and task.exception() is not None:
                raise task.exception()
        if self._source_error is not None:
            raise self._source_error

        result = self._result
        logger.info(
            f"Finished {self.label}: {result.completed} records in "
            f"{result.committed_batches} batches, {result.failed_batches} failed"
        )
        return result

    async def _feed(
        self,
        batches: Iterable[BatchDescriptor],
        queue: asyncio.Queue,
    ) -> None:
        try:
            for batch in batches:
                await queue.put(batch)
        except Exception as e:
            # Queued batches still drain; the run raises this afterwards
            logger.error(f"Batch source for {self.label} failed: {e}")
            self._source_error = e

        self.state = DispatchState.DRAINING
        for _ in range(self.workers):
            await queue.put(_STOP)

    async def _worker(
        self,
        worker_id: int,
        queue: asyncio.Queue,
        handler: BatchHandler,
    ) -> None:
        rng = random.Random(worker_seed(worker_id, self.seed))

        while True:
            batch = await queue.get()
            if batch is _STOP:
                break

            try:
                async with self.engine.begin() as conn:
                    written = await handler(conn, batch, rng)
            except Exception as e:
                await self._record_error(worker_id, batch, e, failed=True)
                continue

            async with self._lock:
                self._result.completed += batch.count
                self._result.rows_written += written
                self._result.committed_batches += 1
            try:
                self.progress(batch.count)
            except Exception as e:
                # The batch stays committed; the run still reports the failure
                await self._record_error(worker_id, batch, e, failed=False)

    async def _record_error(
        self,
        worker_id: int,
        batch: BatchDescriptor,
        error: Exception,
        failed: bool,
    ) -> None:
        wrapped = BatchExecutionError(worker_id, batch.start_id, batch.count, error)
        wrapped.__cause__ = error
        logger.error(str(wrapped))
        async with self._lock:
            if failed:
                self._result.failed_batches += 1
            if self._result.first_error is None:
                self._result.first_error = wrapped
