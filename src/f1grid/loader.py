"""Driver directory loaders (sync and async).

A loader owns one drivers client and the current directory. Each load is
tagged with a sequence number; a result older than the last committed one
is discarded, so the most recently started load always wins.
"""

from __future__ import annotations

import asyncio
import threading
import time
from dataclasses import dataclass
from enum import Enum

from f1grid.api_logging import get_logger
from f1grid.client import AsyncDriversClient, DriversClient
from f1grid.config import LoaderConfig
from f1grid.directory import EMPTY_DIRECTORY, DriverDirectory, build_directory
from f1grid.exceptions import F1GridError, F1GridValidationError
from f1grid.models.driver import DriverRecord


class LoadState(str, Enum):
    """Status of the directory's load lifecycle."""

    IDLE = "idle"
    LOADING = "loading"
    REFRESHING = "refreshing"
    LOADED = "loaded"
    FAILED = "failed"


class FailureKind(str, Enum):
    """Why a load failed."""

    NETWORK = "network"
    PARSE = "parse"


@dataclass(frozen=True)
class LoadSuccess:
    """A load that produced a directory (possibly empty)."""

    directory: DriverDirectory
    sequence: int

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class LoadFailure:
    """A load that failed before producing a directory."""

    kind: FailureKind
    message: str
    sequence: int

    @property
    def ok(self) -> bool:
        return False


LoadResult = LoadSuccess | LoadFailure


def classify_error(exc: F1GridError) -> FailureKind:
    """Map a client exception onto a failure kind."""
    if isinstance(exc, F1GridValidationError):
        return FailureKind.PARSE
    return FailureKind.NETWORK


class _LoaderState:
    """Directory, state machine and sequencing shared by both loaders."""

    def __init__(self, config: LoaderConfig | None) -> None:
        self._config = config or LoaderConfig()
        self._directory: DriverDirectory = EMPTY_DIRECTORY
        self._state = LoadState.IDLE
        self._last_result: LoadResult | None = None
        self._issued = 0
        self._committed = 0

    @property
    def config(self) -> LoaderConfig:
        return self._config

    @property
    def directory(self) -> DriverDirectory:
        """The last successfully loaded directory; empty until a load succeeds."""
        return self._directory

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def last_result(self) -> LoadResult | None:
        return self._last_result

    @property
    def is_loading(self) -> bool:
        return self._state is LoadState.LOADING

    @property
    def is_refreshing(self) -> bool:
        return self._state is LoadState.REFRESHING

    @property
    def in_flight(self) -> bool:
        return self._state in (LoadState.LOADING, LoadState.REFRESHING)

    def _begin(self) -> int:
        # The first load shows a blocking spinner; later ones are refreshes.
        self._state = LoadState.REFRESHING if self._committed else LoadState.LOADING
        self._issued += 1
        get_logger().info(
            "LOAD START: session_key=%s seq=%d state=%s",
            self._config.session_key, self._issued, self._state.value,
        )
        return self._issued

    def _outcome(self, seq: int, records: list[DriverRecord], elapsed: float) -> LoadSuccess:
        logger = get_logger()
        directory = build_directory(records)
        dropped = len(records) - len(directory)
        if dropped:
            logger.debug("LOAD DEDUPE: seq=%d dropped %d duplicate records", seq, dropped)
        logger.info("LOAD OK: seq=%d -> %d drivers (%.3fs)", seq, len(directory), elapsed)
        return LoadSuccess(directory=directory, sequence=seq)

    def _failure(self, seq: int, exc: F1GridError, elapsed: float) -> LoadFailure:
        kind = classify_error(exc)
        get_logger().error(
            "LOAD FAIL: seq=%d -> %s (%s: %s) (%.3fs)",
            seq, kind.value, type(exc).__name__, exc, elapsed,
        )
        return LoadFailure(kind=kind, message=str(exc), sequence=seq)

    def _abort(self, seq: int) -> None:
        """Leave the transitional state after an unexpected error or cancellation."""
        if seq != self._issued:
            return
        if self._last_result is None:
            self._state = LoadState.IDLE
        else:
            self._state = LoadState.LOADED if self._last_result.ok else LoadState.FAILED

    def _commit(self, result: LoadResult) -> bool:
        """Apply *result* unless a newer load has already been committed."""
        if result.sequence < self._committed:
            get_logger().warning(
                "LOAD STALE: seq=%d discarded (committed seq=%d)",
                result.sequence, self._committed,
            )
            return False

        self._committed = result.sequence
        self._last_result = result
        if isinstance(result, LoadSuccess):
            self._directory = result.directory

        # A newer load is still running; stay in the transitional state.
        if result.sequence == self._issued:
            self._state = LoadState.LOADED if result.ok else LoadState.FAILED
        return True


class DirectoryLoader(_LoaderState):
    """Synchronous directory loader.

    Usage:
        with DirectoryLoader() as loader:
            result = loader.load()
            if result is not None and result.ok:
                drivers = loader.directory
    """

    def __init__(
        self,
        config: LoaderConfig | None = None,
        client: DriversClient | None = None,
    ) -> None:
        super().__init__(config)
        self._owns_client = client is None
        self._client = client or DriversClient(
            base_url=self._config.base_url, timeout=self._config.timeout,
        )
        self._lock = threading.Lock()

    def __enter__(self) -> DirectoryLoader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the drivers client if this loader created it."""
        if self._owns_client:
            self._client.close()

    def load(self) -> LoadResult | None:
        """Fetch, deduplicate and sort the session's drivers.

        Never raises for network or parse failures; those come back as a
        LoadFailure. Returns None without fetching when another load is
        already in flight.
        """
        with self._lock:
            if self.in_flight:
                get_logger().info("LOAD SKIP: seq=%d still in flight", self._issued)
                return None
            seq = self._begin()

        start = time.monotonic()
        result: LoadResult
        try:
            records = self._client.drivers(session_key=self._config.session_key)
            result = self._outcome(seq, records, time.monotonic() - start)
        except F1GridError as exc:
            result = self._failure(seq, exc, time.monotonic() - start)
        except BaseException:
            with self._lock:
                self._abort(seq)
            raise

        with self._lock:
            self._commit(result)
        return result

    def refresh(self) -> LoadResult | None:
        """Reload the directory; a no-op while a load is in flight."""
        return self.load()


class AsyncDirectoryLoader(_LoaderState):
    """Asynchronous directory loader.

    Concurrent callers share the in-flight load instead of issuing a second
    request, unless ``force=True`` starts a fresh one.

    Usage:
        async with AsyncDirectoryLoader() as loader:
            result = await loader.load()
    """

    def __init__(
        self,
        config: LoaderConfig | None = None,
        client: AsyncDriversClient | None = None,
    ) -> None:
        super().__init__(config)
        self._owns_client = client is None
        self._client = client or AsyncDriversClient(
            base_url=self._config.base_url, timeout=self._config.timeout,
        )
        self._task: asyncio.Task[LoadResult] | None = None

    async def __aenter__(self) -> AsyncDirectoryLoader:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the drivers client if this loader created it."""
        if self._owns_client:
            await self._client.close()

    async def load(self, *, force: bool = False) -> LoadResult:
        """Fetch, deduplicate and sort the session's drivers.

        Never raises for network or parse failures; those come back as a
        LoadFailure.
        """
        if self._task is not None and not self._task.done() and not force:
            get_logger().info("LOAD JOIN: seq=%d already in flight", self._issued)
            return await asyncio.shield(self._task)

        seq = self._begin()
        task = asyncio.create_task(self._run(seq))
        self._task = task
        return await asyncio.shield(task)

    async def refresh(self, *, force: bool = False) -> LoadResult:
        """Reload the directory, joining any load already in flight."""
        return await self.load(force=force)

    async def _run(self, seq: int) -> LoadResult:
        start = time.monotonic()
        result: LoadResult
        try:
            records = await self._client.drivers(session_key=self._config.session_key)
            result = self._outcome(seq, records, time.monotonic() - start)
        except F1GridError as exc:
            result = self._failure(seq, exc, time.monotonic() - start)
        except BaseException:
            self._abort(seq)
            raise
        self._commit(result)
        return result
