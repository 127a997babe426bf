"""Public client classes for the OpenF1 drivers endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from f1grid._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from f1grid._query import build_query_params
from f1grid.api_logging import log_api_call, log_async_api_call
from f1grid.exceptions import F1GridValidationError
from f1grid.models.driver import DriverRecord


def _validate_list[T](model_type: type[T], data: Any) -> list[T]:
    """Validate a JSON array against a Pydantic model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except Exception as exc:
        raise F1GridValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


class DriversClient:
    """Synchronous client for the OpenF1 drivers endpoint.

    Usage:
        with DriversClient() as f1:
            records = f1.drivers(session_key=9472)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> DriversClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def drivers(self, **kwargs: Any) -> list[DriverRecord]:
        """Get raw driver-session records (duplicates included)."""
        data = self._transport.get("/drivers", build_query_params(**kwargs))
        return _validate_list(DriverRecord, data)


class AsyncDriversClient:
    """Asynchronous client for the OpenF1 drivers endpoint.

    Usage:
        async with AsyncDriversClient() as f1:
            records = await f1.drivers(session_key=9472)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncDriversClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @log_async_api_call
    async def drivers(self, **kwargs: Any) -> list[DriverRecord]:
        """Get raw driver-session records (duplicates included)."""
        data = await self._transport.get("/drivers", build_query_params(**kwargs))
        return _validate_list(DriverRecord, data)
