"""F1 Grid — driver directory for one OpenF1 session."""

from f1grid.client import AsyncDriversClient, DriversClient
from f1grid.config import LoaderConfig
from f1grid.countries import country_to_iso2, flag_url
from f1grid.directory import (
    DriverDirectory,
    build_directory,
    dedupe_drivers,
    filter_drivers,
    sort_by_team,
)
from f1grid.exceptions import (
    F1GridAPIError,
    F1GridConnectionError,
    F1GridError,
    F1GridTimeoutError,
    F1GridValidationError,
)
from f1grid.loader import (
    AsyncDirectoryLoader,
    DirectoryLoader,
    FailureKind,
    LoadFailure,
    LoadResult,
    LoadState,
    LoadSuccess,
)
from f1grid.models.driver import DriverRecord

__all__ = [
    "AsyncDirectoryLoader",
    "AsyncDriversClient",
    "DirectoryLoader",
    "DriverDirectory",
    "DriverRecord",
    "DriversClient",
    "F1GridAPIError",
    "F1GridConnectionError",
    "F1GridError",
    "F1GridTimeoutError",
    "F1GridValidationError",
    "FailureKind",
    "LoadFailure",
    "LoadResult",
    "LoadState",
    "LoadSuccess",
    "LoaderConfig",
    "build_directory",
    "country_to_iso2",
    "dedupe_drivers",
    "filter_drivers",
    "flag_url",
    "sort_by_team",
]

__version__ = "0.1.0"
