"""Loader configuration: endpoint, session and timeout."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from f1grid._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

DEFAULT_SESSION_KEY = 9472


@dataclass(frozen=True)
class LoaderConfig:
    """Fixed configuration for a directory load.

    Usage:
        config = LoaderConfig()                  # OpenF1, session 9472
        config = LoaderConfig(session_key=9161)
        config = LoaderConfig.from_env()         # F1GRID_* overrides
    """

    base_url: str = DEFAULT_BASE_URL
    session_key: int = DEFAULT_SESSION_KEY
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LoaderConfig:
        """Build a config from F1GRID_BASE_URL, F1GRID_SESSION_KEY and F1GRID_TIMEOUT."""
        env = os.environ if environ is None else environ
        base_url = env.get("F1GRID_BASE_URL") or DEFAULT_BASE_URL
        session_key = _parse(env, "F1GRID_SESSION_KEY", int, DEFAULT_SESSION_KEY)
        timeout = _parse(env, "F1GRID_TIMEOUT", float, DEFAULT_TIMEOUT)
        return cls(base_url=base_url, session_key=session_key, timeout=timeout)


def _parse[T](env: Mapping[str, str], name: str, kind: type[T], default: T) -> T:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return kind(raw.strip())  # type: ignore[call-arg]
    except ValueError as exc:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from exc
