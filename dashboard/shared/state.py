"""Process-wide directory loader for the dashboard."""

from __future__ import annotations

import streamlit as st

from f1grid import DirectoryLoader, LoaderConfig, LoadFailure, LoadState

LOADING_MESSAGE = "Loading drivers..."
EMPTY_MESSAGE = "No drivers returned for this session."


@st.cache_resource
def get_loader() -> DirectoryLoader:
    """Return the loader shared by every browser session of this server."""
    return DirectoryLoader(LoaderConfig.from_env())


def ensure_loaded(loader: DirectoryLoader) -> None:
    """Run the initial load once; later loads happen on refresh only."""
    if loader.state is LoadState.IDLE:
        with st.spinner(LOADING_MESSAGE):
            loader.load()


def empty_directory_message(loader: DirectoryLoader) -> str | None:
    """Message for an empty directory, or None when the failure banner covers it.

    Another session may have started the shared load, so an empty directory
    while a load is in flight means "loading", not "no drivers".
    """
    if loader.in_flight:
        return LOADING_MESSAGE
    if isinstance(loader.last_result, LoadFailure):
        return None
    return EMPTY_MESSAGE
