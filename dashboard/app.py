"""F1 Grid — Streamlit driver directory for one OpenF1 session."""

from __future__ import annotations

import streamlit as st

from f1grid import LoadFailure, filter_drivers

from shared import (
    F1_RED,
    PAGE_TITLE,
    SEARCH_PLACEHOLDER,
    describe_failure,
    driver_card,
    empty_directory_message,
    ensure_loaded,
    get_loader,
    render_driver_card,
    show_driver_dialog,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon="\U0001f3ce\ufe0f",
    layout="centered",
)


# ── Load ─────────────────────────────────────────────────────────────────────

loader = get_loader()
ensure_loaded(loader)

header_col, refresh_col = st.columns([5, 1])
with header_col:
    st.markdown(
        f"<h1 style=\"font-style: italic; font-weight: 900; "
        f"border-bottom: 3px solid {F1_RED};\">{PAGE_TITLE}</h1>",
        unsafe_allow_html=True,
    )
with refresh_col:
    if st.button("Refresh", disabled=loader.in_flight):
        with st.spinner("Refreshing..."):
            loader.refresh()

result = loader.last_result
if isinstance(result, LoadFailure):
    st.error(describe_failure(result.kind, result.message))


# ── Search & list ────────────────────────────────────────────────────────────

search = st.text_input("Search", placeholder=SEARCH_PLACEHOLDER, label_visibility="collapsed")
directory = loader.directory

if not directory:
    message = empty_directory_message(loader)
    if message is not None:
        st.info(message)
    st.stop()

drivers = filter_drivers(directory, search)
if not drivers:
    st.info("No drivers match your search.")
    st.stop()

for driver in drivers:
    card = driver_card(driver)
    if render_driver_card(card):
        show_driver_dialog(card)
