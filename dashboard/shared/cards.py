"""Driver card and detail dialog rendering."""

from __future__ import annotations

import html

import streamlit as st

from .constants import NO_PHOTO_LABEL
from .formatters import DriverCard

_CARD_STYLE = (
    "border-left: 6px solid {accent}; border-radius: 16px; "
    "padding: 8px 16px; margin-bottom: 4px; background: #FFF;"
)


def card_html(card: DriverCard) -> str:
    """Markup for the name/team block of a list row; API text is escaped."""
    accent = html.escape(card["accent"])
    return (
        f"<div style=\"{_CARD_STYLE.format(accent=accent)}\">"
        f"<b>{html.escape(card['broadcast_name'])}</b><br>"
        f"<span style=\"color: {accent}; text-transform: uppercase;\">"
        f"{html.escape(card['team_name'])}</span></div>"
    )


def dialog_header_html(card: DriverCard) -> str:
    """Markup for the coloured header of the detail dialog; API text is escaped."""
    return (
        f"<div style=\"background: {html.escape(card['accent'])}; color: #FFF; padding: 12px; "
        f"display: flex; justify-content: space-between; font-weight: 900; font-size: 30px;\">"
        f"<span style=\"opacity: 0.4;\">{html.escape(card['acronym'])}</span>"
        f"<span>{html.escape(card['number_label'])}</span></div>"
    )


def render_driver_card(card: DriverCard) -> bool:
    """Render one list row; returns True when its details button was clicked."""
    with st.container():
        photo_col, info_col, right_col = st.columns([1, 4, 1])
        with photo_col:
            if card["headshot_url"]:
                st.image(card["headshot_url"], width=80)
            else:
                st.markdown(f"**{card['number_label']}**")
        with info_col:
            st.markdown(card_html(card), unsafe_allow_html=True)
        with right_col:
            st.text(card["acronym"])
            st.image(card["flag_url"], width=24)
        return st.button("Details", key=f"details-{card['key']}")


@st.dialog("Driver")
def show_driver_dialog(card: DriverCard) -> None:
    """Detail view for one driver."""
    st.markdown(dialog_header_html(card), unsafe_allow_html=True)
    if card["headshot_url"]:
        st.image(card["headshot_url"], width=200)
    else:
        st.caption(NO_PHOTO_LABEL)
    st.subheader(card["full_name"])
    st.write(card["team_name"])
    st.divider()
    country_col, number_col = st.columns(2)
    with country_col:
        st.caption("Country")
        st.image(card["flag_url"], width=30)
    with number_col:
        st.caption("Number")
        st.markdown(f"**{card['key']}**")
