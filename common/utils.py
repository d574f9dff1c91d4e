"""
Small helpers shared by the pages.

This module holds the Streamlit conveniences the pages rely on:
`selectbox_with_placeholder` for the court picker on Home,
`resolve_court_id` which decides which court the score page is showing, and
`configure_logging` which sets up the standard `logging` module once per
process.
"""

# Import libraries
from __future__ import annotations
import logging
from typing import Any, List, Mapping, Optional
import streamlit as st
from common.config import DEFAULT_COURT, LOG_LEVEL
from common.constants import COURT_QUERY_PARAM

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    # basicConfig is a no-op once the root logger has handlers, so calling
    # this on every Streamlit rerun is fine.
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def resolve_court_id(
    query_params: Mapping[str, Any],
    session: Mapping[str, Any],
    default: str = DEFAULT_COURT,
) -> str:
    """
    Court shown on the score page.

    Order: `?court=` in the URL, then the court picked on Home
    (`session["court_id"]`), then the configured default. The value is not
    checked against COURT_IDS; any non-empty text is a valid court id.
    """
    court = query_params.get(COURT_QUERY_PARAM)
    if isinstance(court, (list, tuple)):
        court = court[0] if court else None
    if court is not None and str(court).strip():
        return str(court).strip()
    picked = session.get("court_id")
    if picked is not None and str(picked).strip():
        return str(picked).strip()
    return str(default)


def selectbox_with_placeholder(
    label: str,
    options: List[str],
    key: Optional[str] = None,
    default_index: Optional[int] = None,
):
    """
    A selectbox that can start empty (placeholder) or preselect an item (default_index).
    Uses a hidden label to avoid duplicate text under the title.
    """
    return st.selectbox(
        label,
        options=options,
        index=default_index,            # None -> placeholder shown; int -> preselect
        placeholder=label,
        label_visibility="collapsed",
        key=key,
    )
