# common/ui.py
from __future__ import annotations
import streamlit as st

from common.config import APP_ROOT, APP_TITLE
from common.constants import SCORE_PAGE

def _link_if_exists(rel_path: str, label: str, icon: str = "📄"):
    """Safely add a page link if the target file exists."""
    target = (APP_ROOT / rel_path)
    if target.exists():
        # Streamlit expects an app-relative path with forward slashes
        st.sidebar.page_link(rel_path.replace("\\", "/"), label=label, icon=icon)

def sidebar_header(court_id: str | None = None, show_custom_nav: bool = False):
    # The built-in pages nav is off in .streamlit/config.toml; these links replace it
    with st.sidebar:
        st.markdown(f"**{APP_TITLE}**")
        st.markdown("**Court:** " + (court_id or "—"))

        if show_custom_nav:
            st.divider()
            st.markdown("#### Pages")
    if show_custom_nav:
        _link_if_exists("main.py", label="Home", icon="🏠")
        _link_if_exists(SCORE_PAGE, label="Input Score", icon="🎾")
