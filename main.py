"""
Main application entry for the Court Scorecard Streamlit app.

This module defines the Home page users see when they open the app. It
handles:
    - application configuration (`st.set_page_config`; environment values
        are loaded from `.env` by `common.config`),
    - logging setup (`common.utils.configure_logging`),
    - the court picker: the chosen court is stored in `st.session_state`
        so the score page opens on it, and direct `?court=` links are listed
        for every court in `COURT_IDS`.

The form, the card and the PNG export all live on `pages/1_Input_Score.py`.
"""

# Import libraries
import streamlit as st

from common.config import APP_TITLE
from common.constants import COURT_IDS, COURT_QUERY_PARAM, SCORE_PAGE
from common.ui import sidebar_header
from common.utils import configure_logging, selectbox_with_placeholder

st.set_page_config(page_title=f"{APP_TITLE} — Home", layout="centered")
configure_logging()

def main():
    sidebar_header(court_id=st.session_state.get("court_id"), show_custom_nav=True)

    st.title(f"🎾 {APP_TITLE}")
    st.caption("Pick a court, enter the match result and save the scorecard as an image.")

    labels = [f"Court {cid}" for cid in COURT_IDS]
    label_to_id = dict(zip(labels, COURT_IDS))

    # --- Restore previous selection if we have one ---
    default_index = None
    prev_id = st.session_state.get("court_id")
    if prev_id and prev_id in COURT_IDS:
        default_index = COURT_IDS.index(prev_id)

    selected_label = selectbox_with_placeholder(
        "Choose a court:",
        labels,
        key="home_court_select",
        default_index=default_index,
    )

    if selected_label:
        # Persist for the score page
        st.session_state["court_id"] = label_to_id[selected_label]
        st.page_link(SCORE_PAGE, label=f"Enter score for {selected_label}", icon="✏️")

    st.divider()
    st.markdown("#### Direct links")
    st.markdown(
        "\n".join(
            f"- [Court {cid}](Input_Score?{COURT_QUERY_PARAM}={cid})" for cid in COURT_IDS
        )
    )

if __name__ == "__main__":
    main()
