# pages/1_Input_Score.py
"""
Score page for one court.

The court comes from `?court=<id>` (or the court picked on Home). The page
shows either the score form or the generated match result card, depending on
the court's `ScoreSession` view. Every button press reruns the script; the
session object is what survives between runs.
"""

from datetime import date

import matplotlib.pyplot as plt
import streamlit as st

from common.config import LOGO_PATH
from common.constants import (
    EDIT_LABEL, FIELD_PLACEHOLDERS, FORM_TITLE, PAGE_TITLE, SAVE_LABEL, SUBMIT_LABEL,
)
from common.scorecard import build_scorecard_figure, load_logo
from common.ui import sidebar_header
from common.utils import configure_logging, resolve_court_id
from common.validation import ValidationError
from controllers.score_controller import ScoreSession, ViewState
from models.score_model import FIELD_LABELS, FIELD_NAMES

st.set_page_config(page_title=PAGE_TITLE, layout="centered")
configure_logging()


def _render_form(session: ScoreSession):
    logo = load_logo(LOGO_PATH)
    if logo is not None:
        st.image(logo, width=120)
    st.title(FORM_TITLE)
    st.caption(f"Court {session.court_id} - Enter match results")

    values = session.form_values()
    errors = session.field_errors
    raw = {}
    with st.form("score_form", clear_on_submit=False):
        for name in FIELD_NAMES:
            if name == "opponent_name":
                st.divider()   # player group | opponent group
            raw[name] = st.text_input(
                FIELD_LABELS[name],
                value=values[name],
                placeholder=FIELD_PLACEHOLDERS[name],
                key=f"input_{name}",
            )
            if name in errors:
                st.error(errors[name])
        submitted = st.form_submit_button(SUBMIT_LABEL, use_container_width=True)

    if submitted:
        try:
            session.submit(raw)
        except ValidationError:
            # Messages are read back from the session on the rerun
            pass
        st.rerun()


def _render_scorecard(session: ScoreSession):
    fig = build_scorecard_figure(session.record, session.court_id, date.today(),
                                 logo_path=LOGO_PATH)
    image = session.export_image(fig)

    col_edit, col_save = st.columns(2)
    with col_edit:
        if st.button(EDIT_LABEL, key="edit_score", use_container_width=True):
            plt.close(fig)
            session.edit()
            st.rerun()
    with col_save:
        if image is None:
            st.button(SAVE_LABEL, key="save_image_disabled", disabled=True,
                      use_container_width=True)
        else:
            st.download_button(
                SAVE_LABEL,
                data=image.data,
                file_name=image.file_name,
                mime=image.mime,
                key="save_image",
                use_container_width=True,
            )
    if session.last_export_error is not None:
        st.error("Failed to save image. Please try again.")

    st.pyplot(fig, use_container_width=False)
    plt.close(fig)


def main():
    court_id = resolve_court_id(st.query_params, st.session_state)
    sidebar_header(court_id=court_id, show_custom_nav=True)

    session = ScoreSession(st.session_state, court_id)
    if session.view is ViewState.REVIEWING and session.record is not None:
        _render_scorecard(session)
    else:
        _render_form(session)


if __name__ == "__main__":
    main()
