"""
Score page controller: the per-court view state kept in Streamlit's session.

A `ScoreSession` wraps a mutable mapping (normally `st.session_state`) and a
court id. It owns the two views of the score page:

    - ENTERING:  the form is shown, pre-filled from the last submit (or empty).
    - REVIEWING: the match result card is shown, with Edit and Save buttons.

Transitions:
    - `submit(raw)`       ENTERING -> REVIEWING when all fields pass validation.
    - `edit()`            REVIEWING -> ENTERING, keeping the last record.
    - `export_image(fig)` REVIEWING -> REVIEWING; failures are logged, never raised.

Keys are namespaced by court id, so two courts opened in the same browser
session keep separate records. Nothing here touches the network or disk.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Dict, Mapping, MutableMapping, Optional

from common.scorecard import ExportError, ScorecardImage, export_scorecard_png
from common.validation import ValidationError, build_record
from models.score_model import FIELD_NAMES, MatchScoreRecord, empty_fields

_log = logging.getLogger(__name__)


class ViewState(str, Enum):
    ENTERING = "entering"
    REVIEWING = "reviewing"


class ScoreSession:
    def __init__(self, state: MutableMapping, court_id: str):
        self._state = state
        self.court_id = str(court_id)
        self._prefix = f"scorecard.{self.court_id}."
        self._state.setdefault(self._key("view"), ViewState.ENTERING)

    def _key(self, name: str) -> str:
        return self._prefix + name

    # ----- read side -----
    @property
    def view(self) -> ViewState:
        return ViewState(self._state[self._key("view")])

    @property
    def record(self) -> Optional[MatchScoreRecord]:
        return self._state.get(self._key("record"))

    @property
    def field_errors(self) -> Dict[str, str]:
        return dict(self._state.get(self._key("errors")) or {})

    @property
    def last_export_error(self) -> Optional[ExportError]:
        return self._state.get(self._key("export_error"))

    def form_values(self) -> Dict[str, str]:
        """Values the form opens with: last submitted text, else empty defaults."""
        values = empty_fields()
        values.update(self._state.get(self._key("draft")) or {})
        return values

    # ----- transitions -----
    def submit(self, raw: Mapping[str, Optional[str]]) -> ViewState:
        """
        Validate the four raw field values.

        On success the record replaces any previous one and the view moves to
        REVIEWING. On failure the typed values and per-field messages are kept
        for the next render, the view stays ENTERING, and ValidationError is
        re-raised for the caller.
        """
        if self.view is not ViewState.ENTERING:
            return self.view

        self._state[self._key("draft")] = {
            name: "" if raw.get(name) is None else str(raw.get(name)) for name in FIELD_NAMES
        }
        try:
            record = build_record(raw)
        except ValidationError as err:
            self._state[self._key("errors")] = err.errors
            _log.info("Court %s: score form rejected (%s)", self.court_id, ", ".join(err.errors))
            raise

        self._state[self._key("record")] = record
        self._state[self._key("errors")] = {}
        self._state.pop(self._key("export_error"), None)
        self._state[self._key("view")] = ViewState.REVIEWING
        _log.info("Court %s: scorecard generated", self.court_id)
        return ViewState.REVIEWING

    def edit(self) -> ViewState:
        """Back to the form with the last record's values filled in."""
        if self.view is not ViewState.REVIEWING:
            return self.view
        if self.record is not None:
            self._state[self._key("draft")] = self.record.to_fields()
        self._state[self._key("view")] = ViewState.ENTERING
        _log.debug("Court %s: editing score", self.court_id)
        return ViewState.ENTERING

    def export_image(self, fig) -> Optional[ScorecardImage]:
        """
        Rasterize the rendered card for download.

        Returns None when the export failed; the error is logged and kept in
        `last_export_error`. The view state is never changed.
        """
        try:
            image = export_scorecard_png(fig, self.court_id)
        except ExportError as err:
            _log.exception("Court %s: failed to save image", self.court_id)
            self._state[self._key("export_error")] = err
            return None

        self._state.pop(self._key("export_error"), None)
        _log.info("Court %s: exported %s (%d bytes)", self.court_id, image.file_name, len(image.data))
        return image
