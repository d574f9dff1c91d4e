from common.config import APP_TITLE

# Courts offered on the Home page. Plain data for navigation; the score page
# itself accepts any court id.
COURT_IDS = ["1", "2", "3", "4", "5", "6"]

COURT_QUERY_PARAM = "court"
SCORE_PAGE        = "pages/1_Input_Score.py"

# Card geometry: 9:16 at BASE_DPI on screen, PIXEL_RATIO x for the export.
CARD_SIZE_IN = (4.5, 8.0)
BASE_DPI     = 100
PIXEL_RATIO  = 2

CARD_TITLE      = "MATCH RESULT"
VS_LABEL        = "VS"
NAME_MAX_CHARS  = 16

FORM_TITLE        = "Input Score"
SUBMIT_LABEL      = "Generate Scorecard"
EDIT_LABEL        = "Edit Score"
SAVE_LABEL        = "Save as Image"
PAGE_TITLE        = f"{APP_TITLE} — Input Score"
FIELD_PLACEHOLDERS = {
    "player_name": "Enter your name",
    "player_score": "0",
    "opponent_name": "Enter opponent's name",
    "opponent_score": "0",
}
