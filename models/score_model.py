"""
Small data model for a submitted match score.

`MatchScoreRecord` is the validated result of the score form. The class is
frozen (immutable) so the scorecard view can hold on to it between reruns
without accidental modification; a new submit replaces it instead of
updating it in place.

Fields hold the text exactly as entered in the form:
    - `player_name`, `player_score`, `opponent_name`, `opponent_score`.
Scores are kept as strings; nothing downstream parses them.
"""

from dataclasses import asdict, dataclass
from typing import Dict, Tuple

# Form field order; also the order the inputs are rendered in.
FIELD_NAMES: Tuple[str, ...] = (
    "player_name",
    "player_score",
    "opponent_name",
    "opponent_score",
)

FIELD_LABELS: Dict[str, str] = {
    "player_name": "Your Name",
    "player_score": "Your Score",
    "opponent_name": "Opponent's Name",
    "opponent_score": "Opponent's Score",
}


@dataclass(frozen=True)
class MatchScoreRecord:
    player_name: str
    player_score: str
    opponent_name: str
    opponent_score: str

    def to_fields(self) -> Dict[str, str]:
        """Return the record as a {field -> value} dict, used to pre-fill the form."""
        return asdict(self)


def empty_fields() -> Dict[str, str]:
    """Form defaults when nothing has been submitted yet."""
    return {name: "" for name in FIELD_NAMES}
