"""
Validation rules for the score form.

Each form field has one named rule. A rule takes the raw text from the input
and returns a `ValidationResult`: either ok, or a failure carrying the
message shown under the input. `build_record` runs every rule, and either
returns a `MatchScoreRecord` or raises `ValidationError` listing every field
that failed.

Scores are only checked for being non-empty. The inputs suggest numbers
(placeholder "0"), but anything typed is accepted and shown as-is on the card.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional

from models.score_model import FIELD_NAMES, MatchScoreRecord


@dataclass(frozen=True)
class ValidationResult:
    field: str
    ok: bool
    message: Optional[str] = None

    @classmethod
    def success(cls, field: str) -> "ValidationResult":
        return cls(field=field, ok=True)

    @classmethod
    def failure(cls, field: str, message: str) -> "ValidationResult":
        return cls(field=field, ok=False, message=message)


class ValidationError(ValueError):
    """
    Raised when one or more form fields failed their rule.

    `field` and `message` refer to the first failing field (form order);
    `errors` maps every failing field to its message.
    """

    def __init__(self, errors: Mapping[str, str]):
        if not errors:
            raise ValueError("ValidationError needs at least one field error")
        self.errors: Dict[str, str] = dict(errors)
        self.field = next(iter(self.errors))
        self.message = self.errors[self.field]
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


def _non_empty(field: str, value: Optional[str], message: str) -> ValidationResult:
    if value is None or not str(value).strip():
        return ValidationResult.failure(field, message)
    return ValidationResult.success(field)


def require_player_name(value: Optional[str]) -> ValidationResult:
    return _non_empty("player_name", value, "Player name is required")


def require_player_score(value: Optional[str]) -> ValidationResult:
    return _non_empty("player_score", value, "Player score is required")


def require_opponent_name(value: Optional[str]) -> ValidationResult:
    return _non_empty("opponent_name", value, "Opponent name is required")


def require_opponent_score(value: Optional[str]) -> ValidationResult:
    return _non_empty("opponent_score", value, "Opponent score is required")


RULES: Dict[str, Callable[[Optional[str]], ValidationResult]] = {
    "player_name": require_player_name,
    "player_score": require_player_score,
    "opponent_name": require_opponent_name,
    "opponent_score": require_opponent_score,
}


def validate_fields(raw: Mapping[str, Optional[str]]) -> Dict[str, ValidationResult]:
    """Run each field's rule independently; missing keys count as empty."""
    return {name: RULES[name](raw.get(name)) for name in FIELD_NAMES}


def build_record(raw: Mapping[str, Optional[str]]) -> MatchScoreRecord:
    """
    Return a MatchScoreRecord when all four fields pass.

    Values are stored as entered; trimming only decides emptiness.
    Raises ValidationError with every failing field otherwise.
    """
    results = validate_fields(raw)
    errors = {name: r.message for name, r in results.items() if not r.ok}
    if errors:
        raise ValidationError(errors)
    return MatchScoreRecord(**{name: str(raw[name]) for name in FIELD_NAMES})
