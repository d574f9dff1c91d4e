"""
Unit tests for the score form validation rules.
"""
import pytest

from common.validation import (
    RULES, ValidationError, ValidationResult, build_record,
    require_opponent_name, require_opponent_score,
    require_player_name, require_player_score, validate_fields,
)
from models.score_model import FIELD_NAMES, MatchScoreRecord

MESSAGES = {
    "player_name": "Player name is required",
    "player_score": "Player score is required",
    "opponent_name": "Opponent name is required",
    "opponent_score": "Opponent score is required",
}


def test_every_field_has_a_rule():
    assert set(RULES) == set(FIELD_NAMES)


@pytest.mark.parametrize("rule, field", [
    (require_player_name, "player_name"),
    (require_player_score, "player_score"),
    (require_opponent_name, "opponent_name"),
    (require_opponent_score, "opponent_score"),
])
def test_rule_results(rule, field):
    assert rule("x") == ValidationResult.success(field)

    for blank in ("", "   ", "\t\n", None):
        result = rule(blank)
        assert not result.ok
        assert result.field == field
        assert result.message == MESSAGES[field]


@pytest.mark.parametrize("field", FIELD_NAMES)
def test_single_blank_field_is_reported_alone(raw_fields, field):
    raw_fields[field] = "  "
    with pytest.raises(ValidationError) as exc:
        build_record(raw_fields)

    err = exc.value
    assert err.errors == {field: MESSAGES[field]}
    assert err.field == field
    assert err.message == MESSAGES[field]


def test_all_blank_reports_every_field_in_form_order():
    with pytest.raises(ValidationError) as exc:
        build_record({})
    assert list(exc.value.errors) == list(FIELD_NAMES)
    assert exc.value.field == "player_name"


def test_build_record_keeps_values_as_entered(raw_fields):
    raw_fields["player_name"] = " Alex "
    rec = build_record(raw_fields)
    assert isinstance(rec, MatchScoreRecord)
    assert rec.player_name == " Alex "
    assert rec.player_score == "21"


def test_scores_are_not_required_to_be_numeric(raw_fields):
    raw_fields["player_score"] = "six-love"
    raw_fields["opponent_score"] = "-3"
    rec = build_record(raw_fields)
    assert rec.player_score == "six-love"
    assert rec.opponent_score == "-3"


def test_validate_fields_checks_fields_independently(raw_fields):
    raw_fields["opponent_name"] = ""
    results = validate_fields(raw_fields)
    assert [r.ok for r in results.values()] == [True, True, False, True]


def test_record_is_immutable(record):
    with pytest.raises(AttributeError):
        record.player_name = "Jordan"


def test_validation_error_needs_errors():
    with pytest.raises(ValueError):
        ValidationError({})
