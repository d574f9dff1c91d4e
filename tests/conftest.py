"""
Shared fixtures for the test suite.
"""
from datetime import date

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest

from models.score_model import MatchScoreRecord


@pytest.fixture
def record():
    return MatchScoreRecord(
        player_name="Alex", player_score="21",
        opponent_name="Sam", opponent_score="15",
    )


@pytest.fixture
def raw_fields():
    return {
        "player_name": "Alex",
        "player_score": "21",
        "opponent_name": "Sam",
        "opponent_score": "15",
    }


@pytest.fixture
def match_day():
    return date(2025, 1, 15)


@pytest.fixture
def session_state():
    """Plain dict standing in for st.session_state."""
    return {}


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
