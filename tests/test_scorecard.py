"""
Unit tests for the scorecard composition and PNG export.
"""
from datetime import date
from io import BytesIO

import numpy as np
import pytest
from PIL import Image

from common.constants import BASE_DPI, CARD_SIZE_IN, PIXEL_RATIO
from common.scorecard import (
    ExportError, build_scorecard_figure, export_scorecard_png,
    format_card_date, load_logo, scorecard_filename, scorecard_lines,
)
from models.score_model import MatchScoreRecord


def _texts(fig):
    return [t.get_text() for t in fig.axes[0].texts]


@pytest.mark.parametrize("day, expected", [
    (date(2025, 1, 15), "JAN 15, 2025"),
    (date(2024, 12, 1), "DEC 1, 2024"),
    (date(2026, 5, 30), "MAY 30, 2026"),
])
def test_format_card_date(day, expected):
    assert format_card_date(day) == expected


def test_scorecard_filename():
    assert scorecard_filename("3") == "scorecard-court3.png"
    assert scorecard_filename("centre") == "scorecard-courtcentre.png"


def test_lines_follow_card_order(record, match_day):
    lines = scorecard_lines(record, "3", match_day)
    assert lines == [
        "MATCH RESULT", "COURT 3",
        "1", "PLAYER", "Alex", "21",
        "VS",
        "2", "PLAYER", "Sam", "15",
        "JAN 15, 2025",
    ]


def test_long_names_are_truncated(match_day):
    rec = MatchScoreRecord("Maximilian Alexander Smith", "7", "Bo", "6")
    lines = scorecard_lines(rec, "1", match_day)
    assert lines[4].endswith("…")
    assert len(lines[4]) <= 16
    assert lines[9] == "Bo"


def test_figure_shows_record_court_and_date(record, match_day):
    fig = build_scorecard_figure(record, "3", match_day)
    assert _texts(fig) == scorecard_lines(record, "3", match_day)

    w, h = fig.get_size_inches()
    assert w / h == pytest.approx(9 / 16)


def test_figure_is_pure_in_its_inputs(record, match_day):
    first = _texts(build_scorecard_figure(record, "2", match_day))
    second = _texts(build_scorecard_figure(record, "2", match_day))
    assert first == second


def test_logo_is_drawn_when_file_exists(tmp_path, record, match_day):
    logo = tmp_path / "logo.png"
    Image.new("RGBA", (40, 20), (255, 0, 0, 255)).save(logo)

    without = build_scorecard_figure(record, "1", match_day)
    with_logo = build_scorecard_figure(record, "1", match_day, logo_path=logo)
    assert len(with_logo.axes[0].images) == len(without.axes[0].images) + 1

    missing = build_scorecard_figure(record, "1", match_day, logo_path=tmp_path / "nope.png")
    assert len(missing.axes[0].images) == len(without.axes[0].images)


def test_export_png_at_double_density(record, match_day):
    fig = build_scorecard_figure(record, "3", match_day)
    image = export_scorecard_png(fig, "3")

    assert image.file_name == "scorecard-court3.png"
    assert image.mime == "image/png"
    png = Image.open(BytesIO(image.data))
    assert png.format == "PNG"
    assert png.size == (
        int(CARD_SIZE_IN[0] * BASE_DPI * PIXEL_RATIO),
        int(CARD_SIZE_IN[1] * BASE_DPI * PIXEL_RATIO),
    )


def test_export_has_transparent_rounded_corners(record, match_day):
    fig = build_scorecard_figure(record, "1", match_day)
    png = Image.open(BytesIO(export_scorecard_png(fig, "1").data)).convert("RGBA")
    pixels = np.asarray(png)
    assert pixels[0, 0, 3] == 0
    assert pixels[pixels.shape[0] // 2, 5, 3] == 255


def test_export_without_figure_raises():
    with pytest.raises(ExportError):
        export_scorecard_png(None, "3")


def test_export_wraps_renderer_failure():
    class BrokenFigure:
        def get_facecolor(self):
            return (0, 0, 0, 0)

        def savefig(self, *args, **kwargs):
            raise OSError("disk on fire")

    with pytest.raises(ExportError) as exc:
        export_scorecard_png(BrokenFigure(), "3")
    assert isinstance(exc.value.__cause__, OSError)


def test_long_scores_are_shown_in_full(match_day):
    rec = MatchScoreRecord("Alex", "12345", "Sam", "100000")
    lines = scorecard_lines(rec, "3", match_day)
    assert "12345" in lines
    assert "100000" in lines

    fig = build_scorecard_figure(rec, "3", match_day)
    texts = {t.get_text(): t for t in fig.axes[0].texts}
    assert "12345" in texts
    assert "100000" in texts
    # Wide scores get a smaller font instead of being cut
    assert texts["100000"].get_fontsize() < texts["12345"].get_fontsize() <= 30.0


def test_short_scores_keep_full_font(record, match_day):
    fig = build_scorecard_figure(record, "3", match_day)
    texts = {t.get_text(): t for t in fig.axes[0].texts}
    assert texts["21"].get_fontsize() == pytest.approx(30.0)


def test_corrupt_logo_is_skipped(tmp_path, record, match_day, caplog):
    logo = tmp_path / "logo.png"
    logo.write_bytes(b"this is not an image")

    assert load_logo(logo) is None
    assert "Skipping logo" in caplog.text

    without = build_scorecard_figure(record, "1", match_day)
    broken = build_scorecard_figure(record, "1", match_day, logo_path=logo)
    assert len(broken.axes[0].images) == len(without.axes[0].images)
    assert export_scorecard_png(broken, "1").data.startswith(b"\x89PNG")


def test_load_logo_returns_rgba(tmp_path):
    logo = tmp_path / "logo.png"
    Image.new("RGB", (8, 8), (0, 128, 0)).save(logo)
    assert load_logo(logo).mode == "RGBA"
    assert load_logo(None) is None
    assert load_logo(tmp_path / "missing.png") is None
