# common/scorecard.py
"""
Match result card: composition and PNG export.

The card is a single matplotlib figure with a 9:16 aspect ratio. All drawing
happens on one full-bleed axes whose data coordinates are 90 x 160 card
units (1 unit = 5 px on screen at BASE_DPI), with y growing upwards; the
helpers below take a `top` measured from the top edge to keep the layout
readable.

`build_scorecard_figure` only depends on its arguments (record, court id,
date, palette, logo), so the same inputs always give the same card.
`export_scorecard_png` rasterizes a figure at PIXEL_RATIO x the on-screen
density and returns the bytes together with the download file name.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date
from io import BytesIO
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Circle, FancyBboxPatch
from PIL import Image

from common.colors import DEFAULT_PALETTE, CardPalette, diagonal_gradient, rgba
from common.constants import (
    BASE_DPI, CARD_SIZE_IN, CARD_TITLE, NAME_MAX_CHARS, PIXEL_RATIO, VS_LABEL,
)
from models.score_model import MatchScoreRecord

_log = logging.getLogger(__name__)

# --- Layout knobs (card units, 90 x 160) ---
CARD_W, CARD_H = 90.0, 160.0
PAD            = 6.4     # p-8
CORNER_RADIUS  = 4.8
CORNER_SIZE    = 16.0
LOGO_BOX       = 20.8

# Score chip: padding plus an approximate advance per glyph at FONT["score"]
CHIP_PAD     = 8.0
CHIP_MIN_W   = 18.0
CHIP_MAX_W   = 36.0
CHIP_H       = 15.0
SCORE_GLYPH_W = 5.4

LAYOUT = {
    "title_top":    34.0,  # centre of the MATCH RESULT banner
    "court_top":    45.0,  # centre of the COURT pill
    "player_top":   60.0,  # top edge of the player block
    "vs_top":       90.0,  # centre of the VS pill
    "opponent_top": 100.0, # top edge of the opponent block
    "block_h":      22.0,
    "date_top":     150.0, # centre of the date pill
}

# Font sizes in points (on-screen px * 0.72)
FONT = {
    "title": 21.5,
    "court": 11.5,
    "label": 8.6,
    "name":  17.0,
    "score": 30.0,
    "badge": 13.0,
    "vs":    14.0,
    "date":  8.6,
}

MONTH_ABBR = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN",
              "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")


class ExportError(RuntimeError):
    """The card could not be rasterized into a PNG."""


@dataclass(frozen=True)
class ScorecardImage:
    file_name: str
    data: bytes
    mime: str = "image/png"


def format_card_date(day: date) -> str:
    """'JAN 15, 2025' regardless of the process locale."""
    return f"{MONTH_ABBR[day.month - 1]} {day.day}, {day.year}"


def scorecard_filename(court_id: str) -> str:
    return f"scorecard-court{court_id}.png"


def _truncate(text: str, limit: int) -> str:
    text = str(text).strip()
    return text if len(text) <= limit else text[: limit - 1].rstrip() + "…"


def _score_chip(score: str):
    """(chip width, chip height, font size) that fit the whole score."""
    needed = CHIP_PAD + SCORE_GLYPH_W * max(len(score), 1)
    chip_w = min(max(needed, CHIP_MIN_W), CHIP_MAX_W)
    size = FONT["score"] * min(1.0, (chip_w - CHIP_PAD) / (needed - CHIP_PAD))
    return chip_w, CHIP_H, size


def scorecard_lines(record: MatchScoreRecord, court_id: str, day: date) -> List[str]:
    """
    Text shown on the card, top to bottom: title, court, player block,
    separator, opponent block, date.
    """
    return [
        CARD_TITLE,
        f"COURT {court_id}",
        "1", "PLAYER",
        _truncate(record.player_name, NAME_MAX_CHARS),
        str(record.player_score),
        VS_LABEL,
        "2", "PLAYER",
        _truncate(record.opponent_name, NAME_MAX_CHARS),
        str(record.opponent_score),
        format_card_date(day),
    ]


def _y(top: float) -> float:
    """Distance from the top edge -> data y."""
    return CARD_H - top


def _rounded(ax, x, top, w, h, radius, **kw) -> FancyBboxPatch:
    patch = FancyBboxPatch(
        (x, _y(top + h)), w, h,
        boxstyle=f"round,pad=0,rounding_size={radius}",
        **kw,
    )
    ax.add_patch(patch)
    return patch


def _draw_background(ax, pal: CardPalette) -> FancyBboxPatch:
    card = _rounded(ax, 0, 0, CARD_W, CARD_H, CORNER_RADIUS,
                    facecolor="none", edgecolor="none", zorder=0)
    grad = diagonal_gradient(pal.background_stops, width=90, height=160)
    im = ax.imshow(grad, extent=(0, CARD_W, 0, CARD_H), origin="upper",
                   aspect="auto", interpolation="bilinear", zorder=0)
    im.set_clip_path(card)

    # Court lines at 20% opacity
    line = dict(color=rgba(pal.white, 0.2), linewidth=1.4, zorder=1)
    artists = [
        ax.plot([CARD_W / 2, CARD_W / 2], [0, CARD_H], **line)[0],
        ax.plot([0, CARD_W], [_y(CARD_H / 4)] * 2, **line)[0],
        ax.plot([0, CARD_W], [_y(CARD_H * 3 / 4)] * 2, **line)[0],
    ]
    outline = _rounded(ax, PAD, PAD, CARD_W - 2 * PAD, CARD_H - 2 * PAD, 1.6,
                       facecolor="none", edgecolor=rgba(pal.white, 0.2),
                       linewidth=1.4, zorder=1)
    artists.append(outline)

    # Corner brackets
    bracket = dict(color=rgba(pal.white, 0.3), linewidth=2.9, zorder=1,
                   solid_capstyle="butt")
    e = 0.4
    for xs, ys in (
        ([e, e, CORNER_SIZE], [_y(CORNER_SIZE), _y(e), _y(e)]),
        ([CARD_W - CORNER_SIZE, CARD_W - e, CARD_W - e], [_y(e), _y(e), _y(CORNER_SIZE)]),
        ([e, e, CORNER_SIZE], [CORNER_SIZE, e, e]),
        ([CARD_W - CORNER_SIZE, CARD_W - e, CARD_W - e], [e, e, CORNER_SIZE]),
    ):
        artists.append(ax.plot(xs, ys, **bracket)[0])

    for a in artists:
        a.set_clip_path(card)
    return card


def load_logo(logo_path: Optional[Path]) -> Optional[Image.Image]:
    """
    Open the configured logo as RGBA. A missing or unreadable file gives None
    (with a warning for the unreadable case) so the page still renders.
    """
    if logo_path is None or not Path(logo_path).is_file():
        return None
    try:
        with Image.open(logo_path) as im:
            return im.convert("RGBA")
    except OSError as exc:
        _log.warning("Skipping logo %s: %s", logo_path, exc)
        return None


def _draw_logo(ax, logo_path: Optional[Path], pal: CardPalette) -> None:
    """Logo in a white rounded box above the title. Skipped when no usable file is configured."""
    image = load_logo(logo_path)
    if image is None:
        return
    logo = np.asarray(image)
    x0 = (CARD_W - LOGO_BOX) / 2
    _rounded(ax, x0, PAD, LOGO_BOX, LOGO_BOX, 3.2,
             facecolor=rgba(pal.white, 0.95), edgecolor="none", zorder=2)

    inner = LOGO_BOX - 4.8
    h, w = logo.shape[:2]
    scale = inner / max(h, w)
    lw, lh = w * scale, h * scale
    cx, cy = CARD_W / 2, _y(PAD + LOGO_BOX / 2)
    ax.imshow(logo, extent=(cx - lw / 2, cx + lw / 2, cy - lh / 2, cy + lh / 2),
              aspect="auto", interpolation="antialiased", zorder=3)


def _draw_header(ax, title: str, court: str, pal: CardPalette) -> None:
    ax.text(CARD_W / 2, _y(LAYOUT["title_top"]), title,
            ha="center", va="center", fontsize=FONT["title"], fontweight="heavy",
            color=pal.court_green, zorder=3,
            bbox=dict(boxstyle="round,pad=0.45,rounding_size=0.5",
                      facecolor=rgba(pal.cream, 0.9), edgecolor="none"))

    y = _y(LAYOUT["court_top"])
    ax.text(CARD_W / 2, y, court,
            ha="center", va="center", fontsize=FONT["court"], fontweight="bold",
            color=pal.white, zorder=3,
            bbox=dict(boxstyle="round,pad=0.4,rounding_size=0.9",
                      facecolor=rgba(pal.white, 0.2), edgecolor="none"))
    rule = dict(color=rgba(pal.white, 0.5), linewidth=0.8, zorder=2)
    ax.plot([CARD_W / 2 - 26, CARD_W / 2 - 16.4], [y, y], **rule)
    ax.plot([CARD_W / 2 + 16.4, CARD_W / 2 + 26], [y, y], **rule)


def _draw_player_block(ax, top: float, badge: str, label: str, name: str,
                       score: str, badge_color: str, pal: CardPalette) -> None:
    h = LAYOUT["block_h"]
    x0, w = PAD, CARD_W - 2 * PAD
    _rounded(ax, x0, top, w, h, 3.2,
             facecolor=rgba(pal.cream, 0.95), edgecolor=rgba(pal.white, 0.6),
             linewidth=1.4, zorder=2)

    # Score chip with a soft shadow; grows with the score, then the font shrinks
    chip_w, chip_h, score_size = _score_chip(score)
    chip_x = x0 + w - 4.0 - chip_w
    chip_top = top + (h - chip_h) / 2
    _rounded(ax, chip_x - 0.6, chip_top + 0.8, chip_w + 1.2, chip_h + 0.4, 3.2,
             facecolor=rgba(pal.glow, 0.35), edgecolor="none", zorder=3)
    _rounded(ax, chip_x, chip_top, chip_w, chip_h, 3.2,
             facecolor=pal.court_green, edgecolor=rgba(pal.white, 0.4),
             linewidth=1.4, zorder=4)

    ax.add_patch(Circle((x0 + 1.4, _y(top + 1.4)), 4.0, facecolor=badge_color,
                        edgecolor="none", zorder=5))
    # Texts in reading order: badge, label, name, score
    ax.text(x0 + 1.4, _y(top + 1.4), badge, ha="center", va="center",
            fontsize=FONT["badge"], fontweight="heavy", color=pal.white, zorder=6)
    ax.text(x0 + 4.0, _y(top + 6.0), label, ha="left", va="center",
            fontsize=FONT["label"], fontweight="bold", color=pal.clay, zorder=5)
    ax.text(x0 + 4.0, _y(top + 13.0), name, ha="left", va="center",
            fontsize=FONT["name"], fontweight="heavy", color=pal.court_green, zorder=5)
    ax.text(chip_x + chip_w / 2, _y(chip_top + chip_h / 2), score,
            ha="center", va="center", fontsize=score_size, fontweight="heavy",
            color=pal.white, zorder=6)


def _draw_separator(ax, label: str, pal: CardPalette) -> None:
    y = _y(LAYOUT["vs_top"])
    ax.plot([0, CARD_W], [y, y], color=rgba(pal.white, 0.4), linewidth=0.8, zorder=2)
    ax.text(CARD_W / 2, y, label, ha="center", va="center",
            fontsize=FONT["vs"], fontweight="heavy", color=pal.court_green, zorder=4,
            bbox=dict(boxstyle="round,pad=0.45,rounding_size=0.9",
                      facecolor=pal.cream, edgecolor=pal.clay, linewidth=2.9))


def _draw_footer(ax, label: str, pal: CardPalette) -> None:
    ax.text(CARD_W / 2, _y(LAYOUT["date_top"]), label,
            ha="center", va="center", fontsize=FONT["date"], fontweight="bold",
            color=pal.white, zorder=3,
            bbox=dict(boxstyle="round,pad=0.6,rounding_size=0.9",
                      facecolor=rgba(pal.white, 0.2), edgecolor=rgba(pal.white, 0.4),
                      linewidth=0.7))


def build_scorecard_figure(record: MatchScoreRecord,
                           court_id: str,
                           day: date,
                           palette: CardPalette = DEFAULT_PALETTE,
                           logo_path: Optional[Path] = None) -> plt.Figure:
    """
    Compose the match result card. Caller owns the figure (`plt.close` it).
    """
    (title, court, badge1, label1, name1, score1, vs,
     badge2, label2, name2, score2, day_label) = scorecard_lines(record, court_id, day)

    fig = plt.figure(figsize=CARD_SIZE_IN, dpi=BASE_DPI)
    fig.patch.set_alpha(0.0)  # transparent outside the rounded card
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, CARD_W)
    ax.set_ylim(0, CARD_H)
    ax.axis("off")

    _draw_background(ax, palette)
    _draw_logo(ax, logo_path, palette)
    _draw_header(ax, title, court, palette)
    _draw_player_block(ax, LAYOUT["player_top"], badge1, label1, name1, score1,
                       palette.court_green, palette)
    _draw_separator(ax, vs, palette)
    _draw_player_block(ax, LAYOUT["opponent_top"], badge2, label2, name2, score2,
                       palette.clay, palette)
    _draw_footer(ax, day_label, palette)
    return fig


def export_scorecard_png(fig: Optional[plt.Figure],
                         court_id: str,
                         pixel_ratio: int = PIXEL_RATIO) -> ScorecardImage:
    """
    Rasterize the card at `pixel_ratio` x the on-screen density.

    Raises ExportError when there is no figure or the renderer fails; no
    partial image is ever returned.
    """
    if fig is None:
        raise ExportError("No rendered scorecard to export")

    buf = BytesIO()
    try:
        fig.savefig(buf, format="png", dpi=BASE_DPI * pixel_ratio,
                    facecolor=fig.get_facecolor(), edgecolor="none")
    except Exception as exc:
        raise ExportError(f"Failed to rasterize scorecard: {exc}") from exc

    data = buf.getvalue()
    if not data:
        raise ExportError("Renderer produced an empty image")
    return ScorecardImage(file_name=scorecard_filename(court_id), data=data)
