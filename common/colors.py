# common/colors.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np


# -------------------- Simple color math --------------------
def hex_to_rgb(hexs: str) -> Tuple[float, float, float]:
    h = hexs.strip().lstrip("#")
    return int(h[0:2], 16) / 255.0, int(h[2:4], 16) / 255.0, int(h[4:6], 16) / 255.0


def rgba(hexs: str, alpha: float = 1.0) -> Tuple[float, float, float, float]:
    """Hex color plus opacity as a matplotlib RGBA tuple."""
    r, g, b = hex_to_rgb(hexs)
    return r, g, b, alpha


def lighten_or_darken(hexs: str, factor: float = 0.15) -> str:
    """Positive factor lightens, negative darkens."""
    r, g, b = hex_to_rgb(hexs)
    if factor >= 0:
        r += (1 - r) * factor; g += (1 - g) * factor; b += (1 - b) * factor
    else:
        r *= (1 + factor); g *= (1 + factor); b *= (1 + factor)
    return "#{:02X}{:02X}{:02X}".format(int(r * 255), int(g * 255), int(b * 255))


def diagonal_gradient(stops: Sequence[str], width: int, height: int) -> np.ndarray:
    """
    Build an (height, width, 3) float image running top-left -> bottom-right
    through evenly spaced color stops (a 135deg CSS linear-gradient).
    """
    ys, xs = np.mgrid[0:height, 0:width]
    t = (xs / max(width - 1, 1) + ys / max(height - 1, 1)) / 2.0
    positions = np.linspace(0.0, 1.0, len(stops))
    rgb = np.array([hex_to_rgb(s) for s in stops])
    img = np.empty((height, width, 3), dtype=float)
    for ch in range(3):
        img[..., ch] = np.interp(t, positions, rgb[:, ch])
    return img


# -------------------- Public API --------------------
@dataclass(frozen=True)
class CardPalette:
    court_green: str = "#32574C"
    court_mid: str = "#4a7366"
    sand: str = "#d4c5b0"
    cream: str = "#f5ebe0"
    clay: str = "#82644f"
    white: str = "#FFFFFF"

    @property
    def background_stops(self) -> Tuple[str, str, str]:
        return self.court_green, self.court_mid, self.sand

    @property
    def glow(self) -> str:
        return lighten_or_darken(self.court_green, -0.25)


DEFAULT_PALETTE = CardPalette()
