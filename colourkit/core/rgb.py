"""Linear-light RGB colour with sRGB primaries, nominal range [0, 1]."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from colourkit.core.srgb import SRGBColor
    from colourkit.core.xyz import XYZColor

# linear sRGB -> XYZ (D65)
RGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)


def _encode(v: float) -> float:
    """sRGB transfer function (linear -> gamma-encoded)."""
    if v <= 0.0031308:
        return 12.92 * v
    return 1.055 * v ** (1 / 2.4) - 0.055


@dataclass(frozen=True)
class RGBColor:
    """A linear RGB colour."""

    r: float
    g: float
    b: float

    def to_array(self) -> list[float]:
        return [self.r, self.g, self.b]

    def to_srgb(self) -> SRGBColor:
        from colourkit.core.srgb import SRGBColor

        return SRGBColor(_encode(self.r), _encode(self.g), _encode(self.b))

    def to_xyz(self) -> XYZColor:
        from colourkit.core.xyz import XYZColor

        x, y, z = (RGB_TO_XYZ @ np.array(self.to_array())).tolist()
        return XYZColor(x, y, z)
