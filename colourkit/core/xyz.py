"""CIE XYZ colour, scaled so the reference white has Y = 1."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from colourkit.core.lab import LINEAR_SLOPE, LINEAR_THRESHOLD, LABColor

if TYPE_CHECKING:
    from colourkit.core.rgb import RGBColor

# XYZ (D65) -> linear sRGB
XYZ_TO_RGB = np.array(
    [
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ]
)


def _f(v: float) -> float:
    # negative ratios always fall on the linear branch, never a cube root
    return math.pow(v, 1 / 3) if v > LINEAR_THRESHOLD else LINEAR_SLOPE * v + 16 / 116


@dataclass(frozen=True)
class XYZColor:
    """A CIE XYZ tristimulus value."""

    x: float
    y: float
    z: float

    D65: ClassVar[XYZColor]

    def to_array(self) -> list[float]:
        return [self.x, self.y, self.z]

    def to_rgb(self) -> RGBColor:
        """Convert to linear RGB (sRGB primaries). Not clamped."""
        from colourkit.core.rgb import RGBColor

        r, g, b = (XYZ_TO_RGB @ np.array(self.to_array())).tolist()
        return RGBColor(r, g, b)

    def to_lab(self) -> LABColor:
        """Forward XYZ -> LAB transform against D65, inverse of LABColor.to_xyz()."""
        white = XYZColor.D65
        fx = _f(self.x / white.x)
        fy = _f(self.y / white.y)
        fz = _f(self.z / white.z)
        return LABColor((116 * fy - 16) / 100, 5 * (fx - fy), 2 * (fy - fz))


# D65 illuminant, 2 degree observer
XYZColor.D65 = XYZColor(0.95047, 1.0, 1.08883)
