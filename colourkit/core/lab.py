"""CIE LAB colour: CIE94 distance and LAB -> XYZ conversion.

Components are stored scaled to the toolkit convention, not textbook CIE:
  l = L* / 100   (nominal [0, 1])
  a = a* / 100
  b = b* / 100

That is why to_xyz() multiplies l by 100 and divides a, b by 5 and 2
instead of 500 and 200. Downstream XYZ/RGB conversions assume this scale.

No range checks are made. Out-of-range components propagate through the
math; NaN or infinite components give undefined results.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from colourkit.core.rgb import RGBColor
    from colourkit.core.srgb import SRGBColor
    from colourkit.core.xyz import XYZColor

# CIE94 graphic-arts weights (kL = kC = kH = 1)
K1 = 0.045
K2 = 0.015

# CIE linearisation threshold (6/29)^3 and slope of the linear segment
LINEAR_THRESHOLD = 0.008856451
LINEAR_SLOPE = 7.787037


class LabColorPoint(Protocol):
    """The AB-subspace of a LAB colour: anything with read-only a and b."""

    @property
    def a(self) -> float: ...

    @property
    def b(self) -> float: ...


def gray_distance(point: LabColorPoint) -> float:
    """Distance from the neutral axis (a=b=0), i.e. the chroma."""
    return math.sqrt(point.a * point.a + point.b * point.b)


def _f_inverse(f: float) -> float:
    f3 = f * f * f
    return f3 if f3 > LINEAR_THRESHOLD else (f - 16 / 116) / LINEAR_SLOPE


@dataclass(frozen=True)
class LABColor:
    """A point in CIE LAB space. Immutable."""

    l: float  # noqa: E741
    a: float
    b: float

    def __iter__(self) -> Iterator[float]:
        yield self.l
        yield self.a
        yield self.b

    def distance_to(self, color: LABColor) -> float:
        """CIE94 colour difference between this colour and `color`.

        Sc and Sh are computed from this colour's chroma only, so
        a.distance_to(b) and b.distance_to(a) may differ slightly.
        CIEDE2000 is more accurate but needs far more computation.
        """
        delta_l = self.l - color.l
        delta_a = self.a - color.a
        delta_b = self.b - color.b
        c1 = math.sqrt(self.a * self.a + self.b * self.b)
        c2 = math.sqrt(color.a * color.a + color.b * color.b)
        delta_c = c1 - c2

        # round-off can push this slightly below zero for equal hues
        delta_h = delta_a * delta_a + delta_b * delta_b - delta_c * delta_c
        delta_h = 0.0 if delta_h < 0 else math.sqrt(delta_h)

        sc = 1.0 + K1 * c1
        sh = 1.0 + K2 * c1
        delta_c_sc = delta_c / sc
        delta_h_sh = delta_h / sh
        total = delta_l * delta_l + delta_c_sc * delta_c_sc + delta_h_sh * delta_h_sh
        return 0.0 if total < 0 else math.sqrt(total)

    def distance_to_gray(self) -> float:
        """Distance to a=b=0 in the AB-subspace. Ignores lightness."""
        return gray_distance(self)

    def to_array(self) -> list[float]:
        """Return a new list [l, a, b]."""
        return [self.l, self.a, self.b]

    def to_xyz(self) -> XYZColor:
        """Convert to XYZ against the D65 white point."""
        from colourkit.core.xyz import XYZColor

        fy = (self.l * 100 + 16) / 116
        fx = self.a / 5 + fy
        fz = fy - self.b / 2
        white = XYZColor.D65
        return XYZColor(
            _f_inverse(fx) * white.x,
            _f_inverse(fy) * white.y,
            _f_inverse(fz) * white.z,
        )

    def to_rgb(self) -> RGBColor:
        return self.to_xyz().to_rgb()

    def to_srgb(self) -> SRGBColor:
        return self.to_xyz().to_rgb().to_srgb()
