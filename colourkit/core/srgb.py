"""Gamma-encoded sRGB colour, nominal range [0, 1], with hex I/O."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from colourkit.core.lab import LABColor
    from colourkit.core.rgb import RGBColor

_HEX_RE = re.compile(r'#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})')


def _decode(v: float) -> float:
    """Inverse sRGB transfer function (gamma-encoded -> linear)."""
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def _to_byte(v: float) -> int:
    return round(min(1.0, max(0.0, v)) * 255)


@dataclass(frozen=True)
class SRGBColor:
    """An sRGB colour as displayed."""

    r: float
    g: float
    b: float

    @classmethod
    def from_hex(cls, text: str) -> SRGBColor:
        """Parse #rrggbb, rrggbb or #rgb (any case)."""
        m = _HEX_RE.fullmatch(text.strip())
        if not m:
            raise ValueError(f'Invalid hex colour: {text!r}')
        digits = m.group(1)
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)
        r, g, b = (int(digits[i : i + 2], 16) / 255.0 for i in (0, 2, 4))
        return cls(r, g, b)

    def to_array(self) -> list[float]:
        return [self.r, self.g, self.b]

    def to_hex(self) -> str:
        """Format as #rrggbb. Channels outside [0, 1] are clamped."""
        r, g, b = _to_byte(self.r), _to_byte(self.g), _to_byte(self.b)
        return f'#{r:02x}{g:02x}{b:02x}'

    def to_rgb(self) -> RGBColor:
        from colourkit.core.rgb import RGBColor

        return RGBColor(_decode(self.r), _decode(self.g), _decode(self.b))

    def to_lab(self) -> LABColor:
        return self.to_rgb().to_xyz().to_lab()
