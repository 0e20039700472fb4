"""colourkit — CIE LAB colour conversion and CIE94 colour difference."""

from colourkit.core.lab import LABColor, LabColorPoint, gray_distance
from colourkit.core.rgb import RGBColor
from colourkit.core.srgb import SRGBColor
from colourkit.core.xyz import XYZColor

__all__ = [
    'LABColor',
    'LabColorPoint',
    'RGBColor',
    'SRGBColor',
    'XYZColor',
    'gray_distance',
]
