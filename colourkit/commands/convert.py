"""Convert each colour from LAB to XYZ, linear RGB, sRGB and hex.

LAB components use the colourkit scale: l = L*/100, a = a*/100, b = b*/100.
XYZ is relative to D65 with Y(white) = 1. RGB values are not clamped, so
out-of-gamut colours show up as components outside [0, 1]; the hex column
is clamped.

Example:
    colourkit convert 'lab(0.5, 0.55, 0.55)' '#2563eb'
    colourkit convert -P labels.palette --json
"""

from colourkit.core.types import Command, NamedColour, Report

command = Command(
    name='convert',
    help='Convert LAB colours to XYZ, linear RGB, sRGB and hex.',
)


@command.run
def run(colours: list[NamedColour], report: Report, args) -> None:
    for colour in colours:
        xyz = colour.lab.to_xyz()
        rgb = xyz.to_rgb()
        srgb = rgb.to_srgb()
        report.add(
            colour.name,
            'convert',
            {
                'xyz': xyz.to_array(),
                'rgb': rgb.to_array(),
                'srgb': srgb.to_array(),
                'hex': srgb.to_hex(),
            },
        )
