"""Render colours as a PNG swatch strip.

Draws one square per colour, left to right, filled with its sRGB value
(clamped to the displayable range), and writes swatch.png into the output
directory (-o, default current directory).

Example:
    colourkit swatch -P labels.palette -o ./tmp
"""

import os
import sys

from PIL import Image, ImageDraw

from colourkit.core.types import Command, NamedColour, Report

SWATCH_SIZE = 64

command = Command(
    name='swatch',
    help='Render colours to a PNG swatch strip.',
)


def render(colours: list[NamedColour], size: int = SWATCH_SIZE) -> Image.Image:
    image = Image.new('RGB', (max(1, len(colours)) * size, size), (0, 0, 0))
    draw = ImageDraw.Draw(image)
    for i, colour in enumerate(colours):
        fill = colour.lab.to_srgb().to_hex()
        draw.rectangle((i * size, 0, (i + 1) * size - 1, size - 1), fill=fill)
    return image


@command.run
def run(colours: list[NamedColour], report: Report, args) -> None:
    out_dir = getattr(args, 'out_dir', None) or '.'
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, 'swatch.png')
    render(colours).save(path)
    print(f'swatch: wrote {path}', file=sys.stderr)

    for i, colour in enumerate(colours):
        report.add(colour.name, 'swatch', {'path': path, 'index': i})
