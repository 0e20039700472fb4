"""Regex-based parser for colour literals and .palette files.

A palette file looks like:

    Palette('labels')

    /// Default annotation colour
    Colour('person', lab(0.53, 0.80, 0.67))
    Colour('vehicle', '#2563eb')

Colour literals are lab(l, a, b), bare "l, a, b", or hex (#rrggbb / #rgb).
Hex literals are converted through sRGB -> linear RGB -> XYZ -> LAB.
"""

import re

from colourkit.core.lab import LABColor
from colourkit.core.srgb import SRGBColor
from colourkit.core.types import NamedColour, Palette

_NUM = r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?'
_TRIPLE = rf'({_NUM})\s*[,\s]\s*({_NUM})\s*[,\s]\s*({_NUM})'
_LAB_RE = re.compile(rf'lab\(\s*{_TRIPLE}\s*\)', re.IGNORECASE)
_BARE_RE = re.compile(_TRIPLE)
_COLOUR_RE = re.compile(r"Colour\(\s*['\"]([^'\"]+)['\"]\s*,\s*(.+)\)\s*$")


def parse_colour(text: str) -> LABColor:
    """Parse a single colour literal into a LABColor."""
    literal = text.strip().strip('\'"').strip()
    m = _LAB_RE.fullmatch(literal) or _BARE_RE.fullmatch(literal)
    if m:
        return LABColor(float(m.group(1)), float(m.group(2)), float(m.group(3)))
    if literal.startswith('#') or re.fullmatch(r'[0-9a-fA-F]{6}', literal):
        return SRGBColor.from_hex(literal).to_lab()
    raise ValueError(f'Invalid colour literal: {text!r}')


def parse_colour_arg(text: str, default_name: str | None = None) -> NamedColour:
    """Parse a command-line colour: `name=literal` or just `literal`."""
    name, sep, literal = text.partition('=')
    if not sep:
        name, literal = default_name or text.strip(), text
    name = name.strip()
    if not name:
        raise ValueError(f'Missing colour name in {text!r}')
    return NamedColour(name=name, lab=parse_colour(literal), source=literal.strip())


def parse_palette_file(path: str) -> Palette:
    """Parse a .palette file from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    return parse_palette_string(text)


def parse_palette_string(text: str) -> Palette:
    """Parse a palette from a string."""
    name = _extract_palette_name(text) or 'unknown'
    return Palette(name=name, colours=_extract_colours(text), raw=text)


def _extract_palette_name(text: str) -> str | None:
    m = re.search(r"Palette\(\s*['\"]([^'\"]+)['\"]", text)
    return m.group(1) if m else None


def _extract_colours(text: str) -> list[NamedColour]:
    """Find every Colour('name', literal) line, with /// docs above it."""
    colours = []
    doc_lines: list[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith('///'):
            doc_lines.append(stripped[3:].strip())
            continue
        m = _COLOUR_RE.match(stripped)
        if m:
            colour_name, literal = m.group(1), m.group(2).strip()
            try:
                lab = parse_colour(literal)
            except ValueError as e:
                raise ValueError(f'Colour {colour_name!r}: {e}') from e
            colours.append(
                NamedColour(
                    name=colour_name,
                    lab=lab,
                    source=literal.strip('\'"'),
                    doc='\n'.join(doc_lines) if doc_lines else None,
                )
            )
        # docs only attach to the entry directly below them
        doc_lines = []
    return colours
