"""Tests for colourkit.core.palette_parser — colour literals and .palette files."""

import os

import pytest
from colourkit.core.lab import LABColor
from colourkit.core.palette_parser import (
    parse_colour,
    parse_colour_arg,
    parse_palette_file,
    parse_palette_string,
)

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'fixtures')
SAMPLE_PALETTE = os.path.join(FIXTURES_DIR, 'sample.palette')


class TestParseColour:
    def test_lab_function(self):
        assert parse_colour('lab(0.5, 0.1, -0.2)') == LABColor(0.5, 0.1, -0.2)

    def test_lab_function_uppercase(self):
        assert parse_colour('LAB(0.5,0.1,0.2)') == LABColor(0.5, 0.1, 0.2)

    def test_bare_commas(self):
        assert parse_colour('0.5,0.1,0.2') == LABColor(0.5, 0.1, 0.2)

    def test_bare_spaces(self):
        assert parse_colour('0.5 0.1 0.2') == LABColor(0.5, 0.1, 0.2)

    def test_exponent_and_leading_dot(self):
        assert parse_colour('lab(.5, 1e-3, -2.5E-1)') == LABColor(0.5, 0.001, -0.25)

    def test_quoted(self):
        assert parse_colour("'lab(0.5, 0, 0)'") == LABColor(0.5, 0.0, 0.0)

    def test_hex_white(self):
        lab = parse_colour('#ffffff')
        assert lab.to_array() == pytest.approx([1.0, 0.0, 0.0], abs=1e-4)

    def test_hex_without_hash(self):
        assert parse_colour('2563eb') == parse_colour('#2563eb')

    @pytest.mark.parametrize('text', ['lab(0.5, 0.1, 0.1', '0.5, 0.1, 0.1)', 'lab 0.5, 0.1, 0.1', 'lab((0.5, 0.1, 0.1)'])
    def test_unbalanced_parens_raise(self, text):
        with pytest.raises(ValueError, match='Invalid colour literal'):
            parse_colour(text)

    @pytest.mark.parametrize('text', ['', 'red', 'lab(0.5, 0.1)', '0.5,0.1,0.2,0.3', '#12', 'rgb(1, 2, 3)'])
    def test_invalid_raises(self, text):
        with pytest.raises(ValueError):
            parse_colour(text)


class TestParseColourArg:
    def test_named(self):
        c = parse_colour_arg('accent=lab(0.5, 0.1, 0.1)')
        assert c.name == 'accent'
        assert c.lab == LABColor(0.5, 0.1, 0.1)
        assert c.source == 'lab(0.5, 0.1, 0.1)'

    def test_unnamed_uses_literal(self):
        c = parse_colour_arg('#2563eb')
        assert c.name == '#2563eb'

    def test_unnamed_with_default(self):
        c = parse_colour_arg('0.5,0,0', default_name='colour1')
        assert c.name == 'colour1'

    def test_empty_name_raises(self):
        with pytest.raises(ValueError, match='Missing colour name'):
            parse_colour_arg('=#ffffff')


class TestParsePaletteFile:
    def test_palette_name(self):
        assert parse_palette_file(SAMPLE_PALETTE).name == 'labels'

    def test_colour_names_in_order(self):
        names = [c.name for c in parse_palette_file(SAMPLE_PALETTE).colours]
        assert names == ['person', 'vehicle', 'background', 'shadow']

    def test_lab_entry(self):
        person = parse_palette_file(SAMPLE_PALETTE).colours[0]
        assert person.lab == LABColor(0.53, 0.80, 0.67)
        assert person.source == 'lab(0.53, 0.80, 0.67)'

    def test_hex_entry(self):
        vehicle = parse_palette_file(SAMPLE_PALETTE).colours[1]
        assert vehicle.source == '#2563eb'
        assert vehicle.lab.to_srgb().to_hex() == '#2563eb'

    def test_double_quoted_hex(self):
        background = parse_palette_file(SAMPLE_PALETTE).colours[2]
        assert background.lab.l == pytest.approx(1.0, abs=1e-4)

    def test_multiline_doc(self):
        person = parse_palette_file(SAMPLE_PALETTE).colours[0]
        assert person.doc == 'Default colour for people\n(standard LAB 53, 80, 67)'

    def test_no_doc(self):
        shadow = parse_palette_file(SAMPLE_PALETTE).colours[3]
        assert shadow.doc is None

    def test_raw_preserved(self):
        palette = parse_palette_file(SAMPLE_PALETTE)
        assert "Palette('labels')" in palette.raw


class TestParsePaletteString:
    def test_missing_header_defaults_name(self):
        palette = parse_palette_string("Colour('a', lab(0.5, 0, 0))")
        assert palette.name == 'unknown'
        assert len(palette.colours) == 1

    def test_empty(self):
        palette = parse_palette_string('')
        assert palette.colours == []

    def test_plain_comment_not_doc(self):
        text = """
// just a note
Colour('a', lab(0.5, 0, 0))
"""
        assert parse_palette_string(text).colours[0].doc is None

    def test_doc_does_not_leak_past_blank_line(self):
        text = """
/// orphan doc

Colour('a', lab(0.5, 0, 0))
"""
        assert parse_palette_string(text).colours[0].doc is None

    def test_bad_literal_names_entry(self):
        with pytest.raises(ValueError, match="Colour 'broken'"):
            parse_palette_string("Colour('broken', lab(0.5, nope, 0))")
