"""colourkit.core — Foundation layer.

Contains the colour value types (LAB, XYZ, linear RGB, sRGB), type
definitions, palette parser, settings, and report builder.
This module has NO dependencies on colourkit.commands or colourkit.registry.
Only stdlib and numpy are allowed here.
"""
