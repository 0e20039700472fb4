"""Shared types for colourkit: NamedColour, Palette, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from colourkit.core.lab import LABColor


@dataclass
class NamedColour:
    """A colour given on the command line or declared in a palette file."""

    name: str
    lab: LABColor
    source: str = ''  # literal as written (lab(...) or hex)
    doc: str | None = None  # /// doc comments


@dataclass
class Palette:
    """Parsed palette file."""

    name: str
    colours: list[NamedColour] = field(default_factory=list)
    raw: str = ''  # original file text


class Command:
    """A self-registering colourkit command.

    Usage in a command module:

        command = Command(name='gray', help='Distance to the neutral axis')

        @command.run
        def run(colours, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, colours: list[NamedColour], report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(colours, report, args)


@dataclass
class Report:
    """Accumulates results from commands for text/JSON output."""

    palette_name: str | None = None
    palette_path: str | None = None
    colours: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, colour_name: str, command_name: str, data: dict[str, Any]) -> None:
        """Add command results for a colour."""
        if colour_name not in self.colours:
            self.colours[colour_name] = {'lab': None, 'commands': {}}
        self.colours[colour_name]['commands'][command_name] = data

    def set_lab(self, colour_name: str, lab: LABColor) -> None:
        """Set the LAB components for a colour in the report."""
        if colour_name not in self.colours:
            self.colours[colour_name] = {'lab': None, 'commands': {}}
        self.colours[colour_name]['lab'] = lab.to_array()

    def record_pass(self, colour_name: str) -> None:
        self.pass_count += 1

    def record_fail(self, colour_name: str) -> None:
        self.fail_count += 1
