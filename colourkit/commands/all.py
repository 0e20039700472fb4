"""Run every analysis command, combine into a single report.

Runs: convert, distance, gray.
Skips: swatch (writes a file — run explicitly if needed).

Example:
    colourkit all -P labels.palette
    colourkit all -P labels.palette --json --min-distance 0.1
"""

from colourkit.core.types import Command, NamedColour, Report

command = Command(
    name='all',
    help='Run every analysis command (except swatch). Combine into a single report.',
)

# Commands never run automatically
SKIP = {'all', 'swatch'}


@command.run
def run(colours: list[NamedColour], report: Report, args) -> None:
    from colourkit.registry import all_commands

    for name, cmd in sorted(all_commands().items()):
        if name in SKIP:
            continue
        cmd.execute(colours, report, args)
