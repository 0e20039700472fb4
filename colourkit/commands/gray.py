"""Distance of each colour from the neutral (gray) axis.

Reports the chroma sqrt(a² + b²), which ignores lightness. A colour whose
chroma is below --gray-threshold (default 0.05, i.e. about 5 a*/b* units)
is marked neutral.

Example:
    colourkit gray 'bg=#f9fafb' 'accent=#2563eb'
"""

from colourkit.core.types import Command, NamedColour, Report

DEFAULT_GRAY_THRESHOLD = 0.05

command = Command(
    name='gray',
    help='Chroma (distance to a=b=0) per colour; flag near-neutral colours.',
)


@command.run
def run(colours: list[NamedColour], report: Report, args) -> None:
    threshold = getattr(args, 'gray_threshold', None)
    if threshold is None:
        threshold = DEFAULT_GRAY_THRESHOLD
    for colour in colours:
        chroma = colour.lab.distance_to_gray()
        report.add(colour.name, 'gray', {'chroma': chroma, 'neutral': chroma < threshold})
