"""Pairwise CIE94 distances between all colours.

For every colour, records distance_to() against every other colour and the
nearest one. CIE94 weights its chroma terms by the first colour only, so
d(a, b) and d(b, a) can differ slightly; both directions are recorded.

With --min-distance N (or COLOURKIT_MIN_DISTANCE), a colour passes when the
smaller of the two directions to every other colour is at least N. Use
this to check that label colours stay distinguishable. The exit status is
1 if any colour fails.

Distances are on the colourkit scale (LAB / 100): 0.023 is about one
just-noticeable difference.

Example:
    colourkit distance -P labels.palette --min-distance 0.1
"""

from colourkit.core.types import Command, NamedColour, Report

command = Command(
    name='distance',
    help='Pairwise CIE94 distances; optional --min-distance gate.',
)


@command.run
def run(colours: list[NamedColour], report: Report, args) -> None:
    min_distance = getattr(args, 'min_distance', None)

    for colour in colours:
        distances: dict[str, float] = {}
        closest: dict[str, float] = {}
        for other in colours:
            if other is colour:
                continue
            forward = colour.lab.distance_to(other.lab)
            distances[other.name] = forward
            closest[other.name] = min(forward, other.lab.distance_to(colour.lab))

        data: dict = {'distances': distances}
        if closest:
            nearest = min(closest, key=closest.__getitem__)
            data['nearest'] = nearest
            data['min_distance'] = closest[nearest]

            if min_distance is not None:
                passed = closest[nearest] >= min_distance
                data['pass'] = passed
                if passed:
                    report.record_pass(colour.name)
                else:
                    report.record_fail(colour.name)

        report.add(colour.name, 'distance', data)
