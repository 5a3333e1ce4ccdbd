"""Measure how far apart two colours are in RGB, HSL and Lab.

rgb  Euclidean distance over raw channels.
hsl  Euclidean distance over (hue, saturation, lightness). Hue is not wrapped,
     so 1° and 359° count as far apart.
lab  CIE94 Delta-E.

Each metric also reports a similarity percentage: 100 for identical colours,
0 for white against black. Percentages are not clamped and can go negative
when a pair is further apart than white/black under that metric.

Example:
    colour-fun compare 032bea 2b36e7
    colour-fun compare navy '#000080' --json
"""

from colour_fun.core.compare import Comparison
from colour_fun.core.errors import ColourError
from colour_fun.core.names import parse_colour
from colour_fun.core.types import Command, Report

command = Command(
    name='compare',
    help='Distance and similarity of two colours under rgb, hsl and lab metrics.',
    operands=('first', 'second'),
)


@command.run
def run(args, report: Report, settings) -> None:
    colours = []
    for text in (args.first, args.second):
        try:
            colours.append(parse_colour(text))
        except ColourError as exc:
            report.add_error(text, exc)
    if report.failed:
        return

    try:
        results = Comparison(*colours).all()
    except ColourError as exc:
        report.add_error(f'{args.first} {args.second}', exc)
        return

    for metric, result in results.items():
        report.add(metric, {'distance': result.distance, 'percent': result.percent})
