"""Show a colour in every supported space: RGB, hex, HSL and Lab.

COLOUR is a hex code (3 or 6 digits, optional '#') or a CSS colour name.
Names are resolved by painting a 1x1 surface and reading the pixel back.

HSL hue is whole degrees; saturation and lightness are percentages.
Lab uses the D65 white point.

Example:
    colour-fun convert f43c8e
    colour-fun convert rebeccapurple --json
"""

from dataclasses import asdict

from colour_fun.core.contrast import contrast_of
from colour_fun.core.convert import rgb_to_hsl, rgb_to_lab
from colour_fun.core.errors import ColourError
from colour_fun.core.hexcodec import to_hex
from colour_fun.core.names import parse_colour
from colour_fun.core.types import Command, Report

command = Command(
    name='convert',
    help='Convert a hex code or colour name to RGB, hex, HSL and Lab.',
    operands=('colour',),
)


@command.run
def run(args, report: Report, settings) -> None:
    try:
        colour = parse_colour(args.colour)
        hsl = rgb_to_hsl(colour)
    except ColourError as exc:
        report.add_error(args.colour, exc)
        return

    report.add('rgb', asdict(colour))
    report.add('hex', {'value': f'#{to_hex(colour)}', 'contrast': f'#{to_hex(contrast_of(colour))}'})
    report.add('hsl', asdict(hsl))
    report.add('lab', asdict(rgb_to_lab(colour)))
