"""Pick black or white text for a background colour.

Uses YIQ luma: (299*r + 587*g + 114*b) // 1000. Luma >= 128 gives black,
anything darker gives white.

Example:
    colour-fun contrast 054     # white
    colour-fun contrast f54     # black
"""

from colour_fun.core.contrast import LUMA_THRESHOLD, contrast_of, yiq_luma
from colour_fun.core.errors import ColourError
from colour_fun.core.hexcodec import to_hex
from colour_fun.core.names import parse_colour
from colour_fun.core.types import Command, ContrastingColour, Report

command = Command(
    name='contrast',
    help='Black or white, whichever reads better on the given colour.',
    operands=('colour',),
)


@command.run
def run(args, report: Report, settings) -> None:
    try:
        colour = parse_colour(args.colour)
    except ColourError as exc:
        report.add_error(args.colour, exc)
        return

    text = ContrastingColour(contrast_of(colour))
    report.add(
        'contrast',
        {
            'background': f'#{to_hex(colour)}',
            'luma': yiq_luma(colour),
            'threshold': LUMA_THRESHOLD,
            'text': text.name.lower(),
            'hex': f'#{to_hex(text.value)}',
        },
    )
