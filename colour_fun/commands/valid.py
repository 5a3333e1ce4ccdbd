"""Check whether strings are usable colours.

hex     every character (after one optional '#') is a hex digit. Any length
        passes here, even though only 3 or 6 digits can be parsed.
colour  hex as above, or a CSS colour name.

Never fails: invalid input is reported as 'no'.

Example:
    colour-fun valid fff abcde '#zz' tomato
"""

from colour_fun.core.hexcodec import is_valid_hex
from colour_fun.core.names import is_valid_colour
from colour_fun.core.types import Command, Report

command = Command(
    name='valid',
    help='Report is_valid_hex / is_valid_colour for one or more strings.',
    operands=('text...',),
)


@command.run
def run(args, report: Report, settings) -> None:
    for text in args.text:
        report.add(text, {'hex': is_valid_hex(text), 'colour': is_valid_colour(text)})
