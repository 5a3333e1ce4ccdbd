"""Report builder — text and JSON output for colour-fun results."""

import json
from typing import Any

from colour_fun.core.types import Report


def _format_value(value: Any, precision: int) -> str:
    if isinstance(value, bool):
        return 'yes' if value else 'no'
    if isinstance(value, float):
        return f'{value:.{precision}f}'
    if isinstance(value, dict):
        return '  '.join(f'{k}={_format_value(v, precision)}' for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return '(' + ', '.join(_format_value(v, precision) for v in value) + ')'
    return str(value)


def format_text(report: Report, precision: int = 2) -> str:
    """Format report as human-readable text."""
    lines = [f'colour-fun {report.command}: {" ".join(report.inputs)}', '']

    for section, data in report.results.items():
        lines.append(f'── {section}')
        for key, value in data.items():
            lines.append(f'  {key:<10} {_format_value(value, precision)}')
        lines.append('')

    for err in report.errors:
        lines.append(f'✗ {err["input"]}: {err["message"]}')

    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'command': report.command,
        'inputs': report.inputs,
        'results': report.results,
    }
    if report.errors:
        obj['errors'] = report.errors
    return json.dumps(obj, indent=2)
