"""Report builder — text and JSON output for colour-scheme results."""

import dataclasses
import json
import re
from typing import Any

from colour_scheme.core.types import CMYK, HSL, RGB, NearestMatch, Report

_HEX6 = re.compile(r'^[0-9a-f]{6}$')

# Result keys whose values are names, never hex codes
_LITERAL_KEYS = frozenset({'name', 'kind'})


def format_value(value: Any) -> str:
    """Render one result value for humans: '#hex', 'rgb(...)', 'hsl(...)', lists."""
    if isinstance(value, str):
        return f'#{value}' if _HEX6.match(value) else value
    if isinstance(value, RGB):
        return f'rgb({value.red}, {value.green}, {value.blue})'
    if isinstance(value, HSL):
        return f'hsl({value.hue:.1f}, {value.saturation * 100:.1f}%, {value.lightness * 100:.1f}%)'
    if isinstance(value, CMYK):
        return f'cmyk({value.c:.3f}, {value.m:.3f}, {value.y:.3f}, {value.k:.3f})'
    if isinstance(value, NearestMatch):
        return f'{value.name} (nearest {value.value}, Δ={value.distance})'
    if isinstance(value, (list, tuple)):
        parts = [f'[{format_value(v)}]' if isinstance(v, (list, tuple)) else format_value(v) for v in value]
        return ', '.join(parts)
    return str(value)


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'colour-scheme: #{report.colour}'
    if report.source is None:
        header += ' (random)'
    lines.append(header)
    lines.append('')

    for scheme_name, data in report.results.items():
        lines.append(f'── {scheme_name}')
        for key, value in data.items():
            if isinstance(value, dict):
                for sub_key, sub_value in value.items():
                    lines.append(f'  {key}.{sub_key}: {format_value(sub_value)}')
            else:
                rendered = str(value) if key in _LITERAL_KEYS else format_value(value)
                lines.append(f'  {key}: {rendered}')
        lines.append('')

    return '\n'.join(lines).rstrip() + '\n'


def _plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {k: _plain(v) for k, v in dataclasses.asdict(value).items() if v is not None}
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'colour': report.colour,
        'random': report.source is None,
        'schemes': _plain(report.results),
    }
    return json.dumps(obj, indent=2)
