"""Report builder — text and JSON output for colourkit results."""

import json
from typing import Any

from colourkit.core.types import Report


def _round(value: Any, precision: int) -> Any:
    """Round every float in a nested structure."""
    if isinstance(value, float):
        return round(value, precision)
    if isinstance(value, dict):
        return {k: _round(v, precision) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_round(v, precision) for v in value]
    return value


def _fmt(values: list[float], precision: int) -> str:
    return '(' + ', '.join(f'{v:.{precision}f}' for v in values) + ')'


def format_text(report: Report, precision: int = 4) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'colourkit: {len(report.colours)} colour(s)'
    if report.palette_path:
        header += f' — {report.palette_name} ({report.palette_path})'
    lines.append(header)
    lines.append('')

    for colour_name, colour_data in report.colours.items():
        lab = colour_data.get('lab')
        lab_str = f'lab{_fmt(lab, precision)}' if lab else ''
        lines.append(f'── {colour_name} {lab_str}')

        commands = colour_data.get('commands', {})
        for cmd_name, data in commands.items():
            if cmd_name == 'convert':
                lines.append(f'  xyz:  {_fmt(data["xyz"], precision)}')
                lines.append(f'  rgb:  {_fmt(data["rgb"], precision)}')
                lines.append(f'  srgb: {_fmt(data["srgb"], precision)}  {data["hex"]}')
            elif cmd_name == 'gray':
                mark = 'neutral' if data.get('neutral') else 'chromatic'
                lines.append(f'  gray: chroma={data["chroma"]:.{precision}f}  {mark}')
            elif cmd_name == 'distance':
                nearest = data.get('nearest')
                if nearest:
                    lines.append(f'  nearest: {nearest}  Δ={data["min_distance"]:.{precision}f}')
                if 'pass' in data:
                    mark = '✓' if data['pass'] else '✗'
                    lines.append(f'  min Δ={data["min_distance"]:.{precision}f}  {mark}')
            elif cmd_name == 'swatch':
                pass  # swatch path is printed once, not per colour
            else:
                for k, v in data.items():
                    lines.append(f'  {cmd_name}.{k}: {_round(v, precision)}')

        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total} colours  FAIL {report.fail_count}/{total} colours')
    return '\n'.join(lines)


def format_json(report: Report, precision: int = 4) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {}
    if report.palette_path:
        obj['palette'] = {'name': report.palette_name, 'path': report.palette_path}

    obj['colours'] = []
    for colour_name, colour_data in report.colours.items():
        obj['colours'].append(
            {
                'name': colour_name,
                'lab': _round(colour_data.get('lab'), precision),
                'commands': _round(colour_data.get('commands', {}), precision),
            }
        )

    obj['summary'] = {
        'total': report.pass_count + report.fail_count,
        'pass': report.pass_count,
        'fail': report.fail_count,
    }
    return json.dumps(obj, indent=2)
