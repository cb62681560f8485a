"""
CSV <-> JSON conversion for the CSV to JSON tool.

Rows are split on line breaks and cells on plain commas, matching the
browser tool: quoted fields are not interpreted on input.
"""

import math
import re
from typing import Any, Dict, List

from .exceptions import InvalidJsonError

_ROW_SPLIT = re.compile(r'\r?\n')


def parse_number(value: str):
    """Return value as int/float when it is numeric, otherwise None."""
    if '_' in value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if math.isnan(number) or math.isinf(number):
        # only numeric literals count; "nan"/"inf" stay strings
        return None
    if number.is_integer() and re.fullmatch(r'[+-]?\d+', value):
        return int(value)
    return number


def convert_value(value: str, parse_numbers: bool = True, parse_booleans: bool = True) -> Any:
    """Apply number and boolean parsing options to a single cell."""
    if parse_numbers and value != '':
        number = parse_number(value)
        if number is not None:
            return number
    if parse_booleans and value.lower() in ('true', 'false'):
        return value.lower() == 'true'
    return value


def csv_to_json(csv: str, use_headers: bool = True, parse_numbers: bool = True,
                parse_booleans: bool = True) -> List[Dict[str, Any]]:
    """Convert CSV text to a list of row objects."""
    rows = [row for row in _ROW_SPLIT.split(csv) if row.strip() != '']
    if not rows:
        return []

    first = rows[0].split(',')
    if use_headers:
        headers = [header.strip() for header in first]
    else:
        headers = [f'column{i + 1}' for i in range(len(first))]

    records = []
    for row in rows[1 if use_headers else 0:]:
        values = [value.strip() for value in row.split(',')]
        record = {}
        for j, header in enumerate(headers):
            value = values[j] if j < len(values) else ''
            record[header] = convert_value(value, parse_numbers, parse_booleans)
        records.append(record)

    return records


def _format_cell(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, str):
        escaped = value.replace('"', '""')
        return f'"{escaped}"' if ',' in value else escaped
    return str(value)


def json_to_csv(records: List[Dict[str, Any]], include_headers: bool = True) -> str:
    """Convert a list of objects to CSV using the first object's keys as columns."""
    if not records:
        return ''
    if not all(isinstance(record, dict) for record in records):
        raise InvalidJsonError('JSON must be an array of objects')

    headers = list(records[0].keys())
    lines = []
    if include_headers:
        lines.append(','.join(headers))
    for record in records:
        lines.append(','.join(_format_cell(record.get(header)) for header in headers))

    return '\n'.join(lines)
