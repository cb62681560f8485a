"""
UUID generation and formatting.
"""

import itertools
import random
import time
import uuid
from typing import Any, List

MAX_UUID_COUNT = 100
NULL_UUID = '00000000-0000-0000-0000-000000000000'
VERSIONS = ('v1', 'v4', 'null', 'simple')

_simple_counter = itertools.count(1)


def generate_simple_uuid() -> str:
    """Timestamp/counter based identifier shaped like a UUID (not RFC 4122)."""
    timestamp = format(int(time.time() * 1000), 'x')
    counter = format(next(_simple_counter) & 0xffff, '04x')
    rand = format(random.randint(0, 0xffff), '04x')
    return f'{timestamp}-{counter}-{rand}'.ljust(36, '0')


def generate_uuid(version: str = 'v4') -> str:
    """Generate a single UUID string in canonical lowercase form."""
    if version == 'v1':
        return str(uuid.uuid1())
    if version == 'null':
        return NULL_UUID
    if version == 'simple':
        return generate_simple_uuid()
    return str(uuid.uuid4())


def format_uuid(value: str, uppercase: bool = False, hyphens: bool = True, braces: bool = False) -> str:
    """Re-format an existing UUID string according to the display options."""
    formatted = value.replace('{', '').replace('}', '')
    formatted = formatted.upper() if uppercase else formatted.lower()

    body = formatted.replace('-', '')
    if hyphens:
        if len(body) == 32:
            formatted = f'{body[:8]}-{body[8:12]}-{body[12:16]}-{body[16:20]}-{body[20:]}'
    else:
        formatted = body

    return f'{{{formatted}}}' if braces else formatted


def clamp_count(count: Any, limit: int = MAX_UUID_COUNT) -> int:
    """Coerce a user supplied count into 1..limit."""
    try:
        value = int(count)
    except (TypeError, ValueError):
        value = 1
    return max(1, min(value, limit))


def generate_uuids(version: str = 'v4', count: Any = 1, uppercase: bool = False,
                   hyphens: bool = True, braces: bool = False,
                   limit: int = MAX_UUID_COUNT) -> List[str]:
    """Generate a batch of formatted UUIDs."""
    results = []
    for _ in range(clamp_count(count, limit)):
        results.append(format_uuid(generate_uuid(version), uppercase, hyphens, braces))
    return results
