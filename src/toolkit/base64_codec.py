"""
Text <-> Base64 conversion with URL-safe and data URL options.
"""

import base64
import binascii
import re

from .exceptions import CodecError

DATA_URL_PREFIX = 'data:text/plain;base64,'

_WHITESPACE = re.compile(r'\s+')


def strip_data_url(text: str) -> str:
    """Return the payload of a data URL, or the text unchanged."""
    if text.startswith('data:') and ',' in text:
        return text.split(',', 1)[1]
    return text


def pad(text: str) -> str:
    """Add the '=' padding a Base64 string needs."""
    if len(text) % 4 == 1:
        raise CodecError('Invalid Base64 length')
    return text + '=' * (-len(text) % 4)


def encode(text: str, url_safe: bool = False, include_prefix: bool = False) -> str:
    """Encode UTF-8 text as Base64."""
    result = base64.b64encode(text.encode('utf-8')).decode('ascii')

    if url_safe:
        result = result.replace('+', '-').replace('/', '_').rstrip('=')

    if include_prefix:
        result = DATA_URL_PREFIX + result

    return result


def decode_bytes(text: str, url_safe: bool = False) -> bytes:
    """Decode a Base64 (optionally URL-safe) string to raw bytes."""
    payload = _WHITESPACE.sub('', strip_data_url(text.strip()))

    if url_safe:
        payload = payload.replace('-', '+').replace('_', '/')

    try:
        return base64.b64decode(pad(payload), validate=True)
    except (binascii.Error, ValueError) as e:
        raise CodecError(f'Invalid Base64 input: {e}')


def decode(text: str, url_safe: bool = False) -> str:
    """Decode Base64 to UTF-8 text."""
    raw = decode_bytes(text, url_safe=url_safe)
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError:
        raise CodecError('Decoded data is not valid UTF-8 text')
