"""
Image <-> Base64 data URL conversion for the Base64 image tool.
"""

import base64
from typing import Optional

from .base64_codec import decode_bytes
from .exceptions import CodecError, ImageCodecError

MAX_IMAGE_BYTES = 5 * 1024 * 1024

# Leading Base64 characters of well known image signatures
_SIGNATURES = [
    ('/9j/', 'image/jpeg'),
    ('iVBOR', 'image/png'),
    ('R0lGOD', 'image/gif'),
    ('UklGR', 'image/webp'),
    ('PHN2Zy', 'image/svg+xml'),
    ('PD94bW', 'image/svg+xml'),
    ('Qk', 'image/bmp'),
]


def guess_image_type(b64: str) -> str:
    """Guess the MIME type from the first characters of a Base64 payload."""
    head = b64[:10]
    for marker, mime_type in _SIGNATURES:
        if head.startswith(marker) or (len(marker) > 2 and marker in head):
            return mime_type
    return 'image/png'


def encode_image(data: bytes, mime_type: Optional[str], include_data_url: bool = True,
                 max_bytes: int = MAX_IMAGE_BYTES) -> str:
    """Encode image bytes as Base64, optionally as a data URL."""
    if not mime_type or not mime_type.startswith('image/'):
        raise ImageCodecError('Please select an image file.')
    if len(data) > max_bytes:
        raise ImageCodecError(f'Please select an image smaller than {max_bytes // (1024 * 1024)}MB.')

    encoded = base64.b64encode(data).decode('ascii')
    return f'data:{mime_type};base64,{encoded}' if include_data_url else encoded


def to_data_url(b64: str) -> str:
    """Turn a Base64 image string into a data URL, validating the payload."""
    value = b64.strip()
    if not value:
        raise ImageCodecError('No Base64 data provided')

    try:
        decode_bytes(value)
    except CodecError:
        raise ImageCodecError('Invalid base64 string. Please check your input.')

    if value.startswith('data:'):
        return value
    return f'data:{guess_image_type(value)};base64,{value}'
