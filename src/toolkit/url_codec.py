"""
URL encoding and decoding with JavaScript encodeURI/encodeURIComponent semantics.
"""

import re
from urllib.parse import quote, unquote

from .exceptions import CodecError

# Characters left untouched by encodeURIComponent (besides alphanumerics)
COMPONENT_SAFE = "-_.!~*'()"
# encodeURI additionally keeps URI reserved characters and '#'
URI_SAFE = COMPONENT_SAFE + ";,/?:@&=+$#"

_BAD_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


def encode(text: str, encode_all: bool = False) -> str:
    """Percent-encode text; encode_all escapes URI delimiters too."""
    safe = COMPONENT_SAFE if encode_all else URI_SAFE
    try:
        return quote(text, safe=safe, encoding='utf-8', errors='strict')
    except UnicodeEncodeError:
        # lone surrogates cannot be represented in UTF-8
        raise CodecError('URI malformed')


def decode(text: str) -> str:
    """Decode percent escapes, rejecting malformed sequences."""
    if _BAD_ESCAPE.search(text):
        raise CodecError('URI malformed')
    try:
        return unquote(text, encoding='utf-8', errors='strict')
    except UnicodeDecodeError:
        raise CodecError('URI malformed')
