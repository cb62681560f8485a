"""
JSON validation, formatting and minification.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict

from .exceptions import InvalidJsonError


@dataclass
class ValidationResult:
    """Result of validating a JSON document."""
    is_valid: bool
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {'valid': self.is_valid, 'message': self.message}


def _describe(error: json.JSONDecodeError) -> str:
    return f"{error.msg} at line {error.lineno} column {error.colno}"


def _reject_constant(name: str):
    # NaN and Infinity are JavaScript literals, not JSON
    raise InvalidJsonError(f"Unexpected token '{name}', {name} is not valid JSON")


def parse_json(text: str) -> Any:
    """Parse JSON text, raising InvalidJsonError with a readable message."""
    if not text or not text.strip():
        raise InvalidJsonError('JSON is empty')
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise InvalidJsonError(_describe(e))


def validate_json(text: str) -> ValidationResult:
    """Validate a JSON string without raising."""
    try:
        parse_json(text)
    except InvalidJsonError as e:
        return ValidationResult(is_valid=False, message=str(e))
    return ValidationResult(is_valid=True, message='JSON is valid')


def format_json(text: str, spaces: int = 2) -> str:
    """Pretty print JSON with the given indentation."""
    data = parse_json(text)
    if spaces is None or spaces < 0:
        spaces = 2
    return json.dumps(data, indent=spaces, ensure_ascii=False)


def minify_json(text: str) -> str:
    """Remove all insignificant whitespace from JSON."""
    data = parse_json(text)
    return json.dumps(data, separators=(',', ':'), ensure_ascii=False)
