"""
Stateless transformations behind every dev toolbox tool.
Each module takes user supplied text and returns the transformed result,
raising a ToolError subclass when the input cannot be processed.
"""

from .exceptions import (
    ToolError, InvalidJsonError, CodecError, ImageCodecError, InvalidRegexError,
    CronExpressionError, InvalidTokenError, UnsupportedAlgorithmError
)
from .json_formatter import validate_json, format_json, minify_json
from .cron_parser import parse_cron, analyze_cron
from .regex_tester import evaluate_regex, explain_pattern

__all__ = [
    'ToolError',
    'InvalidJsonError',
    'CodecError',
    'ImageCodecError',
    'InvalidRegexError',
    'CronExpressionError',
    'InvalidTokenError',
    'UnsupportedAlgorithmError',
    'validate_json',
    'format_json',
    'minify_json',
    'parse_cron',
    'analyze_cron',
    'evaluate_regex',
    'explain_pattern',
]
