"""
Custom exceptions for the toolkit transformations.
"""

class ToolError(Exception):
    """Base exception for all tool errors."""
    pass

class InvalidJsonError(ToolError):
    """Raised when input cannot be parsed as JSON."""
    pass

class CodecError(ToolError):
    """Raised when Base64 or URL encoding/decoding fails."""
    pass

class ImageCodecError(CodecError):
    """Raised when an image cannot be encoded or decoded."""
    pass

class InvalidRegexError(ToolError):
    """Raised when a pattern or its flags cannot be compiled."""
    pass

class CronExpressionError(ToolError):
    """Raised when a cron expression or one of its fields is invalid."""
    pass

class InvalidTokenError(ToolError):
    """Raised when a JWT cannot be decoded."""
    pass

class UnsupportedAlgorithmError(ToolError):
    """Raised when a hash or signature algorithm is not supported."""
    pass
