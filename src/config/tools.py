"""
Static catalog of tool descriptors used for navigation and display.
"""

from typing import Any, Dict, List, Optional

ALL_TOOLS_CATEGORY = 'All Tools'

TOOLS: List[Dict[str, Any]] = [
    {
        "id": "json-formatter",
        "name": "JSON Formatter",
        "description": "Format and validate JSON data with syntax highlighting",
        "category": "Formatters",
        "path": "/tools/json-formatter",
        "endpoint": "/api/format-json",
        "tags": ["formatter", "json", "validator", "minify"],
        "icon": "ri-braces-line",
        "color": "blue"
    },
    {
        "id": "base64",
        "name": "Base64 Encoder/Decoder",
        "description": "Convert text to and from Base64 encoding",
        "category": "Encoders/Decoders",
        "path": "/tools/base64",
        "endpoint": "/api/base64",
        "tags": ["base64", "encode", "decode"],
        "icon": "ri-code-box-line",
        "color": "purple"
    },
    {
        "id": "base64-image",
        "name": "Base64 Image Encoder",
        "description": "Convert images to and from Base64 encoding",
        "category": "Image Tools",
        "path": "/tools/base64-image",
        "endpoint": "/api/base64-image",
        "tags": ["base64", "image", "data-url"],
        "icon": "ri-image-line",
        "color": "emerald"
    },
    {
        "id": "jwt-decoder",
        "name": "JWT Decoder",
        "description": "Decode and verify JSON Web Tokens",
        "category": "Crypto",
        "path": "/tools/jwt-decoder",
        "endpoint": "/api/jwt/decode",
        "tags": ["jwt", "token", "auth", "decoder"],
        "icon": "ri-key-line",
        "color": "blue"
    },
    {
        "id": "regex-tester",
        "name": "Regex Tester",
        "description": "Test regular expressions with live matches",
        "category": "Text Utilities",
        "path": "/tools/regex-tester",
        "endpoint": "/api/regex/test",
        "tags": ["regex", "pattern", "match", "replace"],
        "icon": "ri-brackets-line",
        "color": "red"
    },
    {
        "id": "cron-parser",
        "name": "Cron Expression Parser",
        "description": "Parse cron expressions into human-readable format",
        "category": "Text Utilities",
        "path": "/tools/cron-parser",
        "endpoint": "/api/cron/parse",
        "tags": ["cron", "scheduler", "time"],
        "icon": "ri-time-line",
        "color": "indigo"
    },
    {
        "id": "url-encoder",
        "name": "URL Encoder/Decoder",
        "description": "Encode and decode URLs for web applications",
        "category": "Encoders/Decoders",
        "path": "/tools/url-encoder",
        "endpoint": "/api/url-codec",
        "tags": ["url", "percent-encoding", "encode", "decode"],
        "icon": "ri-link",
        "color": "green"
    },
    {
        "id": "code-formatter",
        "name": "Code Formatter",
        "description": "Format HTML, CSS, and JavaScript code",
        "category": "Formatters",
        "path": "/tools/code-formatter",
        "endpoint": "/api/code-format",
        "tags": ["html", "css", "javascript", "formatter"],
        "icon": "ri-code-s-slash-line",
        "color": "orange"
    },
    {
        "id": "markdown-preview",
        "name": "Markdown Preview",
        "description": "Write and preview Markdown rendered as HTML",
        "category": "Formatters",
        "path": "/tools/markdown-preview",
        "endpoint": "/api/markdown",
        "tags": ["markdown", "html", "preview"],
        "icon": "ri-markdown-line",
        "color": "blue"
    },
    {
        "id": "color-picker",
        "name": "Color Picker",
        "description": "Pick colors and convert between formats",
        "category": "Converters",
        "path": "/tools/color-picker",
        "endpoint": "/api/color",
        "tags": ["color", "hex", "rgb", "hsl"],
        "icon": "ri-palette-line",
        "color": "pink"
    },
    {
        "id": "csv-to-json",
        "name": "CSV to JSON",
        "description": "Convert CSV data to JSON format",
        "category": "Converters",
        "path": "/tools/csv-to-json",
        "endpoint": "/api/csv-to-json",
        "tags": ["csv", "json", "converter"],
        "icon": "ri-file-transfer-line",
        "color": "yellow"
    },
    {
        "id": "uuid-generator",
        "name": "UUID Generator",
        "description": "Generate random UUIDs for your applications",
        "category": "Generators",
        "path": "/tools/uuid-generator",
        "endpoint": "/api/uuid",
        "tags": ["uuid", "guid", "generator"],
        "icon": "ri-key-2-line",
        "color": "indigo"
    },
    {
        "id": "lorem-ipsum",
        "name": "Lorem Ipsum Generator",
        "description": "Generate placeholder text for design mockups",
        "category": "Generators",
        "path": "/tools/lorem-ipsum",
        "endpoint": "/api/lorem-ipsum",
        "tags": ["lorem", "placeholder", "text"],
        "icon": "ri-text",
        "color": "red"
    },
    {
        "id": "hash-generator",
        "name": "Hash Generator",
        "description": "Generate MD5, SHA-1, SHA-256 hashes",
        "category": "Crypto",
        "path": "/tools/hash-generator",
        "endpoint": "/api/hash",
        "tags": ["hash", "md5", "sha", "checksum"],
        "icon": "ri-fingerprint-line",
        "color": "emerald"
    },
]


def get_all_tools() -> List[Dict[str, Any]]:
    return list(TOOLS)


def get_tool_by_id(tool_id: str) -> Optional[Dict[str, Any]]:
    return next((tool for tool in TOOLS if tool['id'] == tool_id), None)


def get_tools_by_category(category: str, tools: Optional[List[Dict[str, Any]]] = None) -> List[Dict[str, Any]]:
    """Tools in a category; 'All Tools' selects everything."""
    tools = TOOLS if tools is None else tools
    if category == ALL_TOOLS_CATEGORY:
        return list(tools)
    return [tool for tool in tools if tool['category'] == category]


def search_tools(query: str, tools: Optional[List[Dict[str, Any]]] = None) -> List[Dict[str, Any]]:
    """Case-insensitive match on name, description or category."""
    tools = TOOLS if tools is None else tools
    needle = query.lower()
    return [
        tool for tool in tools
        if needle in tool['name'].lower()
        or needle in tool['description'].lower()
        or needle in tool['category'].lower()
    ]


def get_categories(tools: Optional[List[Dict[str, Any]]] = None) -> List[str]:
    """Distinct categories in catalog order."""
    tools = TOOLS if tools is None else tools
    categories = []
    for tool in tools:
        if tool['category'] not in categories:
            categories.append(tool['category'])
    return categories
