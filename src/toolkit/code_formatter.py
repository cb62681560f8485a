"""
Lightweight HTML, CSS and JavaScript formatters.

These are line-breaking and indentation passes, not full parsers; any
failure returns the input untouched.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict

logger = logging.getLogger(__name__)


@dataclass
class FormatterOptions:
    indent_size: int = 2
    use_tabs: bool = False

    @property
    def indent(self) -> str:
        return '\t' if self.use_tabs else ' ' * max(0, self.indent_size)


def _safely(formatter: Callable[[str, FormatterOptions], str]):
    def wrapper(source: str, options: FormatterOptions = None) -> str:
        try:
            return formatter(source, options or FormatterOptions())
        except Exception:
            logger.debug('%s failed, returning input unchanged', formatter.__name__, exc_info=True)
            return source
    wrapper.__name__ = formatter.__name__
    wrapper.__doc__ = formatter.__doc__
    return wrapper


_OPENING_TAG = re.compile(r'<[^/!][^>]*[^/]>|<[a-zA-Z]>')
_SELF_CLOSING = re.compile(r'<[^>]+/>')
_CLOSING_TAG = re.compile(r'</[^>]+>')
_VOID_TAGS = re.compile(r'<(area|base|br|col|embed|hr|img|input|link|meta|source|track|wbr)\b', re.I)


@_safely
def format_html(source: str, options: FormatterOptions) -> str:
    """Put tags on their own lines and indent by nesting depth."""
    text = re.sub(r'>\s*<', '>\n<', source.strip())
    lines = [line.strip() for line in text.split('\n') if line.strip()]

    depth = 0
    out = []
    for line in lines:
        opens = bool(_OPENING_TAG.match(line)) and not _SELF_CLOSING.search(line) \
            and not _VOID_TAGS.match(line)
        closes = bool(_CLOSING_TAG.search(line))

        if closes and not opens:
            depth = max(0, depth - 1)
        out.append(options.indent * depth + line)
        if opens and not closes:
            depth += 1

    return '\n'.join(out)


@_safely
def format_css(source: str, options: FormatterOptions) -> str:
    """One declaration per line, rules indented inside their blocks."""
    text = re.sub(r'\s+', ' ', source)
    text = re.sub(r'\s*\{\s*', ' {\n', text)
    text = re.sub(r'\s*;\s*', ';\n', text)
    text = re.sub(r'\s*\}\s*', '\n}\n', text)

    depth = 0
    out = []
    for raw in text.split('\n'):
        line = raw.strip()
        if not line:
            continue
        if line.startswith('}'):
            depth = max(0, depth - 1)
        elif depth > 0 and not line.endswith('{'):
            line = re.sub(r'\s*:\s*', ': ', line, count=1)
        out.append(options.indent * depth + line)
        if line.endswith('{'):
            depth += 1

    return '\n'.join(out)


@_safely
def format_javascript(source: str, options: FormatterOptions) -> str:
    """Break statements onto lines and indent braces."""
    text = re.sub(r';\s*', ';\n', source)
    text = re.sub(r'\{\s*', '{\n', text)
    text = re.sub(r'\s*\}', '\n}', text)
    # keep "};", "})", "} else" and friends on the brace line
    text = re.sub(r'\}\s*(?=\S)(?![;,)]|else\b|catch\b|finally\b|while\b)', '}\n', text)
    text = re.sub(r'\)\s*\n?\{', ') {', text)

    depth = 0
    out = []
    for raw in text.split('\n'):
        line = raw.strip()
        if not line:
            continue
        if line.startswith('}'):
            depth = max(0, depth - 1)
        out.append(options.indent * depth + line)
        if line.endswith('{'):
            depth += 1

    return '\n'.join(out)


FORMATTERS: Dict[str, Callable[..., str]] = {
    'html': format_html,
    'css': format_css,
    'javascript': format_javascript,
    'js': format_javascript,
}
