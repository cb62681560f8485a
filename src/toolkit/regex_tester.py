"""
Regex tester engine: compile with JavaScript style flags, collect matches,
build the replaced text and the highlighted HTML view.
"""

import html
import logging
import re
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .exceptions import InvalidRegexError

logger = logging.getLogger(__name__)

SUPPORTED_FLAGS = 'gmisuy'

_PY_FLAGS = {
    'i': re.IGNORECASE,
    'm': re.MULTILINE,
    's': re.DOTALL,
}

COMMON_PATTERNS = [
    {
        'name': 'Email',
        'pattern': r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}',
        'description': 'Match valid email addresses',
        'flags': 'g',
    },
    {
        'name': 'URL',
        'pattern': r'https?://[\w-]+(\.[\w-]+)+(/[\w\-./?%&=]*)?',
        'description': 'Match URLs with http:// or https://',
        'flags': 'g',
    },
    {
        'name': 'IP Address',
        'pattern': r'\b(?:\d{1,3}\.){3}\d{1,3}\b',
        'description': 'Match IPv4 addresses',
        'flags': 'g',
    },
    {
        'name': 'Date (MM/DD/YYYY)',
        'pattern': r'\b(0?[1-9]|1[0-2])/(0?[1-9]|[12]\d|3[01])/\d{4}\b',
        'description': 'Match dates in MM/DD/YYYY format',
        'flags': 'g',
    },
    {
        'name': 'Phone Number',
        'pattern': r'\b\(?\d{3}\)?[-. ]?\d{3}[-. ]?\d{4}\b',
        'description': 'Match US phone numbers',
        'flags': 'g',
    },
    {
        'name': 'Time (HH:MM)',
        'pattern': r'\b([01]?\d|2[0-3]):([0-5]\d)\b',
        'description': 'Match 24-hour time format',
        'flags': 'g',
    },
    {
        'name': 'HTML Tag',
        'pattern': r'<([a-z][a-z0-9]*)\b[^>]*>.*?</\1>',
        'description': 'Match HTML tags with content',
        'flags': 'gi',
    },
    {
        'name': 'Hex Color',
        'pattern': r'#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})',
        'description': 'Match hexadecimal color codes',
        'flags': 'g',
    },
]

# JavaScript shorthand classes and boundaries never match non-ASCII word characters
_ASCII_ESCAPES = set('dDwWbB')
_ASCII_CLASS_RANGES = {
    'd': '0-9',
    'w': 'A-Za-z0-9_',
}


@dataclass
class Match:
    """A single regex match."""
    text: str
    index: int
    length: int
    groups: List[Optional[str]]
    end: int
    named_groups: Dict[str, Optional[str]] = field(default_factory=dict)


@dataclass
class RegexResult:
    """Outcome of testing a pattern against a text."""
    is_valid: bool
    matches: List[Match]
    replaced_text: Optional[str] = None
    highlighted: str = ''
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            'valid': self.is_valid,
            'error': self.error,
            'matches': [asdict(m) for m in self.matches],
            'match_count': len(self.matches),
            'replaced_text': self.replaced_text,
            'highlighted': self.highlighted,
        }


@dataclass
class CompiledPattern:
    """A compiled pattern together with the JavaScript-only flags."""
    regex: 're.Pattern'
    is_global: bool = False
    sticky: bool = False


def _translate_pattern(pattern: str, multiline: bool = False) -> str:
    """Rewrite JavaScript syntax and semantics into Python's.

    Named groups and backreferences get Python's spelling, the shorthand
    classes and word boundaries are ASCII only, and without the m flag
    ``$`` anchors at the very end of the input.
    """
    out = []
    i = 0
    in_class = False
    while i < len(pattern):
        char = pattern[i]
        if char == '\\' and i + 1 < len(pattern):
            nxt = pattern[i + 1]
            if not in_class and pattern.startswith('\\k<', i):
                close = pattern.find('>', i)
                if close != -1:
                    out.append(f'(?P={pattern[i + 3:close]})')
                    i = close + 1
                    continue
            if in_class and nxt in _ASCII_CLASS_RANGES:
                out.append(_ASCII_CLASS_RANGES[nxt])
            elif not in_class and nxt in _ASCII_ESCAPES:
                out.append(f'(?a:\\{nxt})')
            else:
                out.append(pattern[i:i + 2])
            i += 2
            continue
        if in_class:
            in_class = char != ']'
        elif char == '[':
            in_class = True
        elif char == '$' and not multiline:
            out.append('\\Z')
            i += 1
            continue
        elif pattern.startswith('(?<', i) and pattern[i + 3:i + 4] not in ('=', '!'):
            out.append('(?P<')
            i += 3
            continue
        out.append(char)
        i += 1
    return ''.join(out)


def compile_pattern(pattern: str, flags: str = '') -> CompiledPattern:
    """Compile a pattern with JavaScript flag letters."""
    unknown = sorted(set(flags) - set(SUPPORTED_FLAGS))
    if unknown:
        raise InvalidRegexError(f"Invalid flags supplied: '{''.join(unknown)}'")

    py_flags = 0
    for letter in flags:
        py_flags |= _PY_FLAGS.get(letter, 0)

    try:
        regex = re.compile(_translate_pattern(pattern, multiline='m' in flags), py_flags)
    except re.error as e:
        raise InvalidRegexError(f'Invalid regular expression: /{pattern}/: {e}')

    return CompiledPattern(regex=regex, is_global='g' in flags, sticky='y' in flags)


def iter_matches(compiled: CompiledPattern, text: str) -> Iterator['re.Match']:
    """Yield matches in order; stops after the first one unless global."""
    pos = 0
    while pos <= len(text):
        if compiled.sticky:
            match = compiled.regex.match(text, pos)
        else:
            match = compiled.regex.search(text, pos)
        if match is None:
            return

        yield match

        if not compiled.is_global:
            return
        # step over empty matches so the loop always terminates
        pos = match.end() if match.end() > match.start() else match.end() + 1


def _to_match(match: 're.Match') -> Match:
    return Match(
        text=match.group(0),
        index=match.start(),
        length=match.end() - match.start(),
        groups=list(match.groups()),
        end=match.end(),
        named_groups=match.groupdict(),
    )


def find_matches(pattern: str, text: str, flags: str = 'g') -> List[Match]:
    """Find matches of pattern in text."""
    compiled = compile_pattern(pattern, flags)
    return [_to_match(m) for m in iter_matches(compiled, text)]


def _expand(template: str, match: 're.Match', text: str) -> str:
    """Expand a JavaScript replacement template for one match."""
    group_count = match.re.groups
    out = []
    i = 0
    while i < len(template):
        char = template[i]
        if char != '$' or i + 1 >= len(template):
            out.append(char)
            i += 1
            continue

        nxt = template[i + 1]
        if nxt == '$':
            out.append('$')
            i += 2
        elif nxt == '&':
            out.append(match.group(0))
            i += 2
        elif nxt == '`':
            out.append(text[:match.start()])
            i += 2
        elif nxt == "'":
            out.append(text[match.end():])
            i += 2
        elif nxt.isdigit():
            two = template[i + 1:i + 3]
            if len(two) == 2 and two.isdigit() and 0 < int(two) <= group_count:
                out.append(match.group(int(two)) or '')
                i += 3
            elif 0 < int(nxt) <= group_count:
                out.append(match.group(int(nxt)) or '')
                i += 2
            else:
                out.append('$')
                i += 1
        elif nxt == '<' and match.re.groupindex:
            close = template.find('>', i)
            if close == -1:
                out.append('$')
                i += 1
                continue
            name = template[i + 2:close]
            if name in match.re.groupindex:
                out.append(match.group(name) or '')
            i = close + 1
        else:
            out.append('$')
            i += 1
    return ''.join(out)


def replace(pattern: str, text: str, replacement: str, flags: str = 'g') -> str:
    """Replace matches using JavaScript replacement syntax."""
    compiled = compile_pattern(pattern, flags)
    return _replace_compiled(compiled, text, replacement)


def _replace_compiled(compiled: CompiledPattern, text: str, replacement: str) -> str:
    pieces = []
    last = 0
    for match in iter_matches(compiled, text):
        pieces.append(text[last:match.start()])
        pieces.append(_expand(replacement, match, text))
        last = match.end()
    pieces.append(text[last:])
    return ''.join(pieces)


def escape_html(text: str) -> str:
    return html.escape(text, quote=True)


def highlight_matches(text: str, matches: List[Match]) -> str:
    """Wrap every match in <mark>, escaping the surrounding text."""
    parts = []
    last = 0
    for match in sorted(matches, key=lambda m: m.index):
        parts.append(escape_html(text[last:match.index]))
        parts.append(f'<mark>{escape_html(match.text)}</mark>')
        last = match.index + match.length
    parts.append(escape_html(text[last:]))
    return ''.join(parts).replace('\n', '<br>')


def evaluate_regex(pattern: str, text: str, flags: str = 'g', replacement: str = '') -> RegexResult:
    """Run matching, replacement and highlighting in one pass."""
    try:
        compiled = compile_pattern(pattern, flags)
    except InvalidRegexError as e:
        logger.debug('Rejected pattern %r: %s', pattern, e)
        return RegexResult(
            is_valid=False,
            matches=[],
            highlighted=escape_html(text).replace('\n', '<br>'),
            error=str(e),
        )

    matches = [_to_match(m) for m in iter_matches(compiled, text)]
    return RegexResult(
        is_valid=True,
        matches=matches,
        replaced_text=_replace_compiled(compiled, text, replacement),
        highlighted=highlight_matches(text, matches),
    )


_ESCAPES = {
    'd': 'Match any digit (0-9)',
    'D': 'Match any non-digit character',
    'w': 'Match any word character (a-z, A-Z, 0-9, _)',
    'W': 'Match any non-word character',
    's': 'Match any whitespace character (space, tab, newline)',
    'S': 'Match any non-whitespace character',
    'b': 'Match word boundary',
    'B': 'Match non-word boundary',
    'n': 'Match newline character',
    't': 'Match tab character',
    'r': 'Match carriage return',
}

_SINGLE = {
    '.': 'Match any single character (except newline)',
    '^': 'Match start of string/line',
    '$': 'Match end of string/line',
    '*': 'Match 0 or more of the preceding element',
    '+': 'Match 1 or more of the preceding element',
    '?': 'Match 0 or 1 of the preceding element (optional)',
    '|': 'OR operator - match either left or right side',
    ')': 'End group',
}

_GROUP_OPENERS = [
    ('(?:', 'Start non-capturing group'),
    ('(?=', 'Start positive lookahead'),
    ('(?!', 'Start negative lookahead'),
    ('(?<=', 'Start positive lookbehind'),
    ('(?<!', 'Start negative lookbehind'),
]


def _explain_quantifier(token: str) -> str:
    body = token[1:-1]
    if ',' not in body:
        return f'Match exactly {body} of the preceding element'
    low, high = body.split(',', 1)
    if high:
        return f'Match between {low} and {high} of the preceding element'
    return f'Match {low} or more of the preceding element'


def _scan_token(pattern: str, i: int) -> Tuple[str, str]:
    """Return the token starting at i and its description."""
    char = pattern[i]

    if char == '\\':
        if i + 1 >= len(pattern):
            return char, 'Trailing backslash'
        nxt = pattern[i + 1]
        if nxt in _ESCAPES:
            return char + nxt, _ESCAPES[nxt]
        if nxt.isdigit():
            return char + nxt, f'Match backreference to group {nxt}'
        return char + nxt, f'Match literal character "{nxt}"'

    if char == '(':
        for opener, description in _GROUP_OPENERS:
            if pattern.startswith(opener, i):
                return opener, description
        named = re.match(r'\(\?P?<([A-Za-z_]\w*)>', pattern[i:])
        if named:
            return named.group(0), f'Start named capture group "{named.group(1)}"'
        return char, 'Start capture group'

    if char == '[':
        close = pattern.find(']', i + 2 if pattern[i + 1:i + 2] == ']' else i + 1)
        if close == -1:
            return char, 'Start character class (missing closing bracket)'
        token = pattern[i:close + 1]
        if token.startswith('[^'):
            return token, f'Match any character not in the set: {token}'
        return token, f'Match any character in the set: {token}'

    if char == '{':
        close = pattern.find('}', i)
        if close == -1 or not re.fullmatch(r'\{\d+(,\d*)?\}', pattern[i:close + 1]):
            return char, f'Match literal character "{char}"'
        return pattern[i:close + 1], _explain_quantifier(pattern[i:close + 1])

    if char in '*+?' and pattern[i + 1:i + 2] == '?':
        return char + '?', _SINGLE[char] + ' (lazy)'

    if char in _SINGLE:
        return char, _SINGLE[char]

    return char, f'Match literal character "{char}"'


def explain_pattern(pattern: str) -> List[Dict[str, str]]:
    """Break a pattern into components with human readable descriptions."""
    explanations = []
    i = 0
    while i < len(pattern):
        component, description = _scan_token(pattern, i)
        explanations.append({'component': component, 'description': description})
        i += len(component)
    return explanations


def measure_regex(pattern: str, text: str, flags: str = '') -> Dict[str, Any]:
    """Match with timing metrics for the compile and match phases."""
    compile_start = time.perf_counter()
    compiled = compile_pattern(pattern, flags)
    compile_time = (time.perf_counter() - compile_start) * 1000

    match_start = time.perf_counter()
    matches = [_to_match(m) for m in iter_matches(compiled, text)]
    match_time = (time.perf_counter() - match_start) * 1000

    return {
        'matches': [asdict(m) for m in matches],
        'performance': {
            'compile_time_ms': round(compile_time, 3),
            'match_time_ms': round(match_time, 3),
            'total_time_ms': round(compile_time + match_time, 3),
            'steps': len(matches),
            'pattern_length': len(pattern),
            'text_length': len(text),
        },
    }

