"""
Markdown to HTML rendering for the Markdown preview tool.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

import markdown

EXTENSIONS = ['fenced_code', 'tables', 'sane_lists', 'toc']


@dataclass
class RenderedMarkdown:
    """HTML output plus the document outline."""
    html: str
    headings: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _flatten(tokens: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    headings = []
    for token in tokens:
        headings.append({'level': token['level'], 'id': token['id'], 'title': token['name']})
        headings.extend(_flatten(token.get('children', [])))
    return headings


def render_markdown(text: str) -> RenderedMarkdown:
    """Render Markdown (with fenced code and tables) to HTML."""
    if not text.strip():
        return RenderedMarkdown(html='')

    converter = markdown.Markdown(extensions=EXTENSIONS)
    html = converter.convert(text)
    return RenderedMarkdown(html=html, headings=_flatten(converter.toc_tokens))
