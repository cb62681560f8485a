"""
Placeholder text generation.
"""

import random
from typing import Optional

from .exceptions import ToolError

WORDS = [
    'lorem', 'ipsum', 'dolor', 'sit', 'amet', 'consectetur', 'adipiscing', 'elit',
    'sed', 'do', 'eiusmod', 'tempor', 'incididunt', 'ut', 'labore', 'et', 'dolore',
    'magna', 'aliqua', 'enim', 'ad', 'minim', 'veniam', 'quis', 'nostrud',
    'exercitation', 'ullamco', 'laboris', 'nisi', 'aliquip', 'ex', 'ea', 'commodo',
    'consequat', 'duis', 'aute', 'irure', 'in', 'reprehenderit', 'voluptate',
    'velit', 'esse', 'cillum', 'eu', 'fugiat', 'nulla', 'pariatur', 'excepteur',
    'sint', 'occaecat', 'cupidatat', 'non', 'proident', 'sunt', 'culpa', 'qui',
    'officia', 'deserunt', 'mollit', 'anim', 'id', 'est', 'laborum'
]

MAX_COUNTS = {
    'words': 500,
    'sentences': 50,
    'paragraphs': 20,
}


class LoremIpsumGenerator:
    """Random lorem ipsum words, sentences and paragraphs."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def words(self, count: int) -> str:
        picked = [self.rng.choice(WORDS) for _ in range(count)]
        if picked:
            picked[0] = picked[0].capitalize()
        return ' '.join(picked)

    def sentence(self) -> str:
        # 5-14 words
        return self.words(self.rng.randint(5, 14)) + '.'

    def paragraph(self) -> str:
        # 3-7 sentences
        return ' '.join(self.sentence() for _ in range(self.rng.randint(3, 7)))

    def generate(self, kind: str = 'paragraphs', count: int = 3, include_html: bool = False) -> str:
        if kind not in MAX_COUNTS:
            raise ToolError(f'Unsupported lorem ipsum type: {kind}')
        try:
            count = max(1, min(int(count), MAX_COUNTS[kind]))
        except (TypeError, ValueError):
            raise ToolError(f'Invalid count: {count}')

        if kind == 'words':
            return self.words(count)
        if kind == 'sentences':
            return ' '.join(self.sentence() for _ in range(count))

        paragraphs = [self.paragraph() for _ in range(count)]
        if include_html:
            return '\n'.join(f'<p>{p}</p>' for p in paragraphs)
        return '\n\n'.join(paragraphs)


def generate_lorem_ipsum(kind: str = 'paragraphs', count: int = 3, include_html: bool = False,
                         rng: Optional[random.Random] = None) -> str:
    return LoremIpsumGenerator(rng).generate(kind, count, include_html)
