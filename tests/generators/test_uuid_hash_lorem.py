"""
Tests for the UUID, hash and lorem ipsum generators.
"""

import hashlib
import os
import random
import re
import sys
import uuid

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))

from toolkit.exceptions import ToolError, UnsupportedAlgorithmError
from toolkit.hash_generator import HASH_ALGORITHMS, generate_all_hashes, generate_hash, normalize_algorithm
from toolkit.lorem_ipsum import MAX_COUNTS, WORDS, LoremIpsumGenerator, generate_lorem_ipsum
from toolkit.uuid_generator import (
    NULL_UUID, clamp_count, format_uuid, generate_simple_uuid, generate_uuid, generate_uuids
)

CANONICAL = re.compile(r'^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$')


class TestUuidGenerator:

    def test_v4_is_random_version_4(self):
        value = generate_uuid('v4')
        assert CANONICAL.match(value)
        assert uuid.UUID(value).version == 4

    def test_v1_is_time_based(self):
        assert uuid.UUID(generate_uuid('v1')).version == 1

    def test_null(self):
        assert generate_uuid('null') == NULL_UUID

    def test_unknown_version_defaults_to_v4(self):
        assert uuid.UUID(generate_uuid('v9')).version == 4

    def test_simple_uuid_shape(self):
        first, second = generate_simple_uuid(), generate_simple_uuid()
        assert len(first) == 36
        assert first != second

    def test_batch_is_unique(self):
        values = generate_uuids(count=50)
        assert len(values) == 50
        assert len(set(values)) == 50

    def test_formatting_options(self):
        value = generate_uuids(count=1, uppercase=True, hyphens=False, braces=True)[0]
        assert re.match(r'^\{[0-9A-F]{32}\}$', value)

    def test_format_uuid_restores_hyphens(self):
        assert format_uuid('{0123456789ABCDEF0123456789ABCDEF}') == '01234567-89ab-cdef-0123-456789abcdef'

    @pytest.mark.parametrize('count,expected', [
        (0, 1), (-3, 1), (5, 5), (500, 100), ('7', 7), ('abc', 1), (None, 1),
    ])
    def test_clamp_count(self, count, expected):
        assert clamp_count(count) == expected

    def test_custom_limit(self):
        assert len(generate_uuids(count=20, limit=10)) == 10


class TestHashGenerator:

    @pytest.mark.parametrize('algorithm,hashlib_name', [
        ('md5', 'md5'), ('sha-1', 'sha1'), ('sha-256', 'sha256'),
        ('sha-384', 'sha384'), ('sha-512', 'sha512'),
    ])
    def test_matches_hashlib(self, algorithm, hashlib_name):
        assert generate_hash('hello', algorithm) == hashlib.new(hashlib_name, b'hello').hexdigest()

    def test_known_sha256(self):
        assert generate_hash('abc') == 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'

    def test_md5_empty_string(self):
        assert generate_hash('', 'md5') == 'd41d8cd98f00b204e9800998ecf8427e'

    def test_lengths(self):
        hashes = generate_all_hashes('data')
        for algo in HASH_ALGORITHMS:
            assert len(hashes[algo['id']]) == algo['length']

    @pytest.mark.parametrize('name,expected', [
        ('SHA256', 'sha-256'), ('sha_512', 'sha-512'), ('SHA-1', 'sha-1'), ('MD5', 'md5'),
    ])
    def test_normalize_algorithm(self, name, expected):
        assert normalize_algorithm(name) == expected

    def test_unsupported_algorithm(self):
        with pytest.raises(UnsupportedAlgorithmError):
            generate_hash('x', 'crc32')


class TestLoremIpsum:

    def setup_method(self):
        self.generator = LoremIpsumGenerator(random.Random(42))

    def test_word_count(self):
        text = self.generator.generate('words', 12)
        words = text.split(' ')
        assert len(words) == 12
        assert words[0][0].isupper()
        assert all(word.lower() in WORDS for word in words)

    def test_sentences_end_with_period(self):
        text = self.generator.generate('sentences', 4)
        assert text.count('.') == 4
        assert text.endswith('.')

    def test_paragraphs_plain(self):
        assert len(self.generator.generate('paragraphs', 3).split('\n\n')) == 3

    def test_paragraphs_html(self):
        text = self.generator.generate('paragraphs', 2, include_html=True)
        lines = text.split('\n')
        assert len(lines) == 2
        assert all(line.startswith('<p>') and line.endswith('</p>') for line in lines)

    def test_count_is_clamped(self):
        assert len(self.generator.generate('words', 10000).split(' ')) == MAX_COUNTS['words']
        assert len(self.generator.generate('words', 0).split(' ')) == 1

    def test_seeded_output_is_repeatable(self):
        assert generate_lorem_ipsum('words', 5, rng=random.Random(1)) == \
            generate_lorem_ipsum('words', 5, rng=random.Random(1))

    def test_unsupported_type(self):
        with pytest.raises(ToolError):
            self.generator.generate('chapters', 1)

    def test_invalid_count(self):
        with pytest.raises(ToolError):
            self.generator.generate('words', 'many')
