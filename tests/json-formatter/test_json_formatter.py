"""
Tests for JSON validation, formatting and minification.
"""

import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))

from toolkit.exceptions import InvalidJsonError
from toolkit.json_formatter import format_json, minify_json, parse_json, validate_json


class TestValidateJson:

    def test_valid_object(self):
        result = validate_json('{"name": "test"}')
        assert result.is_valid is True
        assert result.message == 'JSON is valid'

    def test_invalid_reports_position(self):
        result = validate_json('{"name": }')
        assert result.is_valid is False
        assert 'line 1 column 10' in result.message

    def test_empty_input(self):
        result = validate_json('   ')
        assert result.is_valid is False
        assert result.message == 'JSON is empty'

    def test_to_dict(self):
        assert validate_json('[]').to_dict() == {'valid': True, 'message': 'JSON is valid'}

    @pytest.mark.parametrize('document', ['NaN', '[Infinity]', '{"a": -Infinity}'])
    def test_non_finite_literals_are_invalid(self, document):
        result = validate_json(document)
        assert result.is_valid is False
        assert 'is not valid JSON' in result.message


class TestFormatJson:

    def test_two_space_indent(self):
        assert format_json('{"a":1,"b":[1,2]}') == '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ]\n}'

    def test_custom_indent(self):
        assert format_json('{"a":1}', spaces=4) == '{\n    "a": 1\n}'

    def test_non_ascii_preserved(self):
        assert '"héllo"' in format_json('{"k": "héllo"}')

    def test_key_order_preserved(self):
        formatted = format_json('{"z": 1, "a": 2}')
        assert formatted.index('"z"') < formatted.index('"a"')

    def test_invalid_raises(self):
        with pytest.raises(InvalidJsonError):
            format_json('{invalid}')

    def test_nan_raises(self):
        with pytest.raises(InvalidJsonError, match="Unexpected token 'NaN'"):
            format_json('{"x": NaN}')


class TestMinifyJson:

    def test_removes_whitespace(self):
        assert minify_json('{\n  "a": 1,\n  "b": [1, 2]\n}') == '{"a":1,"b":[1,2]}'

    def test_keeps_whitespace_in_strings(self):
        assert minify_json('{"text": "a  b"}') == '{"text":"a  b"}'

    def test_invalid_raises(self):
        with pytest.raises(InvalidJsonError):
            minify_json('[1, 2')

    @pytest.mark.parametrize('document', [
        '{"nested": {"list": [1, 2.5, null, true, false]}, "s": "x"}',
        '[{"a": []}, {}, "unicode ✓"]',
        '42',
    ])
    def test_format_then_minify_preserves_value(self, document):
        original = parse_json(document)
        assert json.loads(minify_json(format_json(document))) == original
