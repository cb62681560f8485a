"""
Tests for the tool catalog and the config.json backed settings.
"""

import json
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))

from config.settings import DEFAULT_LIMITS, Settings, get_config_directory, load_config
from config.tools import (
    ALL_TOOLS_CATEGORY, TOOLS, get_all_tools, get_categories, get_tool_by_id,
    get_tools_by_category, search_tools
)


class TestCatalog:

    def test_ids_are_unique(self):
        ids = [tool['id'] for tool in TOOLS]
        assert len(ids) == len(set(ids)) == 14

    def test_descriptor_fields(self):
        for tool in get_all_tools():
            assert {'id', 'name', 'description', 'category', 'path', 'endpoint'} <= set(tool)
            assert tool['path'] == f"/tools/{tool['id']}"

    def test_get_all_tools_returns_copy(self):
        tools = get_all_tools()
        tools.clear()
        assert len(get_all_tools()) == len(TOOLS) == 14

    def test_get_tool_by_id(self):
        assert get_tool_by_id('regex-tester')['name'] == 'Regex Tester'
        assert get_tool_by_id('missing') is None

    def test_all_tools_category(self):
        assert get_tools_by_category(ALL_TOOLS_CATEGORY) == TOOLS

    def test_category_filter(self):
        ids = {tool['id'] for tool in get_tools_by_category('Generators')}
        assert ids == {'uuid-generator', 'lorem-ipsum'}

    def test_search_is_case_insensitive(self):
        assert [tool['id'] for tool in search_tools('BASE64 IMAGE')] == ['base64-image']

    def test_search_matches_category(self):
        assert {tool['id'] for tool in search_tools('crypto')} == {'jwt-decoder', 'hash-generator'}

    def test_categories_in_catalog_order(self):
        categories = get_categories()
        assert categories[0] == TOOLS[0]['category']
        assert len(categories) == len(set(categories))


class TestSettings:

    def test_config_directory_from_env(self, config_dir):
        assert get_config_directory() == config_dir

    def test_user_config_wins(self, config_dir):
        (config_dir / 'config.json').write_text(json.dumps({'tools': {'base64': {'enabled': False}}}))
        settings = Settings()
        assert settings.is_tool_enabled('base64') is False
        assert settings.is_tool_enabled('json-formatter') is True

    def test_malformed_config_falls_back(self, config_dir):
        (config_dir / 'config.json').write_text('{not json')
        assert isinstance(load_config(), dict)

    def test_enabled_tools_filter(self):
        settings = Settings({'tools': {'lorem-ipsum': {'enabled': False}}})
        ids = [tool['id'] for tool in settings.get_enabled_tools(TOOLS)]
        assert 'lorem-ipsum' not in ids
        assert len(ids) == len(TOOLS) - 1

    def test_limits(self):
        settings = Settings({'limits': {'max_uuid_count': '25', 'max_image_bytes': 'big'}})
        assert settings.limit('max_uuid_count') == 25
        assert settings.limit('max_image_bytes') == DEFAULT_LIMITS['max_image_bytes']
        assert settings.limit('max_input_chars') == DEFAULT_LIMITS['max_input_chars']
