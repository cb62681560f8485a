"""
Loads config.json and exposes tool enablement and input limits.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List

from toolkit.image_codec import MAX_IMAGE_BYTES
from toolkit.uuid_generator import MAX_UUID_COUNT

app_root = Path(__file__).parent.parent.parent

DEFAULT_LIMITS = {
    'max_uuid_count': MAX_UUID_COUNT,
    'max_image_bytes': MAX_IMAGE_BYTES,
    'max_input_chars': 1_000_000,
}


def get_config_directory() -> Path:
    """Get the config directory path."""
    config_dir = os.environ.get('DEV_TOOLBOX_CONFIG_DIR')
    if config_dir:
        return Path(config_dir)

    # Default to ~/.config/dev-toolbox
    return Path.home() / '.config' / 'dev-toolbox'


def load_config() -> Dict[str, Any]:
    """Load config.json from the config directory, then the project's config/ folder."""
    for config_file in (get_config_directory() / 'config.json', app_root / 'config' / 'config.json'):
        if config_file.exists():
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    config = json.load(f)
                if isinstance(config, dict):
                    return config
            except (json.JSONDecodeError, IOError):
                pass
    return {}


class Settings:
    """Tool switches and limits resolved from config.json."""

    def __init__(self, config: Dict[str, Any] = None):
        self.config = load_config() if config is None else config

    @property
    def tools(self) -> Dict[str, Any]:
        return self.config.get('tools', {})

    def is_tool_enabled(self, tool_id: str) -> bool:
        """Check if a tool is enabled in config. Defaults to True if not specified."""
        tool_conf = self.tools.get(tool_id, {})
        return tool_conf.get('enabled', True)

    def get_enabled_tools(self, tools_list: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Filter tools list to only include enabled tools."""
        return [tool for tool in tools_list if self.is_tool_enabled(tool.get('id', ''))]

    def limit(self, name: str) -> int:
        value = self.config.get('limits', {}).get(name, DEFAULT_LIMITS[name])
        try:
            return int(value)
        except (TypeError, ValueError):
            return DEFAULT_LIMITS[name]
