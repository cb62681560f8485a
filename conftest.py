"""
pytest configuration for Dev Toolbox.
Puts src/ on the path and provides Flask app and client fixtures.
"""

import sys
from pathlib import Path

import pytest

src_path = Path(__file__).parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def app():
    """The Flask application configured for testing."""
    from main import app as flask_app
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    """Test client for the Flask application."""
    return app.test_client()


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Isolated config directory via DEV_TOOLBOX_CONFIG_DIR."""
    monkeypatch.setenv('DEV_TOOLBOX_CONFIG_DIR', str(tmp_path))
    return tmp_path
