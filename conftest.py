"""pytest configuration — add src/ to sys.path and share fixtures across tests."""
import io
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent / "src"))

from rich.console import Console  # noqa: E402

from pwstate.log import build_logger  # noqa: E402
from pwstate.models import Config  # noqa: E402


@pytest.fixture
def log_buffer():
    return io.StringIO()


@pytest.fixture
def logger(log_buffer):
    """A debug-level pwstate logger that writes into ``log_buffer``."""
    console = Console(file=log_buffer, width=300, color_system=None)
    return build_logger(debug=True, console=console)


@pytest.fixture
def make_config(tmp_path):
    """Factory for a valid Config writing into *tmp_path*."""

    def _make(**overrides) -> Config:
        options = {
            "api_endpoint": "https://ps.example.com",
            "api_key": "k",
            "password_list_id": 42,
            "key_field": "Title",
            "value_field": "Password",
            "output_format": "YAML",
            "section_name": "secrets",
            "output_path": tmp_path / "secrets.yml",
        }
        options.update(overrides)
        return Config(**options)

    return _make
