"""
Pytest configuration and fixtures for Log Alerts tests.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_CONTENT = "Jan 5 error\nFeb 1 ok\nJan 5 warn\n"


@pytest.fixture
def sample_log(tmp_path: Path) -> Path:
    """A three-line log file with two entries dated Jan 5."""
    log_file = tmp_path / "sample.log"
    log_file.write_text(SAMPLE_CONTENT, encoding="utf-8")
    return log_file


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write a YAML config into tmp_path and return its path."""
    def _write(content: str) -> Path:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(content, encoding="utf-8")
        return config_file
    return _write
