from pathlib import Path

import pytest

from access_analytics.config import LogAnalyzerConfig
from access_analytics.patterns import DEFAULT_LINE_REGEX

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def make_config():
    def _make(**kwargs) -> LogAnalyzerConfig:
        kwargs.setdefault("line_regex", DEFAULT_LINE_REGEX)
        return LogAnalyzerConfig(**kwargs)

    return _make
