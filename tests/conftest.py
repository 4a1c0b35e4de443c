"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`rimsave` package without requiring an editable install in CI, and exposes
the sample save shipped under `tests/fixtures`.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def sample_save_path() -> Path:
    return FIXTURES / "sample_save.xml"


@pytest.fixture
def sample_save_bytes(sample_save_path: Path) -> bytes:
    return sample_save_path.read_bytes()
