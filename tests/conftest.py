"""Shared test fixtures and configuration."""

import sys
from pathlib import Path

# Add src/ to the Python path so `from core.xxx` / `from adapters.xxx` imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def success_html(fixtures_dir: Path) -> str:
    return (fixtures_dir / "success.html").read_text(encoding="utf-8")


@pytest.fixture
def single_error_html(fixtures_dir: Path) -> str:
    return (fixtures_dir / "single_error.html").read_text(encoding="utf-8")


@pytest.fixture
def two_errors_html(fixtures_dir: Path) -> str:
    return (fixtures_dir / "two_errors.html").read_text(encoding="utf-8")
