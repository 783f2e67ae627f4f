"""Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup
- Settings fixtures for both validation modes
- Sample reading-list CSV data
- Helpers for writing CSV files to a temporary directory
"""

import os
from pathlib import Path
from typing import Callable, Generator

import pytest

# Set application environment variables BEFORE importing any application code
os.environ["MAL_VALIDATION_MODE"] = "strict"
os.environ["MAL_CSV_LAYOUT"] = "header"
os.environ["LOG_LEVEL"] = "DEBUG"

from mal_converter.shared.config import Settings, clear_settings_cache  # noqa: E402
from mal_converter.shared.models import RawRow  # noqa: E402


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings around every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def strict_settings() -> Settings:
    """Settings for the reject-and-skip pipeline."""
    return Settings(validation_mode="strict", csv_layout="header")


@pytest.fixture
def lenient_settings() -> Settings:
    """Settings for the silent-default pipeline."""
    return Settings(validation_mode="lenient", csv_layout="header")


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def sample_csv_text() -> str:
    """Reading list with one row per status plus two invalid rows."""
    return (
        "mal,title,type,read,rating,last_read\n"
        'https://myanimelist.net/manga/42/Foo_Bar,"Foo, Bar",Reading,5,8,2023-01-15\n'
        "https://myanimelist.net/manga/2/Berserk,Berserk,Completed,364,10,15-01-2023\n"
        "https://myanimelist.net/manga/13/One_Piece,One Piece,On-Hold,1000,9,\n"
        "https://myanimelist.net/manga/1706/Jojo,JoJo no Kimyou na Bouken,Dropped,20,6,2021-06-30\n"
        "https://myanimelist.net/manga/656/Vagabond,Vagabond,Plan to Read,,,\n"
        "https://myanimelist.net/manga/11/Naruto,Naruto,reading,700,7,2020-02-02\n"
        ",Untracked Title,Reading,3,5,2022-03-04\n"
    )


@pytest.fixture
def sample_raw_row() -> RawRow:
    """The row from the 'Foo, Bar' round-trip scenario."""
    return RawRow(
        mal="https://x/manga/42",
        title="Foo, Bar",
        type="Reading",
        read="5",
        rating="8",
        last_read="2023-01-15",
        line_number=2,
    )


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Factory that writes CSV text to a temporary file."""

    def _write(content: str, name: str = "reading-list.csv", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return path

    return _write


@pytest.fixture
def sample_csv_file(write_csv: Callable[..., Path], sample_csv_text: str) -> Path:
    """Sample reading list written to disk."""
    return write_csv(sample_csv_text)
