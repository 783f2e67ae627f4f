"""Manga reading-list CSV to MyAnimeList import XML converter."""

from .converter import build_output_path, convert_file

__all__ = [
    "build_output_path",
    "convert_file",
]
