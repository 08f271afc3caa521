"""Adapters connecting the level registry to files and terminals."""

from __future__ import annotations

from .console import RichLevelTable
from .source import FileLevelSource, TextLevelSource, extract_level_lines

__all__ = ["FileLevelSource", "RichLevelTable", "TextLevelSource", "extract_level_lines"]
