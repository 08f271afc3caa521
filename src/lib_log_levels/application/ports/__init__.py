"""Protocols separating the level registry from its collaborators."""

from __future__ import annotations

from .source import LevelSourcePort
from .table import LevelTablePort

__all__ = ["LevelSourcePort", "LevelTablePort"]
