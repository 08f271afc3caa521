"""Use cases orchestrating level sources and level tables."""

from __future__ import annotations

from .reload import create_reload

__all__ = ["create_reload"]
