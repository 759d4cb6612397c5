"""Parsing engines with a pluggable host for vtt.js."""

from typing import Any

from .base import ParserEngine
from .playwright_engine import PlaywrightEngine, SUPPORTED_BROWSERS


def get_engine(name: str = "playwright", **kwargs: Any) -> ParserEngine:
    """Build an engine by name. The engine still needs ``initialize()``."""
    if name == "playwright":
        return PlaywrightEngine(**kwargs)
    raise ValueError(f"Unsupported parsing engine: {name}")


__all__ = [
    "ParserEngine",
    "PlaywrightEngine",
    "SUPPORTED_BROWSERS",
    "get_engine",
]
