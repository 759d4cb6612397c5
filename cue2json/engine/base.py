"""
Parsing engine interface.

An engine wraps one running instance of the vtt.js library. It keeps parser
state between calls, so operations on one engine must run one at a time.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ParserEngine:
    """Base engine interface for vtt.js hosts."""
    name: str

    def initialize(self) -> None:
        """Start the engine. Must be called once before any other operation."""
        raise NotImplementedError

    def parse(self, text: str) -> None:
        """Feed WebVTT text to the grammar parser."""
        raise NotImplementedError

    def flush(self) -> Dict[str, Any]:
        """Finish the current parse and return regions, cues and errors."""
        raise NotImplementedError

    def process(self, text: str) -> Any:
        """Parse ``text`` and run the WebVTT processing model over its cues."""
        raise NotImplementedError

    def clear(self) -> None:
        """Reset parser state so the next file starts clean."""
        raise NotImplementedError

    def shutdown(self) -> None:
        """Release every resource held by the engine."""
        raise NotImplementedError
