"""
Parser session management.

A session owns exactly one parsing engine from creation to shutdown. It is
the only object that talks to the engine; the converter works with files
through it and resets it between files instead of relaunching the engine.
"""

import logging
from typing import Any, Callable, Dict

from .engine.base import ParserEngine
from .exceptions import Cue2JsonError, EngineInitError

logger = logging.getLogger(__name__)

EngineFactory = Callable[[], ParserEngine]


class ParserSession:
    """
    Stateful wrapper around one parsing engine.

    Operations must be issued one at a time; the engine keeps parser state
    between calls. ``shutdown()`` may be called any number of times and only
    releases the engine once.
    """

    def __init__(self, engine: ParserEngine):
        self.engine = engine
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def initialize(self) -> None:
        """
        Start the engine.

        Raises:
            EngineInitError: If the engine fails to start. The engine has
                already been shut down when this is raised.
        """
        try:
            self.engine.initialize()
        except Exception as e:
            self.shutdown()
            raise EngineInitError(
                f"Unable to initialize the {self.engine.name} engine. {e}"
            ) from e
        logger.debug(f"Session ready on {self.engine.name} engine")

    def parse_string(self, text: str) -> Dict[str, Any]:
        """Parse WebVTT text and return the flushed parser output."""
        self.engine.parse(text)
        return self.engine.flush()

    def parse_file(self, path: str) -> Dict[str, Any]:
        """Run the grammar parser over a file and return its flushed output."""
        logger.debug(f"Parsing {path}")
        return self.parse_string(_read_vtt(path))

    def process_file(self, path: str) -> Any:
        """Run the WebVTT processing model over a file."""
        logger.debug(f"Processing {path}")
        return self.engine.process(_read_vtt(path))

    def clear(self) -> None:
        self.engine.clear()

    def shutdown(self) -> None:
        if self._closed:
            return
        self._closed = True
        logger.debug(f"Shutting down {self.engine.name} engine")
        self.engine.shutdown()

    def __enter__(self) -> "ParserSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


def _read_vtt(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise Cue2JsonError(f"Unable to read {path}. {e}") from e


def create_session(engine_factory: EngineFactory) -> ParserSession:
    """
    Create and initialize a session on a fresh engine.

    Args:
        engine_factory: Callable returning an uninitialized engine

    Returns:
        Initialized ParserSession

    Raises:
        EngineInitError: If the engine cannot be started
    """
    session = ParserSession(engine_factory())
    session.initialize()
    return session
