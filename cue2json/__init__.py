"""
cue2json - Convert WebVTT files to JSON with vtt.js

Runs the vtt.js WebVTT parser, or the full WebVTT processing model, inside a
headless browser and writes the result as JSON. Works on a single file or
recursively over a directory tree.

Example usage:
    >>> from cue2json import ConvertOptions, process_single_file, get_engine
    >>>
    >>> options = ConvertOptions(source="subs.vtt", copy=True)
    >>> process_single_file(options, lambda: get_engine("playwright"))
    True
"""

import logging

__version__ = "0.1.0"
__author__ = "cue2json Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .models import BatchSummary, ConvertOptions, DEFAULT_VTT_JS_PATH
from .exceptions import Cue2JsonError, EngineError, EngineInitError, PreconditionError
from .engine import ParserEngine, PlaywrightEngine, get_engine
from .session import ParserSession, create_session
from .writer import json_path_for, to_json, write_output
from .converter import (
    discover_work_items,
    process_directory,
    process_single_file,
    run_parser_action,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Models
    "BatchSummary",
    "ConvertOptions",
    "DEFAULT_VTT_JS_PATH",

    # Errors
    "Cue2JsonError",
    "EngineError",
    "EngineInitError",
    "PreconditionError",

    # Engines and sessions
    "ParserEngine",
    "PlaywrightEngine",
    "get_engine",
    "ParserSession",
    "create_session",

    # Output
    "json_path_for",
    "to_json",
    "write_output",

    # Conversion
    "discover_work_items",
    "process_directory",
    "process_single_file",
    "run_parser_action",
]
