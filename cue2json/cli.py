"""CLI entrypoint for converting WebVTT files to JSON.

Usage:
    cue2json -v subs.vtt
    cue2json -v subs.vtt --copy
    cue2json -v subs.vtt --process
    cue2json -v ./subtitles --new
    cue2json -v ./subtitles --vtt-js ./dist/vtt.min.js --browser firefox
"""

from __future__ import annotations

import argparse
import logging
import os
import stat
import sys

from .engine import SUPPORTED_BROWSERS, ParserEngine, get_engine
from .exceptions import Cue2JsonError, PreconditionError
from .models import DEFAULT_VTT_JS_PATH, ConvertOptions
from .converter import process_directory, process_single_file
from .session import EngineFactory

log = logging.getLogger(__name__)


def _setup_logging(*, verbose: bool) -> None:
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    root_level = logging.DEBUG if verbose else logging.INFO
    root_logger.setLevel(root_level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(root_level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="cue2json",
        description="Parse VTT files into JSON.",
    )
    parser.add_argument(
        "-v",
        "--vtt",
        required=True,
        help="Path to a VTT file or directory that contains VTT files to be processed.",
    )
    parser.add_argument(
        "-c",
        "--copy",
        action="store_true",
        help="Copies output to a JSON file with the same name as the source VTT file.",
    )
    parser.add_argument(
        "-p",
        "--process",
        action="store_true",
        help=(
            "Generate JSON from running the WebVTT processing model. "
            "Default is JSON from the WebVTT parser."
        ),
    )
    parser.add_argument(
        "-n",
        "--new",
        action="store_true",
        help=(
            "Creates a new JSON file for any VTT file that does not have one. "
            "Works recursively in a directory."
        ),
    )
    parser.add_argument(
        "--vtt-js",
        default=DEFAULT_VTT_JS_PATH,
        help=f"Path to the vtt.js build (default: {DEFAULT_VTT_JS_PATH})",
    )
    parser.add_argument(
        "--browser",
        choices=SUPPORTED_BROWSERS,
        default="chromium",
        help="Browser used to host vtt.js (default: chromium)",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window instead of running headless",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def options_from_args(args: argparse.Namespace) -> ConvertOptions:
    return ConvertOptions(
        source=args.vtt,
        copy=args.copy,
        process=args.process,
        create_new=args.new,
        vtt_js_path=args.vtt_js,
        browser=args.browser,
        headless=not args.headed,
    )


def _default_engine_factory(options: ConvertOptions) -> EngineFactory:
    def factory() -> ParserEngine:
        return get_engine(
            "playwright",
            vtt_js_path=options.vtt_js_path,
            browser=options.browser,
            headless=options.headless,
        )

    return factory


def check_build_artifact(vtt_js_path: str) -> None:
    if not os.path.exists(vtt_js_path):
        raise PreconditionError(
            f"You must first build vtt.js by running `grunt build` ({vtt_js_path} not found)"
        )


def run(options: ConvertOptions, engine_factory: EngineFactory) -> int:
    """
    Validate preconditions and dispatch to file or directory mode.

    Returns:
        Process exit status
    """
    check_build_artifact(options.vtt_js_path)

    try:
        is_dir = stat.S_ISDIR(os.stat(options.source).st_mode)
    except OSError as e:
        raise PreconditionError(str(e)) from e

    if is_dir:
        summary = process_directory(options, engine_factory)
        print(summary)
        for file_path, message in summary.failures:
            log.debug(f"Failed: {file_path}: {message}")
        return 0

    if not options.source.endswith(".vtt"):
        raise PreconditionError("File must be a VTT file.")

    return 0 if process_single_file(options, engine_factory) else 1


def main(argv: list[str] | None = None, engine_factory: EngineFactory | None = None) -> int:
    """Run the converter and return its exit status."""
    args = parse_args(argv)
    _setup_logging(verbose=args.verbose)

    options = options_from_args(args)
    if engine_factory is None:
        engine_factory = _default_engine_factory(options)

    try:
        return run(options, engine_factory)
    except Cue2JsonError as e:
        log.error(f"Error: {e}")
    except Exception as e:
        log.error(f"Error: {e}")
        log.debug("Unhandled error", exc_info=True)
    return 1
