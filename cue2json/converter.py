"""
VTT to JSON conversion for single files and directory trees.

Single files get their own session. Directory runs discover their work items
first and then convert them one at a time through one shared session, so the
engine is started once per run and never asked to do two things at once.
"""

import dataclasses
import logging
import os
from typing import Any, List

from .models import BatchSummary, ConvertOptions
from .session import EngineFactory, ParserSession, create_session
from .writer import json_path_for, vtt_path_for, write_output

logger = logging.getLogger(__name__)


def output_path_for(vtt_path: str, options: ConvertOptions):
    """Return the JSON destination for a file, or None to print it."""
    if options.copy:
        return json_path_for(vtt_path)
    return None


def run_parser_action(session: ParserSession, path: str, options: ConvertOptions) -> Any:
    """
    Either just parse a VTT file or run the processing model as well.

    Args:
        session: Initialized parser session
        path: VTT file to convert
        options: Run options; ``options.process`` selects the processing model

    Returns:
        Parser output (regions, cues, errors) or processing model output
    """
    if options.process:
        return session.process_file(path)
    return session.parse_file(path)


def process_single_file(options: ConvertOptions, engine_factory: EngineFactory) -> bool:
    """
    Convert one VTT file and write its JSON.

    The session is always shut down before this returns or raises.

    Returns:
        True if the output was written, False if writing it failed

    Raises:
        EngineInitError: If the engine cannot be started
        Exception: Any error raised while parsing the file
    """
    path = options.source
    with create_session(engine_factory) as session:
        data = run_parser_action(session, path, options)
        return write_output(data, output_path_for(path, options))


def discover_work_items(root: str, create_new: bool = False) -> List[str]:
    """
    Find the VTT files a directory run should convert.

    Every ``.json`` file whose sibling ``.vtt`` exists is refreshed. With
    ``create_new`` set, ``.vtt`` files without a ``.json`` sibling are added
    too. Other files are ignored. Directories are walked in sorted order.

    Args:
        root: Directory to walk recursively
        create_new: Also pick up VTT files that have never been converted

    Returns:
        VTT paths in discovery order, each listed once
    """
    items: List[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            file_path = os.path.join(dirpath, filename)
            if filename.endswith(".json"):
                vtt_path = vtt_path_for(file_path)
                if os.path.exists(vtt_path):
                    items.append(vtt_path)
            elif filename.endswith(".vtt") and create_new:
                if not os.path.exists(json_path_for(file_path)):
                    items.append(file_path)

    logger.debug(f"Discovered {len(items)} VTT files under {root}")
    return items


def process_directory(options: ConvertOptions, engine_factory: EngineFactory) -> BatchSummary:
    """
    Convert every discovered VTT file under ``options.source``.

    Directory runs always write files next to their sources. A file that
    fails is logged and counted; the run carries on with the next one. The
    session is cleared after each converted file and shut down exactly once.

    Returns:
        BatchSummary with written and failed counts

    Raises:
        EngineInitError: If the engine cannot be started
    """
    options = dataclasses.replace(options, copy=True)
    files = discover_work_items(options.source, options.create_new)
    summary = BatchSummary(total=len(files), written=len(files))

    with create_session(engine_factory) as session:
        while files:
            file_path = files.pop()
            try:
                data = run_parser_action(session, file_path, options)
            except Exception as e:
                summary.written -= 1
                summary.failures.append((file_path, str(e)))
                logger.warning(f"Couldn't write {file_path}. {e}")
                continue

            if not write_output(data, output_path_for(file_path, options)):
                summary.written -= 1
                summary.failures.append((file_path, "Unable to write output"))
            try:
                session.clear()
            except Exception as e:
                logger.warning(f"Couldn't reset the parser after {file_path}. {e}")

    logger.debug(f"Directory run finished: {summary}")
    return summary
