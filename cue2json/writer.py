"""
JSON output writer.

Serializes converter results and sends them either to standard output or to
a ``.json`` file derived from the source VTT path.
"""

import json
import logging
import re
import sys
from typing import Any, Optional, TextIO

logger = logging.getLogger(__name__)

_VTT_SUFFIX = re.compile(r"\.vtt$")


def json_path_for(vtt_path: str) -> str:
    """
    Get the JSON file name for a VTT file.

    Only a trailing ``.vtt`` is replaced; any other path is returned as is.

    Example:
        >>> json_path_for("subs/episode1.vtt")
        'subs/episode1.json'
    """
    return _VTT_SUFFIX.sub(".json", vtt_path)


def vtt_path_for(json_path: str) -> str:
    """Get the VTT source path a ``.json`` output would have come from."""
    return re.sub(r"\.json$", ".vtt", json_path)


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def write_output(data: Any, path: Optional[str] = None, stream: Optional[TextIO] = None) -> bool:
    """
    Write data as pretty-printed JSON to a file or to standard output.

    Args:
        data: Any JSON serializable structure
        path: Destination file. When omitted the JSON is printed instead.
        stream: Stream used when no path is given (default: sys.stdout)

    Returns:
        True if the output was written, False otherwise. Failures are logged,
        never raised.
    """
    try:
        text = to_json(data)
    except (TypeError, ValueError) as e:
        logger.error(f"Error: Unable to jsonify data. {e}")
        return False

    if path:
        logger.info(f"Writing {path}")
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(text + "\n")
        except OSError as e:
            logger.error(f"Error: Unable to write output. {e}")
            return False
        return True

    try:
        print(text, file=stream or sys.stdout)
    except (OSError, UnicodeEncodeError) as e:
        logger.error(f"Error: Unable to print output. {e}")
        return False
    return True
