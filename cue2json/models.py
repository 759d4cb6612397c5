"""
Data models for cue2json.

Defines the option and result structures passed between the CLI,
the converter and the output writer.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

DEFAULT_VTT_JS_PATH = "dist/vtt.min.js"


@dataclass(frozen=True)
class ConvertOptions:
    """Options for one run of the tool. Never mutated after creation."""
    source: str
    copy: bool = False
    process: bool = False
    create_new: bool = False
    vtt_js_path: str = DEFAULT_VTT_JS_PATH
    browser: str = "chromium"
    headless: bool = True


@dataclass
class BatchSummary:
    """Tally of a directory run."""
    total: int = 0
    written: int = 0
    failures: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return self.total - self.written

    def __str__(self) -> str:
        return f"Files Written: {self.written}, Failed: {self.failed}."
