"""Shared fixtures: a recording fake engine so no browser is needed."""

from typing import Any, Dict, List, Optional, Set

import pytest

from cue2json.engine.base import ParserEngine
from cue2json.exceptions import EngineError

SAMPLE_VTT = """WEBVTT

00:00:00.000 --> 00:00:01.500
Hello world

00:00:02.000 --> 00:00:03.000
Second cue
"""


class FakeEngine(ParserEngine):
    """Engine double recording every call.

    Parsed text becomes one cue per non-empty line after the header. Text
    containing any of ``fail_on`` raises EngineError from parse and process.
    """

    def __init__(
        self,
        fail_init: bool = False,
        fail_on: Optional[Set[str]] = None,
        fail_clear: bool = False,
    ):
        super().__init__(name="fake")
        self.fail_init = fail_init
        self.fail_clear = fail_clear
        self.fail_on = fail_on or set()
        self.calls: List[str] = []
        self.buffer = ""

    def _check(self, text: str) -> None:
        for marker in self.fail_on:
            if marker in text:
                raise EngineError(f"Malformed input: {marker}")

    def initialize(self) -> None:
        self.calls.append("initialize")
        if self.fail_init:
            raise RuntimeError("browser failed to launch")

    def parse(self, text: str) -> None:
        self.calls.append("parse")
        self._check(text)
        self.buffer += text

    def flush(self) -> Dict[str, Any]:
        self.calls.append("flush")
        lines = [line for line in self.buffer.splitlines()[1:] if line and "-->" not in line]
        return {
            "regions": [],
            "cues": [{"text": line} for line in lines],
            "errors": [],
        }

    def process(self, text: str) -> Any:
        self.calls.append("process")
        self._check(text)
        return {"tagName": "DIV", "className": "", "style": "", "childNodes": []}

    def clear(self) -> None:
        self.calls.append("clear")
        if self.fail_clear:
            raise EngineError("page crashed")
        self.buffer = ""

    def shutdown(self) -> None:
        self.calls.append("shutdown")


@pytest.fixture
def engines() -> List[FakeEngine]:
    """Every engine built by ``engine_factory`` in this test."""
    return []


@pytest.fixture
def engine_factory(engines):
    def factory(**kwargs: Any) -> FakeEngine:
        engine = FakeEngine(**kwargs)
        engines.append(engine)
        return engine

    return factory


@pytest.fixture
def vtt_file(tmp_path):
    path = tmp_path / "subs.vtt"
    path.write_text(SAMPLE_VTT, encoding="utf-8")
    return path
