"""
Playwright engine adapter.

Runs vtt.js inside a headless browser page. The vtt.js build artifact is
injected into a blank page together with a small harness that owns the
``WebVTT.Parser`` instance and converts its output to plain JSON values.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .base import ParserEngine
from ..exceptions import EngineError, EngineInitError

logger = logging.getLogger(__name__)

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

_PAGE_HTML = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body style="margin: 0">
<div id="overlay" style="position: absolute; top: 0; left: 0; width: 100%; height: 100%"></div>
</body>
</html>
"""

_HARNESS_JS = """
(function () {
  function regionToJSON(region) {
    if (!region) {
      return null;
    }
    return {
      id: region.id,
      width: region.width,
      lines: region.lines,
      regionAnchorX: region.regionAnchorX,
      regionAnchorY: region.regionAnchorY,
      viewportAnchorX: region.viewportAnchorX,
      viewportAnchorY: region.viewportAnchorY,
      scroll: region.scroll
    };
  }

  function cueToJSON(cue) {
    return {
      id: cue.id,
      startTime: cue.startTime,
      endTime: cue.endTime,
      text: cue.text,
      pauseOnExit: cue.pauseOnExit,
      region: regionToJSON(cue.region),
      vertical: cue.vertical,
      snapToLines: cue.snapToLines,
      line: cue.line,
      lineAlign: cue.lineAlign,
      position: cue.position,
      positionAlign: cue.positionAlign,
      size: cue.size,
      align: cue.align
    };
  }

  function nodeToJSON(node) {
    if (node.nodeType === Node.TEXT_NODE) {
      return { textContent: node.textContent };
    }
    var children = [];
    for (var i = 0; i < node.childNodes.length; i++) {
      children.push(nodeToJSON(node.childNodes[i]));
    }
    return {
      tagName: node.tagName,
      className: node.className || "",
      style: node.getAttribute("style") || "",
      childNodes: children
    };
  }

  var state = {};

  function reset() {
    state.cues = [];
    state.vtt = { regions: [], cues: [], errors: [] };
    state.parser = new WebVTT.Parser(window, WebVTT.StringDecoder());
    state.parser.oncue = function (cue) {
      state.cues.push(cue);
      state.vtt.cues.push(cueToJSON(cue));
    };
    state.parser.onregion = function (region) {
      state.vtt.regions.push(regionToJSON(region));
    };
    state.parser.onparsingerror = function (error) {
      state.vtt.errors.push({ code: error.code, message: error.message });
    };
  }

  window.cue2json = {
    reset: reset,
    parse: function (text) {
      try {
        state.parser.parse(text);
      } catch (e) {
        reset();
        throw e;
      }
    },
    flush: function () {
      state.parser.flush();
      return state.vtt;
    },
    process: function (text) {
      reset();
      state.parser.parse(text);
      state.parser.flush();
      var overlay = document.getElementById("overlay");
      WebVTT.processCues(window, state.cues, overlay);
      var result = nodeToJSON(overlay);
      reset();
      return result;
    }
  };
  reset();
})();
"""


class PlaywrightEngine(ParserEngine):
    """Engine hosting vtt.js in a Playwright-controlled browser."""

    def __init__(
        self,
        vtt_js_path: str = "dist/vtt.min.js",
        browser: str = "chromium",
        headless: bool = True,
        viewport_width: int = 640,
        viewport_height: int = 480,
    ) -> None:
        super().__init__(name="playwright")
        if browser not in SUPPORTED_BROWSERS:
            raise ValueError(f"Unsupported browser: {browser}")
        self.vtt_js_path = Path(vtt_js_path)
        self.browser_name = browser
        self.headless = headless
        self.viewport = {"width": viewport_width, "height": viewport_height}
        self._playwright = None
        self._browser = None
        self._page = None

    def initialize(self) -> None:
        from playwright.sync_api import Error as PlaywrightError, sync_playwright

        logger.debug(f"Launching {self.browser_name} (headless={self.headless})")
        try:
            self._playwright = sync_playwright().start()
            browser_type = getattr(self._playwright, self.browser_name)
            self._browser = browser_type.launch(headless=self.headless)
            self._page = self._browser.new_page(viewport=self.viewport)
            self._page.set_content(_PAGE_HTML)
            self._page.add_script_tag(path=str(self.vtt_js_path))
            self._page.add_script_tag(content=_HARNESS_JS)
        except PlaywrightError as e:
            raise EngineInitError(str(e)) from e
        logger.debug(f"Loaded {self.vtt_js_path} into {self.browser_name}")

    def _evaluate(self, expression: str, arg: Optional[Any] = None) -> Any:
        if self._page is None:
            raise EngineError("Engine is not initialized")
        from playwright.sync_api import Error as PlaywrightError

        try:
            return self._page.evaluate(expression, arg)
        except PlaywrightError as e:
            raise EngineError(str(e)) from e

    def parse(self, text: str) -> None:
        self._evaluate("(text) => window.cue2json.parse(text)", text)

    def flush(self) -> Dict[str, Any]:
        return self._evaluate("() => window.cue2json.flush()")

    def process(self, text: str) -> Any:
        return self._evaluate("(text) => window.cue2json.process(text)", text)

    def clear(self) -> None:
        self._evaluate("() => window.cue2json.reset()")

    def shutdown(self) -> None:
        if self._playwright is None:
            return
        from playwright.sync_api import Error as PlaywrightError

        try:
            if self._browser is not None:
                self._browser.close()
        except PlaywrightError as e:
            logger.warning(f"Browser did not shut down cleanly: {e}")
        finally:
            self._page = None
            self._browser = None
            self._playwright.stop()
            self._playwright = None
