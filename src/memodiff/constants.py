#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the memodiff library.

Constants are organized by category:
1. Type Definitions
2. Document Metadata - language, viewport, favicon
3. Markup - element names, classes and glyphs used in rendered output
4. Stylesheet
5. Diff Engine and Output Paths
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

CleanupMode = Literal["semantic-lossless", "semantic", "efficiency", "none"]
RenderStrategy = Literal["operations", "prerendered"]

# =============================================================================
# Document Metadata
# =============================================================================

DEFAULT_LANGUAGE = "ja"
DEFAULT_CHARSET = "utf-8"
DEFAULT_VIEWPORT = "width=device-width, initial-scale=1.0, maximum-scale=1.0, minimum-scale=1.0"

# U+1F4DD MEMO
DEFAULT_FAVICON_CODEPOINT = 0x1F4DD
FAVICON_SVG_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">'
    '<text x="50%" y="50%" style="dominant-baseline:central;text-anchor:middle;font-size:90px;">'
    "&#x{codepoint:x};</text></svg>"
)
FAVICON_MIME_TYPE = "image/svg+xml"

# encodeURIComponent leaves these unescaped
URI_COMPONENT_SAFE_CHARS = "-_.!~*'()"

DOCTYPE = "<!DOCTYPE html>"

# =============================================================================
# Markup
# =============================================================================

DEFAULT_CONTAINER_ID = "diff-container"
DEFAULT_BREAK_CLASS = "break"

EQUAL_TAG = "span"
INSERT_TAG = "ins"
DELETE_TAG = "del"

NAV_INDEX_ATTR = "tabindex"
INERT_ATTR = "inert"

# diff_prettyHtml encodes "\n" as "&para;<br>"
PILCROW = "¶"
RETURN_ARROW = "↵"

# =============================================================================
# Stylesheet
# =============================================================================

DEFAULT_STYLESHEET = """
#diff-container {
  width: 600px;
  margin: auto;
  font-family: "HackGen", "Source Han Code JP", "Consolas", monospace;
  font-size: 16px;
  line-height: 1.25;
  word-break: break-all;
}

ins {
  border-radius: 4px;
  background: #ffbebe;
  border: 1px solid tomato;
  text-decoration: none;
}

del {
  background: #a4e5ff;
  border: 1px solid #05374b;
  color: #929292;
}

.break::after {
  content: "\\21B5";
  color: #929292;
}
"""

# =============================================================================
# Diff Engine and Output Paths
# =============================================================================

DEFAULT_CLEANUP: CleanupMode = "semantic-lossless"
DEFAULT_DIFF_TIMEOUT = 0.0
DEFAULT_STRATEGY: RenderStrategy = "operations"

OUTPUT_EXTENSION = ".html"
OUTPUT_NAME_TEMPLATE = "{revised}_diff_from_{origin}.html"
TITLE_TEMPLATE = "'{origin}'→'{revised}'"

ENV_PREFIX = "MEMODIFF_"
