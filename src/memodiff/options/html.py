#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/memodiff/options/html.py
"""Configuration options for the HTML diff document."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from memodiff.constants import (
    DEFAULT_BREAK_CLASS,
    DEFAULT_CONTAINER_ID,
    DEFAULT_FAVICON_CODEPOINT,
    DEFAULT_LANGUAGE,
    DEFAULT_STYLESHEET,
    DEFAULT_VIEWPORT,
)
from memodiff.exceptions import ValidationError
from memodiff.options.base import BaseRendererOptions

_LANGUAGE_TAG_RE = re.compile(r"^[A-Za-z]{2,8}(-[A-Za-z0-9]{1,8})*$")
_IDENTIFIER_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")


@dataclass(frozen=True)
class DiffHtmlOptions(BaseRendererOptions):
    """Configuration options for rendering a diff as a standalone HTML document.

    Parameters
    ----------
    language : str, default "ja"
        BCP 47 language tag written to the ``<html lang="...">`` attribute.
    viewport : str
        Content of the responsive ``<meta name="viewport">`` declaration.
    favicon_codepoint : int, default 0x1F4DD
        Unicode code point drawn by the inline SVG favicon (MEMO by default).
    container_id : str, default "diff-container"
        ``id`` of the element wrapping the heading and the diff body.
    break_class : str, default "break"
        Class of the empty marker span emitted before each ``<br>``. The
        stylesheet draws the return-arrow glyph through ``::after``.
    stylesheet : str
        CSS embedded verbatim in the document ``<style>`` element.

    Examples
    --------
    English document with the default styling:
        >>> options = DiffHtmlOptions(language="en")

    Derive a variant from existing options:
        >>> wide = options.create_updated(stylesheet="#diff-container { width: 900px; }")

    """

    language: str = field(
        default=DEFAULT_LANGUAGE,
        metadata={"help": "Document language tag for the HTML lang attribute", "importance": "core"},
    )
    viewport: str = field(
        default=DEFAULT_VIEWPORT,
        metadata={"help": "Content of the viewport meta declaration", "importance": "advanced"},
    )
    favicon_codepoint: int = field(
        default=DEFAULT_FAVICON_CODEPOINT,
        metadata={"help": "Unicode code point rendered as the inline SVG favicon", "type": int, "importance": "advanced"},
    )
    container_id: str = field(
        default=DEFAULT_CONTAINER_ID,
        metadata={"help": "id of the element wrapping the title and diff body", "importance": "advanced"},
    )
    break_class: str = field(
        default=DEFAULT_BREAK_CLASS,
        metadata={"help": "CSS class of the line-break marker span", "importance": "advanced"},
    )
    stylesheet: str = field(
        default=DEFAULT_STYLESHEET,
        metadata={"help": "CSS embedded in the document head", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValidationError
            If any field value is malformed.

        """
        if not _LANGUAGE_TAG_RE.match(self.language):
            raise ValidationError(
                f"language must be a BCP 47 language tag, got {self.language!r}",
                parameter_name="language",
                parameter_value=self.language,
            )
        if not 0 < self.favicon_codepoint <= 0x10FFFF:
            raise ValidationError(
                f"favicon_codepoint must be a valid Unicode code point, got {self.favicon_codepoint!r}",
                parameter_name="favicon_codepoint",
                parameter_value=self.favicon_codepoint,
            )
        for name in ("container_id", "break_class"):
            value = getattr(self, name)
            if not _IDENTIFIER_RE.match(value):
                raise ValidationError(
                    f"{name} must be a CSS identifier, got {value!r}",
                    parameter_name=name,
                    parameter_value=value,
                )
