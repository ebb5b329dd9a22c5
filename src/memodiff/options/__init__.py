#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for memodiff rendering.

Options are frozen dataclasses; use ``create_updated`` to derive variants.
"""

from __future__ import annotations

from memodiff.options.base import BaseRendererOptions, CloneFrozenMixin
from memodiff.options.html import DiffHtmlOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "DiffHtmlOptions",
]
