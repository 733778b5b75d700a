"""
Markdown documentation module.
"""

from __future__ import annotations

from .renderer import DocFragment, MarkdownRenderer, render_markdown

__all__ = [
    "DocFragment",
    "MarkdownRenderer",
    "render_markdown",
]
