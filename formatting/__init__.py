"""Formatting layer - render lookup results as Markdown."""
from .markdown import format_lookup

__all__ = ["format_lookup"]
