"""Markdown to plain text."""
from stripmd.reducer import strip_markdown

__all__ = ["strip_markdown"]
