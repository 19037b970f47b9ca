"""
Markdown Package - Fluent Markdown builder
"""

from designpatterns.markdown.builder import (
    CellBuilder,
    FluentMarkdownBuilder,
    LinkBuilder,
    RowBuilder,
    TableBuilder,
)

__all__ = [
    "CellBuilder",
    "FluentMarkdownBuilder",
    "LinkBuilder",
    "RowBuilder",
    "TableBuilder",
]
