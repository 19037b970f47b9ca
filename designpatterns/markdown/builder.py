"""
Markdown Builder - Fluent construction of Markdown documents

Every add_* method appends to the document and returns the builder, so
calls can be chained. Tables can be given as plain rows or built with
nested row/cell/link builders.
"""

from typing import Callable, List, Sequence, Union


def _format_row(cells: Sequence[str]) -> str:
    """Format cells as one table line, e.g. |a|b|."""
    return "|" + "|".join(cells) + "|"


def _format_table_header(headers: Sequence[str]) -> List[str]:
    """Header line followed by the --- separator line."""
    return [_format_row(headers), _format_row(["---"] * len(headers))]


def _bold(text: str) -> str:
    return f"**{text}**"


def _italic(text: str) -> str:
    return f"*{text}*"


def _link(text: str, url: str) -> str:
    return f"[{text}]({url})"


class LinkBuilder:
    """Builds the visible text of a link."""

    def __init__(self):
        self._parts: List[str] = []

    def add_bold(self, text: str) -> "LinkBuilder":
        self._parts.append(_bold(text))
        return self

    def add_text(self, text: str) -> "LinkBuilder":
        self._parts.append(text)
        return self

    def build(self) -> str:
        return "".join(self._parts)


class CellBuilder:
    """Builds the content of one table cell."""

    def __init__(self):
        self._parts: List[str] = []

    def add_bold(self, text: str) -> "CellBuilder":
        self._parts.append(_bold(text))
        return self

    def add_italic(self, text: str) -> "CellBuilder":
        self._parts.append(_italic(text))
        return self

    def add_text(self, text: str) -> "CellBuilder":
        self._parts.append(text)
        return self

    def add_link(self, build_link: Callable[[LinkBuilder], object], url: str) -> "CellBuilder":
        """Append a link whose text is produced by build_link."""
        link_builder = LinkBuilder()
        build_link(link_builder)
        self._parts.append(_link(link_builder.build(), url))
        return self

    def build(self) -> str:
        return "".join(self._parts)


class RowBuilder:
    """Builds one table row from cells."""

    def __init__(self):
        self._cells: List[str] = []

    def add_cell(self, build_cell: Callable[[CellBuilder], object]) -> "RowBuilder":
        cell_builder = CellBuilder()
        build_cell(cell_builder)
        self._cells.append(cell_builder.build())
        return self

    def build(self) -> str:
        return _format_row(self._cells)


class TableBuilder:
    """Builds the body rows of a table."""

    def __init__(self):
        self._rows: List[str] = []

    def add_row(self, build_row: Callable[[RowBuilder], object]) -> "TableBuilder":
        row_builder = RowBuilder()
        build_row(row_builder)
        self._rows.append(row_builder.build())
        return self

    def build(self) -> str:
        return "".join(f"{row}\n" for row in self._rows)


TableRows = Union[Sequence[Sequence[str]], Callable[[TableBuilder], object]]


class FluentMarkdownBuilder:
    """Accumulates Markdown fragments into a single document."""

    def __init__(self):
        self._parts: List[str] = []

    def add_header(self, level: int, text: str) -> "FluentMarkdownBuilder":
        """Append a header line.

        Args:
            level: Header level, 1 for '#', 2 for '##' and so on

        Raises:
            ValueError: If level is lower than 1
        """
        if level < 1:
            raise ValueError(f"Header level must be at least 1, got {level}")
        self._parts.append(f"{'#' * level} {text}\n")
        return self

    def add_bold(self, text: str) -> "FluentMarkdownBuilder":
        self._parts.append(_bold(text))
        return self

    def add_italic(self, text: str) -> "FluentMarkdownBuilder":
        self._parts.append(_italic(text))
        return self

    def add_text(self, text: str) -> "FluentMarkdownBuilder":
        self._parts.append(text)
        return self

    def add_link(self, name: str, url: str) -> "FluentMarkdownBuilder":
        self._parts.append(_link(name, url))
        return self

    def new_line(self) -> "FluentMarkdownBuilder":
        self._parts.append("\n")
        return self

    def add_table(self, headers: Sequence[str], rows: TableRows) -> "FluentMarkdownBuilder":
        """Append a table.

        Args:
            headers: Column titles
            rows: Either a sequence of rows (each a sequence of cell strings)
                  or a callable that fills a TableBuilder

        Returns:
            The builder
        """
        self._parts.append("".join(f"{line}\n" for line in _format_table_header(headers)))
        if callable(rows):
            table_builder = TableBuilder()
            rows(table_builder)
            self._parts.append(table_builder.build())
        else:
            self._parts.append("".join(f"{_format_row(row)}\n" for row in rows))
        return self

    def build(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.build()
