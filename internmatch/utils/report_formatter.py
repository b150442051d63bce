"""
Plain-text report formatting.

Builds the aligned tables and wrapped keyword lists printed by the CLI.
"""

import textwrap
from typing import Any, Iterable, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        return f"{value:{self.align}{self.width}}"


class TableFormatter:
    """
    Builder for formatted text reports with aligned columns.

    Every add_* method returns self so a report reads top to bottom:

        report = (
            TableFormatter([Column("Keyword", 20), Column("Count", 6, ">")])
            .add_section_header("Keywords")
            .add_table_header()
            .add_separator()
            .add_row(["python", 3])
            .render()
        )
    """

    def __init__(self, columns: List[Column] = None, total_width: int = 72):
        """
        Args:
            columns: Column definitions (may be empty for list-only reports)
            total_width: Total report width for separators and wrapping
        """
        self.columns = columns or []
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        self.lines.append(" ".join(col.format_value(val) for col, val in zip(self.columns, values)))
        return self

    def add_labeled_list(
        self, label: str, items: Iterable[str], empty_text: str = "(none)"
    ) -> "TableFormatter":
        """
        Add a comma-separated list under a label, wrapped to the report width.

        Continuation lines are indented to line up under the first item.
        """
        items = list(items)
        prefix = f"{label}: "
        body = ", ".join(items) if items else empty_text
        wrapped = textwrap.wrap(
            body,
            width=self.total_width,
            initial_indent=prefix,
            subsequent_indent=" " * len(prefix),
            break_on_hyphens=False,
        )
        self.lines.extend(wrapped or [prefix.rstrip()])
        return self

    def add_bullets(self, items: Iterable[str], bullet: str = "-") -> "TableFormatter":
        """Add one wrapped bullet line per item."""
        for item in items:
            self.lines.extend(
                textwrap.wrap(
                    item,
                    width=self.total_width,
                    initial_indent=f"{bullet} ",
                    subsequent_indent=" " * (len(bullet) + 1),
                )
            )
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_percentage(count: int, total: int, decimal_places: int = 1) -> str:
    """
    Format count as percentage of total.

    Returns:
        Formatted percentage string (e.g., "75.0%"), "0.0%" when total is 0
    """
    if total == 0:
        return f"{0:.{decimal_places}f}%"
    percent = (count / total) * 100
    return f"{percent:.{decimal_places}f}%"
