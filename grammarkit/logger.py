"""Text rendering of sets, productions and the tables built by the algorithms."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence

from grammarkit.tables import EPSILON, ParseTable, TableObject


def set_to_string(string_set: Iterable[str]) -> str:
    """Render a set as ``{a, b}`` in sorted order, showing epsilon as empty."""
    items = ("" if item == EPSILON else item for item in sorted(string_set))
    return "{" + ", ".join(items) + "}"


def split_string(text: str) -> list[str]:
    """Split on whitespace and strip backticks; never returns an empty list."""
    return [token.replace("`", "") for token in text.split()] or [""]


def _separator(sizes: Sequence[int]) -> str:
    return "".join("|" + "-" * (size + 3) for size in sizes) + "|"


def _cell(text: str, width: int) -> str:
    return "| " + text.ljust(width) + "  "


def format_table(table: ParseTable) -> str:
    """Render an LL(1) parse table as an ASCII grid, rows and columns sorted."""
    symbols = sorted(table.symbols)
    sizes = [max((len(variable) for variable in table.variables), default=0)]
    for symbol in symbols:
        width = len(symbol)
        for row in table.table.values():
            cell = row.get(symbol, "")
            size = 0 if cell == EPSILON else len(cell)
            if size > width:
                width = size
        sizes.append(width)

    lines = [
        " " * (sizes[0] + 4)
        + "".join(_cell(symbol, width) for symbol, width in zip(symbols, sizes[1:]))
        + "|",
        _separator(sizes),
    ]
    for variable, row in sorted(table.table.items()):
        cells = [_cell(variable, sizes[0])]
        for symbol, width in zip(symbols, sizes[1:]):
            value = row.get(symbol, "")
            cells.append(_cell("" if value == EPSILON else value, width))
        lines.append("".join(cells) + "|")
    lines.append(_separator(sizes))
    return "\n".join(lines)


def format_acceptance_table(table: Sequence[Sequence[TableObject]]) -> str:
    """Render a CYK table with the longest substrings on top."""
    size = len(table)
    rendered = [[set_to_string(cell.variables) for cell in row] for row in table]
    widths = [
        max((len(rendered[i][j]) for i in range(size - j)), default=0)
        for j in range(size)
    ]
    lines = []
    for row in reversed(rendered):
        lines.append(
            "|" + "".join(f" {text.ljust(width)}  |" for text, width in zip(row, widths))
        )
    return "\n".join(lines)


def format_productions(productions: Mapping[str, Iterable[str]]) -> str:
    """Render productions as ``P = { ... }``, one rule per line."""
    lines = ["P = {"]
    for head, bodies in sorted(productions.items()):
        lines.extend(f"    {head} -> `{body}`" for body in sorted(bodies))
    lines.append("}")
    return "\n".join(lines)


def format_json(table: ParseTable) -> str:
    """Render FIRST, FOLLOW and the LL(1) table as indented JSON."""
    document = {
        "first": {key: sorted(values) for key, values in table.first_set.items()},
        "follow": {key: sorted(values) for key, values in table.follow_set.items()},
        "ll1_table": {key: dict(row) for key, row in table.table.items()},
    }
    return json.dumps(document, indent=4, sort_keys=True, ensure_ascii=False)