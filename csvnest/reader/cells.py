from __future__ import annotations

"""Quote-aware CSV line splitting.

Rules:
- ``,`` outside double quotes separates cells
- ``"`` toggles the quoted state; ``""`` inside quotes is one literal ``"``
- the last cell of a line is always emitted, even without a trailing ``,``

Parsing is strictly line oriented. A quoted cell containing a line break is
split at that break like any other line; the pieces are not merged back.
"""

__all__ = [
    "DELIMITER",
    "QUOTE",
    "parse_rows",
    "split_cells",
    "split_lines",
]

DELIMITER = ","
QUOTE = '"'


def split_cells(line: str) -> list[str]:
    """Split one line of CSV text into cells.

    Never raises. An unterminated quote keeps everything up to the end of the
    line in the current cell.

    >>> split_cells('a,"b,c","d""e"')
    ['a', 'b,c', 'd"e']
    """
    cells: list[str] = []
    buf: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        c = line[i]
        if c == QUOTE:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE:
                # "" -> "
                buf.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif c == DELIMITER and not in_quotes:
            cells.append("".join(buf))
            buf.clear()
        else:
            buf.append(c)
        i += 1
    cells.append("".join(buf))  # 行末のセル
    return cells


def split_lines(text: str) -> list[str]:
    """Split text into physical lines on ``\\n``, ``\\r\\n`` or ``\\r``.

    A terminator at the very end does not produce an extra empty line.
    """
    if not text:
        return []
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_rows(text: str) -> list[list[str]]:
    """Split raw CSV text into rows of cells, one row per physical line."""
    return [split_cells(line) for line in split_lines(text)]
