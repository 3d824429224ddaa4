"""
Table renderers for tprint

Two mutually exclusive strategies: plain spaced columns and '='-ruled,
'|'-framed boxes. Both write whole lines to a caller-owned text stream.
"""
from typing import List, Sequence, TextIO

from tprint.table.column import Column
from tprint.table.layout import full_width, pad_cell, rule_line, spacing_for
from tprint.utils.exceptions import OutputException
from tprint.utils.logger import get_logger

logger = get_logger(__name__)


def write_line(output: TextIO, line: str):
    """Write one newline-terminated line to the sink

    Raises:
        OutputException: If the sink is closed or the write fails
    """
    try:
        output.write(line + '\n')
    except (OSError, ValueError) as e:
        raise OutputException(f"Failed to write table output: {e}") from e


def count_rows(columns: Sequence[Column]) -> int:
    """Number of rows in the longest column"""
    rows = 0
    for col in columns:
        if rows < len(col):
            rows = len(col)
    return rows


def render_borderless(output: TextIO, columns: Sequence[Column], show_header: bool,
                      spaces_left: int, spaces_between: int):
    """Render columns separated by spaces only

    Args:
        output: Writable text stream
        columns: Columns in display order
        show_header: Emit a caption line first
        spaces_left: Spaces before the first column
        spaces_between: Spaces before every other column
    """
    rows = 0

    if show_header:
        cells: List[str] = []
        for position, col in enumerate(columns):
            pad = spacing_for(position, spaces_left, spaces_between)
            cells.append(pad_cell(col.caption, col.max_width, col.caption_align, lead=pad))
            if rows < len(col):
                rows = len(col)
        write_line(output, ''.join(cells))
    else:
        rows = count_rows(columns)

    for row in range(rows):
        cells = []
        for position, col in enumerate(columns):
            pad = spacing_for(position, spaces_left, spaces_between)
            cells.append(pad_cell(col.cell(row), col.max_width, col.data_align, lead=pad))
        write_line(output, ''.join(cells))

    logger.debug(f"Rendered borderless table: {len(columns)} columns, {rows} rows")


def _framed_row(texts: Sequence[str], columns: Sequence[Column], aligns, spaces_left: int,
                spaces_between: int) -> str:
    half = spaces_between // 2
    line = ' ' * spaces_left
    for text, col, align in zip(texts, columns, aligns):
        line += '|' + pad_cell(text, col.max_width, align, lead=half, trail=half)
    return line + '|'


def render_bordered(output: TextIO, columns: Sequence[Column], show_header: bool,
                    spaces_left: int, spaces_between: int):
    """Render columns framed by '|' between '=' rule lines

    The top rule is only drawn above a header row.

    Args:
        output: Writable text stream
        columns: Columns in display order
        show_header: Emit the top rule and a caption row
        spaces_left: Spaces before the left border
        spaces_between: Spacing inside each cell, split evenly on both sides
    """
    rule = rule_line(full_width((col.max_width for col in columns), spaces_between), spaces_left)
    rows = count_rows(columns)

    if show_header:
        write_line(output, rule)
        write_line(output, _framed_row(
            [col.caption for col in columns],
            columns,
            [col.caption_align for col in columns],
            spaces_left,
            spaces_between
        ))

    write_line(output, rule)

    data_aligns = [col.data_align for col in columns]
    for row in range(rows):
        write_line(output, _framed_row(
            [col.cell(row) for col in columns],
            columns,
            data_aligns,
            spaces_left,
            spaces_between
        ))

    write_line(output, rule)

    logger.debug(f"Rendered bordered table: {len(columns)} columns, {rows} rows")
