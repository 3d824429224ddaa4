"""
Table controller for tprint
"""
import io
from typing import Dict, List, Optional, TextIO

from tprint.formatters.values import (
    DEFAULT_TEMPLATES,
    INT32_MAX,
    INT32_MIN,
    format_value,
    validate_template,
)
from tprint.table.align import Alignment, ValueKind
from tprint.table.column import Column
from tprint.table.renderer import render_bordered, render_borderless
from tprint.utils.debug import fatal
from tprint.utils.exceptions import FormatError, TableDestroyedException
from tprint.utils.logger import get_logger

logger = get_logger(__name__)


class Table:
    """Buffered table of typed values rendered as aligned text

    Columns are added first, then cells are appended column by column in any
    order. Nothing is written until render() is called.

    Example:
        table = Table(sys.stdout, show_borders=True, show_header=True,
                      spaces_left=0, spaces_between=2)
        name = table.add_column("Name", Alignment.CENTER, Alignment.LEFT)
        size = table.add_column("Size", Alignment.CENTER, Alignment.RIGHT)
        table.append_string(name, "alpha")
        table.append_uint64(size, 1024)
        table.render()
        table.destroy()
    """

    def __init__(self, output: TextIO, show_borders: bool = False, show_header: bool = True,
                 spaces_left: int = 0, spaces_between: int = 2):
        """Initialize table

        Args:
            output: Writable text stream, owned by the caller
            show_borders: Draw '=' rules and '|' separators
            show_header: Display the caption row
            spaces_left: Spaces on the left side of the table
            spaces_between: Spaces between columns

        Raises:
            ValueError: If a spacing value is negative
        """
        if spaces_left < 0 or spaces_between < 0:
            raise ValueError("Table spacing must not be negative")

        self.output = output
        self.show_borders = show_borders
        self.show_header = show_header
        self.spaces_left = spaces_left
        self.spaces_between = spaces_between

        self.columns: List[Column] = []
        self.format_templates: Dict[ValueKind, str] = dict(DEFAULT_TEMPLATES)
        self._destroyed = False

    def _check_alive(self):
        if self._destroyed:
            raise TableDestroyedException("Table has already been destroyed")

    @property
    def row_count(self) -> int:
        """Number of rows in the longest column"""
        return max((len(col) for col in self.columns), default=0)

    def add_column(self, caption: Optional[str], caption_align=Alignment.LEFT,
                   data_align=Alignment.LEFT) -> int:
        """Append a column to the table

        Args:
            caption: Column label, can be None
            caption_align: How to align the caption
            data_align: How to align data in the column

        Returns:
            Zero-based column index for the append methods
        """
        self._check_alive()

        if self.show_header:
            caption = caption if caption is not None else ''
        else:
            caption = None

        self.columns.append(Column(
            caption,
            Alignment.parse(caption_align),
            Alignment.parse(data_align)
        ))
        logger.debug(f"Added column {len(self.columns) - 1}: {caption!r}")
        return len(self.columns) - 1

    def _column(self, index: int) -> Optional[Column]:
        if isinstance(index, int) and 0 <= index < len(self.columns):
            return self.columns[index]
        return None

    def set_format(self, kind, template: str):
        """Set the format template for a value kind

        Already appended cells keep their text.

        Args:
            kind: ValueKind.INT32, ValueKind.UINT64 or ValueKind.DOUBLE
            template: printf-style template with one conversion

        Raises:
            FormatError: For the string kind or a template that does not fit
        """
        self._check_alive()
        kind = ValueKind.parse(kind)
        if kind is ValueKind.STRING:
            raise FormatError("String values are passed through and have no format override")
        validate_template(template, kind)
        self.format_templates[kind] = template

    def append_cell(self, column: int, text: str):
        """Append an already formatted cell

        Unknown column indexes are ignored.
        """
        self._check_alive()
        col = self._column(column)
        if col is None:
            logger.debug(f"Ignoring cell for unknown column {column!r}")
            return
        col.append(text)

    def _append_value(self, column: int, value, kind: ValueKind):
        self._check_alive()
        col = self._column(column)
        if col is None:
            logger.debug(f"Ignoring {kind.value} value for unknown column {column!r}")
            return
        col.append(format_value(self.format_templates[kind], value, kind))

    def append_int32(self, column: int, value: int):
        self._append_value(column, value, ValueKind.INT32)

    def append_uint64(self, column: int, value: int):
        self._append_value(column, value, ValueKind.UINT64)

    def append_string(self, column: int, value: str):
        self._append_value(column, value, ValueKind.STRING)

    def append_double(self, column: int, value: float):
        self._append_value(column, value, ValueKind.DOUBLE)

    def append_row(self, *values):
        """Append one value to every column

        The value kind follows the Python type: str, float, int32-sized int,
        otherwise uint64. Supplying a different number of values than there
        are columns terminates the process.
        """
        self._check_alive()
        if len(values) != len(self.columns):
            fatal(f"row has {len(values)} values but table has {len(self.columns)} columns")

        for index, value in enumerate(values):
            if isinstance(value, str):
                self.append_string(index, value)
            elif isinstance(value, float):
                self.append_double(index, value)
            elif isinstance(value, int) and not isinstance(value, bool) and INT32_MIN <= value <= INT32_MAX:
                self.append_int32(index, value)
            else:
                self.append_uint64(index, value)

    def render(self):
        """Write the table to the output stream

        Raises:
            OutputException: If writing to the output fails
        """
        self._check_alive()
        self._render_to(self.output)

    def render_to_string(self) -> str:
        """Render the table into a string instead of the output stream"""
        self._check_alive()
        buffer = io.StringIO()
        self._render_to(buffer)
        return buffer.getvalue()

    def _render_to(self, output: TextIO):
        strategy = render_bordered if self.show_borders else render_borderless
        strategy(output, self.columns, self.show_header, self.spaces_left, self.spaces_between)

    def destroy(self):
        """Release all columns and their cells

        The table cannot be used afterwards.
        """
        self._check_alive()
        for col in self.columns:
            col.clear()
        self.columns.clear()
        self._destroyed = True

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        if not self._destroyed:
            self.destroy()
