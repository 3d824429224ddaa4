"""
Column model for tprint tables
"""
from typing import List, Optional

from tprint.table.align import Alignment


class Column:
    """A vertical slot of formatted cells with its running maximum width"""

    def __init__(self, caption: Optional[str], caption_align: Alignment, data_align: Alignment):
        """Initialize column

        Args:
            caption: Header label, None when the table hides its header
            caption_align: Alignment of the caption
            data_align: Alignment of data cells
        """
        self.caption = caption
        self.caption_align = caption_align
        self.data_align = data_align
        self.cells: List[str] = []
        self.max_width = len(caption) if caption is not None else 0

    def append(self, text: str):
        """Append a formatted cell and widen the column if needed"""
        if len(text) > self.max_width:
            self.max_width = len(text)
        self.cells.append(text)

    def cell(self, row: int) -> str:
        """Get the cell at a row index, empty for rows past the end"""
        if row < len(self.cells):
            return self.cells[row]
        return ''

    def clear(self):
        """Release all cells"""
        self.cells.clear()

    def __len__(self) -> int:
        return len(self.cells)

    def __repr__(self) -> str:
        return (
            f"Column(caption={self.caption!r}, rows={len(self.cells)}, "
            f"max_width={self.max_width})"
        )
