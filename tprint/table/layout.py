"""
Padding arithmetic for tprint tables

Pure functions shared by the borderless and bordered renderers.
"""
from typing import Iterable

from tprint.table.align import Alignment


def pad_cell(text: str, width: int, align: Alignment, lead: int = 0, trail: int = 0) -> str:
    """Pad a cell to the column width plus the surrounding spacing

    Center alignment gives the odd unit of slack to the right side.

    Args:
        text: Formatted cell text
        width: Column width (the column's max_width)
        align: Cell alignment
        lead: Spaces always emitted before the field
        trail: Spaces always emitted after the field

    Returns:
        Padded cell string of length lead + width + trail
    """
    left, right = pad_split(len(text), width, align, lead, trail)
    return ' ' * left + text + ' ' * right


def pad_split(length: int, width: int, align: Alignment, lead: int = 0, trail: int = 0):
    """Compute the (left, right) space counts around a cell of a given length"""
    slack = width - length

    if align is Alignment.LEFT:
        shift = 0
    elif align is Alignment.CENTER:
        shift = slack // 2
    else:
        shift = slack

    return lead + shift, slack - shift + trail


def spacing_for(position: int, spaces_left: int, spaces_between: int) -> int:
    """Spacing budget before the column at a given display position"""
    return spaces_left if position == 0 else spaces_between


def full_width(widths: Iterable[int], spaces_between: int) -> int:
    """Width of a bordered rule line

    Room for every column's field and spacing plus the inner separators.
    """
    widths = list(widths)
    return sum(w + spaces_between for w in widths) + len(widths) - 1


def rule_line(width: int, spaces_left: int) -> str:
    """Build an '=' rule line indented past the left border

    A table without columns has width -1 and gets a blank line of
    spaces_left spaces.
    """
    if width < 0:
        return ' ' * spaces_left
    return ' ' * (spaces_left + 1) + '=' * width
