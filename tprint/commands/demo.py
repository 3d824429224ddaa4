"""
Demo command for tprint CLI
"""
import sys

from tprint.commands.base import BaseCommand
from tprint.table.align import Alignment
from tprint.utils.exceptions import TPrintException


class DemoCommand(BaseCommand):
    """Render a built-in sample table"""

    ROWS = 20

    def run(self, show_borders=True):
        """Print five columns of growing numbers

        Appends also target column indexes past the last column, which the
        table ignores.

        Args:
            show_borders: Draw borders around the table
        """
        try:
            with self.create_table(sys.stdout, show_borders=show_borders,
                                   show_header=True) as table:
                fill_sample(table, self.ROWS)
                table.render()
        except TPrintException as e:
            self.handle_error(e)


def fill_sample(table, rows: int):
    """Add the sample columns and data to a table"""
    d1, d2, d3 = 40.488, 112.908, 3.23
    i1, i2 = 532, 3

    table.add_column("", Alignment.CENTER, Alignment.RIGHT)
    table.add_column("Align left", Alignment.CENTER, Alignment.LEFT)
    table.add_column("Align right", Alignment.CENTER, Alignment.RIGHT)
    table.add_column("1", Alignment.CENTER, Alignment.LEFT)
    table.add_column("Align center", Alignment.CENTER, Alignment.CENTER)

    for _ in range(rows):
        table.append_string(0, "test")
        d1 *= 2
        table.append_double(1, d1)
        d2 *= 3
        table.append_double(2, d2)

        i1 *= 2
        table.append_uint64(3, i1)

        i2 *= 3
        table.append_uint64(4, i2)

        table.append_string(5, "test2")
        d3 *= 3
        table.append_double(6, d3)
        table.append_string(7, "test3")
