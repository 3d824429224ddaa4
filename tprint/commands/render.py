"""
Render command for tprint CLI
"""
import os
import sys

import click

from tprint.commands.base import BaseCommand
from tprint.loaders.document import load_csv, load_yaml
from tprint.table.align import Alignment
from tprint.utils.exceptions import TPrintException
from tprint.utils.logger import get_logger

logger = get_logger(__name__)


class RenderCommand(BaseCommand):
    """Render a table document to stdout"""

    def render(self, path, doc_format=None, show_borders=None, show_header=None,
               spaces_left=None, spaces_between=None, align=None, delimiter=None):
        """Load a table document and print it

        Args:
            path: YAML or CSV file, '-' for stdin
            doc_format: 'yaml' or 'csv' (guessed from the extension if None)
            show_borders: Override the configured border setting
            show_header: Override the configured header setting
            spaces_left: Override the configured left spacing
            spaces_between: Override the configured column spacing
            align: Alignment for columns that do not set their own
            delimiter: CSV field separator (default: tab for .tsv, else comma)
        """
        try:
            doc_format = doc_format or self._guess_format(path)
            delimiter = delimiter or self._guess_delimiter(path)
            if len(delimiter) != 1:
                raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
            data_align = Alignment.parse(align) if align else self.config.data_align
            caption_align = Alignment.parse(align) if align else self.config.caption_align

            with self.create_table(sys.stdout, show_borders, show_header,
                                   spaces_left, spaces_between) as table:
                with click.open_file(path, 'r') as f:
                    if doc_format == 'csv':
                        load_csv(table, f, caption_align, data_align, delimiter)
                    else:
                        load_yaml(table, f, caption_align, data_align)

                logger.info(f"Rendering {path}: {len(table.columns)} columns, {table.row_count} rows")
                table.render()

        except (TPrintException, OSError, ValueError) as e:
            self.handle_error(e)

    @staticmethod
    def _guess_format(path: str) -> str:
        ext = os.path.splitext(path)[1].lower()
        if ext in ('.csv', '.tsv'):
            return 'csv'
        return 'yaml'

    @staticmethod
    def _guess_delimiter(path: str) -> str:
        if os.path.splitext(path)[1].lower() == '.tsv':
            return '\t'
        return ','
