"""
Base command class for tprint CLI
"""
import sys
import click

from tprint.config import TPrintConfig
from tprint.table.table import Table


class BaseCommand:
    """Base class for all CLI commands"""

    def __init__(self, config: TPrintConfig):
        """Initialize command

        Args:
            config: TPrintConfig instance
        """
        self.config = config

    def create_table(self, output, show_borders=None, show_header=None,
                     spaces_left=None, spaces_between=None) -> Table:
        """Create a table, filling unset options from the configuration"""
        table = Table(
            output,
            show_borders=self.config.show_borders if show_borders is None else show_borders,
            show_header=self.config.show_header if show_header is None else show_header,
            spaces_left=self.config.spaces_left if spaces_left is None else spaces_left,
            spaces_between=self.config.spaces_between if spaces_between is None else spaces_between
        )
        for kind, template in self.config.formats.items():
            table.set_format(kind, template)
        return table

    def handle_error(self, error, exit_code: int = 1):
        """Handle command errors

        Args:
            error: Error object or message
            exit_code: Exit code
        """
        error_msg = str(error)
        click.echo(f"Error: {error_msg}", err=True)
        sys.exit(exit_code)
