"""
Config command for tprint CLI
"""
import click

from tprint.commands.base import BaseCommand
from tprint.utils.exceptions import ConfigurationException


class ConfigCommand(BaseCommand):
    """Show and update the configuration file"""

    def show(self):
        """Print the effective configuration"""
        click.echo(f"# {self.config.config_path}")
        click.echo(self.config.dump(), nl=False)

    def set(self, key, value):
        """Save a configuration value

        Args:
            key: Dotted key, e.g. table.spaces_between
            value: New value
        """
        try:
            self.config.set_value(key, value)
            click.echo(f"Set {key} = {value}")
        except (ConfigurationException, OSError) as e:
            self.handle_error(e)
