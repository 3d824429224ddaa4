#!/usr/bin/env python3
"""
tprint CLI - Main entry point
"""
import click

from tprint.commands.config import ConfigCommand
from tprint.commands.demo import DemoCommand
from tprint.commands.render import RenderCommand
from tprint.config import TPrintConfig
from tprint.utils.logger import setup_logger


# Global context
pass_config = click.make_pass_decorator(dict, ensure=True)


@click.group()
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), help='Configuration file')
@click.option('--log-level', help='Logging level (DEBUG, INFO, WARNING, ...)')
@click.pass_context
def cli(ctx, config_path, log_level):
    """tprint - Render typed tabular data as aligned text"""
    config = TPrintConfig(config_path)

    setup_logger(
        name='tprint',
        log_file=config.log_file,
        log_level=log_level or config.log_level
    )

    ctx.obj = {
        'config': config,
        'render_command': RenderCommand(config),
        'demo_command': DemoCommand(config),
        'config_command': ConfigCommand(config)
    }


@cli.command()
@click.argument('path', type=click.Path(allow_dash=True))
@click.option('--format', 'doc_format', type=click.Choice(['yaml', 'csv']), help='Document format (default: from extension)')
@click.option('--borders/--no-borders', default=None, help='Draw table borders')
@click.option('--header/--no-header', default=None, help='Show the caption row')
@click.option('--spaces-left', type=click.IntRange(min=0), help='Spaces before the table')
@click.option('--spaces-between', type=click.IntRange(min=0), help='Spaces between columns')
@click.option('--align', type=click.Choice(['left', 'center', 'right']), help='Default column alignment')
@click.option('--delimiter', help='CSV field separator (default: tab for .tsv files, else comma)')
@pass_config
def render(ctx, path, doc_format, borders, header, spaces_left, spaces_between, align, delimiter):
    """Render a YAML or CSV table document"""
    ctx['render_command'].render(
        path,
        doc_format,
        borders,
        header,
        spaces_left,
        spaces_between,
        align,
        delimiter
    )


@cli.command()
@click.option('--borders/--no-borders', default=True, help='Draw table borders')
@pass_config
def demo(ctx, borders):
    """Render a sample table"""
    ctx['demo_command'].run(borders)


# Config Command

@cli.group()
def config():
    """Manage tprint configuration"""
    pass


@config.command()
@pass_config
def show(ctx):
    """Show the effective configuration"""
    ctx['config_command'].show()


@config.command(name='set')
@click.argument('key')
@click.argument('value')
@pass_config
def set_value(ctx, key, value):
    """Set a configuration value (e.g. table.spaces_between 4)"""
    ctx['config_command'].set(key, value)


if __name__ == '__main__':
    cli()
