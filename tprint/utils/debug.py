"""
Unrecoverable error exits for tprint
"""
import sys

import click


def fatal(message: str, exit_code: int = 1):
    """Report a programmer error and terminate the process

    Args:
        message: Error description
        exit_code: Process exit status
    """
    click.echo(f"fatal: {message}", err=True)
    sys.stdout.flush()
    sys.exit(exit_code)
