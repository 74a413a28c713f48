"""
CLI Package for docbundle

This package provides a modular CLI architecture using Click groups and subcommands.
Each subcommand is implemented in its own module for better maintainability and testing.

The main entry point is the main() function which creates a Click group and registers
all available subcommands. The cli() function serves as the console script entry point
for setup.py.
"""

import os
import click
from dotenv import load_dotenv

from docbundle import __version__

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')

from .split import split
from .select import select
from .inspect import inspect
from .pack import pack
from .help_texts import MAIN_HELP, ENVIRONMENT_HELP


@click.group(help=MAIN_HELP, epilog=ENVIRONMENT_HELP)
@click.version_option(version=__version__, prog_name='docbundle')
def main():
    """docbundle CLI - split bundles and select the variant to publish."""
    pass


# Register subcommands
main.add_command(split)
main.add_command(select)
main.add_command(inspect)
main.add_command(pack)


# Entry point for setup.py console script
def cli():
    """Console script entry point.

    This function is called when the docbundle command is executed
    from the command line after installation via pip.
    """
    main()
