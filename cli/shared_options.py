"""
Shared CLI Option Decorators

This module provides reusable Click decorators for common CLI options,
ensuring consistency across subcommands, and the configuration loading
step every subcommand runs first.

Options that are not given on the command line default to None so that
configuration files and environment variables can supply them.
"""

import logging
import sys
from typing import Any, Dict, Optional

import click

from docbundle.config.manager import ConfigurationManager
from docbundle.config.environment import EnvironmentVariables
from docbundle.config.schema import BundleConfig
from docbundle.reader import BundleReader, BundleSource
from docbundle.utils.logging_config import logging_config

from .help_texts import ExitCodes


logger = logging.getLogger(__name__)


def input_option(help=None, required=True):
    """Decorator for the bundle input option."""
    def decorator(f):
        return click.option(
            '--input', '-i',
            'input_path',
            required=required,
            type=click.Path(dir_okay=False, allow_dash=True),
            help=help or 'Path to the bundle file'
        )(f)
    return decorator


def delimiter_option(help=None):
    """Decorator for the delimiter option."""
    def decorator(f):
        return click.option(
            '--delimiter', '-d',
            default=None,
            help=help or 'Delimiter token separating variants'
        )(f)
    return decorator


def policy_option(help=None):
    """Decorator for the selection policy option."""
    def decorator(f):
        return click.option(
            '--policy', '-p',
            default=None,
            help=help or 'Selection policy (first, last, index(N))'
        )(f)
    return decorator


def output_dir_option(help=None):
    """Decorator for output directory options."""
    def decorator(f):
        return click.option(
            '--output-dir',
            default=None,
            type=click.Path(file_okay=False),
            help=help or 'Directory for output files (overrides config)'
        )(f)
    return decorator


def force_option(help=None):
    """Decorator for the overwrite flag."""
    def decorator(f):
        return click.option(
            '--force', '-f',
            is_flag=True,
            default=False,
            help=help or 'Overwrite existing files'
        )(f)
    return decorator


def config_option(help=None):
    """Decorator for configuration file options."""
    def decorator(f):
        return click.option(
            '--config',
            'config_path',
            default=None,
            type=click.Path(exists=True, dir_okay=False),
            help=help or 'Path to configuration file'
        )(f)
    return decorator


def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default=None,
            type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
            help=help or 'Logging level'
        )(f)
    return decorator


def load_command_config(
    config_path: Optional[str],
    log_level: Optional[str],
    overrides: Optional[Dict[str, Any]] = None,
) -> BundleConfig:
    """Load layered configuration for a subcommand and configure logging.

    Exits with INVALID_CONFIGURATION if any configuration source is invalid.
    """
    cli_overrides = dict(overrides or {})
    cli_overrides['log_level'] = log_level.lower() if log_level else None

    try:
        config = ConfigurationManager().load_configuration(
            config_file=config_path,
            cli_overrides=cli_overrides,
        )
    except ValueError as e:
        click.echo(f"Configuration Error: {e}", err=True)
        sys.exit(ExitCodes.INVALID_CONFIGURATION)

    logging_config.configure_logging(
        level=config.log_level,
        log_file=config.log_file,
        force=True,
    )
    logging_config.log_configuration_details({
        'delimiter': config.delimiter,
        'policy': config.policy,
        'output_dir': config.output.dir,
        'sidecar': config.output.sidecar,
        'force': config.output.force,
    })

    env_warnings, _ = EnvironmentVariables.validate_environment_setup()
    for warning in env_warnings:
        logger.debug(warning)

    return config


def read_bundle_input(input_path: str) -> BundleSource:
    """Read the bundle named by --input; '-' means standard input.

    Standard input is read as bytes and decoded strictly, so CRLF line
    endings reach the splitter unchanged.

    Raises:
        BundleReadError: If the input cannot be read or is not UTF-8
    """
    reader = BundleReader()
    if input_path == '-':
        return reader.read_bytes(click.get_binary_stream('stdin').read())
    return reader.read(input_path)
