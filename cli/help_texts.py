"""
Centralized Help Text Constants

This module provides all CLI help text constants for commands and options,
plus the mapping from docbundle errors to exit codes, so that every
subcommand reports failures the same way.
"""

import sys

import click

from docbundle.config.environment import EnvironmentVariables
from docbundle.errors import (
    BundleErrorInfo,
    BundleReadError,
    InvalidArgumentError,
    OutOfRangeError,
    OutputWriteError,
)


# Exit codes for different error types
class ExitCodes:
    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INVALID_CONFIGURATION = 3
    INVALID_ARGUMENT = 4
    FILE_NOT_FOUND = 6
    OUTPUT_ERROR = 7
    OUT_OF_RANGE = 9


# Command help texts
MAIN_HELP = (
    "docbundle - split multi-variant document bundles and select the "
    "variant to publish."
)
SPLIT_HELP = "Split a bundle file and write every variant to its own file."
SELECT_HELP = "Select one variant of a bundle and print it (or write it to a file)."
INSPECT_HELP = "Report the variant structure of bundle files."
PACK_HELP = "Pack several documents into a single bundle file."

# "\b" keeps click from rewrapping the list
ENVIRONMENT_HELP = "\b\nEnvironment variables:\n" + "\n".join(
    f"  {name}  {description}"
    for name, description in EnvironmentVariables.get_variable_documentation().items()
)

# Option help texts - shared
INPUT_HELP = "Path to the bundle file. Use '-' to read from stdin."
DELIMITER_HELP = (
    "Delimiter token separating variants (e.g. '<|RELATED_DOC_SEP-1a2b|>'). "
    "Overrides DOCBUNDLE_DELIMITER and configuration files."
)
POLICY_HELP = (
    "Selection policy:\n"
    "  first: the first variant in the file\n"
    "  last: the last variant in the file (default)\n"
    "  index(N): the variant at 0-based ordinal N"
)
CONFIG_HELP = "Path to a YAML configuration file."
LOG_LEVEL_HELP = "Logging level (default: from configuration, normally WARNING)."
FORCE_HELP = "Overwrite existing output files."

# Option help texts - per command
SELECT_OUTPUT_HELP = "Write the selected variant to this file instead of stdout."
SELECT_SIDECAR_HELP = "Also write <output>.meta.json describing the selection (requires --output)."
SPLIT_OUTPUT_DIR_HELP = "Directory for the variant files (default: output.dir from configuration)."
INSPECT_BATCH_HELP = "Glob pattern for batch inspection (e.g. 'posts/**/*.md')."
INSPECT_STRICT_HELP = "Treat warnings (empty or duplicate variants) as failures."
INSPECT_REPORT_HELP = "Write a JSON report to this path."
PACK_OUTPUT_HELP = "Path of the bundle file to create."

# Error messages
MISSING_INPUT_ERROR = "Error: --input or --batch is required"


def exit_code_for(error: Exception) -> int:
    """Map an exception to the CLI exit code for its category."""
    if isinstance(error, OutOfRangeError):
        return ExitCodes.OUT_OF_RANGE
    if isinstance(error, InvalidArgumentError):
        return ExitCodes.INVALID_ARGUMENT
    if isinstance(error, BundleReadError):
        return ExitCodes.FILE_NOT_FOUND
    if isinstance(error, OutputWriteError):
        return ExitCodes.OUTPUT_ERROR
    return ExitCodes.GENERAL_ERROR


def fail(error: Exception) -> None:
    """Print a user-facing error to stderr and exit with its code."""
    info = BundleErrorInfo.from_exception(error)
    click.echo(info.format_human(), err=True)
    sys.exit(exit_code_for(error))
