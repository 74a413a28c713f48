"""
Split Subcommand Module

Writes every variant of a bundle to its own file, named after the
bundle and the variant ordinal (post.md -> post.variant-0.md, ...).
"""

import logging
from typing import Optional

import click

from docbundle.errors import BundleError
from docbundle.splitter import split as split_bundle
from docbundle.writer import OutputWriter

from .help_texts import (
    SPLIT_HELP, INPUT_HELP, DELIMITER_HELP, CONFIG_HELP, LOG_LEVEL_HELP, FORCE_HELP,
    SPLIT_OUTPUT_DIR_HELP, fail,
)
from .shared_options import (
    input_option, delimiter_option, output_dir_option, force_option,
    config_option, log_level_option, load_command_config, read_bundle_input,
)


logger = logging.getLogger(__name__)


@click.command(name="split", help=SPLIT_HELP)
@input_option(help=INPUT_HELP)
@delimiter_option(help=DELIMITER_HELP)
@output_dir_option(help=SPLIT_OUTPUT_DIR_HELP)
@force_option(help=FORCE_HELP)
@config_option(help=CONFIG_HELP)
@log_level_option(help=LOG_LEVEL_HELP)
def split(
    input_path: str,
    delimiter: Optional[str],
    output_dir: Optional[str],
    force: bool,
    config_path: Optional[str],
    log_level: Optional[str],
):
    """Split a bundle into one file per variant.

    Examples:
        docbundle split -i post.md -d '<|RELATED_DOC_SEP-1a2b|>' --output-dir drafts/

        # Bundle from a pipe; files are named variant-0.md, variant-1.md, ...
        cat post.md | docbundle split -i - -d '<|RELATED_DOC_SEP-1a2b|>'
    """
    config = load_command_config(config_path, log_level, {
        'delimiter': delimiter,
        'output': {'dir': output_dir, 'force': force or None},
    })

    try:
        source = read_bundle_input(input_path)
        variants = split_bundle(source.text, config.require_delimiter())
        results = OutputWriter(force_overwrite=config.output.force).write_variants(
            variants,
            output_dir=config.output.dir,
            input_path=input_path if source.path is not None else None,
        )
    except BundleError as e:
        fail(e)

    click.echo(f"Split {input_path} into {len(results)} variant(s):")
    for result in results:
        click.echo(f"  {result.output_path}")
