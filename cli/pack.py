"""
Pack Subcommand Module

Builds a bundle from separate documents, in the order given. When no
delimiter is configured a fresh one is generated and reported, since
whoever splits the bundle later needs the exact same token.
"""

import logging
from typing import Optional, Tuple

import click

from docbundle.errors import BundleError
from docbundle.reader import BundleReader
from docbundle.splitter import join, make_delimiter
from docbundle.writer import OutputWriter

from .help_texts import (
    PACK_HELP, DELIMITER_HELP, CONFIG_HELP, LOG_LEVEL_HELP, FORCE_HELP,
    PACK_OUTPUT_HELP, fail,
)
from .shared_options import (
    delimiter_option, force_option, config_option, log_level_option,
    load_command_config,
)


logger = logging.getLogger(__name__)


@click.command(name="pack", help=PACK_HELP)
@click.argument("documents", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option("--output", "-o", "output_path", required=True, type=click.Path(dir_okay=False), help=PACK_OUTPUT_HELP)
@delimiter_option(help=DELIMITER_HELP)
@force_option(help=FORCE_HELP)
@config_option(help=CONFIG_HELP)
@log_level_option(help=LOG_LEVEL_HELP)
def pack(
    documents: Tuple[str, ...],
    output_path: str,
    delimiter: Optional[str],
    force: bool,
    config_path: Optional[str],
    log_level: Optional[str],
):
    """Pack documents into a bundle.

    Examples:
        docbundle pack original.md revised.md -o post.md -d '<|RELATED_DOC_SEP-1a2b|>'
    """
    config = load_command_config(config_path, log_level, {
        'delimiter': delimiter,
        'output': {'force': force or None},
    })

    token = config.delimiter
    if not token:
        token = make_delimiter()
        click.echo(f"Generated delimiter: {token}", err=True)

    try:
        reader = BundleReader()
        texts = [reader.read(path).text for path in documents]
        bundle = join(texts, token)
        result = OutputWriter(force_overwrite=config.output.force).write(
            text=bundle,
            output_path=output_path,
        )
    except BundleError as e:
        fail(e)

    click.echo(f"✅ Packed {len(texts)} document(s) into {result.output_path}")
