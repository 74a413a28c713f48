"""
Select Subcommand Module

Splits a bundle and hands exactly one variant to the publishing step,
either on stdout or as a file. The variant is emitted unchanged.
"""

import logging
import time
from typing import Optional

import click

from docbundle.errors import BundleError
from docbundle.schemas.selection_v1 import SelectionV1
from docbundle.selector import parse_policy, resolve_index, select as select_variant
from docbundle.splitter import split
from docbundle.utils.logging_config import logging_config
from docbundle.writer import OutputWriter

from .help_texts import (
    SELECT_HELP, INPUT_HELP, DELIMITER_HELP, POLICY_HELP, CONFIG_HELP,
    LOG_LEVEL_HELP, FORCE_HELP, SELECT_OUTPUT_HELP, SELECT_SIDECAR_HELP, fail,
)
from .shared_options import (
    input_option, delimiter_option, policy_option, force_option,
    config_option, log_level_option, load_command_config, read_bundle_input,
)


logger = logging.getLogger(__name__)


@click.command(name="select", help=SELECT_HELP)
@input_option(help=INPUT_HELP)
@delimiter_option(help=DELIMITER_HELP)
@policy_option(help=POLICY_HELP)
@click.option("--output", "-o", "output_path", default=None, type=click.Path(dir_okay=False), help=SELECT_OUTPUT_HELP)
@click.option("--sidecar/--no-sidecar", default=None, help=SELECT_SIDECAR_HELP)
@force_option(help=FORCE_HELP)
@config_option(help=CONFIG_HELP)
@log_level_option(help=LOG_LEVEL_HELP)
def select(
    input_path: str,
    delimiter: Optional[str],
    policy: Optional[str],
    output_path: Optional[str],
    sidecar: Optional[bool],
    force: bool,
    config_path: Optional[str],
    log_level: Optional[str],
):
    """Select one variant of a bundle.

    Examples:
        # Print the most recent variant
        docbundle select -i post.md -d '<|RELATED_DOC_SEP-1a2b|>'

        # Publish the original draft to a file with selection metadata
        docbundle select -i post.md -p first -o out/post.md --sidecar
    """
    if sidecar and output_path is None:
        raise click.UsageError("--sidecar requires --output; metadata is not written to stdout")

    config = load_command_config(config_path, log_level, {
        'delimiter': delimiter,
        'policy': policy,
        'output': {'sidecar': sidecar, 'force': force or None},
    })

    start = time.time()
    try:
        source = read_bundle_input(input_path)
        text = source.text
        source_file = str(source.path) if source.path is not None else None

        variants = split(text, config.require_delimiter())
        selection_policy = parse_policy(config.policy)
        ordinal = resolve_index(len(variants), selection_policy)
        chosen = select_variant(variants, selection_policy)

        logger.info(f"Selected variant {ordinal} of {len(variants)} using policy {selection_policy}")

        if output_path is None:
            # Bytes, so neither ANSI sequences nor CRLF are rewritten on the way out
            stdout = click.get_binary_stream("stdout")
            stdout.write(chosen.encode("utf-8"))
            stdout.flush()
        else:
            metadata = SelectionV1(
                source_file=source_file,
                policy=str(selection_policy),
                variant_index=ordinal,
                variant_count=len(variants),
                character_count=len(chosen),
            )
            result = OutputWriter(force_overwrite=config.output.force).write(
                text=chosen,
                output_path=output_path,
                metadata=metadata,
                generate_sidecar=config.output.sidecar,
            )
            click.echo(f"✅ Variant {ordinal} of {len(variants)} written to {result.output_path}", err=True)
            if result.metadata_path:
                click.echo(f"   Metadata: {result.metadata_path}", err=True)
    except BundleError as e:
        fail(e)

    logging_config.log_operation_timing("Selection", time.time() - start)
