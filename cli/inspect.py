"""
Inspect Subcommand Module

Reports how bundles break down into variants and which variant the
configured policy would publish. Supports batch inspection with glob
patterns and JSON report generation.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from docbundle.errors import BundleError, OutputWriteError
from docbundle.inspection.engine import BundleInspector

from .help_texts import (
    INSPECT_HELP, DELIMITER_HELP, POLICY_HELP, CONFIG_HELP, LOG_LEVEL_HELP,
    INSPECT_BATCH_HELP, INSPECT_STRICT_HELP, INSPECT_REPORT_HELP,
    MISSING_INPUT_ERROR, ExitCodes, fail,
)
from .shared_options import (
    input_option, delimiter_option, policy_option, config_option,
    log_level_option, load_command_config,
)


logger = logging.getLogger(__name__)


@click.command(name="inspect", help=INSPECT_HELP)
@input_option(help="Path to a bundle file", required=False)
@click.option("--batch", "-b", type=str, help=INSPECT_BATCH_HELP)
@delimiter_option(help=DELIMITER_HELP)
@policy_option(help=POLICY_HELP)
@click.option("--strict", is_flag=True, help=INSPECT_STRICT_HELP)
@click.option("--report", "-r", "report_path", type=click.Path(dir_okay=False), help=INSPECT_REPORT_HELP)
@config_option(help=CONFIG_HELP)
@log_level_option(help=LOG_LEVEL_HELP)
def inspect(
    input_path: Optional[str],
    batch: Optional[str],
    delimiter: Optional[str],
    policy: Optional[str],
    strict: bool,
    report_path: Optional[str],
    config_path: Optional[str],
    log_level: Optional[str],
):
    """Inspect bundle files.

    Examples:
        # Inspect one bundle
        docbundle inspect -i post.md -d '<|RELATED_DOC_SEP-1a2b|>'

        # Check that index(1) exists in every post, with a JSON report
        docbundle inspect -b 'posts/*.md' -p 'index(1)' --report report.json
    """
    if not input_path and not batch:
        click.echo(MISSING_INPUT_ERROR, err=True)
        click.echo("Run 'docbundle inspect --help' for usage", err=True)
        sys.exit(ExitCodes.USAGE_ERROR)

    config = load_command_config(config_path, log_level, {
        'delimiter': delimiter,
        'policy': policy,
    })

    try:
        inspector = BundleInspector(
            config.require_delimiter(),
            policy=config.policy,
            strict=strict,
        )
    except BundleError as e:
        fail(e)

    if batch:
        reports = inspector.inspect_batch(batch)
    else:
        reports = [inspector.inspect_file(input_path)]

    for report in reports:
        click.echo(report.format_human())

    passed = sum(1 for r in reports if r.is_valid)
    failed = len(reports) - passed

    if batch:
        click.echo(f"\n  ✅ {passed} passed")
        if failed:
            click.echo(f"  ❌ {failed} failed")

    if report_path:
        if batch:
            data = {
                "total": len(reports),
                "passed": passed,
                "failed": failed,
                "reports": [r.to_dict() for r in reports],
            }
        else:
            data = reports[0].to_dict()
        try:
            _write_report(report_path, data)
        except BundleError as e:
            fail(e)
        click.echo(f"\nReport saved: {report_path}")

    if failed:
        sys.exit(ExitCodes.GENERAL_ERROR)


def _write_report(path: str, data: dict):
    """Write a JSON report to disk.

    Raises:
        OutputWriteError: If the report cannot be written
    """
    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise OutputWriteError(
            f"Failed to write report {path}: {e}",
            output_path=path,
            original_error=e,
        ) from e
