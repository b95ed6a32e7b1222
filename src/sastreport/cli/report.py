"""AsyncClick CLI for SARIF report generation.

Provides user-facing commands:
- convert: Turn a scanner JSON report into a SARIF 2.1.0 report
"""

import logging
import sys
from pathlib import Path

import asyncclick as click
import structlog
from pydantic import ValidationError

from sastreport.core.config import load_config, resolve_tool_version
from sastreport.core.issue import load_report
from sastreport.core.reporting import (
    LocationParseError,
    convert_to_sarif_report,
    export_sarif,
    to_json,
)
from sastreport.core.severity import sort_issues

logger = structlog.get_logger()


def configure_logging(level: str) -> None:
    """Send structlog output to stderr, filtered at `level`.

    stdout carries the SARIF document when no output file is given.
    """
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@click.group()
@click.pass_context
async def cli(ctx):
    """sastreport - SARIF reports for static analysis results"""
    ctx.ensure_object(dict)


@cli.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--root", "-r", "roots", multiple=True,
              help="Root path stripped from file paths (repeatable). Default: SASTREPORT_ROOT_PATHS.")
@click.option("--out", "-o", "output_path", default=None, help="Write SARIF to this file instead of stdout")
@click.option("--tool-version", default=None, help="Tool version written into the report")
@click.option("--sort/--no-sort", "sort", default=True, help="Sort issues by severity")
@click.option("--quiet", "-q", is_flag=True, help="Skip status lines, and write nothing when the report has no issues")
@click.pass_context
async def convert(
    ctx,
    input_path: Path,
    roots: tuple[str, ...],
    output_path: str | None,
    tool_version: str | None,
    sort: bool,
    quiet: bool,
):
    """Convert a scanner JSON report to SARIF.

    Examples:
        sastreport convert results.json -r /home/dev/project -o results.sarif
        sastreport convert results.json --no-sort --tool-version 2.4.0
    """
    config = load_config(
        root_paths=list(roots) or None,
        tool_version=tool_version,
        sort_issues=sort,
    )

    try:
        report_info = load_report(input_path)
    except (OSError, ValueError, ValidationError) as e:
        logger.error("report_load_failed", path=str(input_path), error=str(e))
        click.echo(f"[-] Could not read report {input_path}: {e}", err=True)
        ctx.exit(1)

    if quiet and not report_info.issues:
        return

    issues = report_info.issues
    if config.sort_issues:
        issues = sort_issues(issues)

    try:
        report = convert_to_sarif_report(
            config.root_paths,
            issues,
            tool_version=resolve_tool_version(config),
            tool_name=config.tool_name,
            tool_information_uri=config.tool_information_uri,
        )
    except LocationParseError as e:
        click.echo(f"[-] Report generation failed: {e}", err=True)
        ctx.exit(1)

    if output_path is None:
        click.echo(to_json(report))
        return

    export_sarif(report, output_path)
    if not quiet:
        run = report.runs[0]
        click.echo(f"[+] SARIF report written: {output_path}")
        click.echo(f"[+] Results: {len(run.results)} | Rules: {len(run.tool.driver.rules)}")


def main():
    """Console entry point: configure logging, then run the CLI."""
    configure_logging(load_config().log_level)
    cli()


if __name__ == "__main__":
    main()
