"""
Decomposer CLI
===============

Click-based command-line interface for the AlgoLex decomposer.

Usage::

    python -m decomposer split SHA256withRSA "AES/CBC/PKCS5Padding"
    python -m decomposer file /path/to/java.security
    python -m decomposer tokens OAEPWithSHA-256AndMGF1Padding
    python -m decomposer -o json -f report.json split SHA1withDSA

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from shared.config import LexConfig
from shared.console import LexConsole

from decomposer import __version__
from decomposer.core.engine import DecomposerEngine
from decomposer.core.models import DecompositionReport
from decomposer.output.console import DecomposerConsoleOutput
from decomposer.output.report import DecomposerReportGenerator


_DEFAULT_HTML_REPORT = "algolex_report.html"


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to AlgoLex configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """AlgoLex -- decompose cryptographic algorithm names.

    Splits transformations and composite signature names into the
    sub-algorithm names a security policy has to check.
    """
    ctx.ensure_object(dict)

    lex_config = LexConfig.load(config) if config else LexConfig()
    ctx.obj["config"] = lex_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = LexConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["engine"] = DecomposerEngine(lex_config)
    ctx.obj["display"] = DecomposerConsoleOutput(console)
    ctx.obj["reporter"] = DecomposerReportGenerator()

    # Banner only decorates console output
    if not quiet and output == "console" and ctx.invoked_subcommand != "tokens":
        console.banner(version=__version__)


def _handle_output(ctx: click.Context, report: DecompositionReport) -> None:
    """Render *report* in the format selected on the command line."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: DecomposerReportGenerator = ctx.obj["reporter"]
    console: LexConsole = ctx.obj["console"]

    if output_format == "console":
        display: DecomposerConsoleOutput = ctx.obj["display"]
        display.display_report(report)
    elif output_format == "json":
        if output_file:
            path = reporter.generate_json(report, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(reporter.to_json(report))
    elif output_format == "html":
        path = reporter.generate_html(
            report, Path(output_file or _DEFAULT_HTML_REPORT)
        )
        console.success(f"HTML report saved to: {path}")


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def split(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Decompose one or more algorithm names.

    Each NAME may be a cipher transformation (AES/CBC/PKCS5Padding) or
    a composite name (SHA256withRSA, PBEWithSHA1AndDESede).
    """
    engine: DecomposerEngine = ctx.obj["engine"]
    _handle_output(ctx, engine.decompose_names(names))


@cli.command("file")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def file_(ctx: click.Context, path: str) -> None:
    """Decompose the algorithm names listed in a file.

    Accepts one name per line, comma-separated lists, and security
    property files such as java.security.
    """
    engine: DecomposerEngine = ctx.obj["engine"]
    console: LexConsole = ctx.obj["console"]
    try:
        report = engine.decompose_file(Path(path))
    except (FileNotFoundError, PermissionError) as exc:
        console.error(f"Cannot read {path}: {exc.strerror or exc}")
        ctx.exit(1)

    # Status lines would corrupt JSON written to stdout
    if ctx.obj["output_format"] == "console":
        if report.results:
            console.info(f"Read {report.total_names} names from {path}")
        else:
            console.warning(f"No algorithm names found in {path}")
    _handle_output(ctx, report)


@cli.command()
@click.argument("name")
@click.pass_context
def tokens(ctx: click.Context, name: str) -> None:
    """Print the sorted token set of NAME, one token per line."""
    engine: DecomposerEngine = ctx.obj["engine"]
    for token in sorted(engine.decomposer.decompose(name)):
        click.echo(token)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the AlgoLex CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
