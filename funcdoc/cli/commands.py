"""CLI commands for the function documentation extractor.

Provides the Click-based command group 'funcdoc' with subcommands for
rendering function references from annotated source comments and for
reporting registered functions that have no documentation.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

import click

from funcdoc import __version__, functions
from funcdoc.errors import FuncdocError
from funcdoc.generators.function_docs import generate_function_docs
from funcdoc.output.markdown import MarkdownWriter
from funcdoc.output.text import render_text
from funcdoc.parsers.structure import DocRecord
from funcdoc.registry import load_registry
from funcdoc.utils.config import AppConfig, load_config
from funcdoc.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _resolve_source(source: Optional[str], config: AppConfig) -> str:
    """Pick the source file to scan.

    Args:
        source: Source path given on the command line, if any.
        config: Loaded application configuration.

    Returns:
        The explicit path, the configured path, or the bundled standard
        functions module, in that order of preference.
    """
    if source:
        return source
    if config.extraction.source_file:
        return config.extraction.source_file
    return functions.__file__


def _load(reference: str) -> Mapping[str, Any]:
    """Load a registry, converting failures into CLI errors."""
    try:
        return load_registry(reference)
    except FuncdocError as e:
        raise click.ClickException(str(e)) from e


def _extract(registry: Mapping[str, Any], source_file: str) -> list[DocRecord]:
    """Extract records, converting parse failures into CLI errors."""
    try:
        return generate_function_docs(registry, source_file)
    except FuncdocError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version=__version__, prog_name="funcdoc")
@click.option(
    "--log-level",
    "-L",
    envvar="LOGLEVEL",
    default=None,
    help="Level of log output verbosity.",
)
@click.pass_context
def funcdoc(ctx: click.Context, log_level: Optional[str]) -> None:
    """Function Documentation Extractor: document functions from comments."""
    config = load_config()
    ctx.obj = config
    setup_logging(
        level=log_level or config.logging.level,
        log_format=config.logging.format,
        log_file=config.logging.file,
    )


@funcdoc.command()
@click.argument("source", required=False, type=click.Path(dir_okay=False))
@click.option(
    "--registry",
    "-r",
    default=None,
    help="Function registry as 'module:attribute' or a YAML descriptor file.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "markdown"]),
    default=None,
    help="Output format.",
)
@click.option("--output", "-o", type=click.Path(), default=None, help="Output file.")
@click.pass_obj
def extract(
    config: AppConfig,
    source: Optional[str],
    registry: Optional[str],
    output_format: Optional[str],
    output: Optional[str],
) -> None:
    """Generate a function reference from annotated comments.

    Scans SOURCE for '// fn Name: docstring' or '# fn Name: docstring'
    comments and documents every annotated function found in the
    registry. Defaults to the bundled standard functions.
    """
    source_file = _resolve_source(source, config)
    functions_map = _load(registry or config.extraction.registry)
    records = _extract(functions_map, source_file)

    fmt = output_format or config.output.default_format
    logger.debug("Rendering %d records as %s", len(records), fmt)
    if fmt == "markdown":
        writer = MarkdownWriter()
        if output:
            writer.write(records, output, title=config.output.title)
        else:
            click.echo(writer.render(records, title=config.output.title), nl=False)
    else:
        content = render_text(records)
        if output:
            path = Path(output)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        else:
            click.echo(content, nl=False)

    if output:
        click.echo(f"Wrote {len(records)} functions to {output}", err=True)


@funcdoc.command()
@click.argument("source", required=False, type=click.Path(dir_okay=False))
@click.option(
    "--registry",
    "-r",
    default=None,
    help="Function registry as 'module:attribute' or a YAML descriptor file.",
)
@click.pass_context
def coverage(ctx: click.Context, source: Optional[str], registry: Optional[str]) -> None:
    """Report registered functions without documentation.

    Exits with status 1 if any registered function has no annotation
    in SOURCE.
    """
    config = ctx.obj
    source_file = _resolve_source(source, config)
    functions_map = _load(registry or config.extraction.registry)
    records = _extract(functions_map, source_file)

    documented = {record.name for record in records}
    missing = sorted(name for name in functions_map if name not in documented)

    for name in missing:
        click.echo(f"  Missing: {name}")
    click.echo(f"{len(documented)} of {len(functions_map)} functions documented")

    if missing:
        ctx.exit(1)
