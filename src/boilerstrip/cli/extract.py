"""Extraction command."""

from pathlib import Path

import click

from boilerstrip.cli._common import app, configure_logging


@app.command("extract", help="Extract the main content of an HTML document.")
@click.argument(
    "source",
    required=False,
    default="-",
    type=click.Path(allow_dash=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "html", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    default=None,
    help="Output file. Prints to stdout when omitted.",
)
@click.option(
    "--parser",
    type=click.Choice(["html.parser", "lxml", "html5lib"], case_sensitive=False),
    default=None,
    help="BeautifulSoup parser backend. Also reads BOILERSTRIP_PARSER env.",
)
@click.option(
    "--strict/--no-strict",
    default=False,
    help="Exit with code 2 when no content could be extracted.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def extract_command(
    source: Path,
    output_format: str,
    output: Path | None,
    parser: str | None,
    strict: bool,
    verbose: bool,
) -> None:
    """Extract the main content of SOURCE (a file, or - for stdin).

    Examples:
        boilerstrip extract page.html
        boilerstrip extract page.html --format json --output page.json
        curl -s https://example.com | boilerstrip extract -
        boilerstrip extract page.html --parser lxml --strict
    """
    from dataclasses import replace

    from boilerstrip.config import load_extractor_config
    from boilerstrip.exceptions import BoilerstripError
    from boilerstrip.services.readability import extract_article

    configure_logging(verbose=verbose)

    if str(source) == "-":
        markup: bytes = click.get_binary_stream("stdin").read()
    else:
        if not source.exists():
            click.echo(f"Error: file not found: {source}", err=True)
            raise SystemExit(1)
        markup = source.read_bytes()

    try:
        config = load_extractor_config()
        if parser:
            config = replace(config, parser=parser.lower())
        result = extract_article(markup, config=config)
    except BoilerstripError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e

    fmt = output_format.lower()
    if fmt == "json":
        rendered = result.model_dump_json(indent=2)
    elif fmt == "html":
        rendered = result.html
    else:
        rendered = result.text

    if output:
        output.write_text(rendered + "\n", encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(rendered)

    if strict and not result.success:
        click.echo("No content could be extracted", err=True)
        raise SystemExit(2)
