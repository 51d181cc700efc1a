import json
import logging
from pathlib import Path
from typing import Optional

import typer

from .export import FORMATS, dump, format_for_path, load_file, write_file
from .metadata import METADATA
from .models import SiteMetadata, SiteMetadataError
from .render import render_site

logger = logging.getLogger(__name__)

app = typer.Typer(help="Inspect, export and render the site metadata")


def _metadata(ctx: typer.Context) -> SiteMetadata:
    return ctx.obj["metadata"]


@app.callback()
def main(
    ctx: typer.Context,
    source: Optional[Path] = typer.Option(
        None,
        "--source",
        envvar="SITE_METADATA_SOURCE",
        help="JSON or YAML file to read the metadata from instead of the built-in record",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    metadata = METADATA
    if source is not None:
        try:
            metadata = load_file(source)
        except (SiteMetadataError, OSError) as e:
            typer.echo(f"Error: {str(e)}", err=True)
            raise typer.Exit(code=1)
    ctx.obj = {"metadata": metadata}


@app.command()
def show(
    ctx: typer.Context,
    field: Optional[str] = typer.Argument(None, help="Dotted field path, e.g. social.github"),
):
    """
    Print one field, or the whole record as JSON
    """
    metadata = _metadata(ctx)
    if field is None:
        typer.echo(dump(metadata, "json"), nl=False)
        return

    try:
        value = metadata.lookup(field)
    except SiteMetadataError as e:
        typer.echo(f"Error: {str(e)}", err=True)
        raise typer.Exit(code=1)

    if isinstance(value, dict):
        typer.echo(json.dumps(value, indent=2, ensure_ascii=False))
    else:
        typer.echo(value)


@app.command()
def export(
    ctx: typer.Context,
    fmt: str = typer.Option("json", "--format", "-f", help=f"Output format: {', '.join(FORMATS)}"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="File to write; the suffix must match the format"
    ),
):
    """
    Serialize the record to JSON or YAML
    """
    metadata = _metadata(ctx)
    try:
        if output is None:
            typer.echo(dump(metadata, fmt), nl=False)
        else:
            if format_for_path(output) != fmt.lower():
                raise SiteMetadataError(f"Output file {output} does not match format {fmt}")
            write_file(metadata, output)
    except (SiteMetadataError, OSError) as e:
        typer.echo(f"Error: {str(e)}", err=True)
        raise typer.Exit(code=1)


@app.command()
def render(
    ctx: typer.Context,
    output_dir: Path = typer.Argument(..., help="Directory for the rendered fragments"),
):
    """
    Render head, social links and feed author fragments
    """
    try:
        written = render_site(_metadata(ctx), output_dir)
    except OSError as e:
        typer.echo(f"Error: {str(e)}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Rendered {len(written)} files into {output_dir}")


if __name__ == "__main__":
    app()
