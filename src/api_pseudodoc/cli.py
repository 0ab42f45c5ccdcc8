"""CLI entry point for api-pseudodoc."""

import json
import logging
from pathlib import Path

import click

from api_pseudodoc.config import RenderSettings
from api_pseudodoc.document import assemble
from api_pseudodoc.errors import PseudoDocError
from api_pseudodoc.loader import load_document
from api_pseudodoc.parser.base import Operation
from api_pseudodoc.walker import walk


def _walk_doc(doc_path: Path) -> list[Operation]:
    """Load and walk a Swagger document, turning library errors into CLI errors."""
    try:
        return walk(load_document(doc_path))
    except PseudoDocError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log cycles, skipped keys and other debug details.")
def main(verbose: bool):
    """API Pseudodoc — render Swagger documents as pseudocode Markdown."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file path for the Markdown document.")
@click.option("--default-tag", default=None, help="Section name for operations without tags.")
@click.option("--toc-marker", default=None, help="First line of the document.")
def render(doc_path: Path, output: Path, default_tag: str | None, toc_marker: str | None):
    """Render a Swagger document into tag-grouped pseudocode Markdown."""
    click.echo(f"Parsing {doc_path}...")
    operations = _walk_doc(doc_path)
    click.echo(f"Found {len(operations)} operations.")

    settings = RenderSettings.from_env(default_tag=default_tag, toc_marker=toc_marker)
    content = assemble(operations, settings)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    click.echo(f"Document saved to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write JSON here instead of stdout.")
def operations(doc_path: Path, output: Path | None):
    """Dump the parsed operation records as JSON."""
    ops = _walk_doc(doc_path)
    payload = json.dumps([op.model_dump(by_alias=True) for op in ops], indent=2, ensure_ascii=False)

    if output is None:
        click.echo(payload)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload, encoding="utf-8")
    click.echo(f"{len(ops)} operations saved to {output}", err=True)
