"""
Command-line interface for anypdf.
"""

import mimetypes
import os
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from anypdf import __version__
from anypdf.config import load_settings
from anypdf.dispatch import supported_media_types
from anypdf.exceptions import AnyPdfError, NoInputError
from anypdf.merge import get_pdf_info, merge_pdfs
from anypdf.orchestrator import convert_sync
from anypdf.types import FileInput, MediaType

console = Console()

_EXTENSION_TYPES = {
    ".txt": MediaType.TEXT_PLAIN.value,
    ".text": MediaType.TEXT_PLAIN.value,
    ".rtf": MediaType.TEXT_RTF.value,
    ".jpg": MediaType.JPEG.value,
    ".jpeg": MediaType.JPEG.value,
    ".png": MediaType.PNG.value,
    ".gif": MediaType.GIF.value,
    ".webp": MediaType.WEBP.value,
    ".bmp": MediaType.BMP.value,
    ".docx": MediaType.DOCX.value,
}


def guess_media_type(path):
    """Return the media type for *path* based on its extension."""
    suffix = Path(path).suffix.lower()
    if suffix in _EXTENSION_TYPES:
        return _EXTENSION_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(str(path))
    return guessed or "application/octet-stream"


def _fail(message):
    console.print(f"\n[bold red]✗ Error:[/bold red] {message}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    anypdf - Convert text files, images, Word documents and webpages to one PDF.
    """
    pass


@cli.command(name="convert")
@click.argument('inputs', nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.option('--url', '-u', default=None, help='Webpage to render before the files', type=str)
@click.option(
    '--output', '-o',
    default='converted.pdf',
    help='Path of the merged PDF',
    type=click.Path(dir_okay=False)
)
@click.option(
    '--type', '-t', 'media_type',
    default=None,
    help='Media type to use for every input instead of guessing from the extension',
    type=str
)
def convert_command(inputs, url, output, media_type):
    """
    Convert files and/or a URL into a single PDF.

    Examples:

        anypdf convert notes.txt photo.png

        anypdf convert report.docx --url https://example.com -o bundle.pdf
    """
    files = []
    table = Table(title="Inputs")
    table.add_column("#", style="dim")
    table.add_column("Source", style="cyan")
    table.add_column("Type", style="green")

    position = 1
    if url:
        table.add_row(str(position), url, "url")
        position += 1
    for path in inputs:
        declared = media_type or guess_media_type(path)
        files.append(
            FileInput(
                media_type=declared,
                data=Path(path).read_bytes(),
                filename=os.path.basename(path),
            )
        )
        table.add_row(str(position), os.path.basename(path), declared)
        position += 1

    try:
        if files or url:
            console.print(table)
        console.print("\n[bold cyan]Converting...[/bold cyan]")
        merged = convert_sync(files, url, settings=load_settings())
        Path(output).write_bytes(merged)
        pages = get_pdf_info(merged).num_pages
    except NoInputError:
        _fail("No files or URL provided")
    except AnyPdfError as e:
        _fail(e)
    except (OSError, ValueError) as e:
        _fail(e)

    console.print(f"\n[bold green]✓ Created {output} ({pages} page(s))[/bold green]")
    console.print()


@cli.command(name="merge")
@click.argument('inputs', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', required=True, help='Path of the merged PDF', type=click.Path(dir_okay=False))
def merge_command(inputs, output):
    """
    Merge existing PDF files in the given order.

    Example:

        anypdf merge cover.pdf body.pdf -o book.pdf
    """
    try:
        merged = merge_pdfs(Path(path).read_bytes() for path in inputs)
        Path(output).write_bytes(merged)
        pages = get_pdf_info(merged).num_pages
    except (AnyPdfError, OSError) as e:
        _fail(e)

    console.print(f"\n[bold green]✓ Merged {len(inputs)} file(s) into {output} ({pages} page(s))[/bold green]")


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
def show_info(input_pdf):
    """
    Display information about a PDF file.

    Example:

        anypdf info converted.pdf
    """
    try:
        info = get_pdf_info(Path(input_pdf).read_bytes())
    except (AnyPdfError, OSError) as e:
        _fail(e)

    table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("Number of Pages", str(info.num_pages))
    table.add_row("Encrypted", "Yes" if info.is_encrypted else "No")
    if info.title:
        table.add_row("Title", info.title)

    console.print()
    console.print(table)
    console.print()


@cli.command(name="formats")
def list_formats():
    """
    List the media types accepted for file inputs.
    """
    for media_type in supported_media_types():
        console.print(f"  • {media_type}")


if __name__ == '__main__':
    cli()
