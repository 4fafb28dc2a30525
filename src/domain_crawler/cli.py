"""CLI interface using typer."""

import asyncio
import logging
from typing import Optional

import typer

from .config import settings

app = typer.Typer(
    name="domain-crawler",
    help="Enumerate the pages of a website by following same-domain links",
    no_args_is_help=True,
)


@app.command()
def crawl(
    seed_url: str = typer.Argument(..., help="Starting URL for crawl"),
    max_depth: int = typer.Option(
        settings.max_depth, "--max-depth", "-d", min=0, help="Maximum link depth (0 = unbounded)"
    ),
    ignore: Optional[list[str]] = typer.Option(
        None, "--ignore", "-i", help="Ignored path prefix (repeatable, replaces the defaults)"
    ),
    output: str = typer.Option(None, "-o", "--output", help="Also write results to a JSONL file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Crawl a website starting from a URL."""
    from .crawl import run_crawl

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ignored = ignore if ignore else settings.ignored_path_prefixes

    try:
        asyncio.run(run_crawl(
            seed_url=seed_url,
            max_depth=max_depth,
            ignored_path_prefixes=ignored,
            output_path=output,
        ))
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="SEED_URL") from e


@app.command()
def version():
    """Show version."""
    from . import __version__

    typer.echo(f"domain-crawler {__version__}")


if __name__ == "__main__":
    app()
