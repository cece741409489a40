from __future__ import annotations

import logging
from pathlib import Path

import click
import requests

from . import download


@click.group(name="corpus")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress.")
def corpus_group(verbose: bool) -> None:
    """Commands for acquiring raw corpus text."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO, format="%(levelname)s %(name)s: %(message)s"
        )


@corpus_group.command("fetch")
@click.argument("url")
@click.option(
    "--dest",
    type=click.Path(dir_okay=False),
    required=True,
    help="File to write the downloaded text to.",
)
@click.option(
    "--timeout",
    type=float,
    default=download.DEFAULT_TIMEOUT,
    show_default=True,
    help="Request timeout (seconds).",
)
def corpus_fetch(url: str, dest: str, timeout: float) -> None:
    """Download a text corpus so it can be fed to ngram-windows generate."""
    try:
        written = download.download_text(url, Path(dest), timeout=timeout)
    except requests.RequestException as exc:
        raise click.ClickException(f"Failed to download {url}: {exc}") from exc
    click.echo(f"Wrote {written}")


def main() -> None:
    corpus_group()


if __name__ == "__main__":
    main()
