from pathlib import Path
from typing import Annotated, Optional

import typer

from talkbox.assets.loader import Loader
from talkbox.layout.metrics import PygameFontMetrics
from talkbox.layout.paginate import process
from talkbox.service.service import (DEFAULT_BOX_HEIGHT, DEFAULT_BOX_PADDING,
                                     DEFAULT_BOX_WIDTH)

PAGE_SEPARATOR = "-" * 20


def paginate_command(
    text_file: Annotated[Path, typer.Argument(exists=True, dir_okay=False)],
    width: int = typer.Option(DEFAULT_BOX_WIDTH, "--width", min=1),
    height: int = typer.Option(DEFAULT_BOX_HEIGHT, "--height", min=1),
    padding: int = typer.Option(DEFAULT_BOX_PADDING, "--padding", min=0),
    font_size: Annotated[Optional[int], typer.Option("--font-size", min=1)] = None,
    font_path: Annotated[Optional[Path], typer.Option("--font", exists=True)] = None,
) -> None:
    """Print how a text file would be split into dialogue pages."""

    metrics = PygameFontMetrics(Loader.load_font(font_path, font_size))
    pages = process(
        text_file.read_text(encoding="utf-8"),
        width - padding,
        height - padding,
        metrics,
    )
    for index, page in enumerate(pages, start=1):
        typer.echo(f"{PAGE_SEPARATOR} page {index}/{len(pages)}")
        typer.echo(page.text)
