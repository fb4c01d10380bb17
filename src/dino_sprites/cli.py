"""CLI interface for the sprite generator."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from dino_sprites import __version__
from dino_sprites.config import MissingCredentialError, get_settings
from dino_sprites.core.generator import SpriteGenerator
from dino_sprites.images.client import get_image_client
from dino_sprites.specs import SPRITE_SPECS, select_specs

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="dino-sprites",
    help="Gemini-powered pixel art sprite generator for the dinosaur platformer",
    no_args_is_help=True,
)

console = Console()

USAGE = "Usage: GEMINI_API_KEY=your_key dino-sprites generate"


def version_callback(value: bool):
    if value:
        console.print(f"dino-sprites version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=version_callback, is_eager=True),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
):
    """Dinosaur Game Sprite Generator - pixel art via Gemini."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def generate(
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Assets directory")] = None,
    only: Annotated[
        Optional[list[str]], typer.Option("--only", help="Generate only these sprites (repeatable)")
    ] = None,
    delay: Annotated[
        Optional[float], typer.Option("--delay", min=0, help="Seconds to wait between requests")
    ] = None,
    model: Annotated[Optional[str], typer.Option("--model", "-m", help="Gemini image model")] = None,
    mock: Annotated[bool, typer.Option("--mock", help="Use placeholder images, no API calls")] = False,
):
    """Generate sprites and write them to the assets directory.

    Example: dino-sprites generate --only egg --only heart
    """
    settings = get_settings()

    if not mock:
        try:
            settings.require_api_key()
        except MissingCredentialError as e:
            console.print(f"[red]Error: {escape(str(e))}[/]")
            console.print(USAGE)
            raise typer.Exit(1)

    try:
        specs = select_specs(only)
    except KeyError as e:
        console.print(f"[red]Error: unknown sprite name(s): {e.args[0]}[/]")
        console.print(f"Available: {', '.join(spec.name for spec in SPRITE_SPECS)}")
        raise typer.Exit(1)

    if output:
        settings.assets_dir = output
    if delay is not None:
        settings.request_delay = delay
    if model:
        settings.image_model = model

    console.print(
        Panel(
            "Using Gemini API for AI image generation"
            + (" [yellow](mock)[/]" if mock else ""),
            title="Dinosaur Game Sprite Generator",
        )
    )
    console.print(f"Output directory: {settings.assets_dir}\n")

    client = get_image_client(settings, mock=mock)
    try:
        generator = SpriteGenerator(settings, client=client)
        result = generator.run(specs)
    except Exception as e:
        logger.exception("Sprite generation aborted")
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)

    console.print(
        Panel(
            f"1. Review generated sprites in {settings.assets_dir}/\n"
            "2. Edit sprites if needed (remove backgrounds, adjust)\n"
            "3. Update GameScene.ts to use new sprite files",
            title="Next steps",
        )
    )

    if result.failed_names:
        console.print(f"[dim]Failed: {', '.join(result.failed_names)}[/]")

    usage = getattr(client, "usage", None)
    if usage is not None:
        console.print(
            f"[dim]Images generated: {usage.images_generated} "
            f"(est. cost ${usage.total_cost:.3f})[/]"
        )


@app.command("list")
def list_sprites():
    """List the sprites in the catalogue."""
    table = Table(title=f"Sprites ({len(SPRITE_SPECS)})")
    table.add_column("Name", style="cyan")
    table.add_column("Filename")
    table.add_column("Prompt")

    for spec in SPRITE_SPECS:
        first_line = spec.prompt.splitlines()[0]
        table.add_row(spec.name, spec.filename, first_line)

    console.print(table)


if __name__ == "__main__":
    app()
