"""Sequential sprite generation driver."""

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from rich.console import Console
from rich.markup import escape

from dino_sprites.config import Settings, get_settings
from dino_sprites.images.client import extract_image, get_image_client, response_text
from dino_sprites.specs import SPRITE_SPECS, SpriteSpec

logger = logging.getLogger(__name__)

console = Console()

# Characters of response text echoed when no image comes back
RESPONSE_EXCERPT_CHARS = 200


class ImageClient(Protocol):
    def generate_content(self, prompt: str) -> Any: ...


@dataclass
class GenerationResult:
    """Outcome counts for one pass over the catalogue."""

    succeeded: int = 0
    failed: int = 0
    saved: list[Path] = field(default_factory=list)
    failed_names: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.succeeded + self.failed

    def __iter__(self):
        return iter((self.succeeded, self.failed))


class SpriteGenerator:
    """Drives one generation attempt per sprite, strictly in order."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: ImageClient | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.settings = settings or get_settings()
        self.client = client or get_image_client(self.settings)
        self.sleep = sleep

    @property
    def output_dir(self) -> Path:
        return self.settings.assets_dir

    def generate_one(self, spec: SpriteSpec) -> bool:
        """Generate a single sprite and write it to the assets directory.

        Provider, decode and write errors are reported as a failed attempt;
        they never propagate.

        Returns:
            True if a file was written
        """
        console.print(f"Generating: [bold]{spec.name}[/]...")
        filepath = self.output_dir / spec.filename

        try:
            response = self.client.generate_content(spec.prompt)
            image_data = extract_image(response)
            if image_data is not None:
                filepath.write_bytes(image_data)
        except Exception as e:
            logger.debug("Error generating %s", spec.name, exc_info=True)
            console.print(f"  [red]Error generating {spec.name}: {escape(str(e))}[/]")
            return False

        if image_data is None:
            excerpt = response_text(response)[:RESPONSE_EXCERPT_CHARS]
            logger.debug("No image generated for %s. Response: %s", spec.name, excerpt)
            console.print(f"  [yellow]Warning: No image generated for {spec.name}[/]")
            console.print(f"  Response: {excerpt}", style="dim", markup=False)
            return False

        logger.debug("Wrote %d bytes to %s", len(image_data), filepath)
        console.print(f"  [green]Saved: {escape(str(filepath))}[/]")
        return True

    def run(self, specs: Iterable[SpriteSpec] | None = None) -> GenerationResult:
        """Generate every sprite in order, pausing between requests.

        The pause follows every attempt, successful or not, to stay under
        the provider's request rate limit.

        Args:
            specs: Sprites to generate (defaults to the full catalogue)

        Returns:
            Succeeded/failed counts
        """
        specs = list(SPRITE_SPECS if specs is None else specs)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        result = GenerationResult()
        for spec in specs:
            if self.generate_one(spec):
                result.succeeded += 1
                result.saved.append(self.output_dir / spec.filename)
            else:
                result.failed += 1
                result.failed_names.append(spec.name)

            self.sleep(self.settings.request_delay)

        logger.info("Generation complete: %d succeeded, %d failed", result.succeeded, result.failed)
        console.print(
            f"\nGeneration complete: [green]{result.succeeded} succeeded[/], "
            f"[red]{result.failed} failed[/]"
        )
        return result
