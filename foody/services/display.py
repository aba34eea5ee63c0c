import subprocess
from typing import Callable, List, Tuple

from foody.core.config import ANSI_LIGHT_GREEN, ANSI_NO_COLOR
from foody.core.errors import RenderError
from foody.core.logging_config import get_logger
from foody.models import Recipe

logger = get_logger(__name__)

RENDERABLE_IMAGE_EXTENSION = ".jpg"


class ImageRenderer:
    """Turns a remote picture into ASCII art with the external ``jp2a`` tool."""

    def __init__(self, command: str = "jp2a", width: int = 40):
        self.command = command
        self.width = width

    def can_render(self, image_url: str) -> bool:
        return image_url.endswith(RENDERABLE_IMAGE_EXTENSION)

    def render(self, image_url: str) -> str:
        try:
            completed = subprocess.run(
                [self.command, f"--width={self.width}", image_url],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.error(f"Error running {self.command} command, {exc}")
            raise RenderError(f"could not render image {image_url}: {exc}") from exc
        return completed.stdout


def format_page(
    page: List[Tuple[int, Recipe]],
    color: str = ANSI_LIGHT_GREEN,
    reset: str = ANSI_NO_COLOR,
) -> str:
    return "\n".join(f"{number}. {recipe.summary(color, reset)}" for number, recipe in page)


def render_detail(
    recipe: Recipe,
    write: Callable[[str], None],
    renderer: ImageRenderer,
    color: str = ANSI_LIGHT_GREEN,
    reset: str = ANSI_NO_COLOR,
) -> None:
    write("")
    write(f"{color}{recipe.name}{reset}")
    if recipe.url:
        write(recipe.url)
    if recipe.location:
        write(recipe.location)
    write("")

    if renderer.can_render(recipe.image_url):
        write(renderer.render(recipe.image_url).rstrip("\n"))

    write("")
