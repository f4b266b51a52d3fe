import json
import logging
from importlib import resources
from typing import Dict, Optional

from ..exceptions import ImageLookupError

logger = logging.getLogger(__name__)

# Load packaged image defaults
IMAGE_DEFAULTS_TEXT = resources.files('genkit.resources').joinpath('images').joinpath('defaults').read_text(encoding='utf-8')
IMAGE_DEFAULTS: Dict[str, str] = json.loads(IMAGE_DEFAULTS_TEXT)


class DefaultImageLookup:
    """
    Resolves well-known keys such as `runtime.upstream.docker` to image references.

    Packaged defaults ship with genkit; `overrides` (e.g. the descriptor's
    `default_images` block) take precedence over them for this instance only.
    """

    def __init__(self, overrides: Optional[Dict[str, str]] = None):
        self.images: Dict[str, str] = {**IMAGE_DEFAULTS, **(overrides or {})}
        if overrides:
            logger.debug(f"Default image overrides applied: {sorted(overrides)}")

    def get_image_name(self, key: str) -> str:
        image = self.images.get(key)
        if not image:
            raise ImageLookupError(
                f"No default image registered for '{key}'. Known keys: {sorted(self.images)}"
            )
        logger.debug(f"Default image for '{key}' is '{image}'")
        return image
