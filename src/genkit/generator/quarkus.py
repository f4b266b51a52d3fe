import logging
from typing import List, Optional, Sequence, Tuple

from ..constants import PackagingMode
from ..datacls import BuildContext, ImageConfiguration
from ..exceptions import GenkitIOError
from ..images import DefaultImageCatalog, DefaultImageLookup
from ..protocols import ImageLookupProtocol
from .base import Generator
from .compose import BuildSpecComposer
from .resolve import BaseImageResolver, Resolution

logger = logging.getLogger(__name__)


class QuarkusGenerator(Generator):
    """
    Generates the image configuration for a Quarkus application.

    Each call resolves the base image afresh and appends exactly one image
    configuration to the ones passed in.
    """
    name = "quarkus"

    def __init__(self, context: BuildContext, image_lookup: Optional[ImageLookupProtocol] = None):
        super().__init__(context, image_lookup)
        self.catalog = DefaultImageCatalog(image_lookup or DefaultImageLookup())
        self.resolver = BaseImageResolver(self.catalog, name=self.name)
        self.composer = BuildSpecComposer(context, name=self.name)

    def customize(self, existing: Sequence[ImageConfiguration], primary: bool = True) -> List[ImageConfiguration]:
        logger.info(f"[{self.name}] Generating image configuration ({self.context.runtime_mode.value} mode)")
        resolution = self.resolver.resolution(self.context)
        mode, artifact = self._layout(resolution)
        return self.composer.compose(existing, resolution.image, primary=primary, mode=mode, artifact=artifact)

    def _layout(self, resolution: Resolution) -> Tuple[Optional[PackagingMode], Optional[str]]:
        build_directory = self.context.project.build_directory
        probe = self.resolver.probe_for(self.context)
        if resolution.mode is not None:
            return resolution.mode, probe.find_artifact(build_directory, resolution.mode)

        # pinned image: the layout is best effort and never fails the resolution
        try:
            mode = self.resolver.detect_mode(self.context)
            artifact = probe.find_artifact(build_directory, mode) if mode is not None else None
        except (GenkitIOError, OSError) as e:
            logger.warning(f"[{self.name}] Cannot inspect '{build_directory}', leaving the layout open: {e}")
            return None, None
        return mode, artifact
