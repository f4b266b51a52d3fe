import logging
from typing import Literal, Optional

from pydantic import BaseModel

from .. import constants
from ..constants import PackagingMode
from ..datacls import BuildContext
from ..exceptions import ArtifactNotFoundError, ResolutionError
from ..images import DefaultImageCatalog
from .native import NativeModeResolver
from .options import GeneratorConfig
from .probe import ArtifactProbe

logger = logging.getLogger(__name__)


class Resolution(BaseModel):
    """
        Class represents a resolved base image and the tier it came from.
    """
    image: str
    source: Literal["config", "property", "catalog"]
    mode: Optional[PackagingMode] = None


class BaseImageResolver:
    """
    Applies the base image precedence for one generator:

    1. override config `from`
    2. property `<namespace>.generator.<name>.from`
    3. catalog default for the detected packaging mode and the runtime mode

    Override values are used verbatim.
    """

    def __init__(self, catalog: DefaultImageCatalog, name: str = constants.DEFAULT_GENERATOR):
        self.catalog = catalog
        self.name = name

    def resolve(self, context: BuildContext) -> str:
        return self.resolution(context).image

    def resolution(self, context: BuildContext) -> Resolution:
        options = GeneratorConfig(context, self.name)

        image = options.from_overrides(constants.OPT_FROM)
        if image is not None:
            logger.info(f"[{self.name}] Using base image '{image}' from generator config")
            return Resolution(image=str(image), source="config")

        image = options.from_properties(constants.OPT_FROM)
        if image is not None:
            logger.info(f"[{self.name}] Using base image '{image}' from property '{options.property_key(constants.OPT_FROM)}'")
            return Resolution(image=image, source="property")

        mode = self.packaging_mode(context, options)
        target = context.runtime_mode
        try:
            image = self.catalog.lookup(mode, target)
        except ResolutionError as e:
            raise e.__class__(
                f"[{self.name}] Cannot resolve default base image for {mode.value} packaging "
                f"in {target.value} mode: {e}"
            ) from e
        logger.info(f"[{self.name}] Using default base image '{image}' ({mode.value}, {target.value})")
        return Resolution(image=image, source="catalog", mode=mode)

    def packaging_mode(self, context: BuildContext, options: Optional[GeneratorConfig] = None) -> PackagingMode:
        """Native or runtime packaging; raises ArtifactNotFoundError if it cannot be told."""
        options = options or GeneratorConfig(context, self.name)
        native = NativeModeResolver(self.probe_for(context))
        try:
            return native.resolve(options.get(constants.OPT_NATIVE_IMAGE), context.project.build_directory)
        except ArtifactNotFoundError as e:
            raise ArtifactNotFoundError(f"[{self.name}] Cannot detect packaging mode: {e}") from e

    def detect_mode(self, context: BuildContext) -> Optional[PackagingMode]:
        """Like packaging_mode, but None when nothing was built yet."""
        try:
            return self.packaging_mode(context)
        except ArtifactNotFoundError as e:
            logger.debug(f"[{self.name}] Packaging mode unknown: {e}")
            return None

    @staticmethod
    def probe_for(context: BuildContext) -> ArtifactProbe:
        base_name = None
        if context.project.artifact_id:
            base_name = f"{context.project.artifact_id}{constants.RUNNER_SUFFIX}"
        return ArtifactProbe(context.fs, base_name)
