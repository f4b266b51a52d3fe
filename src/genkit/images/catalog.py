import logging
from types import MappingProxyType
from typing import Mapping, Tuple

from .. import constants
from ..constants import PackagingMode, RuntimeMode
from ..exceptions import CatalogError
from ..protocols import ImageLookupProtocol

logger = logging.getLogger(__name__)

# Native base images are pinned here instead of tracking the lookup
NATIVE_IMAGES: Mapping[RuntimeMode, str] = MappingProxyType({
    RuntimeMode.OPENSHIFT: constants.NATIVE_S2I_IMAGE,
    RuntimeMode.KUBERNETES: constants.NATIVE_MINIMAL_IMAGE,
})

RUNTIME_LOOKUP_KEYS: Mapping[RuntimeMode, str] = MappingProxyType({
    RuntimeMode.OPENSHIFT: constants.LOOKUP_RUNTIME_S2I,
    RuntimeMode.KUBERNETES: constants.LOOKUP_RUNTIME_DOCKER,
})


class DefaultImageCatalog:
    """
    Maps a (packaging mode, runtime mode) pair to the default base image.

    Native entries are constants. Runtime entries are delegated to the
    injected lookup, since they follow upstream runtime releases.
    """

    def __init__(self, image_lookup: ImageLookupProtocol):
        self.image_lookup = image_lookup

    def lookup(self, mode: PackagingMode, target: RuntimeMode) -> str:
        if mode == PackagingMode.NATIVE and target in NATIVE_IMAGES:
            image = NATIVE_IMAGES[target]
        elif mode == PackagingMode.RUNTIME and target in RUNTIME_LOOKUP_KEYS:
            image = self.image_lookup.get_image_name(RUNTIME_LOOKUP_KEYS[target])
        else:
            raise CatalogError(f"No default image for packaging mode '{mode}' in runtime mode '{target}'")
        logger.debug(f"Catalog default for ({mode.value}, {target.value}): {image}")
        return image

    def entries(self) -> Tuple[Tuple[PackagingMode, RuntimeMode, str], ...]:
        """Describe every catalog row, with runtime rows showing their lookup key."""
        rows = []
        for target, image in NATIVE_IMAGES.items():
            rows.append((PackagingMode.NATIVE, target, image))
        for target, key in RUNTIME_LOOKUP_KEYS.items():
            rows.append((PackagingMode.RUNTIME, target, f"lookup:{key}"))
        return tuple(rows)
