import logging
from typing import Any, Optional

from .. import constants
from ..constants import PackagingMode
from .probe import ArtifactProbe

logger = logging.getLogger(__name__)


def is_true(value: Any) -> bool:
    """Permissive boolean parsing: anything but a known 'true' spelling is False."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in constants.TRUE_VALUES


class NativeModeResolver:
    """
    Decides between native and runtime packaging.

    An explicit flag wins unconditionally, so native builds can be declared
    before the executable exists. Without a flag the probe decides.
    """

    def __init__(self, probe: ArtifactProbe):
        self.probe = probe

    def resolve(self, flag: Optional[Any], build_directory: str) -> PackagingMode:
        if flag is not None:
            mode = PackagingMode.NATIVE if is_true(flag) else PackagingMode.RUNTIME
            logger.debug(f"Packaging mode '{mode.value}' set explicitly (nativeImage={flag!r})")
            return mode
        mode = self.probe.probe(build_directory)
        logger.debug(f"Packaging mode '{mode.value}' detected from '{build_directory}'")
        return mode
