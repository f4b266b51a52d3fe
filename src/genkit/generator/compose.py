import logging
import posixpath
from typing import Any, Dict, List, Optional, Sequence

from .. import constants
from ..constants import BuildStrategy, PackagingMode, RuntimeMode
from ..datacls import (
    AssemblyConfiguration,
    BuildConfiguration,
    BuildContext,
    ImageConfiguration,
)
from .options import GeneratorConfig

logger = logging.getLogger(__name__)


def image_tag(version: str) -> str:
    """Snapshot builds are tagged 'latest', releases with their version."""
    if not version or version.endswith(constants.SNAPSHOT_SUFFIX):
        return constants.LATEST_TAG
    return version


def split_tags(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(tag).strip() for tag in value if str(tag).strip()]


class BuildSpecComposer:
    """
    Builds the image configuration for a resolved base image and appends it.

    Composition is strictly additive: existing entries are neither merged
    nor deduplicated, even when they share the new entry's name.
    """

    def __init__(self, context: BuildContext, name: str = constants.DEFAULT_GENERATOR):
        self.context = context
        self.name = name
        self.options = GeneratorConfig(context, name)

    def compose(
        self,
        existing: Sequence[ImageConfiguration],
        resolved: str,
        primary: bool = True,
        mode: Optional[PackagingMode] = None,
        artifact: Optional[str] = None,
    ) -> List[ImageConfiguration]:
        image = ImageConfiguration(
            name=self.image_name(),
            alias=str(self.options.get(constants.OPT_ALIAS, self.name)),
            build=self.build_configuration(resolved, mode, artifact),
            metadata=self.metadata(primary, mode),
        )
        logger.debug(f"[{self.name}] Composed image '{image.name}' FROM '{resolved}'")
        result = list(existing)
        result.append(image)
        return result

    def image_name(self) -> str:
        configured = self.options.get(constants.OPT_NAME)
        if configured:
            return str(configured)
        project = self.context.project
        name = f"{project.artifact_id or self.name}:{image_tag(project.version)}"
        # S2I builds on OpenShift push into the project's image stream, which has no group
        s2i = (self.context.runtime_mode == RuntimeMode.OPENSHIFT
               and self.context.strategy == BuildStrategy.S2I)
        if project.group_id and not s2i:
            name = f"{project.group_id}/{name}"
        return name

    def build_configuration(
        self, resolved: str, mode: Optional[PackagingMode], artifact: Optional[str]
    ) -> BuildConfiguration:
        build = BuildConfiguration(
            from_image=resolved,
            ports=[str(self.options.get(constants.OPT_WEB_PORT, constants.DEFAULT_WEB_PORT))],
            tags=split_tags(self.options.get(constants.OPT_TAGS)),
        )
        files = [posixpath.basename(artifact)] if artifact else []
        if mode == PackagingMode.NATIVE:
            build.workdir = constants.NATIVE_TARGET_DIR
            build.assembly = AssemblyConfiguration(target_dir=constants.NATIVE_TARGET_DIR, files=files)
            if files:
                build.cmd = [f"./{files[0]}", constants.NATIVE_HTTP_HOST_ARG]
        elif mode == PackagingMode.RUNTIME:
            build.workdir = constants.RUNTIME_TARGET_DIR
            build.env = {"JAVA_APP_DIR": constants.RUNTIME_TARGET_DIR}
            build.assembly = AssemblyConfiguration(target_dir=constants.RUNTIME_TARGET_DIR, files=files)
        return build

    def metadata(self, primary: bool, mode: Optional[PackagingMode]) -> Dict[str, Any]:
        metadata: Dict[str, Any] = {
            "primary": primary,
            "generator": self.name,
            "runtime_mode": self.context.runtime_mode.value,
            "strategy": self.context.strategy.value,
        }
        if mode is not None:
            metadata["packaging"] = mode.value
        return metadata
