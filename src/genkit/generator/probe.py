import logging
import posixpath
from typing import List, Optional

from .. import constants
from ..constants import PackagingMode
from ..exceptions import ArtifactNotFoundError
from ..io import FileSystem

logger = logging.getLogger(__name__)


class ArtifactProbe:
    """
    Classifies a build output directory by the artifact it contains.

    A native executable is `<base name>` with no extension; a runnable archive
    is `<base name>.jar`. When no base name is known, the directory is scanned
    for files ending in `-runner` / `-runner.jar`.
    """

    def __init__(self, fs: FileSystem, base_name: Optional[str] = None):
        self.fs = fs
        self.base_name = base_name

    def probe(self, build_directory: str) -> PackagingMode:
        native, archive = self._candidates(build_directory)
        if native and self.fs.is_file(native):
            logger.debug(f"Native executable found: {native}")
            return PackagingMode.NATIVE
        if archive and self.fs.is_file(archive):
            logger.debug(f"Runnable archive found: {archive}")
            return PackagingMode.RUNTIME
        stem = self.base_name or f"*{constants.RUNNER_SUFFIX}"
        raise ArtifactNotFoundError(
            f"No native executable or runnable archive in '{build_directory}' "
            f"(looked for '{stem}' and '{stem}.{constants.ARCHIVE_EXTENSION}'). "
            "Was the application packaged?"
        )

    def find_artifact(self, build_directory: str, mode: PackagingMode) -> Optional[str]:
        """Return the path of the artifact for `mode`, if it exists."""
        native, archive = self._candidates(build_directory)
        path = native if mode == PackagingMode.NATIVE else archive
        if path and self.fs.is_file(path):
            return path
        return None

    def _candidates(self, build_directory: str):
        if self.base_name:
            native = posixpath.join(build_directory, self.base_name)
            archive = f"{native}.{constants.ARCHIVE_EXTENSION}"
            return native, archive
        return (
            self._scan(build_directory, constants.RUNNER_SUFFIX),
            self._scan(build_directory, f"{constants.RUNNER_SUFFIX}.{constants.ARCHIVE_EXTENSION}"),
        )

    def _scan(self, build_directory: str, suffix: str) -> Optional[str]:
        if not self.fs.is_dir(build_directory):
            return None
        matches: List[str] = [
            entry for entry in self.fs.listdir(build_directory) if entry.endswith(suffix)
        ]
        if len(matches) > 1:
            logger.warning(f"Several artifacts ending with '{suffix}' in '{build_directory}', using '{matches[0]}'")
        return posixpath.join(build_directory, matches[0]) if matches else None
