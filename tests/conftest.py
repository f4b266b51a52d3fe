import pytest
from pathlib import Path
from typing import Dict, List

from genkit import BuildContext, ProjectInfo, ProcessorConfig, RuntimeMode
from genkit.exceptions import ImageLookupError

RUNTIME_IMAGES = {
    "runtime.upstream.docker": "quarkus/docker",
    "runtime.upstream.s2i": "quarkus/s2i",
}


class RecordingImageLookup:
    """Default image lookup that remembers which keys were asked for."""

    def __init__(self, images: Dict[str, str]):
        self.images = images
        self.calls: List[str] = []

    def get_image_name(self, key: str) -> str:
        self.calls.append(key)
        if key not in self.images:
            raise ImageLookupError(f"unknown key '{key}'")
        return self.images[key]


@pytest.fixture
def image_lookup():
    return RecordingImageLookup(dict(RUNTIME_IMAGES))


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
    """A build directory holding only the runner jar, like after a JVM build."""
    target = tmp_path / "target"
    target.mkdir()
    (target / "sample-runner.jar").touch()
    return target


@pytest.fixture
def native_executable(build_dir: Path) -> Path:
    executable = build_dir / "sample-runner"
    executable.touch()
    return executable


@pytest.fixture
def make_context(build_dir: Path):
    """Factory for build contexts pointing at `build_dir`."""
    def _make(mode: RuntimeMode = RuntimeMode.OPENSHIFT, properties=None, config=None, **kwargs):
        project = {
            "version": "0.0.1-SNAPSHOT",
            "build_directory": str(build_dir),
            "properties": properties or {},
        }
        for key in ("version", "group_id", "artifact_id", "build_directory"):
            if key in kwargs:
                project[key] = kwargs.pop(key)
        return BuildContext(
            project=ProjectInfo(**project),
            config=ProcessorConfig(config=config or {}),
            runtime_mode=mode,
            **kwargs,
        )
    return _make
