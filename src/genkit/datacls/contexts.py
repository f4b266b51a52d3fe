"""
genkit Build Context

This module contains the BuildContext data class, which holds everything a
generator reads for one invocation. The caller builds it and nothing in
genkit mutates it.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional

from .. import constants
from ..io import FileSystem, DiskFileSystem


class ProjectInfo(BaseModel):
    """
    Metadata of the project whose artifact is being packaged.
    """
    model_config = ConfigDict(frozen=True)

    version: str = "0.0.1-SNAPSHOT"
    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    build_directory: str = "target"
    properties: Dict[str, str] = Field(default_factory=dict)


class ProcessorConfig(BaseModel):
    """
    Per-generator override config, keyed by generator name.

    e.g. {"quarkus": {"from": "java:latest"}}
    """
    model_config = ConfigDict(frozen=True)

    config: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    def generator_options(self, name: str) -> Dict[str, Any]:
        return self.config.get(name) or {}


class BuildContext(BaseModel):
    """
    Holds the shared, immutable state a generator needs for one invocation.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    fs: FileSystem = Field(default_factory=DiskFileSystem)

    project: ProjectInfo = Field(default_factory=ProjectInfo)
    config: ProcessorConfig = Field(default_factory=ProcessorConfig)
    runtime_mode: constants.RuntimeMode = constants.RuntimeMode.KUBERNETES
    strategy: constants.BuildStrategy = constants.BuildStrategy.DOCKER
    namespace: str = constants.PROPERTY_NAMESPACE
