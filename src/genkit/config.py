import yaml
import logging
import os
from typing import Dict, Any, List, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator, ConfigDict

from . import constants
from .datacls import BuildContext, ImageConfiguration, ProcessorConfig, ProjectInfo
from .io import FileSystem, create_app_fs
from .exceptions import (
    ConfigParsingError,
    ConfigFileMissingError,
    ConfigValidationError,
    PathNotFoundError,
)


logger = logging.getLogger(__name__)


class ProjectModel(BaseModel):
    """
        Class Config-Validation Model describe `project`
    """
    version: str = "0.0.1-SNAPSHOT"
    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    build_directory: str = "target"
    properties: Dict[str, str] = Field(default_factory=dict)

    @field_validator('properties', mode='before')
    @classmethod
    def stringify_properties(cls, value: Any) -> Any:
        """YAML turns `true` and `8080` into non-strings, properties are always strings; empty values are dropped"""
        if not isinstance(value, dict):
            return value
        props = {}
        for key, val in value.items():
            if val is None:
                continue
            if isinstance(val, bool):
                val = "true" if val else "false"
            props[str(key)] = str(val)
        return props


class ConfigModel(BaseModel):
    """
        Class Config-Validation Model desribe top-level of the build descriptor
    """
    project: ProjectModel = Field(default_factory=ProjectModel)
    generator: str = constants.DEFAULT_GENERATOR
    generators: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    mode: constants.RuntimeMode = constants.RuntimeMode.KUBERNETES
    strategy: constants.BuildStrategy = constants.BuildStrategy.DOCKER
    namespace: str = constants.PROPERTY_NAMESPACE
    images: List[ImageConfiguration] = Field(default_factory=list)
    default_images: Dict[str, str] = Field(default_factory=dict)
    model_config = ConfigDict(extra="forbid")

    @field_validator('generators', mode='before')
    @classmethod
    def allow_empty_generator_blocks(cls, value: Any) -> Any:
        """`quarkus:` with no body means no overrides"""
        if isinstance(value, dict):
            return {name: opts or {} for name, opts in value.items()}
        return value


class Config:
    """
    Loads and validates a build descriptor (YAML) using Pydantic models.
    It is the sole gatekeeper for configuration.
    """
    def __init__(self, config_path: str, fs: FileSystem = None):
        self.path = config_path
        self.fs = fs or create_app_fs()
        logger.info(f"Loading build descriptor from '{self.path}'...")
        raw_data = self._load_raw_config()

        logger.debug("Validating descriptor structure with Pydantic...")
        try:
            self.model = ConfigModel.model_validate(raw_data)
            logger.debug(f"Descriptor validated successfully: \n{self.model.model_dump_json(indent=2)}")
        except ValidationError as e:
            raise ConfigValidationError(f"Build descriptor validation failed:\n{e}")

    def _load_raw_config(self) -> Dict[str, Any]:
        try:
            content = self.fs.read_text(self.path)
        except (FileNotFoundError, PathNotFoundError):
            raise ConfigFileMissingError(f"Build descriptor not found at: {self.path}")
        try:
            config_data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigParsingError(f"Error parsing YAML file: {e}")
        if config_data is None:
            return {}
        if not isinstance(config_data, dict):
            raise ConfigParsingError("Build descriptor must be a YAML document containing a dictionary.")
        logger.debug(f"Successfully parsed YAML from '{self.path}'.")
        return config_data

    @property
    def generator(self) -> str:
        return self.model.generator

    @property
    def images(self) -> List[ImageConfiguration]:
        return list(self.model.images)

    @property
    def default_images(self) -> Dict[str, str]:
        return dict(self.model.default_images)

    @property
    def build_directory(self) -> str:
        """Build directory, relative paths taken from the descriptor's directory"""
        build_dir = self.model.project.build_directory
        if os.path.isabs(build_dir):
            return build_dir
        base = os.path.dirname(os.path.abspath(self.path))
        return os.path.join(base, build_dir)

    def context(self, fs: Optional[FileSystem] = None) -> BuildContext:
        """Build the immutable context handed to generators"""
        project = ProjectInfo(
            **self.model.project.model_dump(exclude={"build_directory"}),
            build_directory=self.build_directory,
        )
        return BuildContext(
            fs=fs or self.fs,
            project=project,
            config=ProcessorConfig(config=self.model.generators),
            runtime_mode=self.model.mode,
            strategy=self.model.strategy,
            namespace=self.model.namespace,
        )
