"""
genkit - base image resolution for generated application images

Decides which image a generated application image is built FROM: generator
config first, then project properties, then a default picked by packaging
mode (native executable or runnable jar) and runtime mode (Kubernetes or
OpenShift).

Main modules:
- generator: Artifact probing, native mode, base image resolution, composition
- images: Default image catalog and lookup
- datacls: Build context and image configuration models
- config: Build descriptor loading and validation
- io: File system abstraction
- registry: Generator discovery
- utils: Utility functions

Quick start example:
```python
from genkit import BuildContext, ProjectInfo, QuarkusGenerator

ctx = BuildContext(project=ProjectInfo(artifact_id="sample", build_directory="target"))
images = QuarkusGenerator(ctx).customize([], primary=True)
print(images[-1].build.from_image)
```
"""

__version__ = "0.3.0"

from .constants import RuntimeMode, PackagingMode, BuildStrategy
from .datacls import BuildContext, ProjectInfo, ProcessorConfig, ImageConfiguration, BuildConfiguration
from .images import DefaultImageLookup, DefaultImageCatalog
from .generator import (
    ArtifactProbe,
    NativeModeResolver,
    BaseImageResolver,
    BuildSpecComposer,
    QuarkusGenerator,
)
from .registry import generator_registry
from .config import Config, ConfigModel
from .exceptions import (
    GenkitError,
    ConfigurationError,
    DefinitionError,
    ResolutionError,
    ArtifactNotFoundError,
    ImageLookupError,
)

__all__ = [
    # Version
    '__version__',
    # Modes
    'RuntimeMode',
    'PackagingMode',
    'BuildStrategy',
    # Data classes
    'BuildContext',
    'ProjectInfo',
    'ProcessorConfig',
    'ImageConfiguration',
    'BuildConfiguration',
    # Images
    'DefaultImageLookup',
    'DefaultImageCatalog',
    # Generator
    'ArtifactProbe',
    'NativeModeResolver',
    'BaseImageResolver',
    'BuildSpecComposer',
    'QuarkusGenerator',
    'generator_registry',
    # Config
    'Config',
    'ConfigModel',
    # Exceptions
    'GenkitError',
    'ConfigurationError',
    'DefinitionError',
    'ResolutionError',
    'ArtifactNotFoundError',
    'ImageLookupError',
]
