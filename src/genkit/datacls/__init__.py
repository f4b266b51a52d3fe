from .contexts import BuildContext, ProjectInfo, ProcessorConfig
from .images import ImageConfiguration, BuildConfiguration, AssemblyConfiguration

__all__ = [
    'BuildContext',
    'ProjectInfo',
    'ProcessorConfig',
    'ImageConfiguration',
    'BuildConfiguration',
    'AssemblyConfiguration',
]
