"""
genkit Generator Module

- ArtifactProbe: Detects the packaged artifact in the build directory
- NativeModeResolver: Native vs runtime packaging
- BaseImageResolver: Base image precedence (config, property, catalog)
- BuildSpecComposer: Appends the generated image configuration
- QuarkusGenerator: Wires the above for Quarkus applications

Usage:
    from genkit.generator import QuarkusGenerator

    images = QuarkusGenerator(context).customize([], primary=True)
"""

from .base import Generator
from .probe import ArtifactProbe
from .native import NativeModeResolver, is_true
from .options import GeneratorConfig
from .resolve import BaseImageResolver, Resolution
from .compose import BuildSpecComposer
from .quarkus import QuarkusGenerator

__all__ = [
    'Generator',
    'ArtifactProbe',
    'NativeModeResolver',
    'is_true',
    'GeneratorConfig',
    'BaseImageResolver',
    'Resolution',
    'BuildSpecComposer',
    'QuarkusGenerator',
]
