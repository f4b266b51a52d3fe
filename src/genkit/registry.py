"""
genkit Registries

This module contains the generator registry used to look generators up by name.

Dependencies:
- generator: For the Generator base class used in discovery
"""

import importlib
import inspect
import logging
from typing import Dict, Optional, Set, Type

from .exceptions import GeneratorNotFoundError
from .generator import Generator

logger = logging.getLogger(__name__)


def discover_classes(pkg_name: str, base_cls: type) -> Dict[str, type]:
    """
    Discover concrete subclasses of `base_cls` exported by `pkg_name`

    Returns:
        dictionary {class name: class object}
    """
    discovered = {}
    module = importlib.import_module(pkg_name)
    for name, obj in inspect.getmembers(module, inspect.isclass):
        if obj is base_cls or not issubclass(obj, base_cls):
            continue
        if inspect.isabstract(obj):
            continue
        discovered[name] = obj
    return discovered


class GeneratorRegistry:
    """
    Registry for discovering and managing generator classes, keyed by generator name.
    """
    package = "genkit.generator"
    base_class = Generator

    def __init__(self):
        self._registry: Dict[str, Type[Generator]] = {}
        logger.debug(f"Initialized {self.__class__.__name__}")

    def register(self, key: str, value: Type[Generator]):
        self._registry[key] = value
        logger.debug(f"Registered in {self.__class__.__name__}: {key} -> {value.__name__}")

    def get(self, key: str) -> Optional[Type[Generator]]:
        return self._registry.get(key)

    @property
    def registry(self) -> Dict[str, Type[Generator]]:
        return self._registry

    def discover(self):
        logger.debug(f"Starting discovery for {self.__class__.__name__} in '{self.package}'...")
        for class_name, cls in discover_classes(self.package, self.base_class).items():
            if not cls.name:
                logger.warning(f"Generator class '{class_name}' has no name, skipping")
                continue
            self.register(cls.name, cls)
        logger.debug(f"Discovery for {self.__class__.__name__} finished. Total items: {len(self._registry)}")

    def generator(self, name: str) -> Type[Generator]:
        if not self._registry:
            self.discover()
        cls = self.get(name)
        if cls is None:
            raise GeneratorNotFoundError(
                f"Unknown generator '{name}', available: {sorted(self.get_supports())}"
            )
        return cls

    def get_supports(self) -> Set[str]:
        return set(self._registry.keys())


# Global registry
generator_registry = GeneratorRegistry()
