import logging
from typing import Any, Dict, Optional

from .. import constants
from ..datacls import BuildContext

logger = logging.getLogger(__name__)


class GeneratorConfig:
    """
    Option lookup for one generator.

    An option is taken from the override config first, then from the project
    property `<namespace>.generator.<name>.<key>`. Values are returned as given.
    """

    def __init__(self, context: BuildContext, name: str):
        self.name = name
        self.prefix = f"{context.namespace}.{constants.GENERATOR_PROPERTY_PREFIX}.{name}"
        self.overrides: Dict[str, Any] = context.config.generator_options(name)
        self.properties: Dict[str, str] = context.project.properties

    def property_key(self, key: str) -> str:
        return f"{self.prefix}.{key}"

    def from_overrides(self, key: str) -> Optional[Any]:
        return self.overrides.get(key)

    def from_properties(self, key: str) -> Optional[str]:
        return self.properties.get(self.property_key(key))

    def get(self, key: str, default: Optional[Any] = None) -> Optional[Any]:
        value = self.from_overrides(key)
        if value is not None:
            logger.debug(f"[{self.name}] Option '{key}' taken from override config")
            return value
        value = self.from_properties(key)
        if value is not None:
            logger.debug(f"[{self.name}] Option '{key}' taken from property '{self.property_key(key)}'")
            return value
        return default
