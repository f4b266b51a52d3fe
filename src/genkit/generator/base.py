from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..datacls import BuildContext, ImageConfiguration
from ..protocols import ImageLookupProtocol


class Generator(ABC):
    """
    Abstract Class for an image generator.

    Subclasses set `name`, which is also the key of their override config and
    of their `<namespace>.generator.<name>.*` properties.
    """
    name: str = ""

    def __init__(self, context: BuildContext, image_lookup: Optional[ImageLookupProtocol] = None):
        self.context = context
        self.image_lookup = image_lookup

    @abstractmethod
    def customize(self, existing: Sequence[ImageConfiguration], primary: bool = True) -> List[ImageConfiguration]:
        """
        Appends this generator's image configuration.

        Args:
            existing: Image configurations already known to the caller.
            primary: Recorded in the new configuration's metadata.
        Returns:
            `existing` followed by exactly one new image configuration.
        """
        pass
