from .lookup import DefaultImageLookup
from .catalog import DefaultImageCatalog

__all__ = [
    'DefaultImageLookup',
    'DefaultImageCatalog',
]
