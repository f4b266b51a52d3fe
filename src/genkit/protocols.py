"""
genkit Protocol Definitions

This module contains the Protocol definitions for genkit's external collaborators.

Protocols are the foundation layer with zero dependencies on other genkit modules.
"""

from typing import Protocol, runtime_checkable


# ============================================================================
# Image Lookup Protocols
# ============================================================================

@runtime_checkable
class ImageLookupProtocol(Protocol):
    """
    Protocol for default image lookups.

    A lookup resolves a well-known key (e.g. `runtime.upstream.docker`) to an
    image reference, or raises if the key is unknown.
    """

    def get_image_name(self, key: str) -> str:
        """
        Resolve a lookup key.

        Args:
            key: Well-known default image key

        Returns:
            Image reference string
        """
        ...
