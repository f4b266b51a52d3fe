class GenkitError(Exception):
    """Base exception for all application-specific errors."""

    pass


# --- 1. Errors related to loading and parsing the build descriptor ---
class ConfigurationError(GenkitError):
    """Base class for errors encountered while finding, reading, or parsing descriptor files."""

    pass


class ConfigFileMissingError(ConfigurationError):
    """Raised when the build descriptor cannot be found."""

    pass


class ConfigParsingError(ConfigurationError):
    """Raised when a YAML descriptor is syntactically incorrect."""

    pass


class ConfigValidationError(ConfigurationError):
    """Raised when the descriptor fails structural validation (e.g., Pydantic)."""

    pass


# --- 2. Errors related to the logical definitions within the descriptor ---
class DefinitionError(GenkitError):
    """Base class for errors in the logical definition and references within the descriptor."""

    pass


class GeneratorNotFoundError(DefinitionError):
    """Raised when a generator name does not match any registered generator."""

    pass


# --- 3. Errors that occur while resolving the base image ---
class ResolutionError(GenkitError):
    """Base class for errors raised while resolving a base image."""

    pass


class ArtifactNotFoundError(ResolutionError):
    """Raised when neither a native executable nor a runnable archive was built."""

    pass


class ImageLookupError(ResolutionError):
    """Raised when the default image lookup has no entry for a key."""

    pass


class CatalogError(ResolutionError):
    """Raised for a (packaging mode, runtime mode) pair the catalog does not know."""

    pass


# --- 4. Errors related to IO operations ---
class GenkitIOError(GenkitError):
    """Base class for IO-related errors."""

    pass


class PathNotFoundError(GenkitIOError):
    """Raised when a file or directory is not found."""

    pass


class NotADirectoryPathError(GenkitIOError):
    """Raised when a directory is expected, but a file is found."""

    pass
