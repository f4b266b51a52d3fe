from abc import ABC, abstractmethod
from typing import List, Union
from typing import override
import logging
import os
import posixpath
import fsspec
from morefs.memory import MemFS
from ..exceptions import (
    PathNotFoundError,
    NotADirectoryPathError,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def wrap_io_error(func):
    """Decorator to wrap IO errors into genkit exceptions."""

    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FileNotFoundError as e:
            raise PathNotFoundError(e) from e
        except NotADirectoryError as e:
            raise NotADirectoryPathError(e) from e

    return wrapper

# --------------------------------------------------------
#
# Abstract Base FileSystem Interface
#
# --------------------------------------------------------

class FileSystem(ABC):
    """genkit File System Abstract Base Class"""

    @abstractmethod
    def read_text(self, path: PathLike) -> str:
        """Read text from a file"""
        pass

    @abstractmethod
    def write_text(self, path: PathLike, content: str):
        """Write text to a file"""
        pass

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        """Check if a path exists"""
        pass

    @abstractmethod
    def is_dir(self, path: PathLike) -> bool:
        """Check if a path is a directory"""
        pass

    @abstractmethod
    def is_file(self, path: PathLike) -> bool:
        """Check if a path is a file"""
        pass

    @abstractmethod
    def listdir(self, path: PathLike) -> List[str]:
        """List the entry names of a directory"""
        pass

# --------------------
#
# Generic FileSystem
#
# --------------------

class GenericFileSystem(FileSystem, ABC):
    """Generic File System base class for fsspec and morefs implementations"""

    def __init__(self, fs_instance, name=None):
        """
        Initialize with a filesystem instance
        
        Args:
            fs_instance: The underlying filesystem instance (fsspec or morefs)
            name: Optional name for logging purposes
        """
        self.fs = fs_instance
        self.name = name or f"{type(fs_instance).__name__}"

    @abstractmethod
    def path2str(self, path: PathLike) -> str:
        """Convert a path to the string form the backend expects"""
        pass

    @override
    @wrap_io_error
    def read_text(self, path: PathLike, encoding: str = "utf-8") -> str:
        logger.debug(f"[{self.name}] Reading from: {path}")
        with self.fs.open(self.path2str(path), "r", encoding=encoding) as f:
            return f.read()

    @override
    def write_text(self, path: PathLike, content: str, encoding: str = "utf-8"):
        logger.debug(f"[{self.name}] Writing to: {path}")
        target = self.path2str(path)
        parent = posixpath.dirname(target)
        if parent:
            self.fs.mkdirs(parent, exist_ok=True)
        with self.fs.open(target, "w", encoding=encoding) as f:
            f.write(content)

    @override
    def exists(self, path: PathLike) -> bool:
        return self.fs.exists(self.path2str(path))

    @override
    def is_dir(self, path: PathLike) -> bool:
        return self.fs.isdir(self.path2str(path))

    @override
    def is_file(self, path: PathLike) -> bool:
        return self.fs.isfile(self.path2str(path))

    @override
    @wrap_io_error
    def listdir(self, path: PathLike) -> List[str]:
        entries = self.fs.ls(self.path2str(path), detail=False)
        return sorted(posixpath.basename(str(p).rstrip("/")) for p in entries)


class FsspecFileSystem(GenericFileSystem):
    """fsspec-based File System"""

    def __init__(self, protocol="file"):
        fs_instance = fsspec.filesystem(protocol)
        super().__init__(fs_instance, name=f"{protocol}FS")
        self.protocol = protocol

    @override
    def path2str(self, path: PathLike) -> str:
        return os.fspath(path)


class DiskFileSystem(FsspecFileSystem):
    """Local disk file system using fsspec"""

    def __init__(self):
        super().__init__(protocol="file")


class MemoryFileSystem(GenericFileSystem):
    """
    In-memory filesystem backed by morefs, one private store per instance
    """
    def __init__(self):
        super().__init__(MemFS(), name="MemFS")

    @override
    def path2str(self, path: PathLike) -> str:
        path_str = os.fspath(path).replace("\\", "/")
        if not path_str.startswith('/'):
            path_str = '/' + path_str
        return path_str


def create_app_fs(use_vfs: bool = False) -> FileSystem:
    """
    Create the filesystem used by a run, in memory when `use_vfs` is set.
    """
    if use_vfs:
        return MemoryFileSystem()
    return DiskFileSystem()
