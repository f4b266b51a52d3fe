"""
genkit IO Module

- FileSystem: Abstract file system interface
- DiskFileSystem: Local disk file system (fsspec)
- MemoryFileSystem: In-memory file system for testing (morefs)

Usage:
    from genkit.io import create_app_fs

    fs = create_app_fs()
    fs.exists("target/sample-runner.jar")
"""

from .fs import (
    FileSystem,
    GenericFileSystem,
    FsspecFileSystem,
    DiskFileSystem,
    MemoryFileSystem,
    create_app_fs,
)

__all__ = [
    'FileSystem',
    'GenericFileSystem',
    'FsspecFileSystem',
    'DiskFileSystem',
    'MemoryFileSystem',
    'create_app_fs',
]
