"""
File system utilities
"""

import asyncio
import os
from dataclasses import dataclass
from typing import List
import logging

import aiofiles

from ..exceptions import UnreadablePathError

logger = logging.getLogger(__name__)

# Never descended into, neither for resources nor for source code
DEPENDENCY_CACHE_DIRECTORY = 'node_modules'


@dataclass(frozen=True)
class DirectoryEntry:
    """Snapshot of one directory listing entry"""
    name: str
    path: str
    is_file: bool
    is_directory: bool

    @property
    def is_dependency_cache(self) -> bool:
        return self.is_directory and self.name == DEPENDENCY_CACHE_DIRECTORY


def _scan_directory(directory_path: str) -> List[DirectoryEntry]:
    with os.scandir(directory_path) as iterator:
        entries = [
            DirectoryEntry(
                name=entry.name,
                path=os.path.join(directory_path, entry.name),
                is_file=entry.is_file(),
                is_directory=entry.is_dir()
            )
            for entry in iterator
        ]
    # files before directories, then by name
    return sorted(entries, key=lambda entry: (not entry.is_file, entry.name))


async def directory_entries(directory_path: str) -> List[DirectoryEntry]:
    """List a directory in a stable order"""
    try:
        return await asyncio.to_thread(_scan_directory, directory_path)
    except OSError as e:
        logger.error(f"Failed to list {directory_path}: {e}")
        raise UnreadablePathError(directory_path, e.strerror or str(e)) from e


async def read_file(file_path: str) -> bytes:
    """Read a whole file"""
    try:
        async with aiofiles.open(file_path, 'rb') as f:
            return await f.read()
    except OSError as e:
        logger.error(f"Failed to read {file_path}: {e}")
        raise UnreadablePathError(file_path, e.strerror or str(e)) from e


def name_matches_extensions(file_name: str, extensions: List[str]) -> bool:
    return any(file_name.endswith(extension) for extension in extensions)
