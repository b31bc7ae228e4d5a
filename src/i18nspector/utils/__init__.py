"""
Utility modules for i18nspector
"""

from .file_utils import (
    DEPENDENCY_CACHE_DIRECTORY, DirectoryEntry, directory_entries, read_file, name_matches_extensions
)
from .text import pluralize, format_count, format_location

__all__ = [
    'DEPENDENCY_CACHE_DIRECTORY', 'DirectoryEntry', 'directory_entries', 'read_file',
    'name_matches_extensions', 'pluralize', 'format_count', 'format_location'
]
