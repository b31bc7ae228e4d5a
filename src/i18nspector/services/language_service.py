"""
Base language discovery
"""

import logging
import re
from typing import List, Optional

from ..config import InspectorSettings
from ..models import BaseLanguage
from ..utils import DirectoryEntry, directory_entries

logger = logging.getLogger(__name__)


class LanguageService:
    """Finds the base-language resource and derives the naming pattern of its siblings"""

    def __init__(self, settings: InspectorSettings):
        self.base_language_tag = settings.base_language_tag
        self.resource_extensions = settings.resource_extensions
        self._extension_pattern = '|'.join(re.escape(extension) for extension in self.resource_extensions)

    def _base_language_regexp(self, entry: DirectoryEntry) -> re.Pattern:
        # directories: `*<tag>`, files: `*<tag>*<extension>`
        return re.compile(''.join([
            '^(?P<name>.*)',
            rf'\b{re.escape(self.base_language_tag)}\b',
            f'.*(?:{self._extension_pattern})' if entry.is_file else '',
            '$'
        ]), re.ASCII)

    def _sibling_regexp(self, entry: DirectoryEntry, name: str) -> re.Pattern:
        # `en/strings.json`         → `<tag>` directories
        # `locales/strings-en.json` → `strings-<tag><extension>` files
        return re.compile(''.join([
            '^',
            re.escape(name),
            r'\b(?P<language_tag>[-0-9A-Za-z]{2,})\b',
            f'(?:{self._extension_pattern})' if entry.is_file else '',
            '$'
        ]), re.ASCII)

    def match_entry(self, entry: DirectoryEntry, directory_path: str) -> Optional[BaseLanguage]:
        """Anchor for `entry` if it is named after the base language"""
        if entry.is_dependency_cache or not (entry.is_file or entry.is_directory):
            return None

        match = self._base_language_regexp(entry).match(entry.name)
        if not match:
            return None

        return BaseLanguage(
            path=entry.path,
            directory=directory_path,
            is_directory=entry.is_directory,
            pattern=self._sibling_regexp(entry, match.group('name'))
        )

    async def find_base_language(self, directory_path: str) -> Optional[BaseLanguage]:
        """
        Search `directory_path` for a directory or resource file named after the base language

        Every entry of a directory is checked before any of its subdirectories
        is searched; subdirectories are then searched in listing order and the
        first match wins.
        """
        logger.debug(f"📂  Searching for base language ('{self.base_language_tag}') in {directory_path}")

        entries: List[DirectoryEntry] = await directory_entries(directory_path)

        for entry in entries:
            base_language = self.match_entry(entry, directory_path)
            if base_language:
                logger.info(f"✔️   Found '{self.base_language_tag}' base language at {entry.path}.")
                return base_language

        for entry in entries:
            if entry.is_directory and not entry.is_dependency_cache:
                base_language = await self.find_base_language(entry.path)
                if base_language:
                    return base_language

        return None
