"""
Resource tree walking and parsing
"""

import logging
from typing import Dict, List, Optional

from ..config import InspectorSettings
from ..models import BaseLanguage, ParseContext, Resource, ResourceFile
from ..parsers import parser_for
from ..utils import directory_entries, format_count, name_matches_extensions, read_file

logger = logging.getLogger(__name__)


class ResourceService:
    """Parses every resource file that shares the base language's naming convention"""

    def __init__(self, settings: InspectorSettings):
        self.resource_extensions = settings.resource_extensions

    async def parse_resource_file(self, file_path: str, language_tag: str,
                                  resources: Dict[str, Resource]) -> List[Resource]:
        """Parse one file into `resources`, returning the resources it defines"""
        logger.debug(f"🔍  Parsing resource file {file_path}")

        content = await read_file(file_path)
        parser = parser_for(file_path)
        parsed = parser(content, ParseContext(file_path=file_path, language_tag=language_tag, resources=resources))

        logger.info(f"🌐  Found {format_count(len(parsed), 'translation')} for '{language_tag}' in {file_path}.")
        return parsed

    async def process_resource_files(self, directory_path: str, base_language: BaseLanguage,
                                     resources: Dict[str, Resource]) -> List[ResourceFile]:
        """
        Walk `directory_path` (the directory holding the base language) and parse
        every resource file into `resources`

        With a base-language directory (`en/strings.json`), only sibling directories
        matching its pattern are entered and the captured tag applies to every file
        beneath them. With a base-language file (`strings-en.json`), any file in the
        tree matching its pattern is parsed under the tag in its name.
        """
        return await self._walk(directory_path, base_language, resources, language_tag=None, top_level=True)

    async def _walk(self, directory_path: str, base_language: BaseLanguage, resources: Dict[str, Resource],
                    language_tag: Optional[str], top_level: bool) -> List[ResourceFile]:
        files: List[ResourceFile] = []

        logger.debug(f"📂  Searching for {', '.join(self.resource_extensions)} resources in {directory_path}")

        for entry in await directory_entries(directory_path):
            if entry.is_directory and not entry.is_dependency_cache:
                tag = language_tag
                # still listing the directory that holds the language directories
                if base_language.is_directory and top_level:
                    tag = base_language.match_language_tag(entry.name)
                    if tag is None:
                        logger.debug(f"➖  Skipped {entry.path} as it doesn't match pattern "
                                     f"{base_language.pattern.pattern}.")
                        continue
                files.extend(await self._walk(entry.path, base_language, resources, tag, top_level=False))

            elif entry.is_file and name_matches_extensions(entry.name, self.resource_extensions):
                if base_language.is_directory:
                    if top_level:
                        logger.debug(f"➖  Skipped {entry.path} as it's adjacent to language directories.")
                        continue
                    tag = language_tag
                else:
                    tag = base_language.match_language_tag(entry.name)
                    if tag is None:
                        logger.debug(f"➖  Skipped {entry.path} as it doesn't match pattern "
                                     f"{base_language.pattern.pattern}.")
                        continue

                files.append(ResourceFile(language_tag=tag, file_path=entry.path))
                await self.parse_resource_file(entry.path, tag, resources)

        return files
