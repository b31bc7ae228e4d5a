"""
Source code tree walking
"""

import logging
import os
from typing import Dict, List

from ..config import InspectorSettings
from ..models import Problem, Resource, SourceCodeAnalysis, SourceCodeResult
from ..utils import directory_entries, format_count, name_matches_extensions, pluralize, read_file
from .source_code_analyzer import analyze_source_code

logger = logging.getLogger(__name__)


class SourceCodeService:
    """Finds translation references in every source code file under a path"""

    def __init__(self, settings: InspectorSettings):
        self.source_code_extensions = settings.source_code_extensions

    async def parse_source_code_file(self, file_path: str, resources: Dict[str, Resource]) -> SourceCodeAnalysis:
        logger.debug(f"🔍  Parsing source code file {file_path}")
        source = await read_file(file_path)
        return analyze_source_code(source, file_path, resources)

    async def process_source_code_files(self, path: str, problems: List[Problem],
                                        resources: Dict[str, Resource]) -> SourceCodeResult:
        """
        Analyze every source code file under `path` (or `path` itself if it is a file)

        Problems are appended to `problems`. The result lists the files that
        reference at least one string or have at least one problem.
        """
        result = SourceCodeResult()

        if os.path.isfile(path):
            await self._process_file(path, problems, resources, result)
            return result

        logger.debug(f"📂  Searching for {', '.join(self.source_code_extensions)} source code in {path}")

        for entry in await directory_entries(path):
            if entry.is_directory and not entry.is_dependency_cache:
                nested = await self.process_source_code_files(entry.path, problems, resources)
                result.files.extend(nested.files)
                result.referenced_resources.update(nested.referenced_resources)
            elif entry.is_file and name_matches_extensions(entry.name, self.source_code_extensions):
                await self._process_file(entry.path, problems, resources, result)

        return result

    async def _process_file(self, file_path: str, problems: List[Problem], resources: Dict[str, Resource],
                            result: SourceCodeResult):
        analysis = await self.parse_source_code_file(file_path, resources)

        if analysis.problems or analysis.referenced_resources:
            result.files.append(file_path)
        problems.extend(analysis.problems)
        result.referenced_resources.update(analysis.referenced_resources)

        count = len(analysis.referenced_resources)
        if count:
            logger.info(f"🔗  Found {pluralize(count, 'reference')} to {format_count(count, 'string')} in {file_path}.")
