"""
Inspection orchestration and classification
"""

import logging
from typing import Dict, List

from ..config import InspectorSettings
from ..exceptions import BaseLanguageNotFoundError, NoSourceCodeFilesError
from ..models import InspectionReport, Problem, Resource, UntranslatedResource
from .language_service import LanguageService
from .resource_service import ResourceService
from .source_code_service import SourceCodeService

logger = logging.getLogger(__name__)


class InspectionService:
    """Runs one inspection: resources, then source code, then classification"""

    def __init__(self, settings: InspectorSettings):
        self.settings = settings
        self.language_service = LanguageService(settings)
        self.resource_service = ResourceService(settings)
        self.source_code_service = SourceCodeService(settings)

        # state of the current run
        self.resources: Dict[str, Resource] = {}
        self.problems: List[Problem] = []
        self.resource_files_by_language_tag: Dict[str, List[str]] = {}
        self.source_code_files: List[str] = []

    def reset(self):
        self.resources = {}
        self.problems = []
        self.resource_files_by_language_tag = {}
        self.source_code_files = []

    async def process_resource_path(self, resource_path: str):
        base_language = await self.language_service.find_base_language(resource_path)
        if base_language is None:
            error = BaseLanguageNotFoundError(
                resource_path, self.settings.base_language_tag, self.settings.resource_extensions
            )
            logger.error(str(error))
            raise error

        files = await self.resource_service.process_resource_files(
            base_language.directory, base_language, self.resources
        )
        for resource_file in files:
            self.resource_files_by_language_tag.setdefault(resource_file.language_tag, []).append(
                resource_file.file_path
            )

    async def process_source_code_path(self, source_code_path: str):
        result = await self.source_code_service.process_source_code_files(
            source_code_path, self.problems, self.resources
        )
        if not result.files:
            error = NoSourceCodeFilesError(source_code_path, self.settings.source_code_extensions)
            logger.error(str(error))
            raise error

        self.source_code_files.extend(result.files)

    def is_in_optional_resource_path(self, resource: Resource) -> bool:
        return any(
            location.startswith(optional_path)
            for optional_path in self.settings.optional_resource_paths
            for location in resource.definitions.values()
        )

    def classify(self) -> InspectionReport:
        """Turn the collected resources, references, and problems into findings"""
        has_fatal_problems = any(problem.is_fatal for problem in self.problems)
        language_tags = list(self.resource_files_by_language_tag)

        defined: List[Resource] = []
        orphaned: List[Resource] = []
        untranslated: List[UntranslatedResource] = []

        for resource in self.resources.values():
            if resource.is_defined:
                defined.append(resource)

            # one unanalyzable call site can hide any number of references
            if (self.settings.check_for_orphaned_strings and not has_fatal_problems
                    and not resource.is_ignored and not resource.references
                    and not self.is_in_optional_resource_path(resource)):
                orphaned.append(resource)

            if (self.settings.check_for_untranslated_strings
                    and 0 < len(resource.translations) < len(language_tags)):
                missing = [tag for tag in language_tags if tag not in resource.translations]
                untranslated.append(UntranslatedResource(resource=resource, missing_language_tags=missing))

        return InspectionReport(
            defined_resources=defined,
            language_tags=language_tags,
            source_code_files=list(self.source_code_files),
            untranslated_resources=untranslated,
            orphaned_resources=orphaned,
            problems=list(self.problems),
            check_for_orphaned_strings=self.settings.check_for_orphaned_strings
        )

    async def inspect(self) -> InspectionReport:
        """Run a full inspection of every configured path"""
        self.reset()

        for resource_path in self.settings.resource_paths:
            await self.process_resource_path(resource_path)

        for source_code_path in self.settings.source_code_paths:
            await self.process_source_code_path(source_code_path)

        return self.classify()
