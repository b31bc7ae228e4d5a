"""
Inspection result data models
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Set

from .resource import Problem, Resource


@dataclass(frozen=True)
class BaseLanguage:
    """Base-language anchor found in a resource tree"""
    path: str
    directory: str
    is_directory: bool
    pattern: re.Pattern

    def match_language_tag(self, name: str):
        """Language tag captured from a sibling name, or None"""
        match = self.pattern.match(name)
        return match.group('language_tag') if match else None


@dataclass(frozen=True)
class ResourceFile:
    language_tag: str
    file_path: str


@dataclass
class ParseContext:
    """What a resource parser needs besides the file contents"""
    file_path: str
    language_tag: str
    resources: Dict[str, Resource]


@dataclass
class SourceCodeAnalysis:
    """Findings for a single source code file"""
    problems: List[Problem] = field(default_factory=list)
    referenced_resources: Set[Resource] = field(default_factory=set)


@dataclass
class SourceCodeResult:
    """Findings for a source code path"""
    files: List[str] = field(default_factory=list)
    referenced_resources: Set[Resource] = field(default_factory=set)


@dataclass(frozen=True)
class UntranslatedResource:
    resource: Resource
    missing_language_tags: List[str]


@dataclass
class InspectionReport:
    """Everything one run found"""
    defined_resources: List[Resource]
    language_tags: List[str]
    source_code_files: List[str]
    untranslated_resources: List[UntranslatedResource]
    orphaned_resources: List[Resource]
    problems: List[Problem]
    check_for_orphaned_strings: bool = True

    @property
    def has_fatal_problems(self) -> bool:
        return any(problem.is_fatal for problem in self.problems)

    @property
    def orphans_unanalyzable(self) -> bool:
        """Orphan detection was requested but fatal problems prevent it"""
        return self.check_for_orphaned_strings and self.has_fatal_problems

    @property
    def has_failures(self) -> bool:
        return bool(self.orphaned_resources or self.problems)
