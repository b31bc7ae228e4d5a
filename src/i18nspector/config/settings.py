"""
Configuration settings with validation
"""

import os
import re
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_RESOURCE_EXTENSIONS = ['.json', '.jsonc', '.properties']
DEFAULT_SOURCE_CODE_EXTENSIONS = ['.js', '.jsx', '.ts', '.tsx']

OPTIONAL_PATH_SUFFIX = '?'


def parse_list(value: Optional[str]) -> List[str]:
    """Split a comma-separated value, dropping blank elements"""
    if not value:
        return []
    return [element.strip() for element in value.split(',') if element.strip()]


def parse_toggle(value: Optional[str], default: bool = True) -> bool:
    """Only `no` (any case) turns a check off"""
    if value is None:
        return default
    return value.strip().lower() != 'no'


@dataclass
class InspectorSettings:
    """Inspection configuration"""
    resource_paths: List[str] = field(default_factory=list)
    source_code_paths: List[str] = field(default_factory=list)
    base_language_tag: str = 'en'
    resource_extensions: List[str] = field(default_factory=lambda: list(DEFAULT_RESOURCE_EXTENSIONS))
    source_code_extensions: List[str] = field(default_factory=lambda: list(DEFAULT_SOURCE_CODE_EXTENSIONS))
    check_for_orphaned_strings: bool = True
    check_for_untranslated_strings: bool = True
    verbose: int = 0
    optional_resource_paths: List[str] = field(default_factory=list)

    def __post_init__(self):
        # Validate base language
        if not self.base_language_tag or not re.fullmatch(r'[-0-9A-Za-z]+', self.base_language_tag):
            raise ValueError(f"Invalid base language tag: '{self.base_language_tag}'")

        # Validate extensions
        if not self.resource_extensions:
            raise ValueError("At least one resource extension is required")
        if not self.source_code_extensions:
            raise ValueError("At least one source code extension is required")

        # Validate verbosity
        if self.verbose not in (0, 1, 2):
            raise ValueError("Verbosity must be 0, 1, or 2")

        # Paths suffixed with `?` hold strings exempt from orphan checks
        resource_paths = []
        for path in self.resource_paths:
            if path.endswith(OPTIONAL_PATH_SUFFIX):
                path = path[:-len(OPTIONAL_PATH_SUFFIX)]
                if path not in self.optional_resource_paths:
                    self.optional_resource_paths.append(path)
            resource_paths.append(path)
        self.resource_paths = resource_paths

    @property
    def has_paths(self) -> bool:
        return bool(self.resource_paths and self.source_code_paths)

    @classmethod
    def from_env(cls, **overrides) -> 'InspectorSettings':
        """Create settings from environment variables; keyword overrides win"""
        try:
            verbose = int(os.getenv('I18NSPECTOR_VERBOSE', '0'))
        except ValueError:
            raise ValueError("Invalid I18NSPECTOR_VERBOSE format. Use 0, 1, or 2.")

        values = dict(
            resource_paths=parse_list(os.getenv('I18NSPECTOR_RESOURCE_PATHS')),
            source_code_paths=parse_list(os.getenv('I18NSPECTOR_SOURCE_CODE_PATHS')),
            base_language_tag=os.getenv('I18NSPECTOR_BASE_LANGUAGE', 'en'),
            resource_extensions=(parse_list(os.getenv('I18NSPECTOR_RESOURCE_EXTENSIONS'))
                                 or list(DEFAULT_RESOURCE_EXTENSIONS)),
            source_code_extensions=(parse_list(os.getenv('I18NSPECTOR_SOURCE_CODE_EXTENSIONS'))
                                    or list(DEFAULT_SOURCE_CODE_EXTENSIONS)),
            check_for_orphaned_strings=parse_toggle(os.getenv('I18NSPECTOR_CHECK_ORPHANED_STRINGS')),
            check_for_untranslated_strings=parse_toggle(os.getenv('I18NSPECTOR_CHECK_UNTRANSLATED_STRINGS')),
            verbose=verbose
        )
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
