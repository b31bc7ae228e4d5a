"""
Resource-related data models
"""

import re
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Dict, List, Union, Optional

Translation = Union[str, int, float, bool, None, list]

# i18next plural and ordinal suffixes, e.g. `item_one`, `item_other`, `place_ordinal_two`
RESOURCE_KEY_REGEXP = re.compile(
    r'^(?P<base_key>.+?)(?:_ordinal)?_(?:zero|one|two|few|many|other|interval|plural)$'
)


def base_key(key: str) -> str:
    """Collapse a plural-form key onto the key shared by all of its variants"""
    match = RESOURCE_KEY_REGEXP.match(key)
    return match.group('base_key') if match else key


@total_ordering
@dataclass(eq=False)
class Resource:
    """One localization key across all languages"""
    key: str
    definitions: Dict[str, str] = field(default_factory=dict)
    translations: Dict[str, Translation] = field(default_factory=dict)
    references: List[str] = field(default_factory=list)
    is_ignored: bool = False

    @property
    def is_defined(self) -> bool:
        """Whether any resource file defines this key"""
        return bool(self.definitions)

    def define(self, language_tag: str, location: str, value: Translation, ignored: bool = False):
        """Record a definition; `ignored` can set but never clear the ignore flag"""
        self.definitions[language_tag] = location
        self.translations[language_tag] = value
        self.is_ignored = self.is_ignored or ignored

    def add_reference(self, location: str):
        self.references.append(location)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: 'Resource') -> bool:
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)


def get_or_create_resource(resources: Dict[str, Resource], key: str) -> Resource:
    resource: Optional[Resource] = resources.get(key)
    if resource is None:
        resource = resources[key] = Resource(key)
    return resource


@dataclass(frozen=True)
class Problem:
    """Source code finding"""
    description: str
    precludes_static_analysis: bool

    @property
    def is_fatal(self) -> bool:
        return self.precludes_static_analysis
