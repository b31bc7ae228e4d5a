"""
Java `.properties` resource parser

Only block directives apply here: `# i18nspector-ignore-begin` and
`# i18nspector-ignore-end` (or `!`-prefixed) on their own lines.
"""

import math
import re
from typing import List, Tuple

import javaproperties

from ..models import ParseContext, Resource, base_key, get_or_create_resource
from ..utils import format_location
from .directives import BEGIN, END, PROPERTIES_DIRECTIVE_REGEXP

_LINE_BREAK = re.compile(r'\r\n|\r|\n')


def _count_lines(source: str) -> int:
    return len(_LINE_BREAK.findall(source)) or 1


def _ignored_range_update(ranges: List[List[float]], marker: str, line: int):
    if marker == BEGIN:
        ranges.append([line + 1, math.inf])
    elif marker == END and ranges and ranges[-1][1] == math.inf:
        ranges[-1][1] = line - 1


def parse(content: bytes, context: ParseContext) -> List[Resource]:
    """Parse a properties file into the shared resource map"""
    ignored_ranges: List[List[float]] = []
    key_values: List[Tuple[javaproperties.KeyValue, int]] = []

    line = 1
    for element in javaproperties.parse(content.decode('utf-8', errors='replace')):
        if isinstance(element, javaproperties.KeyValue):
            key_values.append((element, line))
        elif isinstance(element, javaproperties.Comment):
            match = PROPERTIES_DIRECTIVE_REGEXP.match(element.source.lstrip())
            if match:
                _ignored_range_update(ignored_ranges, match.group('marker'), line)
        line += _count_lines(element.source)

    resources = []
    for key_value, starting_line in key_values:
        resource = get_or_create_resource(context.resources, base_key(key_value.key))
        resource.define(
            context.language_tag,
            format_location(context.file_path, starting_line),
            key_value.value,
            ignored=any(beginning <= starting_line <= end for beginning, end in ignored_ranges)
        )
        resources.append(resource)

    return resources
