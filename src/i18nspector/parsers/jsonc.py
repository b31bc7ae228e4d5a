"""
JSON / JSONC resource parser
"""

import logging
import math
from typing import List

from ..exceptions import ResourceParseError
from ..models import ParseContext, Resource, base_key, get_or_create_resource
from ..utils import format_location
from .directives import BEGIN, END, JSONC_DIRECTIVE_REGEXP
from .jsonc_visitor import JsoncSyntaxError, JsoncVisitor, PathSegment, visit

logger = logging.getLogger(__name__)


def stringify(value) -> str:
    """Render a literal the way it reads in the file"""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ResourceCollector(JsoncVisitor):
    """Turns literal values into resources while tracking ignore directives"""

    def __init__(self, context: ParseContext):
        self.context = context
        # current object nesting depth
        self.depth = 0
        # below infinity, everything at this depth or deeper is ignored
        self.ignore_depth = math.inf
        # line holding an `ignore` directive, or -1
        self.ignore_line = -1
        # between `ignore-begin` and `ignore-end`
        self.ignore_until_end = False
        # line of the most recent opening brace, or -1
        self.object_start_line = -1
        self.resources: List[Resource] = []

    def on_comment(self, text: str, line: int):
        if self.depth >= self.ignore_depth:
            return

        match = JSONC_DIRECTIVE_REGEXP.search(text)
        if not match:
            return

        marker = match.group('marker')
        if marker == BEGIN:
            self.ignore_until_end = True
        elif marker == END:
            self.ignore_until_end = False
        else:
            self.ignore_line = line
            if line == self.object_start_line:
                self.ignore_depth = self.depth
            elif self.resources:
                resource = self.resources[-1]
                location = format_location(self.context.file_path, line)
                if resource.definitions.get(self.context.language_tag) == location:
                    resource.is_ignored = True

    def on_literal_value(self, value, line: int, path: List[PathSegment]):
        if path and isinstance(path[-1], str):
            path[-1] = base_key(path[-1])
        key = '.'.join(str(segment) for segment in path)

        resource = get_or_create_resource(self.context.resources, key)
        resource.define(
            self.context.language_tag,
            format_location(self.context.file_path, line),
            stringify(value),
            ignored=(self.depth >= self.ignore_depth
                     or line == self.ignore_line
                     or self.ignore_until_end)
        )
        self.resources.append(resource)

    def on_object_begin(self, line: int):
        self.depth += 1
        self.object_start_line = line
        if line == self.ignore_line:
            self.ignore_depth = self.depth

    def on_object_end(self, line: int):
        self.depth -= 1
        if self.depth < self.ignore_depth:
            self.ignore_depth = math.inf


def parse(content: bytes, context: ParseContext) -> List[Resource]:
    """Parse a JSON or JSONC resource file into the shared resource map"""
    collector = ResourceCollector(context)
    try:
        visit(content.decode('utf-8-sig'), collector)
    except JsoncSyntaxError as e:
        logger.error(f"Failed to parse {context.file_path}: {e}")
        raise ResourceParseError(context.file_path, e.line, str(e)) from e
    except UnicodeDecodeError as e:
        raise ResourceParseError(context.file_path, 1, f"Invalid UTF-8: {e.reason}") from e
    return collector.resources
