"""
Resource file parsers, selected by file extension
"""

from typing import Callable, List

from ..models import ParseContext, Resource
from . import jsonc, properties

Parser = Callable[[bytes, ParseContext], List[Resource]]

PARSERS = {
    '.json': jsonc.parse,
    '.jsonc': jsonc.parse,
    '.properties': properties.parse,
}


def parser_for(file_name: str) -> Parser:
    """Parser for a file name; unknown extensions are read as JSONC"""
    for extension, parser in PARSERS.items():
        if file_name.endswith(extension):
            return parser
    return jsonc.parse


__all__ = ['Parser', 'PARSERS', 'parser_for']
