"""
Event-driven JSON-with-comments reader

Parses with the tree-sitter JSON grammar (which keeps comments as extras)
and reports comments, literal values (with their key path), and object
boundaries to a visitor in document order. Stray trailing commas are
tolerated. Line numbers are 1-based.
"""

import json
from typing import List, Optional, Union

import tree_sitter_json
from tree_sitter import Language, Node, Parser

PathSegment = Union[str, int]

JSON = Language(tree_sitter_json.language())

_KEYWORDS = {'true': True, 'false': False, 'null': None}


class JsoncSyntaxError(ValueError):
    def __init__(self, message: str, line: int):
        super().__init__(message)
        self.line = line


class JsoncVisitor:
    """Receives reader events; override what you need"""

    def on_comment(self, text: str, line: int):
        pass

    def on_literal_value(self, value, line: int, path: List[PathSegment]):
        pass

    def on_object_begin(self, line: int):
        pass

    def on_object_end(self, line: int):
        pass


def _line(node: Node) -> int:
    return node.start_point[0] + 1


def _text(node: Node) -> str:
    return node.text.decode('utf-8')


def _is_stray_comma(node: Node) -> bool:
    return node.is_error and b',' in node.text and not node.text.replace(b',', b'').strip()


def _first_error(node: Node) -> Optional[Node]:
    if node.is_missing or (node.is_error and not _is_stray_comma(node)):
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            error = _first_error(child)
            if error is not None:
                return error
    return None


def _check_syntax(root: Node):
    if root.has_error:
        error = _first_error(root)
        if error is not None:
            if error.is_missing:
                raise JsoncSyntaxError(f"Expected {error.type!r}", _line(error))
            raise JsoncSyntaxError(f"Unexpected {_text(error).strip()[:20]!r}", _line(error))

    values = [child for child in root.named_children if child.type != 'comment' and not child.is_error]
    if len(values) > 1:
        raise JsoncSyntaxError("Unexpected content after end of document", _line(values[1]))


def _decode(node: Node):
    if node.type in _KEYWORDS:
        return _KEYWORDS[node.type]
    try:
        # raw tabs and other control characters are kept as they are
        return json.loads(_text(node), strict=False)
    except json.JSONDecodeError as e:
        raise JsoncSyntaxError(f"Invalid literal {_text(node)}: {e.msg}", _line(node))


class _Walker:

    def __init__(self, visitor: JsoncVisitor):
        self._visitor = visitor
        self._path: List[PathSegment] = []

    def walk(self, node: Node):
        if node.type == 'comment':
            self._visitor.on_comment(_text(node), _line(node))
        elif node.type == 'object':
            self._object(node)
        elif node.type == 'array':
            self._array(node)
        elif node.type in ('string', 'number', 'true', 'false', 'null'):
            self._visitor.on_literal_value(_decode(node), _line(node), list(self._path))
        else:
            for child in node.children:
                self.walk(child)

    def _object(self, node: Node):
        self._visitor.on_object_begin(_line(node))
        for child in node.children:
            if child.type == 'pair':
                self._pair(child)
            elif child.type == 'comment':
                self.walk(child)
        self._visitor.on_object_end(node.end_point[0] + 1)

    def _pair(self, node: Node):
        key = node.child_by_field_name('key')
        value = node.child_by_field_name('value')
        for child in node.children:
            if child.type == 'comment':
                self.walk(child)
            elif value is not None and child == value:
                self._path.append(_decode(key))
                self.walk(child)
                self._path.pop()

    def _array(self, node: Node):
        index = 0
        for child in node.children:
            if child.type == 'comment':
                self.walk(child)
            elif child.is_named and not child.is_error:
                self._path.append(index)
                self.walk(child)
                self._path.pop()
                index += 1


def visit(text: str, visitor: JsoncVisitor):
    """Parse `text`, calling `visitor` for every event"""
    tree = Parser(JSON).parse(text.encode('utf-8'))
    _check_syntax(tree.root_node)
    _Walker(visitor).walk(tree.root_node)
