"""
Static analysis of translation calls in JavaScript / TypeScript syntax trees

Recognized call sites are `t(...)`, `<anything>.t(...)`, and
`useTranslation(...)`. The first argument of a `t` call is resolved to the
set of string values it can statically take: string literals, both branches
of a conditional, and every rendering of a template literal whose
interpolations resolve in turn. Anything else cannot be analyzed and is
reported as a fatal problem.
"""

import itertools
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from ..models import Problem, Resource, SourceCodeAnalysis, get_or_create_resource
from ..parsers.directives import IGNORE_DIRECTIVE
from ..utils import format_location

logger = logging.getLogger(__name__)

TYPESCRIPT = Language(tree_sitter_typescript.language_typescript())
# also parses plain JavaScript and JSX
TSX = Language(tree_sitter_typescript.language_tsx())

TYPESCRIPT_EXTENSIONS = ('.ts', '.mts', '.cts')

TRANSLATION_FUNCTION = 't'
TRANSLATION_HOOK = 'useTranslation'
KEY_PREFIX_OPTION = 'keyPrefix'

_ESCAPE_REGEXP = re.compile(
    r'\\(?:u\{(?P<code_point>[0-9A-Fa-f]+)\}|u(?P<unicode>[0-9A-Fa-f]{4})|x(?P<hex>[0-9A-Fa-f]{2})'
    r'|(?P<line_continuation>\r\n|[\r\n\u2028\u2029])|(?P<character>.))',
    re.DOTALL
)
_SINGLE_CHARACTER_ESCAPES = {'b': '\b', 'f': '\f', 'n': '\n', 'r': '\r', 't': '\t', 'v': '\v', '0': '\0'}


def parse_syntax_tree(source: bytes, file_path: str) -> Tree:
    language = TYPESCRIPT if file_path.endswith(TYPESCRIPT_EXTENSIONS) else TSX
    return Parser(language).parse(source)


def _unescape_match(match: re.Match) -> str:
    if match.group('code_point'):
        return chr(int(match.group('code_point'), 16))
    if match.group('unicode'):
        return chr(int(match.group('unicode'), 16))
    if match.group('hex'):
        return chr(int(match.group('hex'), 16))
    if match.group('line_continuation'):
        return ''
    character = match.group('character')
    return _SINGLE_CHARACTER_ESCAPES.get(character, character)


def unescape(raw: str) -> str:
    """Cooked value of a JavaScript string literal body"""
    cooked = _ESCAPE_REGEXP.sub(_unescape_match, raw)
    # join surrogate pairs written as two `\uXXXX` escapes
    return cooked.encode('utf-16', 'surrogatepass').decode('utf-16', 'surrogatepass')


def _text(node: Node) -> str:
    return node.text.decode('utf-8', errors='replace')


def _line(node: Node) -> int:
    return node.start_point[0] + 1


def _named_children(node: Node) -> List[Node]:
    return [child for child in node.named_children if child.type != 'comment']


@dataclass
class StringLiteral:
    value: str
    line: int


@dataclass
class LiteralResolution:
    """Values an expression can take, and the sub-expressions that defeat analysis"""
    non_literal_expressions: List[Node] = field(default_factory=list)
    string_literals: List[StringLiteral] = field(default_factory=list)

    def extend(self, other: 'LiteralResolution'):
        self.non_literal_expressions.extend(other.non_literal_expressions)
        self.string_literals.extend(other.string_literals)


def _resolve_string(node: Node) -> LiteralResolution:
    # 'foo' → ['foo']
    return LiteralResolution(string_literals=[StringLiteral(unescape(_text(node)[1:-1]), _line(node))])


def _resolve_ternary(node: Node) -> LiteralResolution:
    # test ? 'consequence' : 'alternative' → ['alternative', 'consequence']
    resolution = LiteralResolution()
    for name in ('alternative', 'consequence'):
        branch = node.child_by_field_name(name)
        if branch is not None:
            resolution.extend(resolve_literals(branch))
    return resolution


def _resolve_parenthesized(node: Node) -> LiteralResolution:
    children = _named_children(node)
    if len(children) != 1:
        return LiteralResolution(non_literal_expressions=[node])
    return resolve_literals(children[0])


def _resolve_template(node: Node) -> LiteralResolution:
    # `${a ? 'x' : 'y'}.${b ? 'z' : 'w'}` → ['y.w', 'y.z', 'x.w', 'x.z']
    resolution = LiteralResolution()
    source = node.text
    segments: List[str] = []
    options: List[List[str]] = []

    offset = 1  # past the opening backtick
    for substitution in node.named_children:
        if substitution.type != 'template_substitution':
            continue
        segments.append(source[offset:substitution.start_byte - node.start_byte].decode('utf-8', errors='replace'))
        offset = substitution.end_byte - node.start_byte

        expressions = _named_children(substitution)
        if not expressions:
            options.append([''])
            continue
        result = resolve_literals(expressions[0])
        resolution.non_literal_expressions.extend(result.non_literal_expressions)
        options.append([literal.value for literal in result.string_literals])
    segments.append(source[offset:-1].decode('utf-8', errors='replace'))

    for combination in itertools.product(*options):
        value = segments[0] + ''.join(option + segment for option, segment in zip(combination, segments[1:]))
        resolution.string_literals.append(StringLiteral(value, _line(node)))
    return resolution


_RESOLVERS: Dict[str, Callable[[Node], LiteralResolution]] = {
    'string': _resolve_string,
    'ternary_expression': _resolve_ternary,
    'template_string': _resolve_template,
    'parenthesized_expression': _resolve_parenthesized,
}


def resolve_literals(node: Node) -> LiteralResolution:
    """Statically resolve the string values `node` may evaluate to"""
    resolver = _RESOLVERS.get(node.type)
    if resolver is None:
        return LiteralResolution(non_literal_expressions=[node])
    return resolver(node)


def _comment_body(comment: Node) -> str:
    text = _text(comment)
    if text.startswith('//'):
        return text[2:]
    if text.startswith('/*'):
        return text[2:-2] if text.endswith('*/') else text[2:]
    return text


_SEPARATORS = (',', ';')


def _trails_previous_node(comment: Node) -> bool:
    previous = comment.prev_sibling
    while previous is not None and (previous.type == 'comment' or previous.type in _SEPARATORS):
        previous = previous.prev_sibling
    return previous is not None and previous.is_named and previous.end_point[0] == comment.start_point[0]


def attached_comments(node: Node) -> Iterator[Node]:
    """Comments right before `node`, and those after it on the line where it ends

    A comment sharing a line with the end of the node before it belongs to that
    node, even with a separator such as `,` in between.
    """
    sibling = node.prev_sibling
    while sibling is not None and sibling.type == 'comment':
        if not _trails_previous_node(sibling):
            yield sibling
        sibling = sibling.prev_sibling

    sibling = node.next_sibling
    while (sibling is not None and sibling.start_point[0] == node.end_point[0]
           and (sibling.type == 'comment' or sibling.type in _SEPARATORS)):
        if sibling.type == 'comment':
            yield sibling
        sibling = sibling.next_sibling


def has_ignore_directive(node: Node) -> bool:
    return any(_comment_body(comment).strip() == IGNORE_DIRECTIVE for comment in attached_comments(node))


def _call_arguments(call: Node) -> Optional[List[Node]]:
    arguments = call.child_by_field_name('arguments')
    # tagged templates have a template string in place of an argument list
    if arguments is None or arguments.type != 'arguments':
        return None
    return _named_children(arguments)


def is_ignored(call: Node) -> bool:
    """Whether an ignore directive applies to the call's first argument, the call, or any ancestor"""
    arguments = _call_arguments(call)
    if arguments and has_ignore_directive(arguments[0]):
        return True

    node: Optional[Node] = call
    while node is not None:
        if has_ignore_directive(node):
            return True
        node = node.parent
    return False


def _is_translation_function(callee: Node) -> bool:
    if callee.type == 'identifier':
        return _text(callee) == TRANSLATION_FUNCTION
    if callee.type == 'member_expression':
        property_node = callee.child_by_field_name('property')
        return (property_node is not None and property_node.type == 'property_identifier'
                and _text(property_node) == TRANSLATION_FUNCTION)
    return False


def _has_key_prefix(options: Node) -> bool:
    for property_node in _named_children(options):
        if property_node.type == 'shorthand_property_identifier':
            if _text(property_node) == KEY_PREFIX_OPTION:
                return True
        elif property_node.type == 'pair':
            key = property_node.child_by_field_name('key')
            if key is not None and key.type == 'property_identifier' and _text(key) == KEY_PREFIX_OPTION:
                return True
    return False


class SourceCodeAnalyzer:
    """Analyzes the translation calls of one source code file"""

    def __init__(self, file_path: str, resources: Dict[str, Resource]):
        self.file_path = file_path
        self.resources = resources
        self.analysis = SourceCodeAnalysis()

    def _location(self, line: int) -> str:
        return format_location(self.file_path, line)

    def _add_problem(self, description: str, is_fatal: bool):
        logger.debug(f"❌ {description}")
        self.analysis.problems.append(Problem(description=description, precludes_static_analysis=is_fatal))

    def analyze(self, tree: Tree) -> SourceCodeAnalysis:
        if tree.root_node.has_error:
            logger.warning(f"Syntax errors in {self.file_path}; analysis may be incomplete")

        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            if node.type == 'call_expression':
                # ignored calls are skipped along with everything inside them
                if is_ignored(node):
                    continue
                self._process_call(node)
            stack.extend(reversed(node.children))

        return self.analysis

    def _process_call(self, call: Node):
        callee = call.child_by_field_name('function')
        arguments = _call_arguments(call)
        if callee is None or arguments is None:
            return

        if _is_translation_function(callee):
            if arguments:
                self._process_reference(arguments[0])
        elif callee.type == 'identifier' and _text(callee) == TRANSLATION_HOOK:
            if arguments:
                self._add_problem(f"Unsupported namespace at {self._location(_line(arguments[0]))}", True)
            if len(arguments) > 1 and arguments[1].type == 'object' and _has_key_prefix(arguments[1]):
                self._add_problem(f"Unsupported key prefix at {self._location(_line(arguments[1]))}", True)

    def _process_reference(self, argument: Node):
        resolution = resolve_literals(argument)

        for expression in resolution.non_literal_expressions:
            self._add_problem(
                f"Non-literal of type `{expression.type}` at {self._location(_line(expression))}", True
            )

        for literal in resolution.string_literals:
            key = literal.value
            location = self._location(literal.line)
            resource = self.resources.get(key)

            if resource is not None and resource.is_defined:
                logger.debug(f"🔗 Reference to known string '{key}' at {location}")
            else:
                self._add_problem(f"Reference to unknown string '{key}' at {location}", False)
                resource = get_or_create_resource(self.resources, key)

            self.analysis.referenced_resources.add(resource)
            resource.add_reference(location)


def analyze_source_code(source: bytes, file_path: str, resources: Dict[str, Resource]) -> SourceCodeAnalysis:
    """Parse and analyze one source code file against the shared resource map"""
    return SourceCodeAnalyzer(file_path, resources).analyze(parse_syntax_tree(source, file_path))
