"""
Classification of JSX expression containers.

An expression container is never evaluated. Its source text is parsed on
its own and the shape of the expression decides the text it contributes to
a translation key:

* only comments (or nothing) -> ``''``
* one string literal -> the literal's content
* object literal with one named property -> ``{{name}}``
* object literal with several members -> ``''``
* anything else -> the original ``{...}`` text
"""
import logging
import re
from typing import List, Optional, Tuple

from tree_sitter import Node

from jsxtrans.core.engine.ast_handler import ASTHandler
from jsxtrans.models import ExpressionKind

logger = logging.getLogger(__name__)

COMMENTS_ONLY_RE = re.compile(r'\s*(?:(?:/\*(?:(?!\*/)[\s\S])*\*/|//[^\n]*)\s*)*')
ESCAPE_RE = re.compile(r'\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])')

SIMPLE_ESCAPES = {
    'n': '\n', 't': '\t', 'r': '\r', 'b': '\b', 'f': '\f', 'v': '\v', '0': '\0',
    '\n': '', '\r': '', '\r\n': '', '\u2028': '', '\u2029': '',
}

_ast_handler = ASTHandler('tsx')


def _decode_escape(match: 're.Match') -> str:
    sequence = match.group(1)
    if sequence.startswith('u{'):
        code_point = int(sequence[2:-1], 16)
        return chr(code_point) if code_point <= 0x10FFFF else match.group(0)
    if len(sequence) == 5 and sequence[0] == 'u':
        return chr(int(sequence[1:], 16))
    if len(sequence) == 3 and sequence[0] == 'x':
        return chr(int(sequence[1:], 16))
    return SIMPLE_ESCAPES.get(sequence, sequence)


def unescape_string(content: str) -> str:
    """Decode JavaScript escape sequences in a string literal body."""
    if '\\' not in content:
        return content
    text = ESCAPE_RE.sub(_decode_escape, content)
    if any('\ud800' <= ch <= '\udfff' for ch in text):
        # join \uD83D\uDE00 style surrogate pairs
        text = text.encode('utf-16-le', 'surrogatepass').decode('utf-16-le', 'surrogatepass')
    return text


def _string_content(node: Node, code_bytes: bytes) -> str:
    return unescape_string(ASTHandler.get_node_text(node, code_bytes)[1:-1])


def object_members(node: Node) -> List[Node]:
    """Members of an ``object`` node, comments excluded."""
    return [child for child in node.named_children if child.type != 'comment']


def property_name(member: Node, code_bytes: bytes) -> Optional[str]:
    """Name of an object member (``key`` or ``key: value``); None for spreads, methods and computed keys."""
    if member.type == 'shorthand_property_identifier':
        return ASTHandler.get_node_text(member, code_bytes)
    if member.type != 'pair':
        return None
    key = member.child_by_field_name('key')
    if key is None:
        return None
    if key.type == 'string':
        return _string_content(key, code_bytes)
    if key.type in ('property_identifier', 'number'):
        return ASTHandler.get_node_text(key, code_bytes)
    return None


def classify_expression(source_text: str) -> Tuple[ExpressionKind, str]:
    """
    Classify the inside of an expression container.

    Args:
        source_text: Text between the container's braces

    Returns:
        Tuple of (kind, replacement text)
    """
    if COMMENTS_ONLY_RE.fullmatch(source_text):
        return ExpressionKind.COMMENT, ''

    verbatim = ExpressionKind.OTHER, f'{{{source_text}}}'
    parsed = _ast_handler.parse_expression(source_text)
    if parsed is None:
        logger.debug(f'classify_expression: {source_text.strip()!r} is not a single expression')
        return verbatim
    node, code_bytes = parsed

    if node.type == 'string':
        return ExpressionKind.STRING_LITERAL, _string_content(node, code_bytes)

    if node.type == 'object':
        members = object_members(node)
        if len(members) > 1:
            logger.debug(f'classify_expression: dropping multi-member object {source_text.strip()!r}')
            return ExpressionKind.INVALID_SHORTHAND, ''
        if len(members) == 1:
            name = property_name(members[0], code_bytes)
            if name is not None:
                return ExpressionKind.OBJECT_SHORTHAND, f'{{{{{name}}}}}'

    return verbatim


def normalize_expression(source_text: str) -> str:
    """Replacement text an expression container contributes to a key."""
    return classify_expression(source_text)[1]
