"""
Conversion of tree-sitter JSX nodes into jsxtrans element models.

Only this module knows tree-sitter's JSX node types; everything downstream
works with ``ElementNode`` and friends.
"""
import logging
from typing import List, Optional

from tree_sitter import Node

from jsxtrans.models import (BooleanValue, ChildNode, ElementNode, ExpressionNode, ExpressionValue,
                             JsxAttribute, StringValue, TextNode)
from .ast_handler import ASTHandler

logger = logging.getLogger(__name__)

ELEMENT_TYPES = ('jsx_element', 'jsx_self_closing_element', 'jsx_fragment')
CONTENT_NODE_TYPES = ELEMENT_TYPES + ('jsx_expression',)


def is_element(node: Node) -> bool:
    return node.type in ELEMENT_TYPES


def _opening_tag(node: Node) -> Optional[Node]:
    if node.type == 'jsx_self_closing_element':
        return node
    if node.type == 'jsx_element':
        return node.child_by_field_name('open_tag')
    return None


def get_tag_name(node: Node, code_bytes: bytes) -> str:
    """Verbatim tag name of an element; fragments have an empty name."""
    tag = _opening_tag(node)
    if tag is None:
        return ''
    name_node = tag.child_by_field_name('name')
    if name_node is None:
        return ''
    return ASTHandler.get_node_text(name_node, code_bytes)


def read_attributes(tag: Node, code_bytes: bytes) -> List[JsxAttribute]:
    attributes = []
    for child in tag.named_children:
        if child.type != 'jsx_attribute':
            # spread attributes ({...props}) carry no name
            continue
        parts = child.named_children
        if not parts:
            continue
        name = ASTHandler.get_node_text(parts[0], code_bytes)
        value_node = parts[1] if len(parts) > 1 else None
        attributes.append(JsxAttribute(name=name, value=_attribute_value(value_node, code_bytes)))
    return attributes


def _attribute_value(node: Optional[Node], code_bytes: bytes):
    if node is None:
        return BooleanValue()
    raw = ASTHandler.get_node_text(node, code_bytes)
    if node.type == 'string':
        # JSX attribute strings are not escape-processed
        return StringValue(value=raw[1:-1], raw=raw)
    if node.type == 'jsx_expression':
        return ExpressionValue(source_text=raw[1:-1], raw=raw)
    return ExpressionValue(source_text=raw, raw=raw)


def _content_bounds(node: Node):
    open_tag = node.child_by_field_name('open_tag')
    close_tag = node.child_by_field_name('close_tag')
    if node.type == 'jsx_fragment' or open_tag is None or close_tag is None:
        # older grammars: <> and </> are anonymous tokens
        tokens = [child for child in node.children if child.type == '>']
        start = tokens[0].end_byte if tokens else node.start_byte
        closing = [child for child in node.children if child.type == '</']
        end = closing[-1].start_byte if closing else node.end_byte
        return start, end
    return open_tag.end_byte, close_tag.start_byte


def read_children(node: Node, code_bytes: bytes) -> List[ChildNode]:
    """
    Ordered child nodes of an element.

    Text is cut from the source between non-text children rather than taken
    from ``jsx_text`` tokens, which the grammar trims.
    """
    if node.type == 'jsx_self_closing_element':
        return []
    start, end = _content_bounds(node)
    children: List[ChildNode] = []
    cursor = start
    for child in node.children:
        if child.start_byte < start or child.end_byte > end:
            continue
        if child.type not in CONTENT_NODE_TYPES:
            continue
        if child.start_byte > cursor:
            children.append(TextNode(value=ASTHandler.get_text_between(code_bytes, cursor, child.start_byte)))
        if child.type == 'jsx_expression':
            text = ASTHandler.get_node_text(child, code_bytes)
            children.append(ExpressionNode(source_text=text[1:-1]))
        else:
            children.append(to_element(child, code_bytes))
        cursor = child.end_byte
    if end > cursor:
        children.append(TextNode(value=ASTHandler.get_text_between(code_bytes, cursor, end)))
    return children


def to_element(node: Node, code_bytes: bytes) -> ElementNode:
    """Convert a tree-sitter JSX element, self-closing element or fragment."""
    tag = _opening_tag(node)
    return ElementNode(
        tag_name=get_tag_name(node, code_bytes),
        attributes=read_attributes(tag, code_bytes) if tag is not None else [],
        children=read_children(node, code_bytes),
        start_line=node.start_point[0] + 1,
    )
