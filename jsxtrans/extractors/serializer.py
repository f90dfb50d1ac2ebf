"""
Serialization of a component's children into a translation key.

Nested elements lose their tag name and attributes and become numbered
placeholders, ``<i>...</i>``, where ``i`` is the element's position among
its parent's children (text and expression containers count too). Numbering
starts again at 0 inside every element.
"""
import logging
from typing import Sequence

from jsxtrans.core.error_handling import InvalidTypeError
from jsxtrans.models import ChildNode, ElementNode, ExpressionNode, TextNode
from .expression import normalize_expression

logger = logging.getLogger(__name__)


def serialize_children(children: Sequence[ChildNode]) -> str:
    """
    Serialize ``children`` depth-first, left to right.

    Example:
        ``a<b>c<c>z</c></b>{d}<br/>`` becomes ``a<1>c<1>z</1></1>{d}<3></3>``
    """
    parts = []
    for index, child in enumerate(children):
        if isinstance(child, TextNode):
            parts.append(child.value)
        elif isinstance(child, ExpressionNode):
            parts.append(normalize_expression(child.source_text))
        elif isinstance(child, ElementNode):
            parts.append(f'<{index}>{serialize_children(child.children)}</{index}>')
        else:
            raise InvalidTypeError('child', child, (TextNode, ExpressionNode, ElementNode))
    return ''.join(parts)
