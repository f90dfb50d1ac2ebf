from .enums import ExpressionKind
from .attributes import AttributeValue, BooleanValue, ComponentAttributes, ExpressionValue, JsxAttribute, StringValue
from .nodes import ChildNode, ElementNode, ExpressionNode, TextNode
from .entry import TranslationEntry

__all__ = [
    'AttributeValue',
    'BooleanValue',
    'ComponentAttributes',
    'ChildNode',
    'ElementNode',
    'ExpressionKind',
    'ExpressionNode',
    'ExpressionValue',
    'JsxAttribute',
    'StringValue',
    'TextNode',
    'TranslationEntry',
]
