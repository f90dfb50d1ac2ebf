from .models import ElementNode, ExpressionNode, JsxAttribute, TextNode, TranslationEntry
from .core.config import DEFAULT_CONFIG, ExtractorConfig
from .core.error_handling import JsxTransError, ParsingError
from .main import JsxTrans, extract

__version__ = "1.0.0"
__all__ = [
    "DEFAULT_CONFIG",
    "ElementNode",
    "ExpressionNode",
    "ExtractorConfig",
    "JsxAttribute",
    "JsxTrans",
    "JsxTransError",
    "ParsingError",
    "TextNode",
    "TranslationEntry",
    "extract",
]
