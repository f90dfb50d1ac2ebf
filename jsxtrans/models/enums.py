"""
Enumerations shared by the jsxtrans data models.
"""
from enum import Enum

class ExpressionKind(str, Enum):
    """Shallow syntactic shapes recognised inside an expression container"""
    COMMENT = 'comment'
    STRING_LITERAL = 'string_literal'
    OBJECT_SHORTHAND = 'object_shorthand'
    INVALID_SHORTHAND = 'invalid_shorthand'
    OTHER = 'other'
