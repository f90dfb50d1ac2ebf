from .expression import classify_expression, normalize_expression
from .attributes import read_component_attributes
from .serializer import serialize_children
from .entry_builder import build_entry

__all__ = [
    'build_entry',
    'classify_expression',
    'normalize_expression',
    'read_component_attributes',
    'serialize_children',
]
