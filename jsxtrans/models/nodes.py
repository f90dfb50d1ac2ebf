"""
Child node models for parsed JSX elements.

These models are the whole contract between the tree-sitter front-end and the
extraction core: an element exposes its tag name, its attributes and an
ordered list of children. Anything that can build them (the tree adapter or a
test) can drive the core.
"""
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .attributes import JsxAttribute


class TextNode(BaseModel):
    kind: Literal['text'] = 'text'
    value: str
    model_config = {'frozen': True}


class ExpressionNode(BaseModel):
    """Expression container; ``source_text`` excludes the surrounding braces"""
    kind: Literal['expression'] = 'expression'
    source_text: str
    model_config = {'frozen': True}


class ElementNode(BaseModel):
    """A JSX element; fragments carry an empty ``tag_name``"""
    kind: Literal['element'] = 'element'
    tag_name: str
    attributes: List[JsxAttribute] = Field(default_factory=list)
    children: List['ChildNode'] = Field(default_factory=list)
    start_line: Optional[int] = None
    model_config = {'frozen': True}


ChildNode = Annotated[Union[TextNode, ExpressionNode, ElementNode], Field(discriminator='kind')]

ElementNode.model_rebuild()
