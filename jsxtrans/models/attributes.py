from typing import Annotated, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field


class StringValue(BaseModel):
    """Attribute written as ``name="value"``"""
    kind: Literal['string'] = 'string'
    value: str
    raw: str = ''
    model_config = {'frozen': True}

    @property
    def source(self) -> str:
        """Verbatim attribute value, quotes included"""
        return self.raw or f'"{self.value}"'


class ExpressionValue(BaseModel):
    """Attribute written as ``name={expression}``"""
    kind: Literal['expression'] = 'expression'
    source_text: str
    raw: str = ''
    model_config = {'frozen': True}

    @property
    def source(self) -> str:
        """Verbatim attribute value, braces included"""
        return self.raw or f'{{{self.source_text}}}'


class BooleanValue(BaseModel):
    """Attribute present without a value, e.g. ``<Trans shouldUnescape />``"""
    kind: Literal['boolean'] = 'boolean'
    model_config = {'frozen': True}


AttributeValue = Annotated[Union[StringValue, ExpressionValue, BooleanValue], Field(discriminator='kind')]


class JsxAttribute(BaseModel):
    """A named attribute of an opening tag"""
    name: str
    value: AttributeValue = Field(default_factory=BooleanValue)
    model_config = {'frozen': True}


class ComponentAttributes(BaseModel):
    """Attributes of a target component, split into reserved and pass-through ones"""
    key: Optional[str] = None
    namespace: Optional[str] = None
    count: Optional[str] = None
    custom: Dict[str, AttributeValue] = Field(default_factory=dict)
    model_config = {'frozen': True}

    def custom_strings(self) -> Dict[str, str]:
        return {name: value.value for name, value in self.custom.items() if isinstance(value, StringValue)}
