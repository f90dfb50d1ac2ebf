"""
Configuration management for jsxtrans.
"""
import logging
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from .error_handling import InvalidConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TARGET_COMPONENTS = frozenset({'Interpolate', 'Trans'})
DEFAULT_KEY_ATTRIBUTE = 'i18nKey'

# Option names used by i18next-parser lexers, mapped to field names
OPTION_ALIASES = {
    'attr': 'key_attribute_name',
    'componentFunctions': 'target_components',
    'keyAttributeName': 'key_attribute_name',
    'targetComponents': 'target_components',
}


class ExtractorConfig(BaseModel):
    """Read-only settings for one or many extraction calls.

    ``target_components`` lists the tag names treated as translation sources
    and ``key_attribute_name`` names the attribute holding an explicit key.
    """
    target_components: FrozenSet[str] = DEFAULT_TARGET_COMPONENTS
    key_attribute_name: str = DEFAULT_KEY_ATTRIBUTE
    model_config = ConfigDict(frozen=True, extra='forbid')

    @field_validator('target_components', mode='before')
    @classmethod
    def _coerce_components(cls, value: Union[str, Iterable[str]]) -> FrozenSet[str]:
        if isinstance(value, str):
            value = [value]
        components = frozenset(value)
        if not components:
            raise ValueError('at least one target component is required')
        for name in components:
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f'component names must be non-empty strings, got {name!r}')
        return components

    @field_validator('key_attribute_name')
    @classmethod
    def _key_attribute_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('key attribute name must not be blank')
        return value

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> 'ExtractorConfig':
        """Build a config from lexer-style options (``attr``, ``componentFunctions``)."""
        fields: Dict[str, Any] = {}
        for name, value in options.items():
            field_name = OPTION_ALIASES.get(name, name)
            if field_name not in cls.model_fields:
                raise InvalidConfigurationError(name, value, 'unknown option')
            fields[field_name] = value
        try:
            return cls(**fields)
        except PydanticValidationError as e:
            error = e.errors()[0]
            setting = str(error['loc'][0]) if error.get('loc') else 'config'
            logger.debug(f'from_options: rejected options {dict(options)}: {e}')
            raise InvalidConfigurationError(setting, fields.get(setting), error['msg']) from e

    def is_target(self, tag_name: str) -> bool:
        return tag_name in self.target_components


DEFAULT_CONFIG = ExtractorConfig()
