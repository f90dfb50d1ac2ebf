"""
Translation entry model produced by the extractor.
"""
import logging
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

RESERVED_FIELDS = ('key', 'defaultValue', 'namespace', 'count')


class TranslationEntry(BaseModel):
    """One record destined for a translation catalog.

    ``count`` keeps the verbatim attribute source, braces included, so
    pluralisation tooling downstream can inspect it. ``attributes`` holds the
    pass-through string attributes of the component.
    """
    key: str
    default_value: Optional[str] = Field(default=None, alias='defaultValue')
    namespace: Optional[str] = None
    count: Optional[str] = None
    attributes: Dict[str, str] = Field(default_factory=dict)
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator('key')
    @classmethod
    def _key_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError('translation key must not be empty')
        return value

    def to_dict(self) -> Dict[str, str]:
        """Render the entry the way i18next-parser lexers report keys.

        Absent optional fields are omitted. Reserved fields win over custom
        attributes of the same name.
        """
        result = {name: value for name, value in self.attributes.items() if name not in RESERVED_FIELDS}
        dropped = set(self.attributes) - set(result)
        if dropped:
            logger.debug(f'to_dict: custom attributes shadowed by reserved fields: {sorted(dropped)}')
        result.update(self.model_dump(by_alias=True, exclude_none=True, exclude={'attributes'}))
        return result
