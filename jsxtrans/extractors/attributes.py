"""
Reading the attributes of a matched translation component.
"""
import logging
from typing import Dict, Iterable, Optional, Set

from jsxtrans.models import (AttributeValue, BooleanValue, ComponentAttributes, JsxAttribute,
                             StringValue)

logger = logging.getLogger(__name__)

NAMESPACE_ATTRIBUTE = 'ns'
COUNT_ATTRIBUTE = 'count'


def read_component_attributes(attributes: Iterable[JsxAttribute], key_attribute_name: str) -> ComponentAttributes:
    """
    Split an opening tag's attributes into key, namespace, count and pass-through ones.

    The key attribute and ``ns`` only count with a string value; any other
    value leaves them as ordinary pass-through attributes. ``count`` keeps the
    raw value source, braces or quotes included. When a name repeats, the
    first occurrence wins.

    Args:
        attributes: Attributes in source order
        key_attribute_name: Name of the attribute carrying an explicit key

    Returns:
        ComponentAttributes for the entry builder
    """
    key: Optional[str] = None
    namespace: Optional[str] = None
    count: Optional[str] = None
    custom: Dict[str, AttributeValue] = {}
    seen: Set[str] = set()

    for attribute in attributes:
        name, value = attribute.name, attribute.value
        if name in seen:
            logger.debug(f'read_component_attributes: ignoring repeated attribute {name!r}')
            continue
        seen.add(name)

        if name == key_attribute_name and isinstance(value, StringValue):
            key = value.value
        elif name == NAMESPACE_ATTRIBUTE and isinstance(value, StringValue):
            namespace = value.value
        elif name == COUNT_ATTRIBUTE:
            if isinstance(value, BooleanValue):
                logger.debug('read_component_attributes: count attribute without a value ignored')
                continue
            count = value.source
        else:
            custom[name] = value

    return ComponentAttributes(key=key, namespace=namespace, count=count, custom=custom)
