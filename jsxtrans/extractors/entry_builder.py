import logging
from typing import Optional

from jsxtrans.models import ComponentAttributes, TranslationEntry

logger = logging.getLogger(__name__)


def build_entry(attributes: ComponentAttributes, serialized: str) -> Optional[TranslationEntry]:
    """
    Turn a component's attributes and serialized children into an entry.

    An explicit key always yields an entry, with the serialized children as
    ``defaultValue`` when there are any. Without a key the children become
    the key, and a component with neither yields nothing.
    """
    if attributes.key is not None:
        key = attributes.key
        default_value = serialized or None
    elif serialized:
        key = serialized
        default_value = None
    else:
        logger.debug('build_entry: no key attribute and no content, entry suppressed')
        return None

    if not key:
        logger.debug('build_entry: empty key attribute, entry suppressed')
        return None

    return TranslationEntry(
        key=key,
        default_value=default_value,
        namespace=attributes.namespace,
        count=attributes.count,
        attributes=attributes.custom_strings(),
    )
