"""
Extraction service: finds translation components and collects their entries.
"""
import functools
import logging
from typing import Iterable, Iterator, List, Optional

from tree_sitter import Node

from jsxtrans.extractors import build_entry, read_component_attributes, serialize_children
from jsxtrans.models import ElementNode, TranslationEntry
from .config import DEFAULT_CONFIG, ExtractorConfig
from .engine.ast_handler import ASTHandler
from .engine.tree_adapter import get_tag_name, is_element, to_element
from .error_handling import validate_type

logger = logging.getLogger(__name__)

class ExtractionService:
    """
    Extracts translation entries from JSX/TSX source.

    The service holds only its read-only configuration; every call parses and
    extracts from scratch, so one instance can serve concurrent callers.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.ast_handler = ASTHandler('tsx')

    def extract(self, code: str) -> List[TranslationEntry]:
        """
        Extract entries for every target component in ``code``, in source order.

        Raises:
            InvalidTypeError: If ``code`` is not a string
            SyntaxError: If the source cannot be parsed
        """
        validate_type(code, str, 'code')
        root, code_bytes = self.ast_handler.parse(code)
        entries = []
        for node in self._find_components(root, code_bytes):
            entry = self.extract_element(to_element(node, code_bytes))
            if entry is not None:
                entries.append(entry)
        logger.debug(f'extract: {len(entries)} entries from {len(code_bytes)} bytes')
        return entries

    def _is_component(self, node: Node, code_bytes: bytes) -> bool:
        return is_element(node) and self.config.is_target(get_tag_name(node, code_bytes))

    def _find_components(self, root: Node, code_bytes: bytes) -> Iterator[Node]:
        # components nested in a match are child content, not separate entries
        is_component = functools.partial(self._is_component, code_bytes=code_bytes)
        for node in self.ast_handler.walk(root, skip_children_of=is_component):
            if is_component(node):
                logger.debug(f'_find_components: <{get_tag_name(node, code_bytes)}> at line {node.start_point[0] + 1}')
                yield node

    def extract_element(self, element: ElementNode) -> Optional[TranslationEntry]:
        """Build the entry for one matched component, or None when it is suppressed."""
        attributes = read_component_attributes(element.attributes, self.config.key_attribute_name)
        serialized = serialize_children(element.children)
        entry = build_entry(attributes, serialized)
        if entry is None:
            logger.debug(f'extract_element: <{element.tag_name}> at line {element.start_line} produced no entry')
        return entry

    def extract_elements(self, elements: Iterable[ElementNode]) -> List[TranslationEntry]:
        """
        Extract entries from already-built element trees.

        Elements are searched depth-first; a matched element is not searched
        further.
        """
        entries = []
        stack = list(reversed(list(elements)))
        while stack:
            element = stack.pop()
            if self.config.is_target(element.tag_name):
                entry = self.extract_element(element)
                if entry is not None:
                    entries.append(entry)
                continue
            stack.extend(reversed([child for child in element.children if isinstance(child, ElementNode)]))
        return entries
