"""
AST Handler for jsxtrans providing a small interface over tree-sitter.
"""
import logging
from typing import Iterator, List, Optional, Tuple

from tree_sitter import Node

from jsxtrans.core.error_handling import SyntaxError
from .languages import get_parser

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 40

class ASTHandler:
    """
    Parses source text and offers the node helpers the extractor needs.
    """

    def __init__(self, language_code: str = 'tsx'):
        self.language_code = language_code

    def parse(self, code: str) -> Tuple[Node, bytes]:
        """
        Parse source code into an AST.

        Args:
            code: Source code as string

        Returns:
            Tuple of (root_node, code_bytes)

        Raises:
            SyntaxError: If the tree contains an error or missing node
        """
        code_bytes = code.encode('utf8')
        tree = get_parser(self.language_code).parse(code_bytes)
        root = tree.root_node
        if root.has_error:
            self._raise_syntax_error(root, code_bytes)
        logger.debug(f'parse: parsed {len(code_bytes)} bytes of {self.language_code}')
        return root, code_bytes

    def parse_expression(self, source_text: str) -> Optional[Tuple[Node, bytes]]:
        """
        Parse ``source_text`` as one parenthesized expression.

        Returns:
            Tuple of (expression_node, code_bytes), or None when the text is
            not a single well-formed expression
        """
        code_bytes = f'(\n{source_text}\n)'.encode('utf8')
        root = get_parser(self.language_code).parse(code_bytes).root_node
        if root.has_error or root.named_child_count != 1:
            return None
        statement = root.named_children[0]
        if statement.type != 'expression_statement' or statement.named_child_count != 1:
            return None
        wrapper = statement.named_children[0]
        if wrapper.type != 'parenthesized_expression':
            return None
        inner = [child for child in wrapper.named_children if child.type != 'comment']
        if len(inner) != 1:
            return None
        return inner[0], code_bytes

    def _raise_syntax_error(self, root: Node, code_bytes: bytes) -> None:
        bad = self.find_error_node(root) or root
        line, column = bad.start_point[0] + 1, bad.start_point[1] + 1
        snippet = code_bytes[bad.start_byte:bad.start_byte + SNIPPET_LENGTH].decode('utf8', errors='replace')
        reason = 'missing ' + bad.type if bad.is_missing else 'unexpected input'
        logger.debug(f'parse: syntax error at {line}:{column}: {reason}')
        raise SyntaxError(f'Syntax error at line {line}, column {column}: {reason}',
                          language=self.language_code, code_snippet=snippet, line=line, column=column)

    @staticmethod
    def find_error_node(root: Node) -> Optional[Node]:
        """Return the first ERROR or missing node in document order."""
        stack: List[Node] = [root]
        while stack:
            node = stack.pop()
            if node.type == 'ERROR' or node.is_missing:
                return node
            stack.extend(reversed([child for child in node.children if child.has_error or child.is_missing]))
        return None

    @staticmethod
    def get_node_text(node: Node, code_bytes: bytes) -> str:
        return code_bytes[node.start_byte:node.end_byte].decode('utf8')

    @staticmethod
    def get_text_between(code_bytes: bytes, start: int, end: int) -> str:
        return code_bytes[start:end].decode('utf8')

    @staticmethod
    def walk(root: Node, skip_children_of=None) -> Iterator[Node]:
        """
        Pre-order traversal in document order.

        Args:
            root: Node to start from
            skip_children_of: Optional predicate; children of nodes for which it
                returns True are not visited
        """
        stack: List[Node] = [root]
        while stack:
            node = stack.pop()
            yield node
            if skip_children_of is not None and skip_children_of(node):
                continue
            stack.extend(reversed(node.children))
