"""
Tree-sitter language loading.

The TSX grammar covers plain JSX as well as TypeScript syntax inside
expression containers, so it is the only grammar jsxtrans needs.
"""
import logging
from typing import Dict

import tree_sitter_typescript
from tree_sitter import Language, Parser

logger = logging.getLogger(__name__)

LANGUAGES: Dict[str, Language] = {
    'tsx': Language(tree_sitter_typescript.language_tsx()),
}


def get_parser(language_code: str = 'tsx') -> Parser:
    """Return a new parser for ``language_code``.

    Parsers are not shared: each caller gets its own instance, which keeps
    concurrent extraction calls independent.
    """
    language = LANGUAGES.get(language_code)
    if language is None:
        raise ValueError(f'Unsupported language: {language_code}')
    return Parser(language)
