import logging
from typing import Any, Dict, Iterable, List, Optional

from .core.config import ExtractorConfig
from .core.error_handling import InvalidParameterError
from .core.extraction_service import ExtractionService
from .models.entry import TranslationEntry
from .models.nodes import ElementNode

logger = logging.getLogger(__name__)


class JsxTrans:
    """
    Main entry point for jsxtrans.
    Extracts i18next translation keys from ``<Trans>``-style components.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None, **options: Any):
        """
        Initialize the extractor.

        Args:
            config: Ready-made configuration
            **options: Lexer-style options (``attr``, ``componentFunctions``) or
                ExtractorConfig field names; not allowed together with ``config``

        Raises:
            InvalidParameterError: If both ``config`` and options are given
            InvalidConfigurationError: If an option is unknown or invalid
        """
        if config is not None and options:
            raise InvalidParameterError('options', sorted(options), 'either config or options, not both')
        self.config = config if config is not None else ExtractorConfig.from_options(options)
        self.extraction = ExtractionService(self.config)
        logger.debug(f'JsxTrans: components={sorted(self.config.target_components)}, '
                     f'key attribute={self.config.key_attribute_name}')

    def extract(self, code: str) -> List[TranslationEntry]:
        """Extract translation entries from JSX/TSX source, in source order."""
        return self.extraction.extract(code)

    def extract_dicts(self, code: str) -> List[Dict[str, str]]:
        """Like ``extract`` but returns i18next-style dictionaries."""
        return [entry.to_dict() for entry in self.extract(code)]

    def extract_elements(self, elements: Iterable[ElementNode]) -> List[TranslationEntry]:
        """Extract from hand-built element trees, bypassing the parser."""
        return self.extraction.extract_elements(elements)

    def extract_file(self, file_path: str) -> List[TranslationEntry]:
        return self.extract(self.load_file(file_path))

    @staticmethod
    def load_file(file_path: str) -> str:
        """
        Load content from a file.

        Args:
            file_path: Path to the file

        Returns:
            Content of the file as string
        """
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()


def extract(code: str, config: Optional[ExtractorConfig] = None, **options: Any) -> List[TranslationEntry]:
    """Extract translation entries from ``code`` with a one-off extractor."""
    return JsxTrans(config, **options).extract(code)
