"""
Core components of jsxtrans: configuration, errors, parsing and extraction.
"""
from .config import DEFAULT_CONFIG, ExtractorConfig
from .error_handling import (
    ConfigurationError,
    InvalidConfigurationError,
    InvalidTypeError,
    JsxTransError,
    ParsingError,
    SyntaxError,
)
from .extraction_service import ExtractionService

__all__ = [
    'ConfigurationError',
    'DEFAULT_CONFIG',
    'ExtractionService',
    'ExtractorConfig',
    'InvalidConfigurationError',
    'InvalidTypeError',
    'JsxTransError',
    'ParsingError',
    'SyntaxError',
]
