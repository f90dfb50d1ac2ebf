"""
Error handling utilities for jsxtrans.

This module provides the exception hierarchy used around the extraction core.
The core itself never fails on a well-formed tree; these exceptions cover the
edges: invalid arguments, invalid configuration, and source text the
front-end parser rejects.
"""
from typing import Optional, Type, Any, Tuple, Union


class JsxTransError(Exception):
    """Base class for all jsxtrans exceptions.
    
    Keyword arguments passed to the constructor are kept as context and
    rendered by ``__str__``.
    """
    def __init__(self, message: str, **kwargs):
        self.message = message
        self.context = kwargs.get('context', {})
        
        for key, value in kwargs.items():
            if key != 'context':
                self.context[key] = value
                
        super().__init__(message)
    
    def __str__(self) -> str:
        if not self.context:
            return self.message
        
        context_str = ', '.join(f"{k}={v}" for k, v in self.context.items() if v is not None)
        if not context_str:
            return self.message
        return f"{self.message} [Context: {context_str}]"

# ===== Validation Errors =====

class ValidationError(JsxTransError):
    """Exception raised for input validation failures."""
    def __init__(self, message: str, parameter: Optional[str] = None, 
                 value: Optional[Any] = None, expected: Optional[str] = None, **kwargs):
        super().__init__(message, parameter=parameter, value=value, expected=expected, **kwargs)
        self.parameter = parameter
        self.value = value
        self.expected = expected

class InvalidParameterError(ValidationError):
    """Exception raised when a parameter has an invalid value."""
    def __init__(self, parameter: str, value: Any, expected: str, **kwargs):
        message = f"Invalid value for parameter '{parameter}': {value!r}. Expected: {expected}"
        super().__init__(message, parameter=parameter, value=value, expected=expected, **kwargs)

class InvalidTypeError(ValidationError):
    """Exception raised when a parameter has an incorrect type."""
    def __init__(self, parameter: str, value: Any, expected_type: Union[Type, Tuple[Type, ...], str], **kwargs):
        if isinstance(expected_type, str):
            expected_type_str = expected_type
        elif isinstance(expected_type, tuple):
            expected_type_str = ', '.join(t.__name__ for t in expected_type)
        else:
            expected_type_str = expected_type.__name__
        message = f"Invalid type for parameter '{parameter}': {type(value).__name__}. Expected: {expected_type_str}"
        super().__init__(message, parameter=parameter, value=None, expected=expected_type_str, **kwargs)

# ===== Configuration Errors =====

class ConfigurationError(JsxTransError):
    """Exception raised for issues with extractor configuration."""
    pass

class InvalidConfigurationError(ConfigurationError):
    """Exception raised when a configuration setting has an invalid value."""
    def __init__(self, setting: str, value: Any, reason: str, **kwargs):
        message = f"Invalid configuration setting '{setting}': {value!r}. Reason: {reason}"
        super().__init__(message, setting=setting, reason=reason, **kwargs)
        self.setting = setting
        self.value = value
        self.reason = reason

# ===== Parsing Errors =====

class ParsingError(JsxTransError):
    """Exception raised when the front-end parser rejects the source text."""
    def __init__(self, message: str, code_snippet: Optional[str] = None, 
                 position: Optional[Tuple[int, int]] = None, **kwargs):
        super().__init__(message, code_snippet=code_snippet, position=position, **kwargs)
        self.code_snippet = code_snippet
        self.position = position

class SyntaxError(ParsingError):
    """Exception raised for syntax errors in the source code being parsed."""
    def __init__(self, message: str, language: str, code_snippet: Optional[str] = None,
                 line: Optional[int] = None, column: Optional[int] = None, **kwargs):
        position = (line, column) if line is not None and column is not None else None
        super().__init__(
            message, code_snippet=code_snippet, position=position, 
            language=language, **kwargs
        )
        self.language = language
        self.line = line
        self.column = column

# ===== Utility Functions =====

def validate_type(value: Any, expected_type: Union[Type, Tuple[Type, ...]], param_name: str) -> None:
    """
    Validate that a value has the expected type.
    
    Raises:
        InvalidTypeError: If the value is not an instance of ``expected_type``
    """
    if not isinstance(value, expected_type):
        raise InvalidTypeError(param_name, value, expected_type)
