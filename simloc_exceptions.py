# -*- coding: utf-8 -*-
"""
Simple Localization Exceptions Module
Custom exception classes for structured error handling across the package.
"""


class SimLocError(Exception):
    """
    Base exception class for all localization errors.

    Attributes:
        message: Human-readable error message
        details: Optional additional details (dict, string, etc.)
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Parser Exceptions
# =============================================================================

class ParserError(SimLocError):
    """Base exception for parser-related errors."""
    pass


class ParseError(ParserError):
    """Raised when translation file content is malformed."""

    def __init__(self, message: str, line_number: int = None, line_content: str = None):
        super().__init__(message, details={'line_number': line_number, 'content': line_content})
        self.line_number = line_number
        self.line_content = line_content


class UnterminatedBlockError(ParseError):
    """Raised when a raw block opened with #" is never closed."""
    pass


# =============================================================================
# Locale Exceptions
# =============================================================================

class LocaleError(SimLocError):
    """Base exception for locale lookup errors."""
    pass


class LocaleNotFoundError(LocaleError):
    """Raised when no usable translation table exists for a locale."""

    def __init__(self, message: str, locale_id: str = None):
        super().__init__(message, details={'locale_id': locale_id})
        self.locale_id = locale_id


class LocaleLoadError(LocaleNotFoundError):
    """Raised when a locale file exists but cannot be read, decoded or parsed."""

    def __init__(self, message: str, locale_id: str = None, file_path: str = None):
        super().__init__(message, locale_id=locale_id)
        self.details = {'locale_id': locale_id, 'file_path': file_path}
        self.file_path = file_path
