"""
Simple Localization Enum Definitions

Type-safe enums for parsed entries, scanner tokens and locale load results.
"""

from enum import Enum


class EntryKind(str, Enum):
    """Syntax a translation entry was written in"""
    SINGLE_LINE = 'single_line'
    RAW_BLOCK = 'raw_block'


class TokenKind(str, Enum):
    """Tokens produced by the translation file scanner"""
    QUOTED = 'quoted'
    RAW = 'raw'
    ARROW = 'arrow'


class LoadStatus(str, Enum):
    """Cached outcome of acquiring a locale"""
    LOADED = 'loaded'
    NOT_FOUND = 'not_found'
    FAILED = 'failed'
