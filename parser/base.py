# -*- coding: utf-8 -*-
"""
Base Parser Classes

Abstract base classes and Strategy pattern interfaces for parsing.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Protocol

from models.translation_entry import TranslationEntry
from simloc_enums import TokenKind
from simloc_exceptions import ParseError
from simloc_logger import get_logger

logger = get_logger("parser.base")


class ParserStrategy(Protocol):
    """
    Protocol for parser strategies.

    Anything with a matching parse() can be handed to LocaleRegistry.
    """

    def parse(self, text: str) -> List[TranslationEntry]:
        """
        Parse the full content of one locale file.

        Args:
            text: File content

        Returns:
            Entries in file order

        Raises:
            ParseError: If the content is malformed
        """
        ...


@dataclass(frozen=True)
class Token:
    """A scanned token with the lines it starts and ends on (1-based)."""
    kind: TokenKind
    value: str
    line: int
    end_line: int


class BaseParser(ABC):
    """
    Abstract base class for parsers.

    Provides line bookkeeping and error construction shared by implementations.
    """

    def __init__(self):
        self._text: str = ""
        self._lines: List[str] = []
        self._entries: List[TranslationEntry] = []

    @abstractmethod
    def parse(self, text: str) -> List[TranslationEntry]:
        """Parse text into entries."""
        pass

    def _line_at(self, line_number: int) -> Optional[str]:
        """Return the content of a 1-based line, or None if out of range."""
        if 1 <= line_number <= len(self._lines):
            return self._lines[line_number - 1]
        return None

    def _error(self, message: str, line_number: int, error_class=ParseError) -> ParseError:
        """Build a ParseError pointing at a line of the current input."""
        return error_class(
            f"{message} (line {line_number})",
            line_number=line_number,
            line_content=self._line_at(line_number),
        )

    def reset(self):
        """Reset parser state for new file."""
        self._text = ""
        self._lines = []
        self._entries = []
