# -*- coding: utf-8 -*-
"""
Parser Core Functions

Main entry points for parsing locale files and building tables from them.
"""

from pathlib import Path
from typing import Iterable, List, Optional

import simloc_config as config
from models.locale_table import LocaleTable
from models.translation_entry import TranslationEntry
from parser.base import ParserStrategy
from parser.translation_parser import TranslationFileParser
from simloc_exceptions import LocaleLoadError
from simloc_logger import get_logger

logger = get_logger("parser.core")


def parse_text(text: str, parser: Optional[ParserStrategy] = None) -> List[TranslationEntry]:
    """
    Parse the content of one locale file.

    Args:
        text: File content
        parser: Optional parser strategy, TranslationFileParser by default

    Returns:
        Entries in file order

    Raises:
        ParseError: If the content is malformed
    """
    parser = parser or TranslationFileParser()
    return parser.parse(text)


def parse_lines(lines: Iterable[str]) -> List[TranslationEntry]:
    """
    Parse a file given as lines (with or without trailing newlines).
    """
    return parse_text('\n'.join(line.rstrip('\r\n') for line in lines))


def parse_file(path, encoding: str = config.FILE_ENCODING) -> List[TranslationEntry]:
    """
    Read and parse a locale file.

    Raises:
        LocaleLoadError: If the file cannot be read or decoded
        ParseError: If the content is malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise LocaleLoadError(
            f"Cannot read locale file: {e}",
            locale_id=path.name,
            file_path=str(path),
        ) from e

    logger.debug(f"Read {len(text)} characters from {path}")
    return parse_text(text)


def build_table(locale_id: str, entries: Iterable[TranslationEntry]) -> LocaleTable:
    """Build an immutable table from entries (last definition of a phrase wins)."""
    return LocaleTable.from_entries(locale_id, entries)


def parse_table(locale_id: str, text: str, parser: Optional[ParserStrategy] = None) -> LocaleTable:
    """Parse file content straight into a table."""
    return build_table(locale_id, parse_text(text, parser))
