# -*- coding: utf-8 -*-
"""
Simple Localization Parser Package

Parser for flat locale files using the Strategy pattern.
Supports single-line quoted pairs and multi-line raw blocks.
"""

from parser.base import BaseParser, ParserStrategy, Token
from parser.translation_parser import TranslationFileParser
from parser.patterns import LocalizationPatterns

from parser.core import (
    parse_text,
    parse_lines,
    parse_file,
    build_table,
    parse_table,
)

__all__ = [
    'BaseParser',
    'ParserStrategy',
    'Token',
    'TranslationFileParser',
    'LocalizationPatterns',
    'parse_text',
    'parse_lines',
    'parse_file',
    'build_table',
    'parse_table',
]
