# -*- coding: utf-8 -*-
"""
Translation File Patterns

Centralized regex patterns and literals for scanning locale files.
"""

import re

import simloc_config as config


class LocalizationPatterns:
    """
    Collection of patterns for the translation file grammar.

    Organized by category:
    - Layout (whitespace, comments)
    - Literals (quoted single-line phrases, raw blocks)
    - Separators (the => arrow)
    """

    # =========================================================================
    # LAYOUT
    # =========================================================================

    INLINE_WHITESPACE = re.compile(r'[ \t\f\v]+')
    COMMENT = re.compile(r'//[^\n]*')

    # =========================================================================
    # LITERALS
    # =========================================================================

    # "phrase": a backslash always pairs with the next character, so \" never
    # closes the phrase. Phrases cannot span lines.
    QUOTED = re.compile(r'"((?:[^"\\\n]|\\[^\n])*)"')
    QUOTED_OPEN = '"'

    # #"...."# blocks: the content is verbatim
    RAW_OPEN = config.RAW_OPEN
    RAW_CLOSE = config.RAW_CLOSE
    # A closing "# only counts at the end of a line or right before => or //
    RAW_CLOSE_TERMINAL = re.compile(r'"#(?=[ \t\f\v]*(?:\n|\Z|=>|//))')

    ESCAPE_PAIR = re.compile(r'\\(.)')

    # =========================================================================
    # SEPARATORS
    # =========================================================================

    ARROW = config.ARROW
    COMMENT_PREFIX = config.COMMENT_PREFIX

    @classmethod
    def unescape_quoted(cls, text: str) -> str:
        """Turn \\" into a quote. Every other backslash pair is kept as written."""
        return cls.ESCAPE_PAIR.sub(
            lambda m: '"' if m.group(1) == '"' else m.group(0),
            text
        )

    @staticmethod
    def normalize_newlines(text: str) -> str:
        """Drop a leading BOM and convert CRLF / CR line endings to LF."""
        if text.startswith('\ufeff'):
            text = text[1:]
        return text.replace('\r\n', '\n').replace('\r', '\n')
