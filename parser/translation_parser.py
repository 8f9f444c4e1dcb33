# -*- coding: utf-8 -*-
"""
Translation File Parser

Parser for flat locale files mapping a source phrase to a translated phrase.
"""

from typing import Iterator, List

from models.translation_entry import TranslationEntry
from parser.base import BaseParser, Token
from parser.patterns import LocalizationPatterns
from simloc_enums import EntryKind, TokenKind
from simloc_exceptions import UnterminatedBlockError
from simloc_logger import get_logger

logger = get_logger("parser.translation")

_ENTRY_KINDS = {
    TokenKind.QUOTED: EntryKind.SINGLE_LINE,
    TokenKind.RAW: EntryKind.RAW_BLOCK,
}


class TranslationFileParser(BaseParser):
    """
    Parser for locale files.

    Handles two literal syntaxes, freely mixed in one file:
    1. Single-line quoted pairs:
        "Hello" => "Merhaba"

    2. Raw blocks for long text, taken verbatim (newlines, quotes, \\n):
        #"This is a multiline text.

        It keeps everything."#
        =>
        #"Bu bir çok satırlı yazı.

        Her şeyi korur."#

    Blank lines and // comments are ignored. Any malformed construct fails
    the whole file with a ParseError carrying the line number.
    """

    def parse(self, text: str) -> List[TranslationEntry]:
        """
        Parse locale file content into entries.

        Returns:
            Entries in file order
        """
        self.reset()
        self._text = LocalizationPatterns.normalize_newlines(text)
        self._lines = self._text.split('\n')

        tokens = list(self._tokenize())
        self._assemble(tokens)

        logger.debug(f"Parsed {len(self._entries)} entries from {len(self._lines)} lines")
        return list(self._entries)

    # =========================================================================
    # SCANNING
    # =========================================================================

    def _tokenize(self) -> Iterator[Token]:
        text = self._text
        length = len(text)
        pos = 0
        line = 1

        while pos < length:
            char = text[pos]

            if char == '\n':
                line += 1
                pos += 1
                continue

            match = LocalizationPatterns.INLINE_WHITESPACE.match(text, pos)
            if match:
                pos = match.end()
                continue

            if text.startswith(LocalizationPatterns.COMMENT_PREFIX, pos):
                pos = LocalizationPatterns.COMMENT.match(text, pos).end()
                continue

            if text.startswith(LocalizationPatterns.RAW_OPEN, pos):
                start = pos + len(LocalizationPatterns.RAW_OPEN)
                close = LocalizationPatterns.RAW_CLOSE_TERMINAL.search(text, start)
                if close is None:
                    raise self._error(
                        'Raw block opened with #" is never closed',
                        line,
                        UnterminatedBlockError,
                    )
                end = close.start()
                value = text[start:end]
                end_line = line + value.count('\n')
                yield Token(TokenKind.RAW, value, line, end_line)
                line = end_line
                pos = end + len(LocalizationPatterns.RAW_CLOSE)
                continue

            if char == LocalizationPatterns.QUOTED_OPEN:
                match = LocalizationPatterns.QUOTED.match(text, pos)
                if not match:
                    raise self._error("Quoted phrase is missing its closing quote", line)
                yield Token(
                    TokenKind.QUOTED,
                    LocalizationPatterns.unescape_quoted(match.group(1)),
                    line,
                    line,
                )
                pos = match.end()
                continue

            if text.startswith(LocalizationPatterns.ARROW, pos):
                yield Token(TokenKind.ARROW, LocalizationPatterns.ARROW, line, line)
                pos += len(LocalizationPatterns.ARROW)
                continue

            raise self._error(f"Unexpected character {char!r}", line)

    # =========================================================================
    # ENTRY ASSEMBLY
    # =========================================================================

    def _assemble(self, tokens: List[Token]):
        """Group tokens into source => target triples."""
        index = 0
        count = len(tokens)
        previous_end_line = 0

        while index < count:
            source = tokens[index]
            if source.kind == TokenKind.ARROW:
                raise self._error("'=>' without a source phrase", source.line)

            if source.line == previous_end_line:
                raise self._error("Only one entry per line is allowed", source.line)

            if index + 1 >= count or tokens[index + 1].kind != TokenKind.ARROW:
                raise self._error("Missing '=>' after source phrase", source.end_line)
            arrow = tokens[index + 1]

            if index + 2 >= count or tokens[index + 2].kind == TokenKind.ARROW:
                raise self._error("Missing target phrase after '=>'", arrow.line)
            target = tokens[index + 2]

            if source.kind != target.kind:
                raise self._error(
                    "Source and target must use the same syntax (quoted or raw block)",
                    target.line,
                )

            # Quoted pairs live on a single line
            if source.kind == TokenKind.QUOTED and not (source.line == arrow.line == target.line):
                raise self._error("Single-line entry must fit on one line", source.line)

            self._entries.append(TranslationEntry(
                source=source.value,
                target=target.value,
                kind=_ENTRY_KINDS[source.kind],
                line_number=source.line,
            ))
            previous_end_line = target.end_line
            index += 3
