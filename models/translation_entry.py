# -*- coding: utf-8 -*-
"""
Translation Entry Model

A single (source phrase, target phrase) pair read from a locale file.
"""

from dataclasses import dataclass
from typing import Optional

from simloc_enums import EntryKind


@dataclass(frozen=True)
class TranslationEntry:
    """
    One parsed translation.

    Attributes:
        source (str): Untranslated phrase, delimiters removed, content verbatim.
        target (str): Translated phrase, delimiters removed, content verbatim.
        kind (EntryKind): Syntax the entry was written in.
        line_number (Optional[int]): 1-based line where the source phrase starts.
    """
    source: str
    target: str
    kind: EntryKind = EntryKind.SINGLE_LINE
    line_number: Optional[int] = None

    @property
    def is_multiline(self) -> bool:
        return '\n' in self.source or '\n' in self.target

    def as_pair(self):
        return self.source, self.target
