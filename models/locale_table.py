# -*- coding: utf-8 -*-
"""
Locale Table Model

Read-only mapping from source phrase to target phrase for exactly one locale.
Built once from parsed entries and never mutated afterwards.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional

from models.translation_entry import TranslationEntry
from simloc_logger import get_logger

logger = get_logger("models.locale_table")


class LocaleTable(Mapping):
    """
    Immutable translation table.

    Duplicate source phrases resolve last-write-wins; every overwritten
    entry is kept in `duplicates` for diagnostics.
    """

    __slots__ = ('_locale_id', '_translations', '_duplicates')

    def __init__(self, locale_id: str, translations: Dict[str, str],
                 duplicates: Optional[List[TranslationEntry]] = None):
        self._locale_id = locale_id
        self._translations = MappingProxyType(dict(translations))
        self._duplicates = tuple(duplicates or ())

    @classmethod
    def from_entries(cls, locale_id: str, entries: Iterable[TranslationEntry]) -> 'LocaleTable':
        """
        Build a table from entries in file order.

        Args:
            locale_id: Identifier the table belongs to
            entries: Parsed entries

        Returns:
            New LocaleTable
        """
        translations: Dict[str, str] = {}
        duplicates: List[TranslationEntry] = []

        for entry in entries:
            if entry.source in translations:
                logger.warning(
                    f"Duplicate source phrase in '{locale_id}' at line {entry.line_number}, "
                    f"last definition wins: {entry.source[:40]!r}"
                )
                duplicates.append(entry)
            translations[entry.source] = entry.target

        logger.debug(f"Built table for '{locale_id}' with {len(translations)} phrases")
        return cls(locale_id, translations, duplicates)

    @property
    def locale_id(self) -> str:
        return self._locale_id

    @property
    def duplicates(self):
        return self._duplicates

    def translate(self, phrase: str) -> str:
        """Return the target phrase, or `phrase` itself when it is not in the table."""
        return self._translations.get(phrase, phrase)

    def __getitem__(self, key: str) -> str:
        return self._translations[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._translations)

    def __len__(self) -> int:
        return len(self._translations)

    def __repr__(self):
        return f"LocaleTable({self._locale_id!r}, {len(self)} phrases)"
