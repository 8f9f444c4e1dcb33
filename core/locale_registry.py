# -*- coding: utf-8 -*-
"""
Locale Registry

Lazily loads one LocaleTable per locale identifier and answers tr / trl
lookups. Tables are never evicted or refreshed on their own: a locale file
changed on disk is seen only after reload() or by a new registry.
"""

import threading
from typing import Dict, Iterable, List, Optional

import simloc_config as config
from core.locale_provider import EnvironmentLocaleProvider, LocaleProvider
from core.locale_source import LocaleSource
from models.locale_table import LocaleTable
from parser.base import ParserStrategy
from parser.core import parse_table
from parser.translation_parser import TranslationFileParser
from simloc_enums import LoadStatus
from simloc_exceptions import LocaleLoadError, LocaleNotFoundError, ParseError
from simloc_logger import get_logger

logger = get_logger("core.locale_registry")


class LocaleRegistry:
    """
    Thread-safe cache of locale tables.

    For any locale the registry holds either nothing (never requested),
    a fully built immutable table, or an "unavailable" marker (file missing,
    unreadable or malformed). Readers never see a partially built table.
    """

    def __init__(self, source: LocaleSource,
                 locale_provider: Optional[LocaleProvider] = None,
                 parser: Optional[ParserStrategy] = None):
        self._source = source
        self._locale_provider = locale_provider or EnvironmentLocaleProvider()
        self._parser = parser or TranslationFileParser()

        self._tables: Dict[str, LocaleTable] = {}
        self._unavailable: Dict[str, LoadStatus] = {}
        self._lock = threading.Lock()
        self._load_count = 0

    @property
    def source(self) -> LocaleSource:
        return self._source

    @property
    def locale_provider(self) -> LocaleProvider:
        return self._locale_provider

    @property
    def load_count(self) -> int:
        """Number of times the source has been asked for a locale file."""
        return self._load_count

    # =========================================================================
    # ACQUISITION
    # =========================================================================

    def ensure_loaded(self, locale_id: str) -> LocaleTable:
        """
        Return the table for a locale, loading it on first use.

        Args:
            locale_id: Locale identifier such as 'tr_TR'

        Returns:
            The cached LocaleTable

        Raises:
            LocaleNotFoundError: If there is no file for the locale
            LocaleLoadError: If the file cannot be read or parsed
        """
        table = self._tables.get(locale_id)
        if table is not None:
            return table

        with self._lock:
            table = self._tables.get(locale_id)
            if table is not None:
                return table

            status = self._unavailable.get(locale_id)
            if status is None:
                status = self._load_locked(locale_id)
                if status == LoadStatus.LOADED:
                    return self._tables[locale_id]

        return self._raise_unavailable(locale_id, status)

    def _load_locked(self, locale_id: str) -> LoadStatus:
        """Read, parse and publish one locale. Caller must hold the lock."""
        if not config.is_valid_locale_id(locale_id):
            logger.warning(f"Unusable locale identifier: {locale_id!r}")
            self._unavailable[locale_id] = LoadStatus.NOT_FOUND
            return LoadStatus.NOT_FOUND

        self._load_count += 1
        try:
            text = self._source.read(locale_id)
        except LocaleLoadError as e:
            logger.error(f"Cannot load locale '{locale_id}': {e}")
            self._unavailable[locale_id] = LoadStatus.FAILED
            return LoadStatus.FAILED

        if text is None:
            logger.warning(f"Translation file for '{locale_id}' doesn't exist")
            self._unavailable[locale_id] = LoadStatus.NOT_FOUND
            return LoadStatus.NOT_FOUND

        try:
            table = parse_table(locale_id, text, self._parser)
        except ParseError as e:
            logger.error(f"Malformed translation file for '{locale_id}': {e}")
            self._unavailable[locale_id] = LoadStatus.FAILED
            return LoadStatus.FAILED

        self._tables[locale_id] = table
        logger.info(f"Loaded {len(table)} translations for '{locale_id}'")
        return LoadStatus.LOADED

    @staticmethod
    def _raise_unavailable(locale_id: str, status: LoadStatus):
        if status == LoadStatus.FAILED:
            raise LocaleLoadError(f"Locale '{locale_id}' could not be loaded", locale_id=locale_id)
        raise LocaleNotFoundError(f"Locale '{locale_id}' doesn't exist", locale_id=locale_id)

    def get_table(self, locale_id: str) -> Optional[LocaleTable]:
        """Like ensure_loaded(), but returns None for unavailable locales."""
        try:
            return self.ensure_loaded(locale_id)
        except LocaleNotFoundError:
            return None

    def preload(self, locale_ids: Optional[Iterable[str]] = None) -> Dict[str, bool]:
        """
        Eagerly load locales, by default every locale the source lists.

        Returns:
            Dict of locale identifier -> True if a table is available
        """
        if locale_ids is None:
            locale_ids = self._source.list_locales()

        results = {locale_id: self.get_table(locale_id) is not None for locale_id in locale_ids}
        logger.info(f"Preloaded {sum(results.values())}/{len(results)} locales")
        return results

    def reload(self, locale_id: Optional[str] = None) -> None:
        """
        Forget cached state for one locale (or all) so the next lookup reads it again.
        """
        with self._lock:
            if locale_id is None:
                self._tables.clear()
                self._unavailable.clear()
                logger.debug("Cleared all cached locales")
            else:
                self._tables.pop(locale_id, None)
                self._unavailable.pop(locale_id, None)
                logger.debug(f"Cleared cached locale '{locale_id}'")

    # =========================================================================
    # INTROSPECTION
    # =========================================================================

    def available_locales(self) -> List[str]:
        return self._source.list_locales()

    def loaded_locales(self) -> List[str]:
        return sorted(self._tables)

    def is_unavailable(self, locale_id: str) -> bool:
        """True if the locale was requested before and found missing or broken."""
        return locale_id in self._unavailable

    def status(self, locale_id: str) -> Optional[LoadStatus]:
        """Cached load status, or None if the locale was never requested."""
        if locale_id in self._tables:
            return LoadStatus.LOADED
        return self._unavailable.get(locale_id)

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def trl(self, phrase: str, locale_id: str) -> str:
        """
        Translate `phrase` into a specific locale.

        Returns the translation if it exists, else `phrase` unchanged.
        """
        table = self.get_table(locale_id)
        if table is None:
            return phrase

        if phrase not in table:
            logger.debug(f"No translation of {phrase[:40]!r} exists in '{locale_id}'")
        return table.translate(phrase)

    def tr(self, phrase: str) -> str:
        """
        Translate `phrase` into the current locale reported by the provider.

        Returns `phrase` unchanged when the locale cannot be determined.
        """
        locale_id = self._locale_provider.current_locale()
        if locale_id is None:
            return phrase
        return self.trl(phrase, locale_id)

    def __repr__(self):
        return f"LocaleRegistry({self._source!r}, loaded={self.loaded_locales()})"
