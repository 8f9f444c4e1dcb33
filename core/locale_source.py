# -*- coding: utf-8 -*-
"""
Locale Sources

Where locale file contents come from. The registry only asks a source for
the text of a locale; it never touches the filesystem itself.
"""

from pathlib import Path
from typing import Dict, List, Optional, Protocol

import simloc_config as config
from simloc_exceptions import LocaleLoadError
from simloc_logger import get_logger

logger = get_logger("core.locale_source")


class LocaleSource(Protocol):
    """Protocol for locale file providers."""

    def read(self, locale_id: str) -> Optional[str]:
        """
        Return the content of the file for `locale_id`, or None if there is none.

        Raises:
            LocaleLoadError: If the file exists but cannot be read
        """
        ...

    def list_locales(self) -> List[str]:
        """Return the identifiers of every available locale file."""
        ...


class DirectoryLocaleSource:
    """
    Reads locale files named exactly as their identifier from a directory.

    Example layout:
        localization/
            ar_QA
            en_US
            tr_TR
    """

    def __init__(self, directory, encoding: str = config.FILE_ENCODING):
        self._directory = Path(directory)
        self._encoding = encoding

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, locale_id: str) -> Path:
        return self._directory / locale_id

    def read(self, locale_id: str) -> Optional[str]:
        if not config.is_valid_locale_id(locale_id):
            logger.debug(f"Ignoring unusable locale identifier: {locale_id!r}")
            return None

        path = self.path_for(locale_id)
        if not path.is_file():
            return None

        try:
            with open(path, 'r', encoding=self._encoding) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise LocaleLoadError(
                f"Cannot read locale file: {e}",
                locale_id=locale_id,
                file_path=str(path),
            ) from e

        logger.debug(f"Read locale file {path} ({len(text)} characters)")
        return text

    def list_locales(self) -> List[str]:
        if not self._directory.is_dir():
            logger.warning(f"Localization directory does not exist: {self._directory}")
            return []

        return sorted(
            entry.name for entry in self._directory.iterdir()
            if entry.is_file() and config.is_valid_locale_id(entry.name)
        )

    def __repr__(self):
        return f"DirectoryLocaleSource({str(self._directory)!r})"


class InMemoryLocaleSource:
    """
    Serves locale files from a dict of identifier -> content.

    Useful for translations bundled into an application instead of shipped
    as loose files.
    """

    def __init__(self, files: Optional[Dict[str, str]] = None):
        self._files: Dict[str, str] = dict(files or {})

    def read(self, locale_id: str) -> Optional[str]:
        return self._files.get(locale_id)

    def list_locales(self) -> List[str]:
        return sorted(self._files)
