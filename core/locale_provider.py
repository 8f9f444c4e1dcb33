# -*- coding: utf-8 -*-
"""
Current Locale Providers

Supply the locale used by tr(). The registry depends on the LocaleProvider
protocol, so tests never have to mutate the real process environment.
"""

import os
from typing import Iterable, Mapping, Optional, Protocol

import simloc_config as config
from simloc_logger import get_logger

logger = get_logger("core.locale_provider")


class LocaleProvider(Protocol):
    """Protocol for current-locale sources."""

    def current_locale(self) -> Optional[str]:
        """Return the active locale identifier, or None if it cannot be determined."""
        ...


def normalize_locale_identifier(value: Optional[str]) -> Optional[str]:
    """
    Reduce a locale setting to the bare identifier used as a file name.

    'tr_TR.UTF-8' -> 'tr_TR', 'sr_RS@latin' -> 'sr_RS', '' -> None
    """
    if value is None:
        return None

    identifier = value.strip().split('.', 1)[0].split('@', 1)[0].strip()
    return identifier or None


class EnvironmentLocaleProvider:
    """
    Reads the locale from environment variables (LANG by default).

    The environment is read on every call, so changes made while the
    process runs are picked up by the next tr() call. Problems with the
    environment are logged as a WARNING once, then at DEBUG level.
    """

    def __init__(self, variables: Iterable[str] = config.LANG_ENV_VARIABLES,
                 environ: Optional[Mapping[str, str]] = None):
        self._variables = tuple(variables)
        self._environ = environ
        self._warned = False

    def current_locale(self) -> Optional[str]:
        environ = os.environ if self._environ is None else self._environ

        for name in self._variables:
            raw_value = environ.get(name)
            if not raw_value:
                continue

            identifier = normalize_locale_identifier(raw_value)
            if identifier is None:
                self._report(
                    f"'{name}' environment variable is not suitable to parse: "
                    f"{raw_value!r} (example: en_US.UTF-8)"
                )
                continue
            return identifier

        self._report(f"No usable locale in environment variables: {', '.join(self._variables)}")
        return None

    def _report(self, message: str):
        if self._warned:
            logger.debug(message)
            return
        logger.warning(message)
        self._warned = True


class StaticLocaleProvider:
    """Always reports the same locale. Handy for apps that store the language themselves."""

    def __init__(self, locale_id: Optional[str]):
        self.locale_id = locale_id

    def current_locale(self) -> Optional[str]:
        return self.locale_id
