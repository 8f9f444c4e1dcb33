# -*- coding: utf-8 -*-
"""
Simple Localization Public API

tr(text)         - translate into the language from the LANG environment variable
trl(text, lang)  - translate into an explicit locale such as 'tr_TR'

Both return `text` unchanged when no translation exists. Locale files are
read from the directory named by the LOCALIZATION_DIR environment variable
(./localization by default) the first time each locale is requested.
"""

import threading
from typing import Optional

import simloc_config as config
from core.locale_registry import LocaleRegistry
from core.locale_source import DirectoryLocaleSource
from simloc_logger import get_logger

logger = get_logger("localization")

# Global instance
_registry: Optional[LocaleRegistry] = None
_registry_lock = threading.Lock()


def create_registry(localization_dir=None, locale_provider=None) -> LocaleRegistry:
    """Build a registry over a localization directory (resolved from config if omitted)."""
    directory = config.resolve_localization_dir(localization_dir)
    logger.debug(f"Creating locale registry for {directory}")
    return LocaleRegistry(DirectoryLocaleSource(directory), locale_provider=locale_provider)


def get_registry() -> LocaleRegistry:
    """Get the process-wide LocaleRegistry, creating it on first use."""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = create_registry()
    return _registry


def set_registry(registry: LocaleRegistry) -> None:
    """Replace the process-wide registry."""
    global _registry
    with _registry_lock:
        _registry = registry


def reset_registry() -> None:
    """Drop the process-wide registry; the next lookup builds a fresh one."""
    global _registry
    with _registry_lock:
        _registry = None


def tr(text: str) -> str:
    """
    Get translation of `text` in the system language (LANG, e.g. 'tr_TR.UTF-8').

    Returns the translation if it exists, else `text`.
    """
    return get_registry().tr(text)


def trl(text: str, lang: str) -> str:
    """
    Get translation of `text` in a specific language.

    Args:
        text: Source phrase
        lang: Locale identifier, the name of a file in the localization directory

    Returns:
        The translation if it exists, else `text`
    """
    return get_registry().trl(text, lang)


__all__ = ["tr", "trl", "get_registry", "set_registry", "reset_registry", "create_registry"]
