import os
import re
from pathlib import Path

VERSION = "0.2.0"

# Directory holding one translation file per locale (e.g. localization/tr_TR)
LOCALIZATION_DIR_ENV = "LOCALIZATION_DIR"
DEFAULT_LOCALIZATION_DIR = "localization"

# Consulted in order by EnvironmentLocaleProvider, first non-empty wins
LANG_ENV_VARIABLES = ("LANG",)

FILE_ENCODING = "utf-8"

LOG_LEVEL_ENV = "SIMLOC_LOG_LEVEL"
LOG_FILE_ENV = "SIMLOC_LOG_FILE"
DEFAULT_LOG_LEVEL = "WARNING"

# Locale identifiers double as file names, so no separators and no leading dot
LOCALE_ID_REGEX = re.compile(r'^[A-Za-z0-9_\-@][A-Za-z0-9_\-@.]*$')

ARROW = "=>"
RAW_OPEN = '#"'
RAW_CLOSE = '"#'
COMMENT_PREFIX = "//"


def resolve_localization_dir(explicit=None) -> Path:
    """Pick the localization directory: argument, then environment, then default."""
    if explicit:
        return Path(explicit)

    from_env = os.environ.get(LOCALIZATION_DIR_ENV)
    if from_env:
        return Path(from_env)

    return Path.cwd() / DEFAULT_LOCALIZATION_DIR


def is_valid_locale_id(locale_id) -> bool:
    if not isinstance(locale_id, str) or not locale_id:
        return False
    return LOCALE_ID_REGEX.match(locale_id) is not None


__all__ = [
    "VERSION",
    "LOCALIZATION_DIR_ENV", "DEFAULT_LOCALIZATION_DIR", "LANG_ENV_VARIABLES",
    "FILE_ENCODING", "LOG_LEVEL_ENV", "LOG_FILE_ENV", "DEFAULT_LOG_LEVEL",
    "LOCALE_ID_REGEX", "ARROW", "RAW_OPEN", "RAW_CLOSE", "COMMENT_PREFIX",
    "resolve_localization_dir", "is_valid_locale_id",
]
