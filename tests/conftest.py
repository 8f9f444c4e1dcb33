# -*- coding: utf-8 -*-
"""
Simple Localization Test Fixtures

Shared fixtures for all tests.
"""

import logging
import shutil
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

DATA_DIR = Path(__file__).parent / "data" / "localization"

MULTILINE_SOURCE = (
    "This is a multiline text.\n\n"
    "You can write anything you want here.\n\n"
    "Don't need to use \\n.\n\n"
    "The translation of this is next the quoted text."
)

MULTILINE_TARGET = (
    "Bu bir çok satırlı yazı.\n\n"
    "Buraya istediğin her şeyi yazabilirsin.\n\n"
    "\\n kullanman gerekmez.\n\n"
    "Bu yazının çevirisi bir sonraki tırnak içindeki yazıdır."
)


# =============================================================================
# PARSER FIXTURES
# =============================================================================

@pytest.fixture
def tr_tr_text() -> str:
    """Content of the Turkish sample locale file."""
    return (DATA_DIR / "tr_TR").read_text(encoding="utf-8")


@pytest.fixture
def mixed_text() -> str:
    """Single-line and raw entries interleaved with comments and blank lines."""
    return '\n'.join([
        '// Greetings',
        '"Hello" => "Merhaba"',
        '',
        '#"Line one',
        'Line "two"."#',
        '=>',
        '// comment between arrow and target',
        '#"Satır bir',
        'Satır "iki"."#',
        '',
        '    "Bye" => "Hoşça kal"   // trailing comment',
        '#"inline"# => #"satır içi"#',
    ])


# =============================================================================
# REGISTRY FIXTURES
# =============================================================================

class CountingSource:
    """In-memory locale source that records every read."""

    def __init__(self, files):
        self.files = dict(files)
        self.reads = []

    def read(self, locale_id):
        self.reads.append(locale_id)
        return self.files.get(locale_id)

    def list_locales(self):
        return sorted(self.files)


@pytest.fixture
def counting_source(tr_tr_text):
    return CountingSource({
        "tr_TR": tr_tr_text,
        "broken": '#"never closed\n',
    })


@pytest.fixture
def registry(counting_source):
    """Fresh LocaleRegistry over the counting source with a fixed locale."""
    from core.locale_registry import LocaleRegistry
    from core.locale_provider import StaticLocaleProvider
    return LocaleRegistry(counting_source, locale_provider=StaticLocaleProvider("tr_TR"))


# =============================================================================
# TEMP FILE FIXTURES
# =============================================================================

@pytest.fixture
def localization_dir(tmp_path) -> Path:
    """Copy of the sample localization directory."""
    target = tmp_path / "localization"
    shutil.copytree(DATA_DIR, target)
    return target


@pytest.fixture
def default_registry():
    """Reset the process-wide registry around a test."""
    import simloc_localization
    simloc_localization.reset_registry()
    yield simloc_localization
    simloc_localization.reset_registry()


# =============================================================================
# LOGGING FIXTURES
# =============================================================================

@pytest.fixture
def simloc_caplog(caplog):
    """caplog wired to the 'simloc' logger, which does not propagate to root."""
    logger = logging.getLogger("simloc")
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger="simloc")
    yield caplog
    logger.removeHandler(caplog.handler)
