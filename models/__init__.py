# -*- coding: utf-8 -*-
"""
Simple Localization Models Package

Data models shared by the parser and the locale registry.
"""

from models.translation_entry import TranslationEntry
from models.locale_table import LocaleTable

__all__ = ['TranslationEntry', 'LocaleTable']
