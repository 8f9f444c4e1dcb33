# -*- coding: utf-8 -*-
"""
Simple Localization Core Package

Locale file sources, current-locale providers and the locale registry.
"""
