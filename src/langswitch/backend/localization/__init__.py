"""Shared translation helpers for the HTTP routes."""

from .catalog import Translator, get_translator, load_bundle, load_translations, normalise_locale

__all__ = ["Translator", "get_translator", "load_bundle", "load_translations", "normalise_locale"]
