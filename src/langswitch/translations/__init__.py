"""Locale bundles shipped with the package, one JSON object per language."""
