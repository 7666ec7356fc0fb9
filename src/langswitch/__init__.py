"""Localised table and contact form demo with runtime language switching."""
