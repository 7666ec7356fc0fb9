"""Request parsing helpers shared by the routes."""

from .request_parser import parse_json_object, parse_page_argument, resolve_locale

__all__ = ["parse_json_object", "parse_page_argument", "resolve_locale"]
