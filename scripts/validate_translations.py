#!/usr/bin/env python3
"""Validate the packaged locale bundles against the base locale."""

from __future__ import annotations

import argparse
import ast
import json
import re
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
PACKAGE_DIR = REPO_ROOT / "src" / "langswitch"
TRANSLATIONS_DIR = PACKAGE_DIR / "translations"

PLACEHOLDER_PATTERN = re.compile(r"{\s*([A-Za-z0-9_]+)\s*}")


class ValidationError(Exception):
    """Raised when validation detects unrecoverable issues."""


def flatten_messages(tree: dict, prefix: str = "") -> dict[str, str]:
    items: dict[str, str] = {}
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            items.update(flatten_messages(value, path))
        else:
            items[path] = "" if value is None else str(value)
    return items


def load_catalogues(directory: Path = TRANSLATIONS_DIR) -> dict[str, dict[str, str]]:
    if not directory.is_dir():
        raise ValidationError(f"Missing translations directory: {directory}")

    catalogues: dict[str, dict[str, str]] = {}
    for path in sorted(directory.glob("*.json")):
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Malformed bundle {path.name}: {exc}") from exc
        if not isinstance(payload, dict):
            raise ValidationError(f"Bundle must be a JSON object: {path.name}")
        catalogues[path.stem] = flatten_messages(payload)

    if not catalogues:
        raise ValidationError("No translation catalogues discovered")
    return catalogues


def missing_keys(catalogues: dict[str, dict[str, str]], base_locale: str) -> list[str]:
    base_keys = set(catalogues[base_locale])
    issues: list[str] = []
    for locale, messages in sorted(catalogues.items()):
        if locale == base_locale:
            continue
        for key in sorted(base_keys - set(messages)):
            issues.append(f"{locale}: missing {key}")
        for key in sorted(set(messages) - base_keys):
            issues.append(f"{locale}: unexpected {key}")
    return issues


def placeholder_inconsistencies(
    catalogues: dict[str, dict[str, str]], base_locale: str
) -> list[str]:
    issues: list[str] = []
    for key, message in sorted(catalogues[base_locale].items()):
        expected = set(PLACEHOLDER_PATTERN.findall(message))
        for locale, messages in sorted(catalogues.items()):
            if key not in messages:
                continue
            found = set(PLACEHOLDER_PATTERN.findall(messages[key]))
            if found != expected:
                issues.append(
                    f"{key}: {locale}={{{', '.join(sorted(found))}}} "
                    f"expected {{{', '.join(sorted(expected))}}}"
                )
    return issues


def referenced_keys(known: set[str], root: Path = PACKAGE_DIR) -> set[str]:
    """Return the known keys that appear as string literals in the package sources."""

    used: set[str] = set()
    for path in sorted(root.rglob("*.py")):
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        for node in ast.walk(tree):
            if isinstance(node, ast.Constant) and isinstance(node.value, str) and node.value in known:
                used.add(node.value)
    return used


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--base-locale", default="en", help="Locale every bundle is compared to")
    parser.add_argument(
        "--fail-on-unused", action="store_true", help="Exit with an error if unused keys are found"
    )
    args = parser.parse_args(argv)

    try:
        catalogues = load_catalogues()
    except ValidationError as exc:
        print(f"[error] {exc}")
        return 1

    if args.base_locale not in catalogues:
        print(f"[error] Base locale {args.base_locale!r} has no bundle")
        return 1

    missing = missing_keys(catalogues, args.base_locale)
    inconsistencies = placeholder_inconsistencies(catalogues, args.base_locale)
    base_keys = set(catalogues[args.base_locale])
    unused = sorted(base_keys - referenced_keys(base_keys))

    for issue in missing:
        print(f"[missing] {issue}")
    for issue in inconsistencies:
        print(f"[placeholder] {issue}")
    if unused:
        print("[unused] Keys never referenced from the package:")
        for key in unused:
            print(f"  - {key}")

    if missing or inconsistencies or (unused and args.fail_on_unused):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
