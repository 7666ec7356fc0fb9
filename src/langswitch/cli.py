"""Render the demo page in a terminal, in any language a bundle exists for."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any, Sequence

from langswitch.backend.config import load_settings
from langswitch.backend.version import get_project_version
from langswitch.i18n import BundleSource, HttpBundleSource, PackageBundleSource
from langswitch.ui import DemoPage


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    settings = load_settings()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--base-url",
        help="Fetch bundles over HTTP from this server instead of the packaged copies",
    )
    parser.add_argument("--lang", default=settings.default_locale, help="Language to switch to")
    parser.add_argument("--page", type=int, default=1, help="Table page to display")
    parser.add_argument("--name", default="", help="Contact form name field")
    parser.add_argument("--email", default="", help="Contact form email field")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=get_project_version())
    return parser.parse_args(argv)


def _build_source(base_url: str | None) -> BundleSource:
    if not base_url:
        return PackageBundleSource()
    settings = load_settings()
    return HttpBundleSource(
        base_url,
        path_template=settings.bundle_path_template,
        timeout=settings.request_timeout,
    )


def format_page(snapshot: dict[str, Any]) -> str:
    """Lay the page snapshot out as plain text."""

    table = snapshot["table"]
    labels = [column["label"] for column in table["columns"]]
    keys = [column["key"] for column in table["columns"]]
    cells = [[str(row.get(key, "")) for key in keys] for row in table["rows"]]
    widths = [
        max([len(label)] + [len(line[index]) for line in cells])
        for index, label in enumerate(labels)
    ]

    def line(values: Sequence[str]) -> str:
        return " | ".join(value.ljust(width) for value, width in zip(values, widths))

    out = [snapshot["title"], "", line(labels), "-+-".join("-" * width for width in widths)]
    out.extend(line(values) for values in cells)
    out.append("")
    out.append(f"< {table['previous']['label']}   {table['page_info']}   {table['next']['label']} >")

    form = snapshot["form"]
    out.append("")
    for field in ("name", "email"):
        out.append(f"{form['labels'][field]}: {form['values'][field]}")
        if field in form["errors"]:
            out.append(f"  ! {form['errors'][field]}")
    return "\n".join(out)


async def run(args: argparse.Namespace) -> int:
    source = _build_source(args.base_url)
    settings = load_settings()
    page = DemoPage.create(
        source,
        locale=settings.default_locale,
        fallback_locale=settings.fallback_locale,
        page_size=settings.page_size,
    )
    try:
        await page.start()
        page.form.set_value("name", args.name)
        page.form.set_value("email", args.email)
        submitted = page.submit()
        await page.change_language(args.lang)
        page.table.go_to(args.page)
        print(format_page(page.render()))
    finally:
        if isinstance(source, HttpBundleSource):
            await source.aclose()

    return 0 if submitted is not None else 1


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return asyncio.run(run(args))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
