"""Expose the project version for health checks and the CLI banner."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Final, Iterator

PACKAGE_NAME: Final = "langswitch"
PYPROJECT_PATH: Final = Path(__file__).resolve().parents[3] / "pyproject.toml"


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the installed distribution version, else the ``pyproject.toml`` one."""

    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return _read_version_from_pyproject(PYPROJECT_PATH)


def _project_section(lines: Iterator[str]) -> Iterator[str]:
    section: str | None = None
    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("[") and line.endswith("]"):
            section = line.strip("[]")
        elif section == "project":
            yield line


def _read_version_from_pyproject(path: Path) -> str:
    if not path.exists():  # pragma: no cover - source checkouts always ship it
        raise RuntimeError(f"Unable to locate project metadata at {path}")

    for line in _project_section(iter(path.read_text(encoding="utf-8").splitlines())):
        key, _, value = line.partition("=")
        if key.strip() == "version":
            version = value.strip().strip('"')
            if version:
                return version
            break

    raise RuntimeError("Unable to determine project version from pyproject.toml")


__all__ = ["PACKAGE_NAME", "get_project_version"]
