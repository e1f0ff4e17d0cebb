"""geekdemy package: itemized billing for programme purchases."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]

_DISTRIBUTION = "geekdemy"


def _source_checkout_version() -> str | None:
    """Version declared in the pyproject.toml of a source checkout, if any."""
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if not pyproject.is_file():
        return None
    project = tomllib.loads(pyproject.read_text(encoding="utf-8")).get("project", {})
    if project.get("name") != _DISTRIBUTION:
        return None
    return project.get("version")


def _installed_version() -> str:
    try:
        return version(_DISTRIBUTION)
    except PackageNotFoundError:
        return "0+unknown"


__version__ = _source_checkout_version() or _installed_version()
