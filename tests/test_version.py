import tomllib
from pathlib import Path

import geekdemy


def test_version_comes_from_pyproject() -> None:
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    project = tomllib.loads(pyproject.read_text(encoding="utf-8"))["project"]
    assert geekdemy.__version__ == project["version"]
