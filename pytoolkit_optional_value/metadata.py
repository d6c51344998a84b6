import tomllib
from pathlib import Path
from typing import NotRequired, Required, cast

from typing_extensions import ReadOnly, TypedDict

PYPROJECT_PATH = Path(__file__).parent.parent / "pyproject.toml"
UNKNOWN_VERSION = "unknown"

# [project]セクションの型定義 (PEP 621のキーはハイフン区切り)
ProjectInfo = TypedDict(
    "ProjectInfo",
    {
        "name": ReadOnly[Required[str]],
        "version": ReadOnly[NotRequired[str]],
        "description": ReadOnly[NotRequired[str]],
        "readme": ReadOnly[NotRequired[str | dict[str, str]]],
        "requires-python": ReadOnly[NotRequired[str]],
        "dependencies": ReadOnly[NotRequired[list[str]]],
        "optional-dependencies": ReadOnly[NotRequired[dict[str, list[str]]]],
    },
)


class PyProjectToml(TypedDict, total=False):
    """pyproject.toml全体の型定義

    https://peps.python.org/pep-0621/
    """

    project: ReadOnly[Required[ProjectInfo]]


def get_package_metadata(path: Path = PYPROJECT_PATH) -> PyProjectToml:
    """Return the package metadata read from ``path``."""
    with path.open("rb") as f:
        return cast(PyProjectToml, tomllib.load(f))


def get_version(metadata: PyProjectToml) -> str:
    """Return the project version, or ``UNKNOWN_VERSION`` when it is not declared."""
    return metadata["project"].get("version", UNKNOWN_VERSION)


METADATA = get_package_metadata()
NAME = METADATA["project"]["name"]
VERSION = get_version(METADATA)
