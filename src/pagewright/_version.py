"""Package version, preferring a source checkout's pyproject.toml."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version
from pathlib import Path

DISTRIBUTION_NAME = "pagewright"
FALLBACK_VERSION = "0.0.0"

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version(pyproject: Path) -> str | None:
    # Only an editable checkout has pyproject.toml two levels above the package
    try:
        with pyproject.open("rb") as f:
            project = tomllib.load(f).get("project", {})
    except (OSError, tomllib.TOMLDecodeError):
        return None
    if project.get("name") != DISTRIBUTION_NAME:
        return None
    return project.get("version")


def get_version() -> str:
    checkout = _checkout_version(_PYPROJECT)
    if checkout:
        return checkout
    try:
        return distribution_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return FALLBACK_VERSION


__version__ = get_version()
