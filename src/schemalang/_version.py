"""Version of the installed schemalang distribution."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "schemalang"
UNKNOWN_VERSION = "0+unknown"


def get_version() -> str:
    """Installed version, or ``UNKNOWN_VERSION`` when running from an uninstalled tree."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION
