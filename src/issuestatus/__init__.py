"""issuestatus - Move unassigned issues to a new status on a GitHub Project."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the package version."""
    return __version__
