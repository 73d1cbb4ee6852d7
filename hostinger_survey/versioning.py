"""Application versioning utility for the Hostinger survey service.

This module provides a helper to retrieve the installed package version,
using the package name defined in pyproject.toml.
"""

from importlib.metadata import PackageNotFoundError, version

PKG_NAME = "hostinger-survey"  # matches pyproject.toml


def get_app_version() -> str:
    """Get the installed version string for the survey service.

    Returns:
        str: The version string, or "0.0.0+unknown" if not found.
    """
    try:
        return version(PKG_NAME)
    except PackageNotFoundError:
        return "0.0.0+unknown"
