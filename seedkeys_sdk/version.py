"""
Version information for the SeedKeys SDK.
"""
import importlib.metadata

DISTRIBUTION_NAME = "seedkeys-sdk"

# Source checkouts that were never installed have no metadata
UNKNOWN_VERSION = "0.0.0"


def get_version() -> str:
    """Return the installed distribution version, or UNKNOWN_VERSION."""
    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError:
        return UNKNOWN_VERSION


__version__ = get_version()
