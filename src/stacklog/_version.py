"""
Version information for stacklog.

This file is the canonical source for version numbers.

Format: MAJOR.MINOR.PATCH[-PHASE]
Example: 0.1.0-alpha
"""

# Version components - edit these for version bumps
MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = "alpha"  # None, "alpha", "beta", "rc1", etc.

__app_name__ = "stacklog"


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_pip_version():
    """
    Return PEP 440 compliant version for pip/setuptools.

    0.1.0-alpha -> 0.1.0a0, 0.1.0-rc1 -> 0.1.0rc1
    """
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    phase_map = {"alpha": "a0", "beta": "b0"}
    if PHASE:
        base += phase_map.get(PHASE, PHASE)
    return base


__version__ = get_base_version()

# For convenience in imports
BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
