"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain lives in its own service module and exposes a
router defined in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
