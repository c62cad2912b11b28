"""
Application package initializer.

This package contains the entrypoint for the participant API and its
submodules.  The in‑memory record store lives in ``core``, request
and response models in ``schemas``, aggregation and export logic in
``services`` and the HTTP routes in ``api``.
"""

from .main import app  # noqa: F401
