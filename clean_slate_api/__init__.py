"""
Top‑level package for the Clean Slate API.

This file makes ``clean_slate_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``clean_slate_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
