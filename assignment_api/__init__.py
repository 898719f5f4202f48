"""
Top‑level package for the Assignment API.

This file makes ``assignment_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``assignment_api.app.main``.  Tests import the application through
this package, so it must stay importable from the project root.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
