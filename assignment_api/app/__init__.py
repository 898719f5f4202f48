"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (assignments, submissions, reviews and the
leaderboard) has its own schemas, a service wrapping its MongoDB
collection and a router defined in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
