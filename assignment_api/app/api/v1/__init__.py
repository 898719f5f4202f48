"""
Version 1 of the API.

These are the routes consumed by the assignment web client.  Paths are
kept stable because the client hardcodes them; breaking changes belong
in a new version subpackage.
"""
