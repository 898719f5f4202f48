"""
Service layer abstraction.

Each service wraps one MongoDB collection.  Handlers never touch the
database directly, so the queries for a domain live in one place.
"""
