"""
Pydantic schema definitions for API payloads.

Documents travel over the wire in camelCase, exactly as they are
stored in MongoDB.  Schemas expose snake_case attributes with
camelCase aliases so handlers stay pythonic while the stored shape
does not change.
"""
