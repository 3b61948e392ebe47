"""
Pydantic schema definitions for API payloads.

Cards and settings are exchanged as camelCase JSON (``shortDescription``,
``numberOfHighlights``) and stored in exactly the same shape, so the
same models serve both the HTTP layer and the JSON files.
"""
