"""
Pydantic schema definitions for API payloads.

Field names on the wire are camelCase to match the front‑end; the
models expose snake_case attributes and map them with aliases.
"""
