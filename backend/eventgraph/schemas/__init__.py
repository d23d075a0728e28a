"""Pydantic Schemas — request/response shapes for the REST façade.

Invariants:
    - Schemas validate presence and type at the system boundary, nothing more
    - Core records stay plain dicts; schemas convert on the way in and out

Design Decisions:
    - One module per entity kind, shared shapes in common.py
"""
