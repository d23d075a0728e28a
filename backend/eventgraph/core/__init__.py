"""Core Layer — stores, operations and relationship resolution. No IO, no FastAPI.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Logging happens in the shell (routes, error handlers), never here
"""
