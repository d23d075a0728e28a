"""Route Modules — one file per entity kind plus health.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Single-row reads answer 200 with null when the row is absent;
      update/delete answer 404 through ResourceNotFoundError
"""
