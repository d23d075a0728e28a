"""Identifier Generator — random string ids for new records.

Invariants:
    - Ids are 32 lowercase hex chars (UUID4), unique with overwhelming probability
    - No lookup against existing stores; collisions are accepted as negligible
"""

from uuid import uuid4


def generate_id() -> str:
    return uuid4().hex
