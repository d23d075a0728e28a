"""EventGraph Application Package — in-memory graph of users, events, locations, participants.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
