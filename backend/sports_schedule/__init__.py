"""Sports Schedule — league, team and event scheduling API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
