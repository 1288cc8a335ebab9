"""Stoneboard Application Package — per-stone bulletin board backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
