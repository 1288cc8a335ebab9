"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON

Design Decisions:
    - Thin routes delegate to BoardService; stone resolution happens at the edge
"""
