"""API Layer — FastAPI routes, access gate and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON or a redirect

Design Decisions:
    - Thin routes delegate to services; decisions stay in core/
"""
