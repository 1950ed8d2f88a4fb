"""Infrastructure Layer — store session management, view cache, logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All store calls wrapped with rollback/error mapping (database.py)

Design Decisions:
    - Objects built once in the FastAPI lifespan and attached to app.state
"""
