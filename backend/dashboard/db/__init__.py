"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - Engine and sessions are owned by infrastructure/database.py
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL (native async, no thread pool overhead)
"""
