"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (clock and randomness passed in,
      except salt generation in credentials.hash_password)

Design Decisions:
    - Functional core separated from imperative shell: formatting, money,
      pagination and the access decision are testable without a database
"""
