"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - InvoiceId, CustomerId, UserId wrap UUIDs — never use bare UUID in domain logic
    - Cents is always an int count of minor currency units
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

InvoiceId = NewType("InvoiceId", UUID)
CustomerId = NewType("CustomerId", UUID)
UserId = NewType("UserId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

Cents = NewType("Cents", int)   # >= 0


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice states — maps to DB `status` column."""
    PENDING = "pending"
    PAID = "paid"


class AccessOutcome(str, Enum):
    """Authorization gate results."""
    ALLOW = "allow"
    DENY_REDIRECT = "deny_redirect"
    REDIRECT_AWAY = "redirect_away"


def parse_invoice_id(raw: str | UUID) -> InvoiceId | None:
    """Parse a path id. Malformed ids are absence, not errors."""
    if isinstance(raw, UUID):
        return InvoiceId(raw)
    try:
        return InvoiceId(UUID(str(raw)))
    except ValueError:
        return None
