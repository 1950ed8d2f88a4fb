"""Invoice ORM — the only entity with a write path.

Invariants:
    - amount is int cents, never dollars
    - status is 'pending' or 'paid' (validated before any write)
    - date is set on create and never changed by update
    - customer_id must reference an existing customer

Design Decisions:
    - status as String(20), not a DB enum: adding a state needs no migration
    - Index on date: every list query orders by date DESC
"""

import uuid
import datetime

from sqlalchemy import String, Integer, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from dashboard.db.base import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    customer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("customers.id"), nullable=False,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
