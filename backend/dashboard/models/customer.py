"""Customer ORM — read-only from the dashboard's perspective.

Invariants:
    - id is UUID primary key
    - Referenced by zero or more invoices (invoices.customer_id)

Design Decisions:
    - No relationship() to invoices: every read that needs both is an explicit JOIN
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from dashboard.db.base import Base


class Customer(Base):
    __tablename__ = "customers"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(255), nullable=False)
