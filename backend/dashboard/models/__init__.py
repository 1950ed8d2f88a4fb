"""ORM Models — SQLAlchemy declarative models for the dashboard tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Tables: customers, invoices, revenue, users

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete for create_all and Alembic
"""

from dashboard.models.customer import Customer  # noqa: F401
from dashboard.models.invoice import Invoice  # noqa: F401
from dashboard.models.revenue import Revenue  # noqa: F401
from dashboard.models.user import User  # noqa: F401
