"""Root conftest — shared test configuration and store fixtures.

Invariants:
    - Every test gets a fresh file-backed SQLite database under tmp_path
    - Reads that run concurrently get separate connections (file DB, not :memory:)
    - seeded fixture inserts a small known dataset; tests assert exact totals

Design Decisions:
    - SQLite via aiosqlite: no external service, same SQLAlchemy statements as Postgres
    - failing_store stands in for an unreachable database at the session boundary
"""

import os
from contextlib import asynccontextmanager
from datetime import date
from uuid import uuid4

import pytest

# Settings are read once per process; pin them before any app import
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.setdefault("LOG_FORMAT", "text")

from dashboard.core.credentials import hash_password  # noqa: E402
from dashboard.core.errors import DataAccessError  # noqa: E402
from dashboard.db.base import Base  # noqa: E402
from dashboard.infrastructure.database import DatabaseSessionManager  # noqa: E402
from dashboard.infrastructure.view_cache import ViewCache  # noqa: E402
from dashboard.models import Customer, Invoice, Revenue, User  # noqa: E402

USER_EMAIL = "user@nextmail.com"
USER_PASSWORD = "123456"


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'dashboard.db'}",
    )
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
def view_cache():
    return ViewCache(ttl_seconds=30.0)


@pytest.fixture
async def seeded(db_manager):
    """Four customers (one without invoices), five invoices, four revenue months, one user.

    Totals: paid $478.40, pending $707.20.
    """
    customers = {
        "delba": Customer(
            id=uuid4(), name="Delba de Oliveira", email="delba@oliveira.com",
            image_url="/customers/delba-de-oliveira.png",
        ),
        "lee": Customer(
            id=uuid4(), name="Lee Robinson", email="lee@robinson.com",
            image_url="/customers/lee-robinson.png",
        ),
        "evil": Customer(
            id=uuid4(), name="Evil Rabbit", email="evil@rabbit.com",
            image_url="/customers/evil-rabbit.png",
        ),
        "amy": Customer(
            id=uuid4(), name="Amy Burns", email="amy@burns.com",
            image_url="/customers/amy-burns.png",
        ),
    }
    invoices = {
        "delba_pending": Invoice(
            id=uuid4(), customer_id=customers["delba"].id, amount=15795,
            status="pending", date=date(2022, 12, 6),
        ),
        "lee_pending": Invoice(
            id=uuid4(), customer_id=customers["lee"].id, amount=20348,
            status="pending", date=date(2022, 11, 14),
        ),
        "evil_paid": Invoice(
            id=uuid4(), customer_id=customers["evil"].id, amount=3040,
            status="paid", date=date(2022, 10, 29),
        ),
        "delba_paid": Invoice(
            id=uuid4(), customer_id=customers["delba"].id, amount=44800,
            status="paid", date=date(2023, 9, 10),
        ),
        "lee_recent": Invoice(
            id=uuid4(), customer_id=customers["lee"].id, amount=34577,
            status="pending", date=date(2023, 8, 5),
        ),
    }
    # Inserted out of calendar order
    revenue = [
        Revenue(month="Mar", revenue=2200),
        Revenue(month="Jan", revenue=2000),
        Revenue(month="Apr", revenue=2500),
        Revenue(month="Feb", revenue=1800),
    ]
    user = User(
        id=uuid4(), name="User", email=USER_EMAIL,
        password=hash_password(USER_PASSWORD, iterations=1000),
    )
    async with db_manager.session("seed") as session:
        session.add_all(customers.values())
        await session.flush()
        session.add_all(invoices.values())
        session.add_all(revenue)
        session.add(user)
        await session.commit()
    return {
        "customers": {k: c.id for k, c in customers.items()},
        "invoices": {k: i.id for k, i in invoices.items()},
        "user_id": user.id,
    }


class FailingStore:
    """Session provider whose every session fails like an unreachable database."""

    def __init__(self):
        self.operations: list[str] = []

    @asynccontextmanager
    async def session(self, operation: str = "unknown"):
        self.operations.append(operation)
        raise DataAccessError(
            "connection refused at postgresql://secret-host:5432", operation,
        )
        yield  # pragma: no cover

    async def health_check(self) -> bool:
        return False


@pytest.fixture
def failing_store():
    return FailingStore()
