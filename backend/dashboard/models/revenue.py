"""Revenue ORM — precomputed monthly aggregate, read-only."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from dashboard.db.base import Base


class Revenue(Base):
    __tablename__ = "revenue"

    month: Mapped[str] = mapped_column(String(4), primary_key=True)
    revenue: Mapped[int] = mapped_column(Integer, nullable=False)
