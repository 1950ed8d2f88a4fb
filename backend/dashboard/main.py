"""Invoice Dashboard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DashboardError → structured JSON responses
    - Access gate runs before every handler
    - CORS configured from settings (not hardcoded)
    - Store and view cache built by the lifespan and held on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Dependencies on app.state instead of module globals: tests swap in their
      own store without patching
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dashboard.api.access_gate import register_access_gate
from dashboard.api.error_handlers import register_error_handlers
from dashboard.api.routes import auth, customers, health, invoices, overview
from dashboard.config import get_settings
from dashboard.infrastructure.database import DatabaseSessionManager
from dashboard.infrastructure.observability import setup_logging
from dashboard.infrastructure.view_cache import ViewCache

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.view_cache = ViewCache(
        settings.view_cache_ttl_seconds, maxsize=settings.view_cache_max_entries,
    )
    logger.info("Invoice dashboard API started")
    yield
    logger.info("Invoice dashboard API shutting down")
    await app.state.db_manager.dispose()


app = FastAPI(
    title="Invoice Dashboard API", version="1.0.0", lifespan=lifespan,
)

# Last-added middleware runs first: CORS wraps the gate
register_access_gate(app)
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_error_handlers(app)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(overview.router)
app.include_router(invoices.router)
app.include_router(customers.router)
