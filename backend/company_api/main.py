"""Company Employees API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CompanyEmployeesError → structured JSON responses
    - CORS configured from settings (not hardcoded); X-Pagination exposed to browsers
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py, registered once here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from company_api.api.error_handlers import register_error_handlers
from company_api.api.routes import companies, companies_v2, employees, health
from company_api.config import get_settings
from company_api.infrastructure.database import close_db, init_db
from company_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Company Employees API started")
    yield
    await close_db()
    logger.info("Company Employees API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title="Company Employees API", version="1.0.0", lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Pagination", "Location"],
    )

    # Routes — explicit registration; v1 companies before employees (shared prefix)
    application.include_router(health.router)
    application.include_router(companies.router)
    application.include_router(companies_v2.router)
    application.include_router(employees.router)

    register_error_handlers(application)
    return application


app = create_app()
