# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# Configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import API_VERSION, settings
from app.exceptions import ScaffoldException, scaffold_exception_handler
from app.routers import examples, health, organizations, webhooks

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting Tenant Scaffold API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    yield
    logger.info("Shutting down Tenant Scaffold API")


app = FastAPI(
    title="Tenant Scaffold API",
    description="""
## Multi-tenant CRUD scaffold on Supabase

Every request flows through the same layers:

| Layer | Responsibility |
|-------|----------------|
| **Router** | HTTP shape, authentication, request context |
| **Action** | Validation, error-to-envelope conversion, cache revalidation |
| **Service** | Multi-repository orchestration, exact decimal math |
| **Repository** | One query per access pattern, typed records |
| **Client** | Supabase handle (user-scoped, so RLS applies) |

Mutations answer with `{"success": true, "data": ...}` or
`{"success": false, "error": "..."}`.
""",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Examples",
            "description": "The illustrative domain entity: CRUD, markup and CSV export",
        },
        {
            "name": "Organizations",
            "description": "The caller's organization (tenant)",
        },
        {
            "name": "Webhooks",
            "description": "Externally-initiated calls",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(ScaffoldException)
async def handle_scaffold_exception(request: Request, exc: ScaffoldException):
    return await scaffold_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

app.include_router(
    organizations.router,
    prefix="/api/v1/organizations",
    tags=["Organizations"]
)

app.include_router(
    examples.router,
    prefix="/api/v1/examples",
    tags=["Examples"]
)

app.include_router(
    webhooks.router,
    prefix="/api/v1/webhooks",
    tags=["Webhooks"]
)


@app.get("/", tags=["Root"])
async def root():
    return {
        "name": "Tenant Scaffold API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
