"""
Aura Storefront API

Main entry point for the Aura storefront backend.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Common library imports
from common.utils import success_response

# App-specific imports
from aura.config import settings

# Import routers
from aura.routers import (
    catalog_router,
    sessions_router,
    cart_router,
    i18n_router,
    checkout_router,
    concierge_router,
)

# Import service initialization
from aura.dependencies import init_all_services, shutdown_services, get_ai_provider


VERSION = "1.0.0"


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds the services on startup and closes open sessions on shutdown.
    """
    # Startup
    print("Starting Aura API...")

    settings.validate_required()

    # Tests inject their own services before startup
    if not getattr(app.state, "services_ready", False):
        init_all_services(settings)
    print(f"AI provider: {settings.AI_PROVIDER} (enabled: {get_ai_provider() is not None})")

    print("Aura API started successfully!")

    yield

    # Shutdown
    print("Shutting down Aura API...")
    await shutdown_services()
    print("Aura API shut down complete.")


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="Aura API",
    description="Storefront backend with AI translation, shipping estimates and concierge chat",
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# Include Routers (all under /api prefix)
# =============================================================================
API_PREFIX = "/api"

app.include_router(catalog_router, prefix=API_PREFIX, tags=["Catalog"])
app.include_router(sessions_router, prefix=API_PREFIX, tags=["Sessions"])
app.include_router(cart_router, prefix=API_PREFIX, tags=["Cart"])
app.include_router(i18n_router, prefix=API_PREFIX, tags=["i18n"])
app.include_router(checkout_router, prefix=API_PREFIX, tags=["Checkout"])
app.include_router(concierge_router, prefix=API_PREFIX, tags=["Concierge"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get(f"{API_PREFIX}/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Returns the status of the API and whether AI features are enabled.
    """
    return success_response({
        "status": "ok",
        "version": VERSION,
        "aiProvider": settings.AI_PROVIDER,
        "aiEnabled": get_ai_provider() is not None,
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
