"""
FastAPI application entry point.

API server for Folio portfolio pricing.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from folio.core.config import settings
from folio.core.logging import setup_logging

# Setup logging
setup_logging()

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Portfolio Tracker - Asset Pricing and Performance",
    debug=settings.DEBUG,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
    }


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "message": f"Welcome to {settings.APP_NAME} API",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }


from folio.api.prices import router as prices_router
from folio.api.portfolio import router as portfolio_router

app.include_router(prices_router, prefix="/api", tags=["prices"])
app.include_router(portfolio_router, prefix="/api/portfolio", tags=["portfolio"])
