"""
Health Check Router

- /health: Simple health for load balancers
- /api/v1/health: Same check under the versioned prefix
"""

from fastapi import APIRouter

# Router for /api/v1 prefix
router = APIRouter()

# Router for root-level health endpoints
root_router = APIRouter()


@root_router.get("/health")
async def health():
    """Simple health check for load balancers."""
    return {"status": "ok"}


@router.get("/health")
async def health_check():
    """Health check endpoint under /api/v1."""
    return {"status": "ok"}
