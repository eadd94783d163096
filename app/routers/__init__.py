"""API route handlers.

No business routes are registered yet. The only router is the optional
liveness probe.
"""

from app.routers.health import router as health_router

__all__ = ["health_router"]
