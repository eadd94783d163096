"""Liveness probe, mounted only when ``health_check_enabled`` is set."""

from fastapi import APIRouter, Request, status

from app.models import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    response_model=HealthResponse,
    summary="Service Health Check",
)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint for monitoring and load balancer probes.

    Reports process liveness only; the services have no dependencies to probe.
    """
    return HealthResponse(
        status="healthy",
        service=request.app.state.service,
        version=request.app.version,
        environment=request.app.state.environment,
    )
