"""API routes for monitoring sites and their readings."""

from fastapi import APIRouter, Depends, HTTPException, Query

from src.api.application.monitoring_service import MonitoringService
from src.api.domain.schemas import AlertResponse, ReadingResponse, SiteResponse
from src.api.infrastructure.container import get_container
from src.config import AppConfig
from src.telemetry.domain.exceptions import SiteNotFoundError

# Load configuration
_app_config = AppConfig()

router = APIRouter(prefix="/api/sites", tags=["sites"])


def get_monitoring_service() -> MonitoringService:
    """Get monitoring service dependency."""
    container = get_container()
    return MonitoringService(container.store())


@router.get("", response_model=list[SiteResponse])
async def list_sites(service: MonitoringService = Depends(get_monitoring_service)):
    """List all monitoring sites."""
    return service.list_sites()


@router.get("/{site_id}", response_model=SiteResponse)
async def get_site(site_id: str, service: MonitoringService = Depends(get_monitoring_service)):
    """Get a specific monitoring site."""
    try:
        return service.get_site(site_id)
    except SiteNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.get("/{site_id}/readings", response_model=list[ReadingResponse])
async def list_readings(
    site_id: str,
    limit: int = Query(
        _app_config.query.default_readings_limit, ge=1, le=_app_config.query.max_readings_limit
    ),
    service: MonitoringService = Depends(get_monitoring_service),
):
    """
    Get sensor readings for a site.

    Returns readings newest first, truncated to `limit`.
    """
    return service.list_readings(site_id, limit)


@router.get("/{site_id}/latest-reading", response_model=ReadingResponse | None)
async def get_latest_reading(site_id: str, service: MonitoringService = Depends(get_monitoring_service)):
    """Get the most recent reading for a site (null if there is none)."""
    return service.latest_reading(site_id)


@router.get("/{site_id}/alerts", response_model=list[AlertResponse])
async def list_site_alerts(site_id: str, service: MonitoringService = Depends(get_monitoring_service)):
    """Get every alert raised for a site, including dismissed ones."""
    return service.list_site_alerts(site_id)
