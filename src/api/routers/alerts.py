"""API routes for alerts."""

from fastapi import APIRouter, Depends

from src.api.application.monitoring_service import MonitoringService
from src.api.domain.schemas import AlertResponse, DismissResponse
from src.api.routers.sites import get_monitoring_service

router = APIRouter(prefix="/api/alerts", tags=["alerts"])


@router.get("", response_model=list[AlertResponse])
async def list_active_alerts(service: MonitoringService = Depends(get_monitoring_service)):
    """List active alerts, high priority first."""
    return service.list_active_alerts()


@router.post("/{alert_id}/dismiss", response_model=DismissResponse)
async def dismiss_alert(alert_id: str, service: MonitoringService = Depends(get_monitoring_service)):
    """
    Dismiss an alert.

    The alert stays in the site's history with `isActive: false`.
    Dismissing an unknown or already dismissed alert still succeeds.
    """
    service.dismiss_alert(alert_id)
    return DismissResponse(success=True)
