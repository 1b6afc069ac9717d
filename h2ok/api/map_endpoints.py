"""Map view endpoints: snapshot plus the commands the map controls send."""
from fastapi import APIRouter, Depends

from h2ok.config.settings import MapSettings
from h2ok.core.dependencies import get_coordinator, get_map_settings
from h2ok.models.internal_models import Coordinates
from h2ok.schemas.base import Envelope
from h2ok.schemas.map_view import FilterUpdate, LocateRequest, MapView
from h2ok.services.geolocation import GeolocationAdapter, ReportedPositionProvider
from h2ok.services.map_sync_coordinator import MapSyncCoordinator

router = APIRouter(prefix="/map", tags=["map"])


def _map_view(coordinator: MapSyncCoordinator, map_settings: MapSettings) -> Envelope[MapView]:
    view = MapView.from_snapshot(
        coordinator.snapshot(),
        tile_url=map_settings.tile_url,
        tile_attribution=map_settings.tile_attribution,
    )
    return Envelope[MapView](status="ok", data=view)


@router.get("", response_model=Envelope[MapView])
async def get_map(
    coordinator: MapSyncCoordinator = Depends(get_coordinator),
    map_settings: MapSettings = Depends(get_map_settings),
):
    return _map_view(coordinator, map_settings)


@router.post("/activate", response_model=Envelope[MapView])
async def activate_map(
    coordinator: MapSyncCoordinator = Depends(get_coordinator),
    map_settings: MapSettings = Depends(get_map_settings),
):
    await coordinator.on_map_activated()
    return _map_view(coordinator, map_settings)


@router.post("/filters", response_model=Envelope[MapView])
async def change_filters(
    update: FilterUpdate,
    coordinator: MapSyncCoordinator = Depends(get_coordinator),
    map_settings: MapSettings = Depends(get_map_settings),
):
    partial = update.model_dump(exclude_none=True)
    if partial:
        await coordinator.on_filter_changed(**partial)
    return _map_view(coordinator, map_settings)


@router.post("/search", response_model=Envelope[MapView])
async def search(
    coordinator: MapSyncCoordinator = Depends(get_coordinator),
    map_settings: MapSettings = Depends(get_map_settings),
):
    await coordinator.on_search_requested()
    return _map_view(coordinator, map_settings)


@router.post("/locate", response_model=Envelope[MapView])
async def locate(
    body: LocateRequest,
    coordinator: MapSyncCoordinator = Depends(get_coordinator),
    map_settings: MapSettings = Depends(get_map_settings),
):
    position = None
    if body.latitude is not None and body.longitude is not None:
        position = Coordinates(body.latitude, body.longitude)
    adapter = GeolocationAdapter(ReportedPositionProvider(position))
    await coordinator.on_locate_requested(adapter)
    return _map_view(coordinator, map_settings)
