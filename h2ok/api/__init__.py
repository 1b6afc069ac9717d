# API endpoints and routers

from .map_endpoints import router as map_router
from .updates_endpoints import router as updates_router
from .site_endpoints import router as site_router

__all__ = [
    "map_router",
    "updates_router",
    "site_router",
]
