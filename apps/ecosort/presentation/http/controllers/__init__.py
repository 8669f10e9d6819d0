"""HTTP Controllers."""

from ecosort.presentation.http.controllers.game import router as game_router
from ecosort.presentation.http.controllers.health import router as health_router
from ecosort.presentation.http.controllers.history import router as history_router
from ecosort.presentation.http.controllers.location import router as location_router
from ecosort.presentation.http.controllers.scan import router as scan_router

__all__ = [
    "game_router",
    "health_router",
    "history_router",
    "location_router",
    "scan_router",
]
