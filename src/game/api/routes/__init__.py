from .health import router as health_router
from .players import router as players_router

__all__ = [
    "health_router",
    "players_router",
]
