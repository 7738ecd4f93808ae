# Watch Party API Routers
from app.routers import health, marathon, watch_parties

__all__ = ["health", "marathon", "watch_parties"]
