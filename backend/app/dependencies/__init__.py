# Watch Party Dependencies
from app.dependencies.auth import get_current_user, verify_token
from app.dependencies.services import get_services

__all__ = ["get_current_user", "get_services", "verify_token"]
