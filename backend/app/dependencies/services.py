"""
Service dependencies - the container built at startup lives on app.state
"""

from fastapi import Request

from app.services.container import ServiceContainer


def get_services(request: Request) -> ServiceContainer:
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise RuntimeError("Services not initialized")
    return services
