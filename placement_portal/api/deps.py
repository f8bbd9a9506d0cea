"""
API dependencies for dependency injection.
"""
from fastapi import Request

from placement_portal.core.store import PortalStore


async def get_store(request: Request) -> PortalStore:
    """The process-wide store created in the app lifespan."""
    return request.app.state.store
