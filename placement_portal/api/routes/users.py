"""
User routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from placement_portal.api.deps import get_store
from placement_portal.core.exceptions import UserNotFoundException
from placement_portal.core.store import PortalStore
from placement_portal.models.user import User, UserRole
from placement_portal.schemas.user import UserCreate, UserUpdate
from placement_portal.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

user_service = UserService()


@router.get("/", response_model=List[User])
async def list_users(
    role: Optional[UserRole] = Query(None),
    department: Optional[str] = Query(None),
    store: PortalStore = Depends(get_store),
):
    return await user_service.list_users(store, role=role, department=department)


@router.post("/", response_model=User, status_code=201)
async def create_user(
    data: UserCreate,
    store: PortalStore = Depends(get_store),
):
    return await user_service.create_user(store, data)


@router.get("/alumni", response_model=List[User])
async def list_alumni(
    department: Optional[str] = Query(None),
    store: PortalStore = Depends(get_store),
):
    return await user_service.list_alumni(store, department=department)


@router.get("/{user_id}", response_model=User)
async def get_user(
    user_id: int,
    store: PortalStore = Depends(get_store),
):
    user = await user_service.get_user(store, user_id)
    if user is None:
        raise UserNotFoundException()
    return user


@router.patch("/{user_id}", response_model=User)
async def update_user(
    user_id: int,
    data: UserUpdate,
    store: PortalStore = Depends(get_store),
):
    return await user_service.update_user(store, user_id, data)
