"""User listing route."""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_user_repo
from api.models import UserResponse
from domain.model.errors import InternalError
from port.user_repository import UserRepository
from services import auth_service

router = APIRouter(prefix="/api/user", tags=["users"])


@router.get("/all", response_model=list[UserResponse])
async def list_users(repo: UserRepository = Depends(get_user_repo)):
    """Return every registered user, without password hashes."""
    try:
        users = auth_service.list_users(repo)
    except InternalError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return [UserResponse.from_domain(u) for u in users]
