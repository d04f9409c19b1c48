# app/routers/user.py
from fastapi import APIRouter, Depends

from app.services.providers import get_user_service
from app.services.user_service import UserService
from app.utils.auth import CurrentUser, get_current_user, require_manager
from app.utils.responses import to_response

router = APIRouter()

@router.get("")
def get_all_users(
    service: UserService = Depends(get_user_service),
    current_user: CurrentUser = Depends(require_manager),
):
    """Get all users (Manager only)"""
    return to_response(service.get_all_users())

@router.get("/{user_id}")
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    """Get a user by ID - employees can only view their own profile"""
    return to_response(service.get_user_by_id(user_id, current_user.id, current_user.role))
