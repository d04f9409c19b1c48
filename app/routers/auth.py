from fastapi import APIRouter, Depends

from app.schemas.user import UserCreate, UserLogin
from app.services.auth_service import AuthService
from app.services.providers import get_auth_service
from app.utils.responses import to_response, validation_failed
from app.utils.validation import validate_login, validate_register

router = APIRouter()

@router.post("/register")
def register(user: UserCreate, service: AuthService = Depends(get_auth_service)):
    """Register a new user (Employee or Manager)"""
    errors = validate_register(user)
    if errors:
        return validation_failed(errors)
    return to_response(service.register(user))

@router.post("/login")
def login(user: UserLogin, service: AuthService = Depends(get_auth_service)):
    """Login with email and password"""
    errors = validate_login(user)
    if errors:
        return validation_failed(errors)
    return to_response(service.login(user))
