# app/services/auth_service.py
import logging

from sqlalchemy.exc import IntegrityError

from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.response import ApiResponse, ErrorKind
from app.schemas.tokens import LoginResponse
from app.schemas.user import UserCreate, UserLogin
from app.utils.policy import is_valid_role
from app.utils.security import create_access_token, hash_password, needs_rehash, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """Registration and login. Both hand back a signed token on success."""

    def __init__(self, users: UserRepository):
        self.users = users

    def register(self, payload: UserCreate) -> ApiResponse[LoginResponse]:
        if not is_valid_role(payload.role):
            return ApiResponse[LoginResponse].fail(
                ErrorKind.VALIDATION_FAILED, "Invalid role. Must be 'Employee' or 'Manager'."
            )

        if self.users.email_exists(payload.email):
            logger.warning(f"Registration rejected, email already in use: {payload.email}")
            return ApiResponse[LoginResponse].fail(ErrorKind.CONFLICT, "Email already exists.")

        try:
            user = self.users.create(
                User(
                    full_name=payload.full_name,
                    email=payload.email,
                    hashed_password=hash_password(payload.password),
                    role=payload.role,
                )
            )
        except IntegrityError:
            # Another registration for the same email committed first
            logger.warning(f"Registration lost a race on unique email: {payload.email}")
            return ApiResponse[LoginResponse].fail(ErrorKind.CONFLICT, "Email already exists.")
        logger.info(f"Registered {user.role} {user.email} (ID: {user.id})")
        return ApiResponse[LoginResponse].ok(self._login_response(user), "User registered successfully.")

    def login(self, payload: UserLogin) -> ApiResponse[LoginResponse]:
        user = self.users.get_by_email(payload.email)
        if user is None or not verify_password(payload.password, user.hashed_password):
            logger.warning(f"Failed login for {payload.email}")
            return ApiResponse[LoginResponse].fail(ErrorKind.UNAUTHORIZED, "Invalid email or password.")

        if needs_rehash(user.hashed_password):
            user = self.users.update_password(user, hash_password(payload.password))
            logger.info(f"Upgraded stored password hash for user {user.id}")

        return ApiResponse[LoginResponse].ok(self._login_response(user), "Login successful.")

    @staticmethod
    def _login_response(user: User) -> LoginResponse:
        token = create_access_token(user.id, user.email, user.full_name, user.role)
        return LoginResponse(
            user_id=user.id,
            full_name=user.full_name,
            email=user.email,
            role=user.role,
            token=token,
        )
