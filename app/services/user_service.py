# app/services/user_service.py
from typing import List

from app.repositories.user_repository import UserRepository
from app.schemas.response import ApiResponse, ErrorKind
from app.schemas.user import UserOut
from app.utils.policy import can_view_user


class UserService:

    def __init__(self, users: UserRepository):
        self.users = users

    def get_all_users(self) -> ApiResponse[List[UserOut]]:
        users = self.users.get_all()
        return ApiResponse[List[UserOut]].ok([UserOut.model_validate(u) for u in users])

    def get_user_by_id(self, user_id: int, actor_id: int, actor_role: str) -> ApiResponse[UserOut]:
        if not can_view_user(actor_role, actor_id, user_id):
            return ApiResponse[UserOut].fail(ErrorKind.FORBIDDEN, "You can only view your own profile.")

        user = self.users.get_by_id(user_id)
        if user is None:
            return ApiResponse[UserOut].fail(ErrorKind.NOT_FOUND, "User not found.")
        return ApiResponse[UserOut].ok(UserOut.model_validate(user))
