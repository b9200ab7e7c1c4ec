from .user_dto import UserCreateRequest, UserUpdateRequest

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
]
