from .user import (
    ListUsersUseCase,
    AddUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)

__all__ = [
    "ListUsersUseCase",
    "AddUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
]
