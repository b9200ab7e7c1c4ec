from .list_users import ListUsersUseCase
from .add_user import AddUserUseCase
from .update_user import UpdateUserUseCase
from .delete_user import DeleteUserUseCase

__all__ = [
    "ListUsersUseCase",
    "AddUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
]
