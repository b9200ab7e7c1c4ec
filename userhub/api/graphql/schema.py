# Standard library imports
import logging
from typing import List, Optional

# External package imports
import strawberry
from graphql import GraphQLError
from strawberry.types import ExecutionContext, Info

# Local application imports
from ...application.dto.user_dto import UserCreateRequest, UserUpdateRequest
from ...application.use_cases.user import (
    AddUserUseCase,
    DeleteUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from ...di.container import get_container
from .errors import UserOperationError, unwrap
from .types import UserType

logger = logging.getLogger(__name__)


@strawberry.type
class Query:
    """User queries"""

    @strawberry.field
    async def get_users(self, info: Info) -> List[UserType]:
        use_case = get_container().get(ListUsersUseCase)
        users = unwrap(await use_case.execute(info.context.rate_usage))
        return [UserType.from_domain(user) for user in users]


@strawberry.type
class Mutation:
    """User mutations"""

    @strawberry.mutation
    async def add_user(
        self,
        info: Info,
        full_name: str,
        age: int,
        address: str,
        email: str,
        contact_number: str,
        username: str,
        password: str,
    ) -> Optional[UserType]:
        use_case = get_container().get(AddUserUseCase)
        request = UserCreateRequest(
            full_name=full_name,
            age=age,
            address=address,
            email=email,
            contact_number=contact_number,
            username=username,
            password=password,
        )
        user = unwrap(await use_case.execute(request, info.context.rate_usage))
        return UserType.from_domain(user)

    @strawberry.mutation
    async def update_user(
        self,
        info: Info,
        id: strawberry.ID,
        full_name: Optional[str] = None,
        age: Optional[int] = None,
        address: Optional[str] = None,
        email: Optional[str] = None,
        contact_number: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Optional[UserType]:
        use_case = get_container().get(UpdateUserUseCase)
        request = UserUpdateRequest(
            id=id,
            full_name=full_name,
            age=age,
            address=address,
            email=email,
            contact_number=contact_number,
            username=username,
            password=password,
        )
        user = unwrap(await use_case.execute(request, info.context.rate_usage))
        return UserType.from_domain(user)

    @strawberry.mutation
    async def delete_user(self, info: Info, id: strawberry.ID) -> Optional[UserType]:
        use_case = get_container().get(DeleteUserUseCase)
        user = unwrap(await use_case.execute(id, info.context.rate_usage))
        return UserType.from_domain(user)


class UserHubSchema(strawberry.Schema):
    """Schema that logs every execution error with its original cause"""

    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, UserOperationError):
                logger.info(f"Operation rejected: {original.error.code} - {original.error.message}")
            else:
                logger.error(
                    f"GraphQL error: {error.message}",
                    exc_info=original if original is not None else error,
                )


schema = UserHubSchema(query=Query, mutation=Mutation)
