# External package imports
import strawberry

# Local application imports
from ...domain.models.user import User


@strawberry.type(name="User")
class UserType:
    """GraphQL view of a user; the password hash is never exposed"""
    id: strawberry.ID
    full_name: str
    age: int
    address: str
    email: str
    contact_number: str
    username: str

    @classmethod
    def from_domain(cls, user: User) -> "UserType":
        return cls(
            id=strawberry.ID(user.id or ""),
            full_name=user.full_name,
            age=user.age,
            address=user.address,
            email=user.email,
            contact_number=user.contact_number,
            username=user.username,
        )
