from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies

    ``hashed_password`` only ever holds a bcrypt hash; the plaintext never
    reaches this model.
    """
    id: Optional[str]
    full_name: str
    age: int
    address: str
    email: str
    contact_number: str
    username: str
    hashed_password: str
