from typing import Optional

from pydantic import BaseModel, Field


class UserCreateRequest(BaseModel):
    """DTO for user creation request

    Presence and format are checked by the domain validation rules, not by
    the model, so every field is optional here.
    """
    full_name: Optional[str] = None
    age: Optional[int] = None
    address: Optional[str] = None
    email: Optional[str] = None
    contact_number: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)


class UserUpdateRequest(BaseModel):
    """DTO for partial user update request (falsy values leave fields unchanged)"""
    id: Optional[str] = None
    full_name: Optional[str] = None
    age: Optional[int] = None
    address: Optional[str] = None
    email: Optional[str] = None
    contact_number: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
