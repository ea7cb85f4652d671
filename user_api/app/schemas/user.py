"""
Pydantic models for user data.

Defines the request bodies for creating and updating users and the
``User`` record that the entity store persists and the API returns.
No format validation is applied to ``name`` or ``email``; both are
free text and may be omitted.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: Optional[str] = Field(None, examples=["Test"])
    email: Optional[str] = Field(None, examples=["test@example.com"])


class UserCreate(UserBase):
    """Schema for creating a user.

    An ``id`` sent by the client is not part of the schema and is
    dropped during parsing; the store assigns identifiers.
    """


class UserUpdate(UserBase):
    """Schema for replacing a user's ``name`` and ``email``.

    Both fields overwrite the stored values, including when they are
    omitted (which stores ``null``).  The identifier always comes from
    the URL.
    """


class User(UserBase):
    """A persisted user as stored and returned by the API.

    ``id`` is ``None`` only for a record that has not been saved yet.
    """

    id: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }
