"""
User endpoints.

CRUD routes over the ``/users`` collection.  Handlers only parse the
request, call ``UserService`` and map ``UserNotFoundError`` to HTTP
404; every business decision lives in the service.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from user_api.app.api.dependencies import get_user_service
from user_api.app.core.exceptions import UserNotFoundError
from user_api.app.schemas.user import User, UserCreate, UserUpdate
from user_api.app.services.user_service import UserService

router = APIRouter()

# Identifiers are signed 64-bit integers, matching SQLite's INTEGER range.
MIN_USER_ID = -(2**63)
MAX_USER_ID = 2**63 - 1

UserId = Annotated[int, Path(ge=MIN_USER_ID, le=MAX_USER_ID, description="Numeric user identifier")]


@router.get("", response_model=List[User])
async def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    """Return all users."""
    return await service.get_all_users()


@router.get("/{user_id}", response_model=User)
async def get_user(
    user_id: UserId,
    service: UserService = Depends(get_user_service),
) -> User:
    """Retrieve a single user by ID.

    Returns HTTP 404 if the user is not found.
    """
    try:
        return await service.get_user_by_id(user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=User, status_code=status.HTTP_200_OK)
async def create_user(
    user: UserCreate,
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a user.

    The store assigns the identifier; any ``id`` in the body is ignored.
    """
    return await service.create_user(user)


@router.put("/{user_id}", response_model=User)
async def update_user(
    user_id: UserId,
    user: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> User:
    """Replace a user's name and email.

    The identifier in the path wins over any ``id`` in the body.
    Returns HTTP 404 if the user is not found.
    """
    try:
        return await service.update_user(user_id, user)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{user_id}", status_code=status.HTTP_200_OK, response_class=Response)
async def delete_user(
    user_id: UserId,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Delete a user by ID and answer with an empty 200 response.

    Returns HTTP 404 if the user is not found.
    """
    try:
        await service.delete_user(user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_200_OK)
