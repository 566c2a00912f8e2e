from http import HTTPStatus
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import ValidationError

from dinero.api.dependencies import read_body, user_id_param
from dinero.core.context import AppContext, get_context
from dinero.core.errors import ConflictError, NotFoundError, StoreError
from dinero.core.responses import empty_response, status_response, storage_failure
from dinero.schemas.user import UserCreate, UserRead
from dinero.utils.validation import validate_user

router = APIRouter(prefix="/users", tags=["users"])


def decode_user(body: bytes) -> Optional[UserCreate]:
    try:
        return UserCreate.model_validate_json(body)
    except ValidationError:
        return None


@router.get("", response_model=List[UserRead])
def list_users(ctx: AppContext = Depends(get_context)):
    try:
        return ctx.store.list_users()
    except StoreError:
        return storage_failure(ctx.log, "listing users failed")


@router.post("", response_model=UserRead)
def create_user(body: bytes = Depends(read_body), ctx: AppContext = Depends(get_context)):
    user = decode_user(body)
    if user is None:
        return status_response(HTTPStatus.BAD_REQUEST)

    if not validate_user(user):
        return status_response(HTTPStatus.UNPROCESSABLE_ENTITY)

    try:
        return ctx.store.create_user(user)
    except ConflictError:
        return status_response(HTTPStatus.CONFLICT)
    except StoreError:
        return storage_failure(ctx.log, "creating user failed")


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: Optional[int] = Depends(user_id_param),
    ctx: AppContext = Depends(get_context),
):
    if not isinstance(user_id, int):
        return status_response(HTTPStatus.UNPROCESSABLE_ENTITY)

    try:
        return ctx.store.get_user(user_id)
    except NotFoundError:
        return status_response(HTTPStatus.NOT_FOUND)
    except StoreError:
        return storage_failure(ctx.log, "getting user %s failed", user_id)


@router.put("/{user_id}")
def update_user(
    user_id: Optional[int] = Depends(user_id_param),
    body: bytes = Depends(read_body),
    ctx: AppContext = Depends(get_context),
):
    """Replace a user, or create it (201) when the id is unknown."""
    if not isinstance(user_id, int):
        return status_response(HTTPStatus.UNPROCESSABLE_ENTITY)

    user = decode_user(body)
    if user is None:
        return status_response(HTTPStatus.BAD_REQUEST)

    if not validate_user(user):
        return status_response(HTTPStatus.UNPROCESSABLE_ENTITY)

    try:
        ctx.store.get_user(user_id)
    except NotFoundError:
        try:
            ctx.store.create_user(user)
        except ConflictError:
            return status_response(HTTPStatus.CONFLICT)
        except StoreError:
            return storage_failure(ctx.log, "creating user from PUT %s failed", user_id)
        return empty_response(HTTPStatus.CREATED)
    except StoreError:
        return storage_failure(ctx.log, "looking up user %s failed", user_id)

    try:
        ctx.store.update_user(user_id, user)
    except ConflictError:
        return status_response(HTTPStatus.CONFLICT)
    except StoreError:
        return storage_failure(ctx.log, "updating user %s failed", user_id)
    return empty_response(HTTPStatus.NO_CONTENT)
