from http import HTTPStatus
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import ValidationError

from dinero.api.dependencies import account_id_param, read_body
from dinero.core.context import AppContext, get_context
from dinero.core.errors import ConflictError, NotFoundError, StoreError
from dinero.core.responses import empty_response, status_response, storage_failure
from dinero.schemas.account import AccountCreate, AccountRead
from dinero.utils.validation import validate_account

router = APIRouter(prefix="/accounts", tags=["accounts"])


def decode_account(body: bytes) -> Optional[AccountCreate]:
    try:
        return AccountCreate.model_validate_json(body)
    except ValidationError:
        return None


@router.get("", response_model=List[AccountRead])
def list_accounts(ctx: AppContext = Depends(get_context)):
    try:
        return ctx.store.list_accounts()
    except StoreError:
        return storage_failure(ctx.log, "listing accounts failed")


@router.post("", response_model=AccountRead)
def create_account(body: bytes = Depends(read_body), ctx: AppContext = Depends(get_context)):
    account = decode_account(body)
    if account is None:
        return status_response(HTTPStatus.BAD_REQUEST)

    if not validate_account(account):
        return status_response(HTTPStatus.UNPROCESSABLE_ENTITY)

    try:
        return ctx.store.create_account(account)
    except ConflictError:
        return status_response(HTTPStatus.CONFLICT)
    except StoreError:
        return storage_failure(ctx.log, "creating account failed")


@router.get("/{account_id}", response_model=AccountRead)
def get_account(
    account_id: Optional[int] = Depends(account_id_param),
    ctx: AppContext = Depends(get_context),
):
    # not an int only when the handler is called without the id dependency
    if not isinstance(account_id, int):
        return status_response(HTTPStatus.UNPROCESSABLE_ENTITY)

    try:
        return ctx.store.get_account(account_id)
    except NotFoundError:
        return status_response(HTTPStatus.NOT_FOUND)
    except StoreError:
        return storage_failure(ctx.log, "getting account %s failed", account_id)


@router.put("/{account_id}")
def update_account(
    account_id: Optional[int] = Depends(account_id_param),
    body: bytes = Depends(read_body),
    ctx: AppContext = Depends(get_context),
):
    """
    Replace an account. If the id does not exist the body is created as a new
    account instead (201); its id is assigned by the store and may differ
    from the one in the path.
    """
    if not isinstance(account_id, int):
        return status_response(HTTPStatus.UNPROCESSABLE_ENTITY)

    account = decode_account(body)
    if account is None:
        return status_response(HTTPStatus.BAD_REQUEST)

    if not validate_account(account):
        return status_response(HTTPStatus.UNPROCESSABLE_ENTITY)

    try:
        ctx.store.get_account(account_id)
    except NotFoundError:
        try:
            ctx.store.create_account(account)
        except ConflictError:
            return status_response(HTTPStatus.CONFLICT)
        except StoreError:
            return storage_failure(ctx.log, "creating account from PUT %s failed", account_id)
        return empty_response(HTTPStatus.CREATED)
    except StoreError:
        return storage_failure(ctx.log, "looking up account %s failed", account_id)

    try:
        ctx.store.update_account(account_id, account)
    except ConflictError:
        return status_response(HTTPStatus.CONFLICT)
    except StoreError:
        return storage_failure(ctx.log, "updating account %s failed", account_id)
    return empty_response(HTTPStatus.NO_CONTENT)


@router.delete("/{account_id}")
def delete_account(
    account_id: Optional[int] = Depends(account_id_param),
    ctx: AppContext = Depends(get_context),
):
    if not isinstance(account_id, int):
        return status_response(HTTPStatus.UNPROCESSABLE_ENTITY)

    try:
        ctx.store.delete_account(account_id)
    except NotFoundError:
        return status_response(HTTPStatus.NOT_FOUND)
    except StoreError:
        return storage_failure(ctx.log, "deleting account %s failed", account_id)
    return empty_response(HTTPStatus.NO_CONTENT)
