import re

from fastapi import HTTPException, Request, status
from starlette.requests import ClientDisconnect

ID_PATTERN = re.compile(r"[0-9]+")

# ids are 64-bit integer primary keys
MAX_ID = 2**63 - 1


def parse_id(raw: str) -> int:
    """Parse a path id as a non-negative 64-bit integer, failing the request with 400."""
    if ID_PATTERN.fullmatch(raw) is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
    value = int(raw)
    if value > MAX_ID:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
    return value


def account_id_param(account_id: str) -> int:
    return parse_id(account_id)


def user_id_param(user_id: str) -> int:
    return parse_id(user_id)


async def read_body(request: Request) -> bytes:
    try:
        return await request.body()
    except ClientDisconnect:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
