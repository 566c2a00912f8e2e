from http import HTTPStatus

from fastapi.responses import PlainTextResponse, Response


def status_response(status_code: int) -> PlainTextResponse:
    """Bare status response: the status text plus a newline, as text/plain."""
    return PlainTextResponse(f"{HTTPStatus(status_code).phrase}\n", status_code=int(status_code))


def empty_response(status_code: int) -> PlainTextResponse:
    # 201 / 204 from the update handlers: no body, still text/plain
    return PlainTextResponse("", status_code=int(status_code))


def method_not_allowed(headers=None) -> Response:
    return Response(status_code=int(HTTPStatus.METHOD_NOT_ALLOWED), headers=headers)


def storage_failure(log, message: str, *args) -> PlainTextResponse:
    """Log the active storage exception and answer with a generic 500."""
    log.exception(message, *args)
    return status_response(HTTPStatus.INTERNAL_SERVER_ERROR)
