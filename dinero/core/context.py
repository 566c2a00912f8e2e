import logging
from dataclasses import dataclass

from fastapi import Request

from dinero.store.interface import Store


@dataclass
class AppContext:
    """Dependencies shared by every route handler."""

    store: Store
    log: logging.Logger


def get_context(request: Request) -> AppContext:
    return request.app.state.ctx
