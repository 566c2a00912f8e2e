from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from dinero.api import accounts, users
from dinero.core.config import Settings, get_settings
from dinero.core.context import AppContext
from dinero.core.logging import configure_logging, request_logger
from dinero.core.responses import method_not_allowed, status_response
from dinero.database import create_db_and_tables, make_engine
from dinero.store.interface import Store
from dinero.store.sql import SQLStore


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unregistered verbs on a known path: no body and no Content-Type
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return method_not_allowed(exc.headers)
    response = status_response(exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def create_app(store: Optional[Store] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API. Without an explicit `store` the app owns a SQLStore on
    `settings.database_url` and creates its tables on startup.
    """
    settings = settings or get_settings()
    log = configure_logging(settings.log_level)

    engine = None
    if store is None:
        engine = make_engine(settings.database_url, echo=settings.sql_echo)
        store = SQLStore(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if engine is not None:
            create_db_and_tables(engine)
        yield
        if engine is not None:
            engine.dispose()

    app = FastAPI(title="dinero", lifespan=lifespan)
    app.state.ctx = AppContext(store=store, log=log)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_logger(log))
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(accounts.router)
    app.include_router(users.router)

    return app


app = create_app()


def run():
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level).info("Serving on port %d...", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
