from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine


def make_engine(database_url: str, echo: bool = False):
    """
    Build the engine for `database_url`. SQLite connections are shared across
    FastAPI's worker threads, and an in-memory database must stay on a single
    connection or every session would see an empty database.
    """
    kwargs = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def create_db_and_tables(engine):
    from dinero.models.account import Account  # import the models so they register
    from dinero.models.user import User

    SQLModel.metadata.create_all(engine)


def drop_db_and_tables(engine):
    from dinero.models.account import Account
    from dinero.models.user import User

    SQLModel.metadata.drop_all(engine)
