from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy import delete, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from dinero.core.errors import ConflictError, NotFoundError, StoreError
from dinero.models.account import Account
from dinero.models.user import User
from dinero.schemas.account import AccountBase, AccountRead
from dinero.schemas.user import UserBase, UserRead
from dinero.store.interface import Store

# SQLSTATE for unique_violation (PostgreSQL)
PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    if getattr(orig, "pgcode", None) == PG_UNIQUE_VIOLATION:
        return True
    # sqlite3: "UNIQUE constraint failed: accounts.user_id, accounts.name"
    return "unique constraint" in str(orig).lower()


class SQLStore(Store):
    """Store backed by a relational database through SQLModel."""

    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with Session(self.engine) as session:
                yield session
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise ConflictError(str(exc.orig)) from exc
            raise StoreError(str(exc)) from exc
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    # Accounts

    def list_accounts(self) -> List[AccountRead]:
        with self._session() as session:
            rows = session.exec(select(Account).order_by(Account.id)).all()
            return [AccountRead(**row.model_dump()) for row in rows]

    def get_account(self, account_id: int) -> AccountRead:
        with self._session() as session:
            row = session.get(Account, account_id)
            if row is None:
                raise NotFoundError(f"account {account_id} not found")
            return AccountRead(**row.model_dump())

    def create_account(self, account: AccountBase) -> AccountRead:
        with self._session() as session:
            row = Account(**account.model_dump())
            session.add(row)
            session.commit()
            session.refresh(row)
            new_id = row.id
        return self.get_account(new_id)

    def update_account(self, account_id: int, account: AccountBase) -> None:
        with self._session() as session:
            session.execute(
                update(Account).where(Account.id == account_id).values(**account.model_dump())
            )
            session.commit()

    def delete_account(self, account_id: int) -> None:
        with self._session() as session:
            result = session.execute(delete(Account).where(Account.id == account_id))
            session.commit()
            if result.rowcount == 0:
                raise NotFoundError(f"account {account_id} not found")

    # Users

    def list_users(self) -> List[UserRead]:
        with self._session() as session:
            rows = session.exec(select(User).order_by(User.id)).all()
            return [UserRead(**row.model_dump()) for row in rows]

    def get_user(self, user_id: int) -> UserRead:
        with self._session() as session:
            row = session.get(User, user_id)
            if row is None:
                raise NotFoundError(f"user {user_id} not found")
            return UserRead(**row.model_dump())

    def create_user(self, user: UserBase) -> UserRead:
        with self._session() as session:
            row = User(**user.model_dump())
            session.add(row)
            session.commit()
            session.refresh(row)
            new_id = row.id
        return self.get_user(new_id)

    def update_user(self, user_id: int, user: UserBase) -> None:
        with self._session() as session:
            session.execute(
                update(User).where(User.id == user_id).values(**user.model_dump())
            )
            session.commit()
