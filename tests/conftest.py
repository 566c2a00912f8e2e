"""
pytest configuration and fixtures.

MockStore is an in-memory Store used by the API tests. It enforces the same
uniqueness rules as the SQL schema and can be switched into a failure mode
where every operation raises StoreError.
"""

from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from dinero.core.config import Settings
from dinero.core.errors import ConflictError, NotFoundError, StoreError
from dinero.main import create_app
from dinero.schemas.account import AccountBase, AccountRead
from dinero.schemas.user import UserBase, UserRead
from dinero.store.interface import Store


class MockStore(Store):

    def __init__(self, db_err: bool = False):
        self.db_err = db_err
        self.accounts: Dict[int, AccountRead] = {}
        self.users: Dict[int, UserRead] = {}
        self._next_account_id = 1
        self._next_user_id = 1

    def _check(self):
        if self.db_err:
            raise StoreError("Database error")

    def _account_conflicts(self, account: AccountBase, skip_id: int = 0) -> bool:
        return any(
            a.user_id == account.user_id and a.name == account.name
            for a in self.accounts.values()
            if a.id != skip_id
        )

    def _user_conflicts(self, user: UserBase, skip_id: int = 0) -> bool:
        return any(u.email == user.email for u in self.users.values() if u.id != skip_id)

    def list_accounts(self) -> List[AccountRead]:
        self._check()
        return list(self.accounts.values())

    def get_account(self, account_id: int) -> AccountRead:
        self._check()
        if account_id not in self.accounts:
            raise NotFoundError(account_id)
        return self.accounts[account_id]

    def create_account(self, account: AccountBase) -> AccountRead:
        self._check()
        if self._account_conflicts(account):
            raise ConflictError(account.name)
        created = AccountRead(id=self._next_account_id, **account.model_dump())
        self.accounts[created.id] = created
        self._next_account_id += 1
        return self.get_account(created.id)

    def update_account(self, account_id: int, account: AccountBase) -> None:
        self._check()
        if self._account_conflicts(account, skip_id=account_id):
            raise ConflictError(account.name)
        if account_id in self.accounts:
            self.accounts[account_id] = AccountRead(id=account_id, **account.model_dump())

    def delete_account(self, account_id: int) -> None:
        self._check()
        if self.accounts.pop(account_id, None) is None:
            raise NotFoundError(account_id)

    def list_users(self) -> List[UserRead]:
        self._check()
        return list(self.users.values())

    def get_user(self, user_id: int) -> UserRead:
        self._check()
        if user_id not in self.users:
            raise NotFoundError(user_id)
        return self.users[user_id]

    def create_user(self, user: UserBase) -> UserRead:
        self._check()
        if self._user_conflicts(user):
            raise ConflictError(user.email)
        created = UserRead(id=self._next_user_id, **user.model_dump())
        self.users[created.id] = created
        self._next_user_id += 1
        return self.get_user(created.id)

    def update_user(self, user_id: int, user: UserBase) -> None:
        self._check()
        if self._user_conflicts(user, skip_id=user_id):
            raise ConflictError(user.email)
        if user_id in self.users:
            self.users[user_id] = UserRead(id=user_id, **user.model_dump())


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", log_level="WARNING")


@pytest.fixture
def store() -> MockStore:
    return MockStore()


@pytest.fixture
def client(store, settings) -> TestClient:
    return TestClient(create_app(store=store, settings=settings))


@pytest.fixture
def failing_client(settings) -> TestClient:
    return TestClient(create_app(store=MockStore(db_err=True), settings=settings))


@pytest.fixture
def account_payload() -> dict:
    return {
        "userID": 1,
        "name": "Car Payment",
        "accountType": "monthly",
        "minimumPayment": 217.99,
        "currentPayment": 217.99,
        "fullAmount": 21000,
        "dueDate": "10",
        "URL": "ford.com",
    }


@pytest.fixture
def user_payload() -> dict:
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "fullName": "Ada Lovelace",
        "email": "ada@example.com",
        "biweeklyIncome": 2150.5,
    }
