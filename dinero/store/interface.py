"""
Storage port consumed by the route handlers.

Both the SQL-backed store and the in-memory store used by the tests implement
this interface. Every method works on a single resource and is expected to be
atomic with respect to its own constraints (uniqueness is checked here, never
pre-checked by a handler).
"""

from abc import ABC, abstractmethod
from typing import List

from dinero.schemas.account import AccountBase, AccountRead
from dinero.schemas.user import UserBase, UserRead


class Store(ABC):

    @abstractmethod
    def list_accounts(self) -> List[AccountRead]:
        """Return every account in storage order."""

    @abstractmethod
    def get_account(self, account_id: int) -> AccountRead:
        """
        Raises:
            NotFoundError: no account has this id
        """

    @abstractmethod
    def create_account(self, account: AccountBase) -> AccountRead:
        """
        Insert an account and return it as re-read from storage.

        Raises:
            ConflictError: (user_id, name) already exists
        """

    @abstractmethod
    def update_account(self, account_id: int, account: AccountBase) -> None:
        """
        Replace every field of an account. A missing id is not reported.

        Raises:
            ConflictError: the new (user_id, name) collides with another account
        """

    @abstractmethod
    def delete_account(self, account_id: int) -> None:
        """
        Raises:
            NotFoundError: nothing was deleted
        """

    @abstractmethod
    def list_users(self) -> List[UserRead]:
        """Return every user in storage order."""

    @abstractmethod
    def get_user(self, user_id: int) -> UserRead:
        """
        Raises:
            NotFoundError: no user has this id
        """

    @abstractmethod
    def create_user(self, user: UserBase) -> UserRead:
        """
        Insert a user and return it as re-read from storage.

        Raises:
            ConflictError: the email is already taken
        """

    @abstractmethod
    def update_user(self, user_id: int, user: UserBase) -> None:
        """
        Replace every field of a user. A missing id is not reported.

        Raises:
            ConflictError: the new email is already taken
        """
