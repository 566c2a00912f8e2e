class StoreError(Exception):
    """Any failure raised by a Store implementation."""


class NotFoundError(StoreError):
    """The requested record does not exist."""


class ConflictError(StoreError):
    """A unique constraint (users.email or accounts(user_id, name)) was violated."""
