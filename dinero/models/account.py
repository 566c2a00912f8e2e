from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


class Account(SQLModel, table=True):
    """A debt or bill a user tracks. `user_id` is a soft reference to users.id."""

    __tablename__ = "accounts"
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_accounts_user_id_name"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int
    name: str
    account_type: str  # daily, weekly, biweekly, monthly, yearly
    minimum_payment: float
    current_payment: float
    full_amount: float
    due_date: str  # day of month, "1".."31"
    url: str = Field(default="")
