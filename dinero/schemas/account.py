from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AccountBase(BaseModel):
    user_id: int = Field(default=0, alias="userID")
    name: str = ""
    account_type: str = Field(default="", alias="accountType")
    minimum_payment: float = Field(default=0.0, alias="minimumPayment")
    current_payment: float = Field(default=0.0, alias="currentPayment")
    full_amount: float = Field(default=0.0, alias="fullAmount")
    due_date: str = Field(default="", alias="dueDate")
    url: str = Field(default="", alias="URL")

    model_config = ConfigDict(populate_by_name=True)


class AccountCreate(AccountBase):
    """Request body for POST /accounts and PUT /accounts/{id}.

    Missing or null fields take their zero value and are left to
    validate_account; a field of the wrong JSON type, NaN or Infinity is a
    decoding error.
    """

    model_config = ConfigDict(populate_by_name=True, strict=True, allow_inf_nan=False)

    @model_validator(mode="before")
    @classmethod
    def nulls_as_zero_values(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class AccountRead(AccountBase):
    id: int = Field(alias="ID")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
