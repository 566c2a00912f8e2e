from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UserBase(BaseModel):
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    full_name: str = Field(default="", alias="fullName")
    email: str = ""
    biweekly_income: float = Field(default=0.0, alias="biweeklyIncome")

    model_config = ConfigDict(populate_by_name=True)


class UserCreate(UserBase):
    model_config = ConfigDict(populate_by_name=True, strict=True, allow_inf_nan=False)

    @model_validator(mode="before")
    @classmethod
    def nulls_as_zero_values(cls, data: Any) -> Any:
        # null leaves the zero value in place, like a missing field
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class UserRead(UserBase):
    id: int = Field(alias="ID")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
