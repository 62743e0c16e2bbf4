from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 20


def _check_password_length(value: str, label: str) -> str:
    if not PASSWORD_MIN_LENGTH <= len(value) <= PASSWORD_MAX_LENGTH:
        raise PydanticCustomError(
            "password_length",
            "{label} must be {min} to {max} characters",
            {"label": label, "min": PASSWORD_MIN_LENGTH, "max": PASSWORD_MAX_LENGTH},
        )
    return value


def _check_not_blank(value: str, label: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError("blank", "{label} must not be blank", {"label": label})
    return value


class RegisterRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(
        max_length=64, validation_alias=AliasChoices("userName", "username")
    )
    password: str

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_not_blank(value, "username")

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password_length(value, "password")


class LoginRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(validation_alias=AliasChoices("userName", "username"))
    password: str  # no length rule on login, legacy passwords must still work

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_not_blank(value, "username")

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("blank", "password must not be blank", {})
        return value


class ChangePasswordRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    old_password: str = Field(validation_alias=AliasChoices("oldPassword", "old_password"))
    new_password: str = Field(validation_alias=AliasChoices("newPassword", "new_password"))

    @field_validator("old_password")
    @classmethod
    def validate_old_password(cls, value: str) -> str:
        return _check_password_length(value, "old password")

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, value: str) -> str:
        return _check_password_length(value, "new password")


class ProfileQueryDTO(BaseModel):
    id: int = Field(gt=0, le=2**31 - 1)


class LoginResponseDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(serialization_alias="userName")
    token: str


class ProfileResponseDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    username: str = Field(serialization_alias="userName")
