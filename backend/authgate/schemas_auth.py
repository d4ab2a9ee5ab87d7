from __future__ import annotations

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

PASSWORD_MIN_LENGTH = 6


class _CredentialsBase(BaseModel):
    # camelCase on the wire only; unknown keys are dropped.
    model_config = ConfigDict(
        alias_generator=to_camel,
        frozen=True,
        extra="ignore",
    )

    email: str

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        # Bare address only: no display name, no padding. The value is kept as sent.
        if v != v.strip():
            raise ValueError("value is not a valid email address: surrounding whitespace")
        try:
            validate_email(v, check_deliverability=False, allow_display_name=False)
        except EmailNotValidError as exc:
            raise ValueError(f"value is not a valid email address: {exc}") from exc
        return v


class LoginRequest(_CredentialsBase):
    password: str = Field(min_length=1)


class RegistrationRequest(_CredentialsBase):
    password: str = Field(min_length=PASSWORD_MIN_LENGTH)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
