"""Credential payload validation.

Runs every field rule declared on the request schemas against a raw payload
and reports all failures together instead of stopping at the first one.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ValidationError

from authgate.schemas_auth import LoginRequest, RegistrationRequest

ValidatedRequest = Union[LoginRequest, RegistrationRequest]


class RequestKind(str, Enum):
    LOGIN = "login"
    REGISTRATION = "registration"


class ViolationKind(str, Enum):
    MISSING_FIELD = "missing_field"
    INVALID_FORMAT = "invalid_format"
    TOO_SHORT = "too_short"


@dataclass(frozen=True)
class FieldViolation:
    field: str
    kind: ViolationKind
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "kind": self.kind.value, "message": self.message}


@dataclass(frozen=True)
class ValidationResult:
    request: ValidatedRequest | None
    violations: tuple[FieldViolation, ...] = ()

    @property
    def ok(self) -> bool:
        return self.request is not None and not self.violations


_SCHEMAS: dict[RequestKind, type[BaseModel]] = {
    RequestKind.LOGIN: LoginRequest,
    RequestKind.REGISTRATION: RegistrationRequest,
}


def _classify(error: Mapping[str, Any]) -> FieldViolation:
    field = ".".join(str(part) for part in error["loc"]) or "body"
    error_type = error["type"]
    value = error.get("input")

    if error_type == "missing" or value is None or value == "":
        return FieldViolation(field, ViolationKind.MISSING_FIELD, "Field is required")

    if error_type == "string_too_short":
        min_length = error.get("ctx", {}).get("min_length", 1)
        if min_length > 1:
            return FieldViolation(
                field,
                ViolationKind.TOO_SHORT,
                f"Must be at least {min_length} characters long",
            )
        return FieldViolation(field, ViolationKind.MISSING_FIELD, "Field is required")

    return FieldViolation(field, ViolationKind.INVALID_FORMAT, error["msg"])


def validate(kind: RequestKind | str, payload: Any) -> ValidationResult:
    """Validate ``payload`` as a request of the given ``kind``.

    ``payload`` is usually the decoded JSON body. An already validated request
    model is accepted too and checked again from its wire form.

    Never raises for bad input: every violation ends up in the result, in
    field declaration order. Raises ``ValueError`` for an unknown ``kind``.
    """
    schema = _SCHEMAS[RequestKind(kind)]

    if isinstance(payload, BaseModel):
        payload = payload.model_dump(by_alias=True)
    if not isinstance(payload, Mapping):
        violation = FieldViolation(
            "body", ViolationKind.INVALID_FORMAT, "Payload must be a JSON object"
        )
        return ValidationResult(request=None, violations=(violation,))

    try:
        request = schema.model_validate(dict(payload))
    except ValidationError as exc:
        violations = tuple(_classify(err) for err in exc.errors())
        return ValidationResult(request=None, violations=violations)

    return ValidationResult(request=request)  # type: ignore[arg-type]
