from __future__ import annotations

from collections.abc import Sequence

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.requests import Request

from authgate.validation import FieldViolation, RequestKind, ViolationKind

INVALID_PAYLOAD = "Invalid request payload"


class PayloadRejected(Exception):
    def __init__(self, kind: RequestKind, violations: Sequence[FieldViolation]):
        super().__init__(f"{kind.value} payload rejected")
        self.kind = kind
        self.violations = tuple(violations)


def _rejection_response(violations: Sequence[FieldViolation]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"detail": INVALID_PAYLOAD, "errors": [v.as_dict() for v in violations]},
    )


async def payload_rejected_handler(request: Request, exc: PayloadRejected) -> JSONResponse:
    return _rejection_response(exc.violations)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Body could not be decoded into a JSON object at all.
    violations = [
        FieldViolation(
            field=".".join(str(p) for p in err.get("loc", ()) if p != "body") or "body",
            kind=ViolationKind.MISSING_FIELD
            if err.get("type") == "missing"
            else ViolationKind.INVALID_FORMAT,
            message=str(err.get("msg", "Invalid value")),
        )
        for err in exc.errors()
    ]
    return _rejection_response(violations)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PayloadRejected, payload_rejected_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
