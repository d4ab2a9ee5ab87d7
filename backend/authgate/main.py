from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, cast

from fastapi import Body, FastAPI, HTTPException

from authgate.errors import PayloadRejected, register_error_handlers
from authgate.schemas_auth import LoginRequest, RegistrationRequest
from authgate.settings import Settings, get_settings, setup_logging
from authgate.validation import RequestKind, ValidatedRequest, validate

logger = logging.getLogger(__name__)

LoginHandler = Callable[[LoginRequest], dict[str, Any]]
RegisterHandler = Callable[[RegistrationRequest], dict[str, Any]]


def _checked(kind: RequestKind, payload: dict[str, Any]) -> ValidatedRequest:
    result = validate(kind, payload)
    if not result.ok:
        logger.info(
            "Rejected %s payload: %s",
            kind.value,
            ", ".join(f"{v.field}={v.kind.value}" for v in result.violations),
        )
        raise PayloadRejected(kind, result.violations)
    return cast(ValidatedRequest, result.request)


def _not_configured() -> HTTPException:
    return HTTPException(status_code=501, detail="Authentication backend not configured")


def create_app(
    login_handler: LoginHandler | None = None,
    register_handler: RegisterHandler | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title=settings.title)
    app.state.settings = settings
    register_error_handlers(app)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(f"{settings.api_prefix}/login")
    def login(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:  # noqa: B008
        request = _checked(RequestKind.LOGIN, payload)
        if login_handler is None:
            raise _not_configured()
        return login_handler(request)  # type: ignore[arg-type]

    @app.post(f"{settings.api_prefix}/register")
    def register(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:  # noqa: B008
        request = _checked(RequestKind.REGISTRATION, payload)
        if register_handler is None:
            raise _not_configured()
        return register_handler(request)  # type: ignore[arg-type]

    return app


_settings = get_settings()
setup_logging(_settings.log_level)
app = create_app(settings=_settings)
