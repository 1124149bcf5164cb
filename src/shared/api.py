"""HTTP plumbing shared by the context routers.

Response bodies use camelCase keys; request bodies accept either camelCase or
snake_case field names.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel, to_snake

from shared.exceptions import AuthenticationError, ObjectNotFoundError, ValidationError


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StatusResponse(CamelModel):
    status: str = "ok"


async def read_payload(request: Request) -> dict:
    """Request JSON body as a dict with snake_case keys; anything else is empty."""
    try:
        payload = await request.json()
    except ValueError:
        return {}
    if not isinstance(payload, dict):
        return {}
    return {to_snake(key): value for key, value in payload.items()}


# ---------------------------------------------------------------------------
# Exception translation
# ---------------------------------------------------------------------------
def _request_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location) or "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain errors onto HTTP status codes."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"message": exc.first_message, "errors": exc.messages})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        error = ValidationError(_request_errors(exc))
        return JSONResponse(status_code=400, content={"message": error.first_message, "errors": error.messages})

    @app.exception_handler(ObjectNotFoundError)
    async def not_found_handler(request: Request, exc: ObjectNotFoundError):
        return JSONResponse(status_code=404, content={"message": str(exc)})

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        return JSONResponse(
            status_code=401,
            content={"message": str(exc) or "Sesi tidak valid"},
            headers={"WWW-Authenticate": "Bearer"},
        )
