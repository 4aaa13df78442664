from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.commission import CommissionErrorCode
from app.core.logging_setup import configure_logging

from app.api.v1.commission import error_response, router as commission_router


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Request body is invalid"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    msg = first.get("msg", "invalid value")
    return f"{loc}: {msg}" if loc else msg


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Unparseable / incomplete bodies get the same {error, message} shape as
    # calculator rejections, with 400 instead of FastAPI's default 422.
    return error_response(CommissionErrorCode.INVALID_REQUEST.value, _describe_validation_error(exc))


def create_application() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Commission Calculator API")

    # CORS for the React calculator form
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_origin_regex=settings.CORS_ALLOW_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.get("/")
    def root():
        return {"status": "ok", "service": "commission-calculator"}

    # Routers
    app.include_router(commission_router)

    return app


app = create_application()
