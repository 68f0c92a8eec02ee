# bloglist/main.py

"""Bloglist Backend - share and rate blog links, with per-user ownership."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from bloglist.configs import settings
from bloglist.db import ping_db
from bloglist.errors import (
    DatabaseError,
    PasswordHashingError,
    UserAuthenticationError,
    auth_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.routes import blog_router, login_router, user_router
from bloglist.schemas import HealthCheckResponse
from bloglist.utils import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Bloglist Backend API",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)

routes = [
    blog_router,
    user_router,
    login_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (DatabaseError, database_exception_handler),
    (UserAuthenticationError, auth_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2026-01-01 12:00:00",
                        "database": "ok",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check() -> HealthCheckResponse:
    """
    Health check endpoint.

    Returns
    -------
    HealthCheckResponse
        API version, overall status and database reachability.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "...", "database": "ok"}
    """
    database_ok = await ping_db()
    return HealthCheckResponse(
        version=app.version,
        status="ok" if database_ok else "degraded",
        timestamp=today_str(),
        database="ok" if database_ok else "unavailable",
    )


if __name__ == "__main__":
    from uvicorn import run

    run(
        "bloglist.main:app",
        host="127.0.0.1",
        port=8000,
        log_level="info",
        reload=settings.DEBUG,
    )
