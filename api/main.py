"""FastAPI application configuration.

Main entry point for the Password Strength REST API.
Implements security best practices including rate limiting, security headers,
HTTPS enforcement, and restrictive CORS configuration.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from core import InvalidConfiguration, log_rejected_configuration, shutdown_logging
from core.config import CORS_ORIGINS, REQUIRE_HTTPS
from api.limiter import limiter
from api.routes import health_router, tools_router
from version import __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    yield
    shutdown_logging()


app = FastAPI(
    title="Password Strength API",
    description="""
    Password strength scoring API with:
    - Standard and extended rule variants
    - Ordered per-criterion feedback
    - Strength label, color token and bar percentage
    - SIEM-compatible logging (passwords are never logged)
    - Rate limiting
    """,
    version=__version__,
    lifespan=lifespan
)

# Attach rate limiter to app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(InvalidConfiguration)
async def invalid_configuration_handler(request: Request, exc: InvalidConfiguration) -> JSONResponse:
    """Reject unknown rule variants with 422."""
    log_rejected_configuration(exc.value, source="api")
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": "invalid_configuration"}
    )


def _safe_text(value) -> str:
    """Make a value JSON-encodable, replacing lone surrogates."""
    return str(value).encode("utf-8", "replace").decode("utf-8")


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed requests with 422.

    Only the location and message of each error are returned. The rejected
    input is left out so a password is never echoed back.
    """
    errors = [
        {
            "loc": [_safe_text(part) for part in error.get("loc", ())],
            "msg": _safe_text(error.get("msg", "")),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={"detail": errors, "error": "invalid_request"}
    )


# HTTPS enforcement middleware
@app.middleware("http")
async def enforce_https(request: Request, call_next) -> Response:
    """Enforce HTTPS connections when REQUIRE_HTTPS is enabled.

    Passwords travel in request bodies, so plain HTTP exposes them to anyone
    on the network path. Health checks are exempted to allow load balancer
    probes.
    """
    if REQUIRE_HTTPS:
        if request.url.path in ["/", "/health"]:
            return await call_next(request)

        # X-Forwarded-Proto is set by reverse proxies (nginx, traefik, etc.)
        forwarded_proto = request.headers.get("X-Forwarded-Proto", "")
        is_https = (
            request.url.scheme == "https" or
            forwarded_proto.lower() == "https"
        )

        if not is_https:
            return JSONResponse(
                status_code=403,
                content={
                    "detail": "HTTPS required. This API requires secure connections.",
                    "error": "https_required"
                }
            )

    return await call_next(request)


# Security headers middleware
@app.middleware("http")
async def add_security_headers(request: Request, call_next) -> Response:
    """Add security headers to all responses.

    Headers follow OWASP security recommendations:
    - X-Content-Type-Options: Prevents MIME-type sniffing
    - X-Frame-Options: Prevents clickjacking attacks
    - Content-Security-Policy: Restricts resource loading
    - Referrer-Policy: Controls referrer information leakage
    - Cache-Control: Prevents caching of scored passwords' responses
    """
    response = await call_next(request)

    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Content-Security-Policy"] = "default-src 'self'; frame-ancestors 'none'"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, private"
    response.headers["Pragma"] = "no-cache"

    return response


# CORS configuration - explicitly restricted
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin"],
    max_age=600,  # Cache preflight requests for 10 minutes
)

# Register routers
app.include_router(health_router)
app.include_router(tools_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
