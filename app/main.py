import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import auth, bookings, memberships, services, vehicles
from app.config import settings
from app.middleware.rate_limit import FixedWindowRateLimiter, RateLimitMiddleware
from app.middleware.request_logging import RequestLoggingMiddleware
from app.services.auth.dependencies import authenticate_request

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


configure_logging()

# authenticate_request runs before every route and only attaches the user;
# routes opt into require_auth / require_admin.
app = FastAPI(
    title="Detailing Booking API",
    version="0.1.0",
    dependencies=[Depends(authenticate_request)],
)

app.state.rate_limiter = FixedWindowRateLimiter(
    limit=settings.rate_limit_requests,
    window_seconds=settings.rate_limit_window,
)

# Last added runs first: logging wraps rate limiting
app.add_middleware(RateLimitMiddleware)
app.add_middleware(RequestLoggingMiddleware)


# =============================================================================
# Error handlers
# =============================================================================


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing input is a 400, not FastAPI's default 422."""
    details = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request", "details": details},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled error: method=%s, path=%s", request.method, request.url.path
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error"},
    )


# Include routers
app.include_router(auth.router)
app.include_router(services.router)
app.include_router(vehicles.router)
app.include_router(bookings.router)
app.include_router(memberships.router)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
