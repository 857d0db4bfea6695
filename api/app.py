"""Main FastAPI application with modularized routes."""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from api.config import CORS_ORIGINS, LOG_LEVEL
from api.database import init_db
from api.routes import auth, submissions, tests
from core.logging_setup import setup_console_logging

setup_console_logging(LOG_LEVEL)

log = logging.getLogger(__name__)

app = FastAPI(title="Test Bank API")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _validation_message(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        message = str(error.get("msg", "Invalid request"))
        message = message.removeprefix("Value error, ")
        if error.get("type") != "value_error":
            location = ".".join(str(part) for part in error.get("loc", ())[1:])
            if location:
                message = f"{location}: {message}"
        messages.append(message)
    return "; ".join(messages) or "Invalid request"


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _validation_message(exc)
    log.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"success": False, "error": message})


# Startup events
@app.on_event("startup")
def startup_events() -> None:
    """Create missing tables on startup."""
    init_db()


@app.get("/api/health")
def health() -> dict[str, str]:
    return {"status": "ok", "message": "Test Bank API is running"}


# Include routers
app.include_router(auth.router)
app.include_router(tests.router)
app.include_router(submissions.router)
