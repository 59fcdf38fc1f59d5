"""
FastAPI Application Entry Point
Main application setup and route registration
"""

import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from clubify import __version__
from clubify.config import settings
from clubify.database import connect_db, disconnect_db
from clubify.logging_config import configure_logging

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent


class NoCacheMiddleware(BaseHTTPMiddleware):
    """Prevent browser from caching HTML pages"""
    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        ct = response.headers.get("content-type", "")
        if "text/html" in ct:
            response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"
        return response


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Role-based club management: tasks, events, sales, proposals and messages",
    version=__version__
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# No-cache middleware for HTML pages
app.add_middleware(NoCacheMiddleware)


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, **extra}
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc.detail, dict):
        detail = dict(exc.detail)
        return _error(exc.status_code, detail.pop("message", "Request failed"), **detail)
    message = exc.detail
    if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
        message = "Route not found"
    return _error(exc.status_code, message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request")
    first = errors[0]
    message = str(first.get("msg", "Invalid request"))
    # pydantic prefixes messages raised from validators
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    if first.get("type") == "missing" and field:
        message = f"{field} is required"
    return _error(status.HTTP_400_BAD_REQUEST, message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    extra = {"error": str(exc)} if settings.DEBUG else {}
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Something went wrong!", **extra)


# Setup Jinja2 templates
templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))

# Mount static files
app.mount("/static", StaticFiles(directory=str(PACKAGE_DIR / "static")), name="static")


# Startup event
@app.on_event("startup")
async def startup():
    """Run on application startup"""
    configure_logging()
    await connect_db()
    logger.info("[START] %s started in %s mode", settings.APP_NAME, settings.APP_ENV)


# Shutdown event
@app.on_event("shutdown")
async def shutdown():
    """Run on application shutdown"""
    await disconnect_db()
    logger.info("[STOP] %s shut down", settings.APP_NAME)


# HTML Page Routes
@app.get("/", response_class=HTMLResponse)
async def home_page(request: Request):
    """Login / signup page"""
    return templates.TemplateResponse(request, "index.html", {"app_name": settings.APP_NAME})


@app.get("/dashboard", response_class=HTMLResponse)
async def dashboard_page(request: Request):
    """Role-aware dashboard"""
    return templates.TemplateResponse(request, "dashboard.html", {"app_name": settings.APP_NAME})


# Import and include routers
from clubify.routes import auth, users, clubs, tasks, events, sales, proposals, messages, system  # noqa: E402

app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(users.router, prefix="/api", tags=["Users"])
app.include_router(clubs.router, prefix="/api", tags=["Clubs"])
app.include_router(tasks.router, prefix="/api", tags=["Tasks"])
app.include_router(events.router, prefix="/api", tags=["Events"])
app.include_router(sales.router, prefix="/api", tags=["Products & Sales"])
app.include_router(proposals.router, prefix="/api", tags=["Proposals"])
app.include_router(messages.router, prefix="/api", tags=["Messages"])
app.include_router(system.router, tags=["System"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "clubify.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
