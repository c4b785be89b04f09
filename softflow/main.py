import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .database.database import create_tables
from .routers import auth, blogs, careers, invoices, messages, partners, projects, services, users
from .schemas.validation import FieldValidationError, format_errors

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# /api/<segment> or /api/admin/<segment> -> entity name used in error messages
ENTITY_NAMES = {
    "blogs": "blog",
    "partners": "partner",
    "messages": "message",
    "careers": "career",
    "apply": "application",
    "applications": "application",
    "services": "service",
    "projects": "project",
    "invoices": "invoice",
    "invoice-items": "invoice item",
    "payments": "payment",
    "users": "user",
    "register": "registration",
    "login": "login",
}

DEFAULT_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173,http://localhost:5000"


def entity_for_path(path: str) -> str:
    parts = [p for p in path.split("/") if p]
    if parts and parts[0] == "api":
        parts = parts[1:]
    if parts and parts[0] == "admin":
        parts = parts[1:]
    if not parts:
        return "request"
    # the innermost collection names the entity (/invoices/3/payments -> payment)
    for segment in reversed(parts):
        if segment in ENTITY_NAMES:
            return ENTITY_NAMES[segment]
    return "request"


def create_app() -> FastAPI:
    app = FastAPI(
        title="Softflow website API",
        description="Public site content, client dashboard and admin back-office",
        version="1.0.0",
    )

    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", DEFAULT_ORIGINS).split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        entity = entity_for_path(request.url.path)
        return JSONResponse(
            status_code=400,
            content={"message": f"Invalid {entity} data", "errors": format_errors(exc.errors(), "body")},
        )

    @app.exception_handler(FieldValidationError)
    async def field_validation_handler(request: Request, exc: FieldValidationError):
        return JSONResponse(status_code=400, content={"message": str(exc), "errors": exc.errors})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    for module in (auth, blogs, partners, messages, careers, services, projects, invoices):
        app.include_router(module.router)
        if hasattr(module, "admin_router"):
            app.include_router(module.admin_router)
    app.include_router(users.admin_router)

    @app.get("/")
    def read_root():
        return {"message": "Softflow API running"}

    return app


create_tables()
app = create_app()
