import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.middleware.sessions import SessionMiddleware

# Import all models to ensure they're registered with SQLAlchemy Base
from . import models  # noqa: F401
from .config import (
    ALLOWED_ORIGINS,
    CREATE_TABLES_ON_STARTUP,
    SECRET_KEY,
    SECURITY_HEADERS_ENABLED,
    SESSION_COOKIE_NAME,
    SESSION_HTTPS_ONLY,
    SESSION_MAX_AGE,
)
from .database import Base, engine, get_db
from .domain.catalog.router import course_tag_mappings_router, course_tags_router, courses_router
from .domain.community.router import (
    notifications_router,
    reviews_router,
    search_histories_router,
)
from .domain.directory.router import (
    announcements_router,
    branches_router,
    educenters_router,
    faqs_router,
)
from .domain.enrollment.router import contracts_router, enrollments_router, payments_router
from .domain.geography.router import cities_router, districts_router, subdistricts_router
from .domain.users.router import user_roles_router, users_router, workers_router
from .routes import auth_router
from .security_headers import DOCS_PATHS, SecurityHeadersMiddleware

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("passlib").setLevel(logging.ERROR)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    if CREATE_TABLES_ON_STARTUP:
        try:
            Base.metadata.create_all(bind=engine, checkfirst=True)
            logger.info("Database tables created successfully")
        except SQLAlchemyError as e:
            # Ignore "already exists" errors from race conditions between workers
            error_msg = str(e)
            if "already exists" in error_msg or "duplicate key" in error_msg:
                logger.info("Database tables already exist (created by another worker)")
            else:
                logger.error(f"Failed to create database tables: {e}")
    yield
    logger.info("Application shutting down...")


app = FastAPI(
    title="EDU SYSTEM API",
    description="API for EDU SYSTEM",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api",
    swagger_ui_oauth2_redirect_url="/api/oauth2-redirect",
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=422, content={"detail": jsonable_errors(exc)})


def jsonable_errors(exc: RequestValidationError) -> list:
    # Validator errors carry the raised ValueError in ctx, which is not JSON serializable
    errors = []
    for error in exc.errors():
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {key: str(value) for key, value in error["ctx"].items()}
        errors.append(error)
    return errors


@app.middleware("http")
async def log_requests(request: Request, call_next):
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
        raise


if SECURITY_HEADERS_ENABLED:
    app.add_middleware(SecurityHeadersMiddleware, exclude_paths=DOCS_PATHS)
    logger.info("Security headers enabled")
else:
    logger.warning("Security headers DISABLED - only use in development!")

app.add_middleware(
    SessionMiddleware,
    secret_key=SECRET_KEY,
    session_cookie=SESSION_COOKIE_NAME,
    max_age=SESSION_MAX_AGE,
    same_site="lax",
    https_only=SESSION_HTTPS_ONLY,
)

logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,  # Session cookie travels cross-origin
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Routes
app.include_router(auth_router)
app.include_router(announcements_router)
app.include_router(branches_router)
app.include_router(cities_router)
app.include_router(contracts_router)
app.include_router(courses_router)
app.include_router(course_tags_router)
app.include_router(course_tag_mappings_router)
app.include_router(districts_router)
app.include_router(educenters_router)
app.include_router(enrollments_router)
app.include_router(faqs_router)
app.include_router(notifications_router)
app.include_router(payments_router)
app.include_router(reviews_router)
app.include_router(search_histories_router)
app.include_router(subdistricts_router)
app.include_router(users_router)
app.include_router(user_roles_router)
app.include_router(workers_router)


@app.get("/")
def root():
    return {"message": "EDU SYSTEM API is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}


@app.get("/health/db")
def database_health_check(db: Session = Depends(get_db)):
    """Check database connectivity for monitoring"""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": {"connected": True}}
    except SQLAlchemyError as e:
        logger.error(f"❌ Database health check failed: {e}")
        return {"status": "unhealthy", "database": {"connected": False, "error": str(e)}}
