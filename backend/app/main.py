"""
ProfileHub Backend - FastAPI Application

User accounts with JWT authentication, editable profiles and interests.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.core.exceptions import ServiceError, ValidationFailedError
from app.core.logging import setup_logging
from app.core.security import get_token_service
from app.database.connections import get_database, close_connections
from app.database.indexes import create_indexes
from app.dependencies.auth import public_route
from app.routers import health, user

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Configure logging
    - Load the signing key once
    - Create indexes

    Shutdown:
    - Close the database connection
    """
    setup_logging()
    logger.info("Starting up ProfileHub Backend...")

    # Fails fast when JWT_SECRET_KEY is missing
    get_token_service()

    try:
        db = await get_database()
        await create_indexes(db)
        logger.info("Database indexes created")
    except Exception as e:
        logger.warning("Database initialization warning: %s", e)

    yield

    logger.info("Shutting down ProfileHub Backend...")
    await close_connections()
    logger.info("Database connections closed")


# Create FastAPI application
app = FastAPI(
    title="ProfileHub API",
    description="""
## User Profile API

### Features
- **Accounts**: register and log in with email and password
- **Profiles**: partial updates with derived horoscope and Chinese zodiac
- **Interests**: add and remove interest tags
- **Images**: upload a profile picture

### Authentication
Protected endpoints accept the JWT from `POST /user/login` either as a header
```
Authorization: Bearer your_jwt_token
```
or as a `jwt` cookie.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Translate business-rule failures into HTTP responses."""
    content = {"detail": exc.message}
    if isinstance(exc, ValidationFailedError):
        content["errors"] = [e.to_dict() for e in exc.errors]
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Answer malformed request bodies as 400 with field errors."""
    errors = [
        {
            "field": ".".join(str(part) for part in err["loc"] if part != "body"),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Bad Request", "errors": errors},
    )


# Include routers
app.include_router(health.router)
app.include_router(user.router)


@app.get("/", tags=["Root"], dependencies=[Depends(public_route)])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "ProfileHub API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
