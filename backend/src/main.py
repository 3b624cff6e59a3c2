"""Main FastAPI Application

Wires middleware, global exception handlers and the API routers from
`presentation`. Run locally for development with:

    uvicorn main:app --reload

Keep application logic in `application`, `core` and `infrastructure`.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from core.config import settings
from core.database import init_db, close_db, health_check as db_health_check
from core.logging_config import configure_logging  # noqa: F401
from core.exceptions import (
    DomainException,
    AuthenticationException,
    NotAuthorizedException,
    ValidationException,
    CryptoException,
    RepositoryException,
)
from presentation.api.v1.endpoints import auth_router, jobs_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"🚀 Starting {settings.APP_NAME} ({settings.ENVIRONMENT})...")

    await init_db()
    logger.info("✅ Database initialized")

    yield

    logger.info("👋 Shutting down gracefully...")
    await close_db()
    logger.info("✅ Database connections closed")


app = FastAPI(
    title=settings.APP_NAME,
    description="Track job applications: accounts, owner-scoped jobs and statistics",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def status_for(exc: DomainException) -> int:
    if isinstance(exc, ValidationException):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if isinstance(exc, AuthenticationException):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, NotAuthorizedException):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, (CryptoException, RepositoryException)):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException):
    """Handle domain-level exceptions"""
    status_code = status_for(exc)

    if status_code >= 500:
        logger.error(f"Domain exception on {request.url.path}: {str(exc)}")
        return JSONResponse(
            status_code=status_code,
            content={"detail": "Internal server error"}
        )

    logger.warning(f"Domain exception on {request.url.path}: {str(exc)}")
    content = {"detail": exc.message if isinstance(exc, ValidationException) else str(exc)}
    if isinstance(exc, ValidationException):
        content["errors"] = [e.to_dict() for e in exc.errors]

    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all exception handler"""
    logger.opt(exception=exc).error(f"Unhandled exception: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )


app.include_router(
    auth_router,
    prefix="/api/v1/auth",
    tags=["Authentication"]
)

app.include_router(
    jobs_router,
    prefix="/api/v1/jobs",
    tags=["Jobs"]
)


@app.get("/health")
async def health():
    """Health check endpoint"""
    database_ok = await db_health_check()
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": database_ok,
        "service": "job-tracker",
        "version": "1.0.0"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
