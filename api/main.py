import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.error_handler import register_error_handlers
from api.routes.auth import router as auth_router
from api.routes.users import router as users_router
from api.routes.resumes import router as resumes_router
from config.logging_config import configure_logging
from config.settings import TokenConfig, settings
from utils.token_service import TokenService

logger = logging.getLogger(__name__)

DESCRIPTION = """
Resume management API: account registration, sign-in, and CRUD over your own resumes.

## Authentication

`POST /auth/sign-in` returns a token valid for 12 hours. Send it as
`Authorization: Bearer <token>` on every `/users` and `/resumes` call.

## Quick Start

1. **Sign up** → `POST /auth/sign-up` with email, password, passwordConfirm, name
2. **Sign in** → `POST /auth/sign-in` to get a token
3. **Create a resume** → `POST /resumes` with title and content (10+ characters)
4. **List** → `GET /resumes?sort=asc` (newest first by default)

## Errors

Every failure returns `{"message": "..."}`. Resumes of other accounts are
reported as 404, exactly like missing ones.
"""

tags_metadata = [
    {
        "name": "Health",
        "description": "Health check endpoints. No authentication required.",
    },
    {
        "name": "Auth",
        "description": "Sign up and sign in.",
    },
    {
        "name": "Users",
        "description": "The signed-in account.",
    },
    {
        "name": "Resumes",
        "description": "Create, list, read, update and delete your resumes.",
    },
]


def create_app(token_config: Optional[TokenConfig] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        token_config: Signing config; read from settings when omitted.
            A missing ACCESS_TOKEN_SECRET_KEY aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        app.state.token_service = TokenService(token_config or TokenConfig.from_settings(settings))
        logger.info("Resume API started")
        yield

    app = FastAPI(
        title="Resume API",
        description=DESCRIPTION,
        version="1.0.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS.split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    @app.get("/", tags=["Root"])
    def root():
        """Root endpoint with API information and documentation links"""
        return {
            "message": "Welcome to Resume API",
            "version": "1.0.0",
            "documentation": {
                "swagger": "/docs",
                "redoc": "/redoc"
            },
            "authentication": {
                "type": "Bearer",
                "header": "Authorization",
                "note": "Required for /users and /resumes"
            },
            "endpoints": {
                "health": "/health",
                "ping": "/ping",
                "auth": "/auth",
                "users": "/users",
                "resumes": "/resumes"
            }
        }

    # Health check endpoints (public - no authentication required)
    @app.get("/ping", tags=["Health"])
    def ping():
        """Simple ping endpoint to check if API is responding. No authentication required."""
        return {"message": "pong"}

    @app.get("/health", tags=["Health"])
    def health():
        """Health check endpoint with basic status information. No authentication required."""
        return {
            "status": "healthy",
            "service": "Resume API",
            "version": "1.0.0"
        }

    # Register routers
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(resumes_router)

    return app


app = create_app()
