from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.dependencies import DbSession
from app.errors import AuthError, RegistryError
from app.logger import configure_logging
from app.routers import auth, gifts, lists, profile, public

logger = configure_logging()


def create_app() -> FastAPI:
    application = FastAPI(title="Gift Registry API")

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.middleware("http")
    async def request_logging(request: Request, call_next):
        request_id = request.headers.get("X-Request-Id") or str(uuid4())
        start = perf_counter()
        response = await call_next(request)
        logger.info(
            "Request completed id=%s method=%s path=%s status=%s duration_ms=%.2f",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            (perf_counter() - start) * 1000.0,
        )
        response.headers["X-Request-Id"] = request_id
        return response

    @application.exception_handler(RegistryError)
    async def registry_error_handler(request: Request, exc: RegistryError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message},
            headers=headers,
        )

    @application.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.debug("Validation failed path=%s errors=%s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request."},
        )

    @application.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error."},
        )

    application.include_router(auth.router)
    application.include_router(lists.router)
    application.include_router(gifts.router)
    application.include_router(public.router)
    application.include_router(profile.router)

    @application.get("/health")
    def health(db: DbSession):
        try:
            db.execute(text("SELECT 1"))
        except SQLAlchemyError:
            db.rollback()
            logger.warning("Health check failed", exc_info=True)
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy"},
            )
        return {"status": "ok"}

    return application


app = create_app()
