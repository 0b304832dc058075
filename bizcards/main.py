import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bizcards.api import routers
from bizcards.core.config import settings
from bizcards.core.logging_config import configure_logging
from bizcards.db.seed import seed_database
from bizcards.db.session import close_db_pool, connect_db_pool, get_pool
from bizcards.middleware.error_logger import ErrorLoggingMiddleware
from bizcards.repositories.card_repo import CardRepository
from bizcards.repositories.memory import InMemoryCardRepository, InMemoryUserRepository, MemoryStore
from bizcards.repositories.user_repo import UserRepository

configure_logging(settings)
logger = logging.getLogger("bizcards")


async def _seed(app: FastAPI):
    if settings.STORAGE_BACKEND == "memory":
        store = app.state.memory_store
        await seed_database(InMemoryUserRepository(store), InMemoryCardRepository(store))
        return
    pool = await get_pool()
    async with pool.acquire() as conn:
        await seed_database(UserRepository(conn), CardRepository(conn))


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.memory_store = MemoryStore()
    if settings.STORAGE_BACKEND == "postgres":
        await connect_db_pool()
    logger.info("Storage backend: %s (%s mode)", settings.STORAGE_BACKEND, settings.ENV)

    if settings.is_development and settings.SEED_ON_STARTUP:
        await _seed(app)

    yield

    if settings.STORAGE_BACKEND == "postgres":
        await close_db_pool()


app = FastAPI(
    title="Business Cards API",
    description="Users and business-card listings with owner/admin authorization",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(ErrorLoggingMiddleware)
app.include_router(routers.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # only the first violation is reported
    first = exc.errors()[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    if first.get("type") == "json_invalid":
        # loc carries the character offset of the parse failure
        location = []
    field = ".".join(location) or "body"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": f"{field}: {first.get('msg', 'invalid value')}"},
    )


@app.exception_handler(StarletteHTTPException)
async def unknown_route_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND and "endpoint" not in request.scope:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "Page not found",
                "message": f"The route '{request.url.path}' does not exist",
            },
        )
    return await http_exception_handler(request, exc)


@app.get("/")
async def root():
    return {"message": "Welcome to Business Cards API"}
