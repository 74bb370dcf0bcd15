"""
API Documentation Catalog - FastAPI Application

Services own modules, which group endpoints and data schemas; schemas own an
ordered list of fields. Renames and deletes cascade across collections.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.config import get_settings
from catalog.core.exceptions import CatalogError
from catalog.core.logging_config import setup_logging
from catalog.database.connections import get_mongo_client, close_connections
from catalog.database.registry import create_indexes
from catalog.routers import endpoints, health, modules, schemas, services

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Configure logging
    - Initialize database connection
    - Create indexes

    Shutdown:
    - Close database connection
    """
    setup_logging()
    logger.info("Starting up API Documentation Catalog...")

    try:
        client = await get_mongo_client()
        await create_indexes(client)
        logger.info("Database indexes created")
    except Exception as e:
        logger.warning("Database initialization warning: %s", e)

    yield

    logger.info("Shutting down API Documentation Catalog...")
    await close_connections()
    logger.info("Database connections closed")


app = FastAPI(
    title="API Documentation Catalog",
    description="""
## API Documentation Catalog

Document services, their modules, endpoints and data schemas.

### Cascades
- Renaming a module updates every endpoint and schema that references it
- Deleting a module removes its endpoints and schemas
- Deleting a service removes everything scoped to it

### Authentication
Mutating routes require a JWT for a user with the privileged role, sent as a
bearer token (or, failing that, as the `token` query parameter):
```
Authorization: Bearer your_jwt_token
PUT /api/modules/{id}?token=your_jwt_token
```

### Field names
JSON bodies and query parameters are camelCase (`serviceId`, `authRequired`);
snake_case keys are also accepted in request bodies.

### Responses
Every body is shaped `{success, data?, message?}`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== Error envelope ====================


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": f"Validation failed: {problems}"},
    )


# Include routers
app.include_router(health.router)
app.include_router(services.router, prefix=settings.api_prefix)
app.include_router(modules.router, prefix=settings.api_prefix)
app.include_router(schemas.router, prefix=settings.api_prefix)
app.include_router(endpoints.router, prefix=settings.api_prefix)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "API Documentation Catalog",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
