import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, get_settings
from app.core.errors import POSError
from app.core.logging import setup_logging
from app.database import Base, QueryExecutor, engine
from app.models import import_all_models
from app.routers import (
    auth_router,
    catalog_router,
    health_router,
    inventory_router,
    statistics_router,
    transactions_router,
)

setup_logging()
settings: Settings = get_settings()
logger = logging.getLogger(__name__)

import_all_models()
executor = QueryExecutor(engine)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("%s started (%s).", settings.APP_NAME, engine.url.render_as_string(hide_password=True))
    try:
        yield
    finally:
        executor.dispose()
        logger.info("Database connections closed.")


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.state.executor = executor
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.CORS_ALLOW_ORIGINS.split(",") if origin.strip()],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(POSError)
async def pos_error_handler(request: Request, exc: POSError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


app.include_router(health_router)
app.include_router(auth_router)
app.include_router(catalog_router)
app.include_router(transactions_router)
app.include_router(statistics_router)
app.include_router(inventory_router)


__all__ = ["app"]


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=3000)
