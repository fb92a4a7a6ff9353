import logging
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.router import api_router
from app.config import settings
from app.database import async_session_factory
from app.exceptions import EngineError
from app.middleware.logging import RequestLoggingMiddleware
from app.reference_data.seed import seed_reference_data
from app.services.clock import SystemClock

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
)

logger = logging.getLogger("imk.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            traces_sample_rate=0.1,
            environment=settings.environment,
        )
        logger.info("Sentry initialized (env=%s)", settings.environment)

    if settings.seed_reference_data:
        async with async_session_factory() as session:
            await seed_reference_data(session, SystemClock().now())
            await session.commit()

    logger.info("Starting IMK Cargo Control Tower (env=%s)", settings.environment)
    yield
    logger.info("Shutting down IMK Cargo Control Tower")


app = FastAPI(
    title="IMK Cargo Control Tower",
    description="Logistics decision and settlement engine: rates, compliance, routing, ETA, telemetry, billing",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(EngineError)
async def engine_error_handler(request: Request, exc: EngineError) -> JSONResponse:
    logger.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.include_router(api_router, prefix="/api")
