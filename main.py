"""
Main entry point for the FastAPI server.

This module defines the FastAPI application, its middleware and routers,
and startup handling. It relies on environment variables for configuration
(e.g., HOST, PORT, ADMIN_PASSWORD, DATA_DIR) via ServerConfig.
"""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from tire_pickup.Core.Exceptions.handlers import register_exception_handlers
from tire_pickup.dependencies import bootstrap_storage, server_config
from tire_pickup.Http.Middleware.body_limit import BodySizeLimitMiddleware
from tire_pickup.Http.Routes.accounts import router as accounts_router
from tire_pickup.Http.Routes.admin import router as admin_router
from tire_pickup.Http.Routes.appointments import router as appointments_router
from tire_pickup.Http.Routes.public import router as public_router

# Configure loguru
logger.remove()
logger.add(
    sys.stderr,
    level=server_config.log_level,
    format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    enqueue=True,
    backtrace=True,
    diagnose=False,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan manager: makes sure the data files exist and reports the
    active business settings before serving.
    """
    config = await bootstrap_storage()
    logger.info(
        f"Using capacityPerDay={config.capacity_per_day}, timezone={config.timezone}, "
        f"data dir {server_config.data_dir}"
    )
    if server_config.uses_default_password:
        logger.warning("Admin password is default (set ADMIN_PASSWORD!)")
    else:
        logger.info("Admin password configured via env")
    yield


app: FastAPI = FastAPI(
    lifespan=lifespan,
    title="Tire Pickup Scheduler API",
    description="Public pickup booking plus admin management of appointments, accounts and reminders.",
    version="1.0.0",
)

# Register custom exception handlers for `{"error": ...}` responses
register_exception_handlers(app)

app.add_middleware(BodySizeLimitMiddleware, max_bytes=server_config.max_body_bytes)

# Configure CORS (outermost, so rejections still carry CORS headers)
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"https?://.*",
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(public_router)
app.include_router(admin_router)
app.include_router(appointments_router)
app.include_router(accounts_router)


def parse_server_args():
    """Parse server-specific arguments, overriding the environment"""
    import argparse

    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--host", help="Server host")
    parser.add_argument("--port", type=int, help="Server port")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    server_args, _ = parser.parse_known_args()

    if server_args.host:
        server_config.host = server_args.host
    if server_args.port:
        server_config.port = server_args.port
    if server_args.reload:
        server_config.reload = server_args.reload


if __name__ == "__main__":
    import uvicorn

    parse_server_args()
    logger.info(f"Pickup scheduler listening on http://{server_config.host}:{server_config.port}")
    uvicorn.run(
        "main:app",
        host=server_config.host,
        port=server_config.port,
        reload=server_config.reload,
    )
