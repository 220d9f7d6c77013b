"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, record table
creation, and engine disposal. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from uploader.infrastructure.persistence.database import create_schema, dispose_engine
from uploader.shared.telemetry import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    setup_logging()
    await create_schema()
    logger.info("Uploader started")

    yield

    await dispose_engine()
