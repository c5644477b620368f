# app/middleware/db_middleware.py
"""
Lazy Database Connection Middleware.

The app starts even when MongoDB is unreachable. Until a connection
succeeds, each API request retries it once and gets a 503 if MongoDB is
still down, instead of failing deep inside a route.
"""

import asyncio
import logging
from typing import Tuple

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.middleware.base import BaseHTTPMiddleware

from database import Database
from settings import settings

logger = logging.getLogger(__name__)

# Served without touching MongoDB
NO_DATABASE_PATHS: Tuple[str, ...] = ("/health", "/docs", "/redoc", "/openapi.json")


class LazyDatabaseMiddleware(BaseHTTPMiddleware):
    """Connect Beanie on demand; concurrent requests share one attempt."""

    def __init__(self, app):
        super().__init__(app)
        self._connect_lock = asyncio.Lock()

    async def _ensure_connected(self) -> bool:
        if Database._initialized:
            return True
        async with self._connect_lock:
            # Another request may have connected while this one waited
            if Database._initialized:
                return True
            logger.info("Connecting to MongoDB on first request...")
            try:
                await Database.connect_db(
                    database_url=settings.DATABASE_URL,
                    database_name=settings.DATABASE_NAME
                )
            except PyMongoError as e:
                logger.error(f"MongoDB still unavailable: {e}")
                return False
        return True

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if path == "/" or path.startswith(NO_DATABASE_PATHS):
            return await call_next(request)

        if not await self._ensure_connected():
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"detail": "Database unavailable"}
            )
        return await call_next(request)
