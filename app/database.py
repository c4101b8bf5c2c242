# app/database.py
import logging
from contextlib import asynccontextmanager

import certifi
from fastapi import FastAPI, Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.server_api import ServerApi

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class Database:
    """
    Process-wide MongoDB handle exposing the services and checkouts
    collections. Opened once at startup and shared by every request.
    """

    def __init__(self, url: str, name: str, services: str = "services", checkouts: str = "checkOuts"):
        options = {
            "server_api": ServerApi("1", strict=True, deprecation_errors=True),
        }
        if url.startswith("mongodb+srv://"):
            options["tlsCAFile"] = certifi.where()
        self.client = AsyncIOMotorClient(url, **options)
        self.db = self.client[name]
        self.services = self.db[services]
        self.checkouts = self.db[checkouts]

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.mongo_url,
            settings.DB_NAME,
            services=settings.SERVICES_COLLECTION,
            checkouts=settings.CHECKOUTS_COLLECTION,
        )

    async def connect(self) -> None:
        await self.client.admin.command("ping")
        logger.info("Pinged your deployment. Connected to MongoDB.")

    def close(self) -> None:
        self.client.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = getattr(app.state, "settings", None) or get_settings()
    database = Database.from_settings(settings)
    try:
        await database.connect()
    except Exception as e:
        if settings.EXIT_ON_DB_FAILURE:
            logger.critical("MongoDB connection failed: %s", e)
            database.close()
            raise
        logger.error("MongoDB connection failed, serving anyway: %s", e)

    app.state.db = database
    try:
        yield
    finally:
        database.close()
        logger.info("MongoDB connection closed.")


def get_db(request: Request) -> Database:
    return request.app.state.db
