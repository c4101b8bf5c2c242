# app/main.py
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.core.config import Settings, get_settings
from app.core.error_messages import http_exception_handler
from app.database import lifespan
from app.routes.auth import auth_router
from app.routes.checkouts import checkout_router
from app.routes.services import service_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    app.state.settings = settings

    # Origins come from the deployment profile; wildcards are refused in config
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(HTTPException, http_exception_handler)

    app.include_router(auth_router)
    app.include_router(service_router)
    app.include_router(checkout_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Car Service is Running in Web"

    logging.getLogger(__name__).info(
        "Configured %s profile, origins: %s",
        settings.profile.name,
        ", ".join(settings.allowed_origins),
    )
    return app


app = create_app()
