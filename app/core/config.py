# app/core/config.py
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
from urllib.parse import quote_plus

from fastapi import Request
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class DeploymentProfile:
    """CORS origins and cookie transport flags that must change together."""

    name: str
    origins: tuple
    cookie_secure: bool
    cookie_samesite: str


PROFILES = {
    # Front end served from Firebase hosting, API on another origin.
    "hosted": DeploymentProfile(
        name="hosted",
        origins=(
            "https://car-service-2dc17.web.app",
            "https://car-service-2dc17.firebaseapp.com",
        ),
        cookie_secure=True,
        cookie_samesite="none",
    ),
    # Vite dev server talking to a local API over plain http.
    "local": DeploymentProfile(
        name="local",
        origins=("http://localhost:5173",),
        cookie_secure=False,
        cookie_samesite="strict",
    ),
}


class Settings(BaseSettings):
    """
    Application settings loaded from the environment (.env supported).

    Either MONGO_URL or DB_USER/DB_PASS must be provided, plus
    ACCESS_TOKEN_SECRET for signing identity tokens.
    """

    PROJECT_NAME: str = "Car Service API"

    # MongoDB
    MONGO_URL: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASS: Optional[str] = None
    DB_CLUSTER: str = "cluster0.cirzz5b.mongodb.net"
    DB_NAME: str = "carServiceDB"
    SERVICES_COLLECTION: str = "services"
    CHECKOUTS_COLLECTION: str = "checkOuts"
    EXIT_ON_DB_FAILURE: bool = True

    # JWT
    ACCESS_TOKEN_SECRET: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    DEPLOYMENT_PROFILE: str = "hosted"
    CORS_ORIGINS: str = ""

    # Require a matching token on delete/patch of checkouts too
    ENFORCE_OWNERSHIP: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("DEPLOYMENT_PROFILE")
    @classmethod
    def _known_profile(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in PROFILES:
            raise ValueError(f"unknown deployment profile: {value!r}")
        return value

    @field_validator("CORS_ORIGINS")
    @classmethod
    def _no_wildcard(cls, value: str) -> str:
        if "*" in value:
            raise ValueError("CORS_ORIGINS must list explicit origins")
        return value

    @property
    def profile(self) -> DeploymentProfile:
        return PROFILES[self.DEPLOYMENT_PROFILE]

    @property
    def allowed_origins(self) -> list[str]:
        if self.CORS_ORIGINS:
            return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
        return list(self.profile.origins)

    @property
    def mongo_url(self) -> str:
        if self.MONGO_URL:
            return self.MONGO_URL
        if not (self.DB_USER and self.DB_PASS):
            raise ValueError("set MONGO_URL or DB_USER/DB_PASS")
        return (
            f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}"
            f"@{self.DB_CLUSTER}/?retryWrites=true&w=majority"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with; falls back to the env."""
    return getattr(request.app.state, "settings", None) or get_settings()
