# app/routes/auth.py
import logging

from fastapi import APIRouter, Body, Depends, Response

from app.core.config import Settings, get_app_settings
from app.middleware.access import requires
from app.schemas.auth import TokenClaims, TokenCleared, TokenIssued
from app.utils.auth_utils import clear_token_cookie, create_access_token, set_token_cookie

logger = logging.getLogger(__name__)

auth_router = APIRouter(tags=["Auth"])


@auth_router.post("/jwt", response_model=TokenIssued, dependencies=requires("POST", "/jwt"))
async def issue_token(
    claims: TokenClaims,
    response: Response,
    settings: Settings = Depends(get_app_settings),
):
    user = claims.model_dump()
    logger.info("Issuing token for %s", user["email"])
    token = create_access_token(user, settings=settings)
    set_token_cookie(response, token, settings)
    return TokenIssued()


@auth_router.post("/logout", response_model=TokenCleared, dependencies=requires("POST", "/logout"))
async def logout(
    response: Response,
    user: dict = Body(default=None),
    settings: Settings = Depends(get_app_settings),
):
    logger.info("logging out %s", user)
    clear_token_cookie(response, settings)
    return TokenCleared()
