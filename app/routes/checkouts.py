# app/routes/checkouts.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request

from app.core.config import get_app_settings
from app.core.error_messages import ErrorResponses
from app.database import Database, get_db
from app.middleware.access import current_user, requires
from app.models import checkouts
from app.schemas.checkouts import CheckoutCreate, CheckoutStatusUpdate

logger = logging.getLogger(__name__)

checkout_router = APIRouter(prefix="/checkouts", tags=["Checkouts"])


async def _check_owner(request: Request, db: Database, checkout_id: str) -> None:
    """In strict mode, only the owner may change an existing checkout."""
    if not get_app_settings(request).ENFORCE_OWNERSHIP:
        return
    user = current_user(request)
    if user is None:
        raise ErrorResponses.UNAUTHORIZED
    checkout = await checkouts.get_checkout(db.checkouts, checkout_id)
    if checkout is not None and checkout.get("email") != user.get("email"):
        raise ErrorResponses.FORBIDDEN


@checkout_router.post("", dependencies=requires("POST", "/checkouts"))
async def create_checkout(data: CheckoutCreate, db: Database = Depends(get_db)):
    return await checkouts.create_checkout(db.checkouts, data.model_dump())


@checkout_router.get("", dependencies=requires("GET", "/checkouts"))
async def list_checkouts(
    request: Request,
    email: Optional[str] = None,
    db: Database = Depends(get_db),
):
    logger.debug("From checkouts: %s", email)
    user = current_user(request)
    if not email or user.get("email") != email:
        raise ErrorResponses.FORBIDDEN
    return await checkouts.list_checkouts(db.checkouts, email)


@checkout_router.delete("/{checkout_id}", dependencies=requires("DELETE", "/checkouts/{id}"))
async def delete_checkout(checkout_id: str, request: Request, db: Database = Depends(get_db)):
    await _check_owner(request, db, checkout_id)
    return await checkouts.delete_checkout(db.checkouts, checkout_id)


@checkout_router.patch("/{checkout_id}", dependencies=requires("PATCH", "/checkouts/{id}"))
async def update_checkout_status(
    checkout_id: str,
    data: CheckoutStatusUpdate,
    request: Request,
    db: Database = Depends(get_db),
):
    await _check_owner(request, db, checkout_id)
    return await checkouts.update_checkout_status(db.checkouts, checkout_id, data.status)
