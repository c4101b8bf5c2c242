# app/routes/services.py
from fastapi import APIRouter, Depends

from app.database import Database, get_db
from app.middleware.access import requires
from app.models import services

service_router = APIRouter(prefix="/services", tags=["Services"])


@service_router.get("", dependencies=requires("GET", "/services"))
async def list_services(db: Database = Depends(get_db)):
    return await services.list_services(db.services)


# Unknown ids answer null rather than 404
@service_router.get("/{service_id}", dependencies=requires("GET", "/services/{id}"))
async def get_service(service_id: str, db: Database = Depends(get_db)):
    return await services.get_service(db.services, service_id)
