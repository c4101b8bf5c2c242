# app/models/services.py
from motor.motor_asyncio import AsyncIOMotorCollection

from app.models.documents import serialize_document, to_object_id


async def list_services(collection: AsyncIOMotorCollection) -> list[dict]:
    services = await collection.find({}).to_list(None)
    return [serialize_document(s) for s in services]


async def get_service(collection: AsyncIOMotorCollection, service_id: str):
    oid = to_object_id(service_id)
    if oid is None:
        return None
    return serialize_document(await collection.find_one({"_id": oid}))
