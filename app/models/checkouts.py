# app/models/checkouts.py
from motor.motor_asyncio import AsyncIOMotorCollection

from app.models.documents import serialize_document, to_object_id


async def create_checkout(collection: AsyncIOMotorCollection, data: dict) -> dict:
    result = await collection.insert_one(data)
    return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}


async def list_checkouts(collection: AsyncIOMotorCollection, email=None) -> list[dict]:
    query = {"email": email} if email else {}
    checkouts = await collection.find(query).to_list(None)
    return [serialize_document(c) for c in checkouts]


async def get_checkout(collection: AsyncIOMotorCollection, checkout_id: str):
    oid = to_object_id(checkout_id)
    if oid is None:
        return None
    return await collection.find_one({"_id": oid})


async def delete_checkout(collection: AsyncIOMotorCollection, checkout_id: str) -> dict:
    oid = to_object_id(checkout_id)
    if oid is None:
        return {"acknowledged": True, "deletedCount": 0}
    result = await collection.delete_one({"_id": oid})
    return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}


async def update_checkout_status(collection: AsyncIOMotorCollection, checkout_id: str, status) -> dict:
    oid = to_object_id(checkout_id)
    if oid is None:
        return _update_result(True, 0, 0)
    result = await collection.update_one(
        {"_id": oid},
        {"$set": {"status": status}}
    )
    return _update_result(result.acknowledged, result.matched_count, result.modified_count)


def _update_result(acknowledged: bool, matched: int, modified: int) -> dict:
    return {
        "acknowledged": acknowledged,
        "matchedCount": matched,
        "modifiedCount": modified,
        "upsertedCount": 0,
        "upsertedId": None,
    }
