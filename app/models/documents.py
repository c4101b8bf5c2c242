# app/models/documents.py
from typing import Optional

from bson import ObjectId


def to_object_id(value) -> Optional[ObjectId]:
    """Parse a path id; malformed ids match nothing instead of failing."""
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def serialize_document(doc: Optional[dict]) -> Optional[dict]:
    if doc is None:
        return None
    doc = dict(doc)
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc
