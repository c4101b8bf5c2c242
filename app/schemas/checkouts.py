from typing import Optional

from pydantic import BaseModel, ConfigDict


class CheckoutCreate(BaseModel):
    # Order forms carry their own fields (service, status, date, price...)
    model_config = ConfigDict(extra="allow")

    email: str


class CheckoutStatusUpdate(BaseModel):
    status: Optional[str] = None
