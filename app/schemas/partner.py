from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PartnerCreate(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None


class PartnerResponse(BaseModel):
    id: str
    name: str
    email: str | None = None
    phone: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class PartnerDetailResponse(PartnerResponse):
    vehicle_count: int = 0
