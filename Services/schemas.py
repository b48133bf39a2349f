# Services/schemas.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, constr
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class AddressBase(CamelModel):
    house_no: Optional[constr(max_length=255)] = None
    street: Optional[constr(max_length=255)] = None
    city: Optional[constr(max_length=255)] = None


class AddressResponse(AddressBase):
    address_id: int
