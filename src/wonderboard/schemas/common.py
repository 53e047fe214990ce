# src/wonderboard/schemas/common.py

"""Common Pydantic configuration shared by every resource schema."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema that speaks camelCase on the wire.

    Fields are declared in snake_case; the JSON representation uses
    camelCase (``playerId``, ``createdAt``). Either spelling is accepted
    on input, and ORM objects can be validated directly.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
