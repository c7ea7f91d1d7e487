"""
Shared pydantic base for request/response schemas.

Fields are snake_case in Python and camelCase on the wire.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class SuccessResponse(CamelModel):
    success: bool = True


class IdResponse(CamelModel):
    id: int
