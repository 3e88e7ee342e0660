"""
Schema base con alias camelCase.
Los clientes envían y reciben claves camelCase (licenseNumber, hospitalId);
internamente se usan nombres snake_case.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base para schemas expuestos con claves camelCase."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
