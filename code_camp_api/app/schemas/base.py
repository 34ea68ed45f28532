"""
Common configuration for API schemas.

Fields are declared in snake_case and exchanged as camelCase JSON
(``eventDate``, ``companyName``).  Either spelling is accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
