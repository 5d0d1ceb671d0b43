from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# primary keys are int4 columns
MAX_ID = 2**31 - 1

RecordId = Annotated[int, Field(gt=0, le=MAX_ID)]


class ApiModel(BaseModel):
    """JSON bodies use camelCase field names; Python code uses snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
