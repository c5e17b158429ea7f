from pydantic import BaseModel
from pydantic.alias_generators import to_camel

# Reports are computed at full precision; responses round at this boundary.
DISPLAY_DECIMALS = 2
DENSITY_DECIMALS = 6


class CamelModel(BaseModel):
    """Base model that speaks camelCase JSON and also accepts snake_case."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class PaginatedResponse(CamelModel):
    total: int
    offset: int
    limit: int
