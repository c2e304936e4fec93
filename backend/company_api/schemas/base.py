"""Schema Base — camelCase JSON keys over snake_case attributes.

Invariants:
    - Serialized (by_alias) keys are camelCase; input accepts either spelling
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for all API DTOs."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
