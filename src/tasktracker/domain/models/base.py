from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for models exchanged with clients: camelCase on the wire, enum names as values."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
