"""Base model for the frozen value types of seed discovery."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic model.

    Unknown fields are rejected, values are not coerced across types, and
    instances are hashable so they can be collected into sets.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)
