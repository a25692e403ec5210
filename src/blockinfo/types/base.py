"""Pydantic base models for Beacon-API data."""

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """
    A model parsed from Beacon-API JSON.

    The API's keys are snake_case, so field names are the keys as-is.
    Unknown keys are ignored, which suits payloads newer nodes extend.
    """

    model_config = ConfigDict(validate_default=True, arbitrary_types_allowed=True)


class StrictBaseModel(ApiModel):
    """An immutable model that rejects unknown keys. Block schemas are closed."""

    model_config = ApiModel.model_config | {"extra": "forbid", "frozen": True}
