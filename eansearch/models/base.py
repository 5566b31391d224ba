"""
Common base model for EAN-Search API payloads.
"""

from pydantic import BaseModel, ConfigDict


class APIModel(BaseModel):
    """Base model for API responses; wire names are accepted as aliases."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
    )
