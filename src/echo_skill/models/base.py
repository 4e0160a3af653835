"""
Base models for wire payloads.

Python attributes are snake_case; the platform's camelCase names are aliases.
Both spellings are accepted on input, aliases are emitted on output.
"""

from typing import Any

from pydantic import BaseModel, model_validator


class WireModel(BaseModel):
    model_config = {"populate_by_name": True}


class InboundModel(WireModel):
    """Wire model for platform-sent data: an explicit null reads as the field's default."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
