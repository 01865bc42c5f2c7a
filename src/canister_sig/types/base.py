"""Reusable, strict base models for the library."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class CanisterSigModel(BaseModel):
    """A base model for the value types exchanged with callers."""

    model_config = ConfigDict(validate_default=True)

    def copy(self: Self, **kwargs: Any) -> Self:
        """Create a copy of the model with the updated fields that are validated."""
        return self.__class__(**(self.model_dump(exclude_unset=True) | kwargs))


class StrictBaseModel(CanisterSigModel):
    """A strict, immutable pydantic base model."""

    model_config = CanisterSigModel.model_config | {
        "extra": "forbid",
        "frozen": True,
        "strict": True,
    }
