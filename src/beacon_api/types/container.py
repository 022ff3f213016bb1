"""Base class for stored consensus containers."""

from __future__ import annotations

from typing_extensions import Self

from .base import StrictBaseModel


class Container(StrictBaseModel):
    """
    A consensus object that can be persisted.

    The stored encoding is the model's JSON form, which is the same
    representation the API returns to clients.
    """

    def encode_bytes(self) -> bytes:
        """Serialize this container to its stored byte form."""
        return self.model_dump_json().encode("utf-8")

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Deserialize a container from its stored byte form.

        Raises:
            pydantic.ValidationError: If the data does not match the schema.
        """
        return cls.model_validate_json(data)
