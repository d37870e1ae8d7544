"""Shared pieces of the wire contracts.

Field names are snake_case in Python and camelCase on the wire. Unset
optional fields are dropped from every encoded body.
"""

import logging
from decimal import Decimal
from typing import Annotated, Any, TypeVar, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer, ValidationError
from pydantic.alias_generators import to_camel

from jupswap.exceptions import DeserializationError

logger = logging.getLogger(__name__)

U64_MAX = 2**64 - 1

ModelT = TypeVar("ModelT", bound="WireModel")


def _parse_u64(value: Any) -> int:
    """Accept an int or a decimal digit string in the u64 range."""
    if isinstance(value, bool):
        raise ValueError("Expected an unsigned integer, got a boolean")
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        parsed = int(value)
    else:
        raise ValueError(f"Expected an unsigned integer string, got {value!r}")

    if not 0 <= parsed <= U64_MAX:
        raise ValueError(f"Amount {parsed} is outside the u64 range")
    return parsed


# Token amounts: int in Python, decimal string on the wire
U64String = Annotated[
    int,
    BeforeValidator(_parse_u64),
    PlainSerializer(str, return_type=str, when_used="json"),
]

# Exact decimals, never in exponent form on the wire
DecimalString = Annotated[
    Decimal,
    PlainSerializer(lambda d: format(d, "f"), return_type=str, when_used="json"),
]


class WireModel(BaseModel):
    """Base model for request and response bodies."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Encode as a JSON-ready dict with wire field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls: type[ModelT], payload: Union[bytes, str, dict]) -> ModelT:
        """Decode a raw JSON body or an already-parsed dict.

        Raises:
            DeserializationError: if the payload does not match the model
        """
        try:
            if isinstance(payload, (bytes, bytearray, str)):
                return cls.model_validate_json(payload)
            return cls.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Failed to decode {cls.__name__}: {e.error_count()} error(s)")
            raise DeserializationError(f"Invalid {cls.__name__}: {e}") from e


class ResponseModel(WireModel):
    """Response bodies are immutable once parsed."""

    model_config = ConfigDict(frozen=True)
