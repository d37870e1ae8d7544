"""Solana public key type and its base58 text codec.

Every account, mint and program address travels on the wire as base58 text.
``Pubkey`` is the in-memory form; it plugs into pydantic so model fields
accept either a ``Pubkey`` or its string and always serialize as the string.
"""

from typing import Any, Union

import base58
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from jupswap.exceptions import InvalidIdentifier

PUBKEY_LENGTH = 32


class Pubkey:
    """Immutable 32-byte public key."""

    __slots__ = ("_raw",)

    def __init__(self, raw: Union[bytes, bytearray]):
        raw = bytes(raw)
        if len(raw) != PUBKEY_LENGTH:
            raise InvalidIdentifier(
                f"Public key must be {PUBKEY_LENGTH} bytes, got {len(raw)}"
            )
        object.__setattr__(self, "_raw", raw)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Pubkey is immutable")

    def __reduce__(self):
        return (Pubkey, (self._raw,))

    def __copy__(self) -> "Pubkey":
        return self

    def __deepcopy__(self, memo: dict) -> "Pubkey":
        return self

    @classmethod
    def from_string(cls, text: str) -> "Pubkey":
        """Parse a base58 string."""
        return decode_pubkey(text)

    @classmethod
    def default(cls) -> "Pubkey":
        """The all-zero key (system program address)."""
        return cls(bytes(PUBKEY_LENGTH))

    def __bytes__(self) -> bytes:
        return self._raw

    def __str__(self) -> str:
        return encode_pubkey(self)

    def __repr__(self) -> str:
        return f"Pubkey({encode_pubkey(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pubkey):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    @classmethod
    def _validate(cls, value: Any) -> "Pubkey":
        if isinstance(value, Pubkey):
            return value
        if isinstance(value, str):
            return decode_pubkey(value)
        if isinstance(value, (bytes, bytearray)):
            return cls(value)
        raise InvalidIdentifier(
            f"Expected a base58 string, got {type(value).__name__}"
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                encode_pubkey, when_used="json"
            ),
        )


def encode_pubkey(pubkey: Pubkey) -> str:
    """Encode a public key as base58 text."""
    return base58.b58encode(bytes(pubkey)).decode("ascii")


def decode_pubkey(text: str) -> Pubkey:
    """Decode base58 text into a public key.

    Raises:
        InvalidIdentifier: if the text is not base58 or does not decode
            to exactly 32 bytes
    """
    if not isinstance(text, str) or not text:
        raise InvalidIdentifier(f"Invalid public key: {text!r}")

    try:
        raw = base58.b58decode(text)
    except ValueError as e:
        raise InvalidIdentifier(f"Invalid public key {text!r}: {e}") from e

    if len(raw) != PUBKEY_LENGTH:
        raise InvalidIdentifier(
            f"Invalid public key {text!r}: decodes to {len(raw)} bytes, "
            f"expected {PUBKEY_LENGTH}"
        )
    return Pubkey(raw)
