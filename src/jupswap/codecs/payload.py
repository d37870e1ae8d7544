"""Base64 codec for serialized transactions and instruction data."""

import base64
import binascii
from typing import Annotated, Any, Union

from pydantic import BeforeValidator, PlainSerializer

from jupswap.exceptions import MalformedPayload


def encode_payload(data: Union[bytes, bytearray]) -> str:
    """Encode bytes as padded standard base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def decode_payload(text: str) -> bytes:
    """Decode padded standard base64 text.

    Raises:
        MalformedPayload: on characters outside the base64 alphabet or
            incorrect padding
    """
    if not isinstance(text, str):
        raise MalformedPayload(f"Expected base64 text, got {type(text).__name__}")

    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise MalformedPayload(f"Malformed base64 payload: {e}") from e


def _coerce_payload(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return decode_payload(value)


# Bytes in Python, base64 text on the wire
Base64Bytes = Annotated[
    bytes,
    BeforeValidator(_coerce_payload),
    PlainSerializer(encode_payload, return_type=str, when_used="json"),
]
