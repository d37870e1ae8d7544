"""Wire codecs for public keys and binary payloads."""

from jupswap.codecs.payload import Base64Bytes, decode_payload, encode_payload
from jupswap.codecs.pubkey import PUBKEY_LENGTH, Pubkey, decode_pubkey, encode_pubkey

__all__ = [
    "Base64Bytes",
    "PUBKEY_LENGTH",
    "Pubkey",
    "decode_payload",
    "decode_pubkey",
    "encode_payload",
    "encode_pubkey",
]
