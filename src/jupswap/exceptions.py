"""Error types raised by the swap API client."""

from typing import Union


class JupiterError(Exception):
    """Base class for all swap API client errors."""


class RequestFailed(JupiterError):
    """The service answered with a non-2xx status.

    The body is kept exactly as received; error bodies are not part of the
    success contract so they are never parsed.
    """

    def __init__(self, status: int, body: Union[bytes, str]):
        self.status = status
        self.body = body
        super().__init__(f"Request failed with status {status}: {self.body_text[:200]}")

    @property
    def body_text(self) -> str:
        """Body decoded as UTF-8 (lossy) for display."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8", errors="replace")
        return self.body


class DeserializationError(JupiterError):
    """A response body did not parse into the expected model."""


class InvalidIdentifier(JupiterError, ValueError):
    """Text is not a valid base58 encoding of a 32-byte public key."""


class MalformedPayload(JupiterError, ValueError):
    """Text is not valid padded base64."""


class UnrecognizedConfigShape(JupiterError, ValueError):
    """A polymorphic configuration value matched none of its legal shapes."""
