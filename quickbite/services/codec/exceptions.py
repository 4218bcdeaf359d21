"""Codec exceptions."""
from typing import Optional


class CodecError(Exception):
    """Base exception for token encoding and decoding errors."""

    def __init__(self, message: str, stage: Optional[str] = None) -> None:
        self.message = message
        self.stage = stage
        super().__init__(message)


class EncodeError(CodecError):
    """Value could not be serialized into a token."""


class DecodeFailure(CodecError):
    """Token could not be turned back into a menu or order.

    Raised for every decode stage (sanitized base64, decompression,
    JSON parsing, shape classification) so callers handle one type.
    """


class CorruptStreamError(DecodeFailure):
    """Bytes are not a valid compressed stream."""

    def __init__(self, message: str) -> None:
        super().__init__(message, stage="decompress")
