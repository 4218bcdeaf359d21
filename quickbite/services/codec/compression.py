"""Binary compression codec.

Raw gzip streams, no framing of our own. Tokens produced by browser
clients (CompressionStream("gzip")) use the same format.
"""
import gzip
import logging
import zlib

from quickbite.services.codec.exceptions import CorruptStreamError

logger = logging.getLogger(__name__)


def compress(data: bytes) -> bytes:
    """Compress bytes into a gzip stream."""
    return gzip.compress(data, mtime=0)


def decompress(data: bytes) -> bytes:
    """
    Decompress a gzip stream.

    Raises:
        CorruptStreamError: If the bytes are truncated, have the wrong
            magic number, or fail the stream checksum
    """
    if not data:
        raise CorruptStreamError("Empty compressed stream")
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as e:
        logger.debug(f"[CODEC] Decompression failed - {type(e).__name__}: {str(e)}")
        raise CorruptStreamError(f"Invalid compressed stream: {str(e)}") from e
