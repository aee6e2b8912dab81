from __future__ import annotations

import asyncio
import logging
import zlib
from typing import Any

logger = logging.getLogger(__name__)

# gzipRatio thresholds in the scorer are calibrated against gzip at zlib's
# default level; changing either shifts every score.
GZIP_COMPRESSION_LEVEL = 6
GZIP_WBITS = 16 + zlib.MAX_WBITS
CHUNK_SIZE = 64 * 1024


class CompressionError(RuntimeError):
    """Raised when the byte compressor fails while measuring compressibility."""


def _compressor() -> Any:
    return zlib.compressobj(GZIP_COMPRESSION_LEVEL, zlib.DEFLATED, GZIP_WBITS)


def gzip_compress(data: bytes) -> bytes:
    """Stream data through a gzip compressor and return the full output."""
    try:
        compressor = _compressor()
        chunks: list[bytes] = []
        for start in range(0, len(data), CHUNK_SIZE):
            chunks.append(compressor.compress(data[start : start + CHUNK_SIZE]))
        chunks.append(compressor.flush())
    except zlib.error as exc:
        logger.error("gzip compression failed after %d input bytes", len(data))
        raise CompressionError(f"Compression failed: {exc}") from exc
    return b"".join(chunks)


def gzip_ratio(text: str) -> float:
    """Compressed byte length over raw UTF-8 byte length (raw floored at 1)."""
    raw = text.encode("utf-8")
    return len(gzip_compress(raw)) / max(1, len(raw))


def schedule_gzip_ratio(text: str) -> asyncio.Future[float]:
    """Start gzip_ratio on the running loop's default executor."""
    loop = asyncio.get_running_loop()
    return loop.run_in_executor(None, gzip_ratio, text)
