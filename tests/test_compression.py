from __future__ import annotations

import asyncio
import zlib

import pytest

from stat_ai_detector.analyzer import compression
from stat_ai_detector.analyzer.compression import (
    CompressionError,
    gzip_compress,
    gzip_ratio,
    schedule_gzip_ratio,
)


class BrokenCompressor:
    def compress(self, data: bytes) -> bytes:
        raise zlib.error("stream error")

    def flush(self) -> bytes:
        raise zlib.error("stream error")


def test_gzip_compress_produces_valid_gzip():
    payload = ("repeat me " * 20_000).encode("utf-8")
    compressed = gzip_compress(payload)
    assert compressed[:2] == b"\x1f\x8b"
    assert zlib.decompress(compressed, 16 + zlib.MAX_WBITS) == payload


def test_gzip_ratio_tracks_redundancy():
    redundant = gzip_ratio("a" * 10_000)
    varied = gzip_ratio("The quick brown fox jumps over the lazy dog while 12 owls hoot.")
    assert redundant < 0.05
    assert varied > redundant


def test_gzip_ratio_of_empty_text_uses_denominator_floor():
    """Empty input still yields the gzip container overhead over a floor of 1."""
    assert gzip_ratio("") == 20.0


def test_compressor_failure_raises_compression_error(monkeypatch):
    monkeypatch.setattr(compression, "_compressor", lambda: BrokenCompressor())
    with pytest.raises(CompressionError) as excinfo:
        gzip_ratio("some text")
    assert isinstance(excinfo.value.__cause__, zlib.error)


def test_schedule_gzip_ratio_matches_sync_result():
    async def run() -> float:
        return await schedule_gzip_ratio("hello hello hello")

    assert asyncio.run(run()) == gzip_ratio("hello hello hello")
