# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Tests for digest re-verification."""

import errno
import io

import pytest

from sif_integrity import (
    Algorithm,
    AlgorithmUnavailableError,
    Digest,
    compute,
    matches,
)
from sif_integrity import hashing
from conftest import FailingStream


class TestMatches:
    """Recompute-and-compare."""

    def test_matches_own_content(self, algorithm, payload):
        """Test a digest matches the stream it was computed from."""
        digest = compute(algorithm, io.BytesIO(payload))
        assert matches(digest, io.BytesIO(payload)) is True

    def test_empty_content(self, algorithm):
        """Test matching over empty streams."""
        digest = compute(algorithm, io.BytesIO(b""))
        assert matches(digest, io.BytesIO(b""))
        assert not matches(digest, io.BytesIO(b"\x00"))

    @pytest.mark.parametrize("position", [0, 1, 255, -1])
    def test_single_byte_mutation(self, algorithm, payload, position):
        """Test flipping one byte anywhere breaks the match."""
        digest = compute(algorithm, io.BytesIO(payload))

        mutated = bytearray(payload)
        mutated[position] ^= 0x01

        assert matches(digest, io.BytesIO(bytes(mutated))) is False

    def test_truncated_content(self, payload):
        """Test a truncated stream does not match."""
        digest = compute(Algorithm.SHA256, io.BytesIO(payload))
        assert not matches(digest, io.BytesIO(payload[:-1]))

    def test_extended_content(self, payload):
        """Test appended data does not match."""
        digest = compute(Algorithm.SHA256, io.BytesIO(payload))
        assert not matches(digest, io.BytesIO(payload + b"\x00"))

    def test_chunk_size(self, payload):
        """Test the read size does not affect the verdict."""
        digest = compute(Algorithm.SHA512, io.BytesIO(payload), chunk_size=4096)
        assert matches(digest, io.BytesIO(payload), chunk_size=3)

    def test_digest_unchanged(self, payload):
        """Test matching never modifies the stored digest."""
        digest = compute(Algorithm.SHA256, io.BytesIO(payload))
        before = Digest(digest.algorithm, digest.value)

        matches(digest, io.BytesIO(b"other content"))

        assert digest == before

    def test_uses_digest_algorithm(self):
        """Test the stored algorithm is used for recomputation."""
        sha1 = compute(Algorithm.SHA1, io.BytesIO(b"hello"))
        assert matches(sha1, io.BytesIO(b"hello"))


class TestMatchErrors:
    """Failures surface instead of reading as a mismatch."""

    def test_read_error_propagates(self, payload):
        """Test stream errors propagate unchanged."""
        digest = compute(Algorithm.SHA256, io.BytesIO(payload))
        error = OSError(errno.EIO, "read failed")

        with pytest.raises(OSError) as exc_info:
            matches(digest, FailingStream(payload[:10], error))

        assert exc_info.value is error

    def test_unavailable_algorithm(self, monkeypatch):
        """Test an unavailable algorithm is an error, not a mismatch."""
        digest = Digest(Algorithm.SHA1, bytes(20))
        monkeypatch.setattr(hashing, "is_available", lambda alg: False)

        with pytest.raises(AlgorithmUnavailableError):
            matches(digest, io.BytesIO(b""))
