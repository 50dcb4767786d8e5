# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Pytest configuration and fixtures."""

import hashlib
import io

import pytest

from sif_integrity import Algorithm


# Reference output sizes in bytes
EXPECTED_LENGTHS = {
    Algorithm.SHA1: 20,
    Algorithm.SHA224: 28,
    Algorithm.SHA256: 32,
    Algorithm.SHA384: 48,
    Algorithm.SHA512: 64,
}


def reference_digest(algorithm: Algorithm, data: bytes) -> bytes:
    """Hash data with hashlib for cross-checking."""
    return hashlib.new(algorithm.canonical_name, data).digest()


class FailingStream(io.RawIOBase):
    """Stream that yields some data and then fails to read."""

    def __init__(self, data: bytes, error: OSError):
        self._data = data
        self._error = error
        self._served = False

    def readable(self) -> bool:
        return True

    def read(self, size=-1) -> bytes:
        if not self._served:
            self._served = True
            return self._data
        raise self._error


class ScriptedStream(io.RawIOBase):
    """Raw stream that returns a fixed sequence of read results.

    ``None`` entries behave like a non-blocking stream with no data ready.
    """

    def __init__(self, results):
        self._results = list(results)

    def readable(self) -> bool:
        return True

    def read(self, size=-1):
        if not self._results:
            return b""
        return self._results.pop(0)


class RecordingStream(io.BytesIO):
    """BytesIO that records the size of every read request."""

    def __init__(self, data: bytes):
        super().__init__(data)
        self.requested = []

    def read(self, size=-1) -> bytes:
        self.requested.append(size)
        return super().read(size)


@pytest.fixture(params=list(Algorithm), ids=lambda alg: alg.canonical_name)
def algorithm(request) -> Algorithm:
    """Every registry algorithm."""
    return request.param


@pytest.fixture
def payload() -> bytes:
    """Object content larger than a few read chunks."""
    return bytes(range(256)) * 40 + b"tail"
