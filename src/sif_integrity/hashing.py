# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Digest computation over byte streams.

Input is consumed in fixed-size chunks, so memory use does not grow with the
length of the stream. Read errors from the stream are propagated unchanged.
"""

import errno
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes

from .algorithms import Algorithm, is_available
from .config import settings
from .digest import Digest
from .errors import AlgorithmUnavailableError

logger = logging.getLogger(__name__)


def _new_hash(algorithm: Algorithm) -> hashes.Hash:
    if not is_available(algorithm):
        raise AlgorithmUnavailableError(algorithm.canonical_name)
    try:
        return hashes.Hash(algorithm.hash_algorithm(), backend=default_backend())
    except UnsupportedAlgorithm as e:
        raise AlgorithmUnavailableError(f"{algorithm.canonical_name}: {e}") from e


def compute(
    algorithm: Algorithm,
    stream: BinaryIO,
    chunk_size: Optional[int] = None,
) -> Digest:
    """
    Compute a digest by reading stream to exhaustion.

    Args:
        algorithm: Registry algorithm to hash with
        stream: Binary file-like object with a ``read(size)`` method
        chunk_size: Bytes per read (default: ``settings.chunk_size``)

    Returns:
        Digest of everything read from stream

    Raises:
        AlgorithmUnsupportedError: If algorithm is not a registry member
        AlgorithmUnavailableError: If the crypto backend cannot compute it
        OSError: If reading the stream fails
        BlockingIOError: If a non-blocking stream has no data ready

    Example:
        >>> import io
        >>> compute(Algorithm.SHA256, io.BytesIO(b"hello")).hex[:16]
        '2cf24dba5fb0a30e'
    """
    if chunk_size is None:
        chunk_size = settings.chunk_size
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    h = _new_hash(algorithm)
    total = 0
    while True:
        chunk = stream.read(chunk_size)
        if chunk is None:
            # Non-blocking stream with no data ready; not end of stream
            raise BlockingIOError(
                errno.EAGAIN,
                f"stream returned no data after {total} bytes",
            )
        if len(chunk) == 0:
            break
        h.update(chunk)
        total += len(chunk)

    logger.debug(f"Computed {algorithm.canonical_name} over {total} bytes")
    return Digest(algorithm, h.finalize())


def compute_bytes(algorithm: Algorithm, data: bytes) -> Digest:
    """
    Compute a digest of an in-memory buffer.

    Example:
        >>> compute_bytes(Algorithm.SHA1, b"").hex
        'da39a3ee5e6b4b0d3255bfef95601890afd80709'
    """
    h = _new_hash(algorithm)
    h.update(data)
    return Digest(algorithm, h.finalize())


def compute_file(
    algorithm: Algorithm,
    path: Union[str, Path],
    chunk_size: Optional[int] = None,
) -> Digest:
    """
    Compute a digest of a file's contents.

    Args:
        algorithm: Registry algorithm to hash with
        path: Path to the file
        chunk_size: Bytes per read (default: ``settings.chunk_size``)

    Raises:
        OSError: If the file cannot be opened or read
    """
    with open(path, "rb") as f:
        return compute(algorithm, f, chunk_size)
