# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Registry of the hash algorithms accepted for SIF integrity digests.

The set is closed: SHA-1 and the four SHA-2 variants, ordered from the oldest
(weakest) to the strongest. Each member is backed by the matching
``cryptography`` hash class, which supplies the output length and lets the
crypto backend report whether it can actually compute the hash.
"""

import enum
import logging
from typing import Type

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes

from .errors import AlgorithmUnsupportedError

logger = logging.getLogger(__name__)


class Algorithm(enum.Enum):
    """Supported digest algorithms. Values are the canonical names."""

    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def canonical_name(self) -> str:
        """Lowercase name used in the ``alg:hex`` encoding."""
        return self.value

    @property
    def output_length(self) -> int:
        """Digest size in bytes."""
        return _HASH_CLASSES[self].digest_size

    @property
    def available(self) -> bool:
        """Whether the crypto backend can compute this algorithm."""
        return is_available(self)

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        """Return a fresh ``cryptography`` hash algorithm instance."""
        return _HASH_CLASSES[self]()


_HASH_CLASSES: dict[Algorithm, Type[hashes.HashAlgorithm]] = {
    Algorithm.SHA1: hashes.SHA1,
    Algorithm.SHA224: hashes.SHA224,
    Algorithm.SHA256: hashes.SHA256,
    Algorithm.SHA384: hashes.SHA384,
    Algorithm.SHA512: hashes.SHA512,
}

_BY_NAME: dict[str, Algorithm] = {alg.canonical_name: alg for alg in Algorithm}


def _require(algorithm: object) -> Algorithm:
    if not isinstance(algorithm, Algorithm):
        logger.warning(f"Rejected unsupported hash algorithm: {algorithm!r}")
        raise AlgorithmUnsupportedError(repr(algorithm))
    return algorithm


def canonical_name(algorithm: Algorithm) -> str:
    """
    Get the canonical textual name of an algorithm.

    Raises:
        AlgorithmUnsupportedError: If algorithm is not a registry member
    """
    return _require(algorithm).canonical_name


def output_length(algorithm: Algorithm) -> int:
    """
    Get the digest size of an algorithm in bytes.

    Raises:
        AlgorithmUnsupportedError: If algorithm is not a registry member
    """
    return _require(algorithm).output_length


def lookup(name: str) -> Algorithm:
    """
    Find an algorithm by canonical name. Matching is case-sensitive.

    Example:
        >>> lookup("sha256")
        <Algorithm.SHA256: 'sha256'>

    Raises:
        AlgorithmUnsupportedError: If no algorithm has that name
    """
    try:
        return _BY_NAME[name]
    except (KeyError, TypeError):
        logger.warning(f"Rejected unknown algorithm name: {name!r}")
        raise AlgorithmUnsupportedError(repr(name)) from None


def is_available(algorithm: Algorithm) -> bool:
    """Check whether the default crypto backend supports algorithm."""
    return default_backend().hash_supported(_require(algorithm).hash_algorithm())
