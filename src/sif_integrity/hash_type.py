# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Hash-type tags carried by SIF signature descriptors.

Descriptors record the hash function of a signature as a small integer. Only
the SHA-2 tags have a registry counterpart; BLAKE2 tags exist in the format but
are not accepted for integrity digests.
"""

import enum
import logging

from .algorithms import Algorithm
from .errors import AlgorithmUnsupportedError

logger = logging.getLogger(__name__)


class HashType(enum.IntEnum):
    """Descriptor hash-type values."""

    SHA256 = 1
    SHA384 = 2
    SHA512 = 3
    BLAKE2S = 4
    BLAKE2B = 5


_ALGORITHMS = {
    HashType.SHA256: Algorithm.SHA256,
    HashType.SHA384: Algorithm.SHA384,
    HashType.SHA512: Algorithm.SHA512,
}


def resolve_hash_type(hash_type: int) -> Algorithm:
    """
    Convert a descriptor hash-type tag to a registry algorithm.

    Plain integers are accepted and interpreted as ``HashType`` values.

    Raises:
        AlgorithmUnsupportedError: If the tag has no registry algorithm
    """
    try:
        return _ALGORITHMS[HashType(hash_type)]
    except (KeyError, ValueError, TypeError):
        logger.warning(f"Rejected unsupported hash type: {hash_type!r}")
        raise AlgorithmUnsupportedError(f"hash type {hash_type!r}") from None
