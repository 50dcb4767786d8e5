# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Digest value type.

A Digest pairs a registry algorithm with the raw hash output. Both fields are
checked on construction, so any Digest instance in circulation is well formed.
"""

import binascii
import logging
from dataclasses import dataclass
from typing import Union

from .algorithms import Algorithm, output_length
from .errors import AlgorithmUnsupportedError, DigestMalformedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Digest:
    """
    Immutable (algorithm, value) pair.

    Equality is structural: same algorithm and byte-for-byte equal value.
    Digests are hashable but deliberately unordered.

    Attributes:
        algorithm: Registry member the value was produced with
        value: Raw hash output, exactly ``algorithm.output_length`` bytes

    Example:
        >>> d = Digest(Algorithm.SHA256, bytes(32))
        >>> d.name
        'sha256'
    """

    algorithm: Algorithm
    value: bytes

    def __post_init__(self) -> None:
        """Validate algorithm membership and value length."""
        if not isinstance(self.algorithm, Algorithm):
            raise AlgorithmUnsupportedError(repr(self.algorithm))

        if not isinstance(self.value, (bytes, bytearray, memoryview)):
            raise DigestMalformedError(
                f"value must be bytes, got {type(self.value).__name__}"
            )
        # Copy mutable buffers so the digest cannot change under us
        object.__setattr__(self, "value", bytes(self.value))

        expected = output_length(self.algorithm)
        if len(self.value) != expected:
            logger.warning(
                f"Rejected {self.algorithm.canonical_name} digest of "
                f"{len(self.value)} bytes (expected {expected})"
            )
            raise DigestMalformedError(
                f"{self.algorithm.canonical_name} digest must be {expected} bytes, "
                f"got {len(self.value)}"
            )

    @property
    def name(self) -> str:
        """Canonical algorithm name, for display."""
        return self.algorithm.canonical_name

    @property
    def hex(self) -> str:
        """Lowercase hex of the value, for display."""
        return self.value.hex()

    def __repr__(self) -> str:
        return f"Digest({self.name}:{self.hex})"


def decode_hex(text: Union[str, bytes]) -> bytes:
    """
    Strictly decode hex text.

    Unlike ``bytes.fromhex``, whitespace is rejected.

    Raises:
        DigestMalformedError: On odd length, non-hex characters or non-text input
    """
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError, TypeError) as e:
        raise DigestMalformedError(f"invalid hex: {e}") from e
