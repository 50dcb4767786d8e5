# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Digest extraction from legacy signature plaintext.

Older SIF signatures embed the signed digest as::

    SIFHASH:
    <hex digest>

Producers were not consistent about the envelope, so the prefix line and the
trailing newline are each removed when present and tolerated when missing.
"""

import logging
from typing import Union

from .digest import Digest, decode_hex
from .errors import DigestMalformedError
from .hash_type import HashType, resolve_hash_type

logger = logging.getLogger(__name__)

LEGACY_PREFIX = b"SIFHASH:\n"
LEGACY_SUFFIX = b"\n"


def extract_legacy(hash_type: HashType, blob: Union[bytes, str]) -> Digest:
    """
    Parse the plaintext of a legacy signature into a Digest.

    Args:
        hash_type: Hash-type tag from the signature descriptor
        blob: Signed plaintext (bytes, or ASCII text)

    Returns:
        Digest of the algorithm named by hash_type

    Raises:
        AlgorithmUnsupportedError: If hash_type has no registry algorithm
        DigestMalformedError: If the payload is not valid hex of the right length

    Example:
        >>> d = extract_legacy(HashType.SHA256, b"SIFHASH:\\n" + b"00" * 32 + b"\\n")
        >>> d.value == bytes(32)
        True
    """
    if isinstance(blob, str):
        try:
            blob = blob.encode("ascii")
        except UnicodeEncodeError as e:
            raise DigestMalformedError(f"legacy payload is not ASCII: {e}") from e

    if blob.startswith(LEGACY_PREFIX):
        blob = blob[len(LEGACY_PREFIX):]
    else:
        logger.debug("Legacy payload has no SIFHASH prefix")

    if blob.endswith(LEGACY_SUFFIX):
        blob = blob[:-len(LEGACY_SUFFIX)]

    algorithm = resolve_hash_type(hash_type)

    return Digest(algorithm, decode_hex(blob))
