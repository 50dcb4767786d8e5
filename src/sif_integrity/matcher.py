# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Re-verification of stored digests against current content."""

import hmac
import logging
from typing import BinaryIO, Optional

from .digest import Digest
from .hashing import compute

logger = logging.getLogger(__name__)


def matches(
    digest: Digest,
    stream: BinaryIO,
    chunk_size: Optional[int] = None,
) -> bool:
    """
    Check whether digest matches the contents of stream.

    A fresh digest is computed with ``digest.algorithm`` and compared over the
    full length in constant time. digest itself is never modified.

    Args:
        digest: Stored digest to check
        stream: Binary file-like object to read to exhaustion
        chunk_size: Bytes per read (default: ``settings.chunk_size``)

    Returns:
        True if the contents hash to exactly digest.value

    Raises:
        AlgorithmUnavailableError: If the crypto backend cannot compute the algorithm
        OSError: If reading the stream fails
    """
    current = compute(digest.algorithm, stream, chunk_size)

    # compare_digest returns False on length mismatch
    matched = hmac.compare_digest(digest.value, current.value)
    if not matched:
        logger.debug(f"Digest mismatch: stored {digest!r}, current {current!r}")
    return matched
