# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Textual encoding of digests.

The persisted form is ``<algorithm>:<hex>``, e.g.::

    sha256:2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824

Signature metadata stores this form as a JSON string; ``to_json`` and
``from_json`` wrap the codec for that use.
"""

import json
import logging

from .algorithms import canonical_name, lookup
from .digest import Digest, decode_hex
from .errors import DigestMalformedError

logger = logging.getLogger(__name__)

SEPARATOR = ":"


def encode(digest: Digest) -> str:
    """
    Encode digest as ``<algorithm>:<lowercase hex>``.

    Raises:
        AlgorithmUnsupportedError: If the digest algorithm is not a registry member
    """
    return f"{canonical_name(digest.algorithm)}{SEPARATOR}{digest.value.hex()}"


def decode(text: str) -> Digest:
    """
    Parse ``<algorithm>:<hex>`` into a Digest.

    The algorithm name is matched case-sensitively. The hex part is decoded
    before the name is looked up, so text that is wrong in both places is
    reported as malformed.

    Raises:
        DigestMalformedError: If the text is not exactly two colon-separated
            parts, the hex is invalid, or the value has the wrong length
        AlgorithmUnsupportedError: If the algorithm name is unknown

    Example:
        >>> decode("sha1:" + "00" * 20).name
        'sha1'
    """
    if not isinstance(text, str):
        raise DigestMalformedError(f"expected str, got {type(text).__name__}")

    parts = text.split(SEPARATOR)
    if len(parts) != 2:
        logger.warning(f"Rejected digest with {len(parts)} parts: {text!r}")
        raise DigestMalformedError(f"expected '<algorithm>:<hex>', got {text!r}")
    name, value = parts

    raw = decode_hex(value)
    return Digest(lookup(name), raw)


def to_json(digest: Digest) -> str:
    """Encode digest as a JSON string document."""
    return json.dumps(encode(digest))


def from_json(data) -> Digest:
    """
    Parse a JSON string document produced by ``to_json``.

    Raises:
        DigestMalformedError: If data is not valid JSON or not a JSON string
        AlgorithmUnsupportedError: If the algorithm name is unknown
    """
    try:
        text = json.loads(data)
    except (json.JSONDecodeError, TypeError, UnicodeDecodeError) as e:
        raise DigestMalformedError(f"invalid JSON: {e}") from e

    if not isinstance(text, str):
        raise DigestMalformedError(f"expected JSON string, got {type(text).__name__}")
    return decode(text)
