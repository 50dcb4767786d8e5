# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
SIF Integrity Digests

Typed, validated digests for verifying the integrity of objects stored in SIF
container images.

Modules:
    algorithms: Registry of supported hash algorithms
    digest: The Digest value type
    hashing: Streaming digest computation
    legacy: Digest extraction from legacy signature plaintext
    matcher: Re-verification of digests against content
    codec: ``<algorithm>:<hex>`` encoding and decoding

Example:
    >>> import io
    >>> from sif_integrity import Algorithm, compute, encode, decode, matches
    >>>
    >>> digest = compute(Algorithm.SHA256, io.BytesIO(b"hello"))
    >>> text = encode(digest)
    >>> matches(decode(text), io.BytesIO(b"hello"))
    True
"""

__version__ = "0.1.0"

from .errors import (
    IntegrityError,
    AlgorithmUnsupportedError,
    AlgorithmUnavailableError,
    DigestMalformedError,
)

from .algorithms import (
    Algorithm,
    canonical_name,
    output_length,
    lookup,
    is_available,
)

from .digest import Digest

from .hashing import (
    compute,
    compute_bytes,
    compute_file,
)

from .hash_type import (
    HashType,
    resolve_hash_type,
)

from .legacy import extract_legacy

from .matcher import matches

from .codec import (
    encode,
    decode,
    to_json,
    from_json,
)

from .schemas import DigestField

__all__ = [
    # Version
    "__version__",
    # Errors
    "IntegrityError",
    "AlgorithmUnsupportedError",
    "AlgorithmUnavailableError",
    "DigestMalformedError",
    # Registry
    "Algorithm",
    "canonical_name",
    "output_length",
    "lookup",
    "is_available",
    # Digest
    "Digest",
    "compute",
    "compute_bytes",
    "compute_file",
    # Legacy signatures
    "HashType",
    "resolve_hash_type",
    "extract_legacy",
    # Verification
    "matches",
    # Codec
    "encode",
    "decode",
    "to_json",
    "from_json",
    "DigestField",
]
