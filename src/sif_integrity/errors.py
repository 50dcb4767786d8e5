# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Exceptions raised by the integrity digest layer.

Stream read failures are not wrapped: they surface as the ``OSError`` raised
by the stream itself.
"""

from typing import Optional


class IntegrityError(Exception):
    """Base class for digest errors."""

    default_message = "integrity error"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        message = self.default_message
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class AlgorithmUnsupportedError(IntegrityError):
    """Algorithm is not one of the supported digest algorithms."""

    default_message = "hash algorithm unsupported"


class AlgorithmUnavailableError(IntegrityError):
    """Algorithm is supported but the crypto backend cannot compute it."""

    default_message = "hash algorithm unavailable"


class DigestMalformedError(IntegrityError, ValueError):
    """Digest value or its textual encoding is structurally invalid."""

    default_message = "digest malformed"
