# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Pydantic field type for digests.

Lets descriptor and signature metadata models declare digest fields that
validate from, and serialize to, the ``<algorithm>:<hex>`` form::

    class ObjectMetadata(BaseModel):
        relative_id: int
        object_digest: DigestField
"""

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from .codec import decode, encode
from .digest import Digest
from .errors import IntegrityError


def _validate_digest(value: Any) -> Digest:
    if isinstance(value, Digest):
        return value
    try:
        return decode(value)
    except IntegrityError as e:
        # pydantic only converts ValueError/AssertionError into ValidationError
        raise ValueError(str(e)) from e


DigestField = Annotated[
    Digest,
    PlainValidator(_validate_digest),
    PlainSerializer(encode, return_type=str),
]
