# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Tests for the hash algorithm registry."""

import pytest

from sif_integrity import (
    Algorithm,
    AlgorithmUnsupportedError,
    canonical_name,
    is_available,
    lookup,
    output_length,
)
from conftest import EXPECTED_LENGTHS


class TestRegistry:
    """Registry membership and properties."""

    def test_exactly_five_members_in_order(self):
        """Test the closed set, oldest to strongest."""
        assert [alg.canonical_name for alg in Algorithm] == [
            "sha1", "sha224", "sha256", "sha384", "sha512",
        ]

    def test_output_lengths(self, algorithm):
        """Test output length of every member."""
        assert output_length(algorithm) == EXPECTED_LENGTHS[algorithm]
        assert algorithm.output_length == EXPECTED_LENGTHS[algorithm]

    def test_canonical_names_lowercase(self, algorithm):
        """Test canonical names are lowercase and stable."""
        name = canonical_name(algorithm)
        assert name == name.lower()
        assert name == algorithm.value

    def test_lookup_round_trip(self, algorithm):
        """Test lookup finds each member by canonical name."""
        assert lookup(algorithm.canonical_name) is algorithm

    def test_sha256_available(self):
        """Test a common algorithm is reported available."""
        assert is_available(Algorithm.SHA256)
        assert Algorithm.SHA256.available


class TestUnsupported:
    """Lookups outside the registry."""

    @pytest.mark.parametrize("name", ["md5", "SHA256", "Sha256", "sha3_256", "", "sha256 "])
    def test_lookup_unknown_name(self, name):
        """Test unknown and differently cased names are rejected."""
        with pytest.raises(AlgorithmUnsupportedError):
            lookup(name)

    def test_lookup_non_string(self):
        """Test lookup of a non-hashable value is rejected."""
        with pytest.raises(AlgorithmUnsupportedError):
            lookup(["sha256"])

    @pytest.mark.parametrize("value", ["sha256", 1, None])
    def test_canonical_name_non_member(self, value):
        """Test canonical_name requires a registry member."""
        with pytest.raises(AlgorithmUnsupportedError):
            canonical_name(value)

    @pytest.mark.parametrize("value", ["sha512", 3, None])
    def test_output_length_non_member(self, value):
        """Test output_length requires a registry member."""
        with pytest.raises(AlgorithmUnsupportedError):
            output_length(value)

    def test_is_available_non_member(self):
        """Test availability check requires a registry member."""
        with pytest.raises(AlgorithmUnsupportedError):
            is_available("sha1")
