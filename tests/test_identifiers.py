# SPDX-License-Identifier: MIT
"""Unit tests for identifier validation."""

import pytest

from semverkit import (
    IdentifierKind,
    VALID_IDENTIFIER_CHARS,
    is_numeric_identifier,
    is_valid_identifier,
    validate_identifiers,
)

PRE = IdentifierKind.PRE_RELEASE
BUILD = IdentifierKind.BUILD_METADATA


class TestIsNumericIdentifier:
    """Tests for is_numeric_identifier."""

    @pytest.mark.parametrize("token", ["0", "7", "01", "123456789012345678901234567890"])
    def test_numeric(self, token):
        assert is_numeric_identifier(token) is True

    @pytest.mark.parametrize("token", ["", "a", "1a", "-1", "1-", "١"])
    def test_not_numeric(self, token):
        assert is_numeric_identifier(token) is False


class TestIsValidIdentifier:
    """Tests for is_valid_identifier."""

    def test_character_set(self):
        assert len(VALID_IDENTIFIER_CHARS) == 63
        assert "-" in VALID_IDENTIFIER_CHARS
        assert "_" not in VALID_IDENTIFIER_CHARS

    @pytest.mark.parametrize("token", ["alpha", "0", "1", "10", "0a", "x86-64", "-", "--"])
    def test_valid_prerelease(self, token):
        assert is_valid_identifier(token, PRE) is True

    @pytest.mark.parametrize("token", ["", "01", "00", "000", "a.b", "a+b", "é", " a", "a_b"])
    def test_invalid_prerelease(self, token):
        assert is_valid_identifier(token, PRE) is False

    @pytest.mark.parametrize("token", ["00", "01", "0001"])
    def test_build_metadata_allows_leading_zeros(self, token):
        assert is_valid_identifier(token, BUILD) is True

    @pytest.mark.parametrize("token", ["", "a+b", "a.b", "#"])
    def test_invalid_build_metadata(self, token):
        assert is_valid_identifier(token, BUILD) is False

    def test_non_string(self):
        assert is_valid_identifier(1, PRE) is False  # type: ignore
        assert is_valid_identifier(None, BUILD) is False  # type: ignore


class TestValidateIdentifiers:
    """Tests for validate_identifiers."""

    def test_none_is_valid(self):
        assert validate_identifiers(None, PRE) is True
        assert validate_identifiers(None, BUILD) is True

    def test_empty_is_valid(self):
        assert validate_identifiers([], PRE) is True
        assert validate_identifiers((), BUILD) is True

    def test_all_valid(self):
        assert validate_identifiers(["alpha", "1"], PRE) is True

    def test_single_bad_token(self):
        assert validate_identifiers(["alpha", "01"], PRE) is False
        assert validate_identifiers(["alpha", ""], BUILD) is False

    def test_same_tokens_differ_by_kind(self):
        assert validate_identifiers(["sha", "007"], PRE) is False
        assert validate_identifiers(["sha", "007"], BUILD) is True

    def test_bare_string_rejected(self):
        assert validate_identifiers("alpha", PRE) is False  # type: ignore

    def test_non_iterable_rejected(self):
        assert validate_identifiers(5, PRE) is False  # type: ignore
