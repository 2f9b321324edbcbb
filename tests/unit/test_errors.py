"""Tests for permission store exceptions."""

import pytest

from bitperms.errors import (
    InvalidBitMaskError,
    InvalidFlagError,
    InvalidFlagSpaceError,
    PermissionStoreError,
)


pytestmark = pytest.mark.unit


class TestPermissionStoreError:
    """Tests for the exception hierarchy."""

    def test_defaults(self):
        """Test class-level message and code are used when omitted."""
        error = InvalidFlagError()

        assert error.message == "Flag identifier must be an integer or numeric string"
        assert error.error_code == "invalid_flag"
        assert error.details == {}
        assert str(error) == error.message

    def test_overrides(self):
        """Test that message, code and details can be overridden."""
        error = PermissionStoreError("boom", error_code="custom", details={"a": 1})

        assert error.message == "boom"
        assert error.error_code == "custom"
        assert error.details == {"a": 1}

    def test_flag_goes_into_details(self):
        """Test that the offending flag is recorded."""
        assert InvalidFlagError(flag="x").details == {"flag": "'x'"}
        assert InvalidFlagSpaceError(flag_space=0).details == {"flag_space": "0"}

    @pytest.mark.parametrize(
        "error_class",
        [InvalidFlagError, InvalidFlagSpaceError, InvalidBitMaskError],
    )
    def test_subclasses(self, error_class: type[PermissionStoreError]):
        """Test that every error is both a store error and a ValueError."""
        error = error_class()

        assert isinstance(error, PermissionStoreError)
        assert isinstance(error, ValueError)
