"""Exceptions raised for malformed permission input.

Well-formed flags never raise. These errors cover values that cannot be
turned into a bit position at all.
"""

from typing import Any


class PermissionStoreError(Exception):
    """Base exception for all permission store errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        details: Additional error details
    """

    message: str = "Permission store error"
    error_code: str = "permission_store_error"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidFlagError(PermissionStoreError, ValueError):
    """Raised when a flag identifier is neither an int nor a numeric string.

    Example:
        raise InvalidFlagError(flag="admin")
    """

    message = "Flag identifier must be an integer or numeric string"
    error_code = "invalid_flag"

    def __init__(
        self,
        message: str | None = None,
        flag: Any = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if flag is not None:
            details["flag"] = repr(flag)
        super().__init__(message=message, details=details, **kwargs)


class InvalidFlagSpaceError(PermissionStoreError, ValueError):
    """Raised when the flag space is not a positive integer."""

    message = "Flag space must be a positive integer"
    error_code = "invalid_flag_space"

    def __init__(
        self,
        message: str | None = None,
        flag_space: Any = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if flag_space is not None:
            details["flag_space"] = repr(flag_space)
        super().__init__(message=message, details=details, **kwargs)


class InvalidBitMaskError(PermissionStoreError, ValueError):
    """Raised when an initial bit mask has bits outside the addressable range."""

    message = "Bit mask must be a non-negative integer within the flag space"
    error_code = "invalid_bit_mask"
