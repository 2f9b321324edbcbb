"""Bit-flag permission store.

A ``PermissionStore`` keeps one integer bitmask for a single entity.
Flag identifiers are reduced modulo the store's flag space to pick a
bit, so a store with a flag space of 10 addresses bits 0 through 9:

    0000000010 (1)
    0100000000 (8)
    0000000001 (10)

Ten lands on bit 0 rather than a new eleventh bit. Identifiers that are
congruent modulo the flag space share a bit.
"""

import logging
import operator
import re
from collections.abc import Iterable
from typing import Any, Self

import structlog

from bitperms.config import get_settings
from bitperms.constants import HOST_INT_BITS, MAX_FLAG_SPACE
from bitperms.errors import (
    InvalidBitMaskError,
    InvalidFlagError,
    InvalidFlagSpaceError,
)


# Silent until the host attaches a handler to the "bitperms" logger
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    wrapper_class=structlog.stdlib.BoundLogger,
)

_DECIMAL_RE = re.compile(r"[+-]?\d+(?:\.\d*)?")

Flag = int | str


def _to_int(value: Any) -> int:
    """Convert an int-like value or numeric string to an int.

    Raises:
        TypeError: If the value does not implement ``__index__``
        ValueError: If a string is not a base-10 number
    """
    if isinstance(value, str):
        text = value.strip()
        if not _DECIMAL_RE.fullmatch(text):
            raise ValueError(f"not a numeric string: {value!r}")
        # Fractional digits are truncated toward zero
        return int(text.partition(".")[0], 10)
    return operator.index(value)


class PermissionStore:
    """Mutable set of permission flags backed by a single integer.

    Intended to be used directly or subclassed per entity type, e.g.
    ``class UserPermissions(PermissionStore)``. Mutators return the
    store so calls can be chained.

    Not thread-safe: every mutator is a read-modify-write of the mask.
    """

    def __init__(self, flag_space: Flag | None = None, bit_mask: int = 0) -> None:
        """Initialize the store.

        Args:
            flag_space: Number of addressable flag slots; defaults to the
                configured ``default_flag_space``. Values above the host's
                maximum integer are clamped to it.
            bit_mask: Previously serialized mask to start from

        Raises:
            InvalidFlagSpaceError: If the flag space is not a positive integer
            InvalidBitMaskError: If the mask has bits outside the flag space
        """
        if flag_space is None:
            flag_space = get_settings().default_flag_space

        try:
            space = _to_int(flag_space)
        except (TypeError, ValueError) as e:
            raise InvalidFlagSpaceError(flag_space=flag_space) from e

        if space < 1:
            raise InvalidFlagSpaceError(flag_space=flag_space)

        if space > MAX_FLAG_SPACE:
            logger.warning(
                "flag_space_clamped",
                requested=str(space),
                flag_space=MAX_FLAG_SPACE,
            )
            space = MAX_FLAG_SPACE

        self._flag_space = space
        self._bit_mask = self._validate_mask(bit_mask)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(flag_space={self._flag_space}, "
            f"bit_mask={self._bit_mask:#b})"
        )

    @property
    def flag_space(self) -> int:
        """Number of addressable flag slots."""
        return self._flag_space

    @property
    def bit_mask(self) -> int:
        """Current mask; serialize this to persist the store."""
        return self._bit_mask

    def _validate_mask(self, bit_mask: int) -> int:
        try:
            mask = operator.index(bit_mask)
        except TypeError as e:
            raise InvalidBitMaskError(details={"bit_mask": repr(bit_mask)}) from e

        width = min(self._flag_space, HOST_INT_BITS)
        if mask < 0 or mask >> width:
            raise InvalidBitMaskError(
                details={"bit_mask": mask, "flag_space": self._flag_space}
            )
        return mask

    def _flag_bit(self, flag: Flag) -> int:
        """Reduce a flag identifier to its bit.

        Python's modulus takes the sign of the divisor, so negative
        identifiers wrap to a non-negative index (-1 maps to the top slot).
        An index at or past the host integer width has no bit and yields 0.
        """
        try:
            value = _to_int(flag)
        except (TypeError, ValueError) as e:
            raise InvalidFlagError(flag=flag) from e

        index = value % self._flag_space
        if index >= HOST_INT_BITS:
            return 0
        return 1 << index

    def has_permission(self, *flags: Flag) -> int:
        """Check for one or more permissions.

        Example:
            store.has_permission(1, 2, 7)

        Args:
            *flags: Flag identifiers to check

        Returns:
            The mask bits shared with the requested flags; nonzero if at
            least one of them is set
        """
        check_mask = 0
        for flag in flags:
            check_mask |= self._flag_bit(flag)

        return self._bit_mask & check_mask

    def get_permissions(self) -> int:
        """Return the store's flag space.

        Note:
            Despite the name this returns the capacity, not the mask.
            Callers rely on it; use ``bit_mask`` to read the mask.
        """
        return self._flag_space

    def set_permission(self, flag: Flag) -> Self:
        """Turn on the bit for ``flag`` with a bitwise OR."""
        self._bit_mask |= self._flag_bit(flag)
        return self

    def set_permissions(self, flags: Iterable[Flag]) -> Self:
        """Turn on each flag in order."""
        for flag in flags:
            self.set_permission(flag)

        return self

    def unset_permission(self, flag: Flag) -> Self:
        """Turn off the bit for ``flag``.

        ANDing the mask with the complement of the flag's bit clears that
        bit and leaves the rest untouched:

            0100000000 (8)
            1011111111 (~8)
        """
        self._bit_mask &= ~self._flag_bit(flag)
        return self

    def unset_permissions(self, flags: Iterable[Flag]) -> Self:
        """Turn off each flag in order."""
        for flag in flags:
            self.unset_permission(flag)

        return self
