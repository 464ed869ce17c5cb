# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Tolerance-aware floating point comparisons.

Every elimination routine decides "is this entry zero?" through a
`Tolerance`.  Callers may pass one explicitly (``tol=``); otherwise the
process-wide default is used.  The default is plain mutable state, so set
it once at start-up or use the `tolerance` context manager from a single
thread.
"""

import contextlib
from typing import Iterator, Optional, Union

DEFAULT_TOLERANCE: float = 1e-4


class Tolerance:
    """Absolute-difference comparator with a fixed epsilon."""

    __slots__ = ("epsilon",)

    def __init__(self, epsilon: float = DEFAULT_TOLERANCE):
        self.epsilon = float(epsilon)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.epsilon!r})"

    def is_zero(self, x: float) -> bool:
        return abs(x) < self.epsilon

    def are_equal(self, *values: float) -> bool:
        """True if every value is within epsilon of the first one."""
        if len(values) < 2:
            return True
        first = values[0]
        return all(self.is_zero(v - first) for v in values[1:])


_default = Tolerance()


def get_tolerance() -> Tolerance:
    return _default


def set_tolerance(epsilon: float) -> None:
    """Replace the epsilon used by every comparison that is not given `tol`."""
    _default.epsilon = float(epsilon)


@contextlib.contextmanager
def tolerance(epsilon: float) -> Iterator[Tolerance]:
    """
    Temporarily swap the default epsilon.

    >>> with tolerance(1e-9):
    ...     is_zero(1e-6)
    False
    """
    previous = _default.epsilon
    set_tolerance(epsilon)
    try:
        yield _default
    finally:
        _default.epsilon = previous


def resolve(tol: Optional[Union[float, Tolerance]]) -> Tolerance:
    """Turn a ``tol=`` argument (None, number or Tolerance) into a Tolerance."""
    if tol is None:
        return _default
    if isinstance(tol, Tolerance):
        return tol
    return Tolerance(tol)


def is_zero(x: float) -> bool:
    return _default.is_zero(x)


def are_equal(*values: float) -> bool:
    return _default.are_equal(*values)
