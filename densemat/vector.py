# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Vector operations on top of a single-column Matrix
"""

import math
import numbers
from typing import Iterator, Optional, Union

import numpy as np

from .matrix import Matrix
from .tolerance import Tolerance, resolve

TolLike = Optional[Union[float, Tolerance]]


class Vector:
    """
    Column vector of floats.

    A Vector owns a ``(length, 1)`` Matrix and delegates storage to it;
    `as_matrix` hands that matrix out for anything matrix-shaped
    (transpose, augment, rref, ...).
    """

    __slots__ = ("_matrix",)

    def __init__(self, *components: float):
        for c in components:
            if not isinstance(c, numbers.Real):
                raise TypeError(
                    f"components must be real numbers, got {type(c).__name__}; "
                    "use Vector.from_numpy for arrays"
                )
        self._matrix = Matrix(len(components), 1, components)

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> "Vector":
        """Wrap (without copying) a matrix that has exactly one column."""
        if matrix.columns != 1:
            raise ValueError(f"a vector needs exactly one column, got {matrix.columns}")
        v = cls.__new__(cls)
        v._matrix = matrix
        return v

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "Vector":
        array = np.asarray(array, dtype=float).ravel()
        return cls.from_matrix(Matrix.from_numpy(array[:, None]))

    @classmethod
    def zeros(cls, length: int) -> "Vector":
        return cls.from_matrix(Matrix.zeros(length, 1))

    @classmethod
    def filled(cls, length: int, value: float) -> "Vector":
        return cls.from_matrix(Matrix.filled(length, 1, value))

    @classmethod
    def basis(cls, length: int, coordinate: int) -> "Vector":
        """Standard basis vector e_coordinate in R^length."""
        if not 0 <= coordinate < length:
            raise ValueError(f"coordinate {coordinate} out of range for length {length}")
        e = cls.zeros(length)
        e.set(coordinate, 1.0)
        return e

    def as_matrix(self) -> Matrix:
        return self._matrix

    def copy(self) -> "Vector":
        return Vector.from_matrix(self._matrix.copy())

    @property
    def rows(self) -> int:
        return self._matrix.rows

    @property
    def columns(self) -> int:
        return 1

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.rows:
            raise ValueError(f"index {index} out of range for length {self.rows}")

    def get(self, index: int) -> float:
        self._check_index(index)
        return self._matrix.get(index, 0)

    def set(self, index: int, value: float) -> None:
        self._check_index(index)
        self._matrix.set(index, 0, value)

    def _check_same_length(self, other: "Vector") -> None:
        if not isinstance(other, Vector):
            raise TypeError(f"expected Vector, got {type(other).__name__}")
        if self.rows != other.rows:
            raise ValueError(f"length mismatch: {self.rows} vs {other.rows}")

    def add(self, other: "Vector") -> "Vector":
        self._check_same_length(other)
        return Vector.from_matrix(self._matrix.add(other._matrix))

    def scale(self, scalar: float) -> "Vector":
        return Vector.from_matrix(self._matrix.scale(scalar))

    def subtract(self, subtrahend: "Vector") -> "Vector":
        return self.add(subtrahend.scale(-1))

    def dot_product(self, other: "Vector") -> float:
        """
        Implements the scalar (dot) product between two vectors.
        """
        self._check_same_length(other)
        return float(self.to_numpy() @ other.to_numpy())

    def cross_product(self, other: "Vector") -> "Vector":
        """
        Classical cross product u x v in R^3.
        Defines a vector orthogonal to u and v with magnitude
        equal to the parallelogram area.
        """
        if not isinstance(other, Vector):
            raise TypeError(f"expected Vector, got {type(other).__name__}")
        if self.rows != 3 or other.rows != 3:
            raise ValueError(
                f"cross product is defined for length 3 only, got {self.rows} and {other.rows}"
            )
        product = Vector.zeros(3)
        for i in range(3):
            nxt, prev = (i + 1) % 3, (i + 2) % 3
            product.set(i, self.get(nxt) * other.get(prev) - self.get(prev) * other.get(nxt))
        return product

    def square_length(self) -> float:
        return self.dot_product(self)

    def length(self) -> float:
        return math.sqrt(self.square_length())

    def distance(self, other: "Vector") -> float:
        return other.subtract(self).length()

    def normalize(self, tol: TolLike = None) -> "Vector":
        length = self.length()
        if resolve(tol).is_zero(length):
            raise ValueError("cannot normalize a zero-length vector")
        return self.scale(1.0 / length)

    def direction(self, other: "Vector", tol: TolLike = None) -> "Vector":
        """Unit vector pointing from self towards `other`."""
        return other.subtract(self).normalize(tol)

    def project(self, onto: "Vector", tol: TolLike = None) -> "Vector":
        """Orthogonal projection of self onto the line spanned by `onto`."""
        onto_square = onto.square_length()
        if resolve(tol).is_zero(onto_square):
            raise ValueError("cannot project onto a zero-length vector")
        return onto.scale(self.dot_product(onto) / onto_square)

    def cosine_similarity(self, other: "Vector", tol: TolLike = None) -> float:
        u_len = self.length()
        v_len = other.length()
        t = resolve(tol)
        if t.is_zero(u_len) or t.is_zero(v_len):
            raise ValueError("Angle undefined for zero-length vector")
        cos_theta = self.dot_product(other) / (u_len * v_len)
        # clamp to [-1, 1] against rounding
        return max(-1.0, min(1.0, cos_theta))

    def angle(self, other: "Vector", tol: TolLike = None) -> float:
        """Angle between self and `other` in radians."""
        return math.acos(self.cosine_similarity(other, tol))

    def transpose(self) -> Matrix:
        return self._matrix.transpose()

    def to_numpy(self) -> np.ndarray:
        return self._matrix.to_numpy().ravel()

    def tolist(self):
        return self.to_numpy().tolist()

    def allclose(self, other: "Vector", tol: TolLike = None) -> bool:
        return isinstance(other, Vector) and self._matrix.allclose(other._matrix, tol)

    def __len__(self) -> int:
        return self.rows

    def __iter__(self) -> Iterator[float]:
        return iter(self.tolist())

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __setitem__(self, index: int, value: float) -> None:
        self.set(index, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._matrix == other._matrix

    __hash__ = None  # mutable

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Vector":
        return self.scale(-1)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return str(self._matrix)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(repr(c) for c in self)})"
