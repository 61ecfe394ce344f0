# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Core Types - Planar Value Types

Defines the value types shared by every PhaseFlow module:
- Matrix2x2: coefficients of the linear system v' = Mv
- Point: a plane position or velocity
- ComplexNumber / ComplexVector: eigenvalues and eigenvectors
- Array aliases and numerical constants

All value types are frozen dataclasses. A new Matrix2x2 is created whenever
a coefficient changes; nothing mutates a matrix in place. Frozen instances
are hashable, so callers may memoize integrator or classifier output keyed
on them.

Usage
-----
>>> from phaseflow.types.core import Matrix2x2, Point
>>>
>>> M = Matrix2x2(a=0.0, b=-2.0, c=2.0, d=0.0)
>>> M.trace, M.determinant
(0.0, 4.0)
>>> Point(1.0, 0.5).to_array()
array([1. , 0.5])
"""

import math
import warnings
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

# ============================================================================
# Array Aliases
# ============================================================================

ArrayLike = Union[np.ndarray, Sequence[float], Sequence[Sequence[float]]]
"""Anything np.asarray accepts as a vector or a matrix."""

StateVector = np.ndarray
"""Planar state, shape (2,) or batched (N, 2)."""

StateMatrix = np.ndarray
"""System matrix as a NumPy array, shape (2, 2)."""

ScalarLike = Union[float, int, np.number]

# ============================================================================
# Numerical Constants
# ============================================================================

DEFAULT_DTYPE = np.float64

EIGEN_TOLERANCE = 1e-9
"""Tolerance for the trace test of a center and eigenvector row degeneracy."""

DIVERGENCE_BOUND = 20.0
"""Integration stops once either coordinate exceeds this in absolute value."""

DEFAULT_STEPS = 200
DEFAULT_STEP_SIZE = 0.05


# ============================================================================
# Value Types
# ============================================================================


@dataclass(frozen=True)
class Point:
    """
    Point (or vector) in the plane.

    Used interchangeably as a position along a trajectory and as a
    velocity returned by the vector field.

    Examples
    --------
    >>> p = Point(3.0, 4.0)
    >>> p.norm()
    5.0
    >>> Point.from_array(np.array([1.0, 2.0]))
    Point(x=1.0, y=2.0)
    """

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_array(cls, arr: ArrayLike) -> "Point":
        """Build a point from a length-2 array-like."""
        arr = np.asarray(arr, dtype=DEFAULT_DTYPE)
        if arr.shape != (2,):
            raise ValueError(f"Point requires shape (2,), got {arr.shape}")
        return cls(float(arr[0]), float(arr[1]))

    def to_array(self) -> StateVector:
        return np.array([self.x, self.y], dtype=DEFAULT_DTYPE)

    def norm(self) -> float:
        return math.hypot(self.x, self.y)


Vector = Point


@dataclass(frozen=True)
class ComplexNumber:
    """
    One scalar of the complex plane, stored as its real and imaginary parts.

    Examples
    --------
    >>> ComplexNumber(-1.0, 2.0).to_complex()
    (-1+2j)
    """

    re: float
    im: float = 0.0

    @classmethod
    def from_complex(cls, z: complex) -> "ComplexNumber":
        return cls(float(z.real), float(z.imag))

    def to_complex(self) -> complex:
        return complex(self.re, self.im)

    @property
    def is_real(self) -> bool:
        return self.im == 0.0


@dataclass(frozen=True)
class ComplexVector:
    """2-vector over the complex field."""

    x: ComplexNumber
    y: ComplexNumber

    @classmethod
    def from_real(cls, x: float, y: float) -> "ComplexVector":
        """Embed a real vector (zero imaginary parts)."""
        return cls(ComplexNumber(float(x), 0.0), ComplexNumber(float(y), 0.0))

    def to_array(self) -> np.ndarray:
        return np.array([self.x.to_complex(), self.y.to_complex()], dtype=np.complex128)

    def real_part(self) -> Point:
        return Point(self.x.re, self.y.re)


@dataclass(frozen=True)
class Matrix2x2:
    """
    Real 2×2 system matrix::

        [a b]
        [c d]

    Examples
    --------
    >>> M = Matrix2x2(1.0, 0.0, 0.0, -1.0)
    >>> M.determinant
    -1.0
    >>> Matrix2x2.from_array([[-1, -2], [2, -1]]).discriminant
    -16.0
    """

    a: float
    b: float
    c: float
    d: float

    def __post_init__(self):
        for name in ("a", "b", "c", "d"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def from_array(cls, arr: ArrayLike) -> "Matrix2x2":
        """
        Build a matrix from a (2, 2) array-like.

        Raises
        ------
        ValueError
            If the input does not have shape (2, 2)

        Warns
        -----
        RuntimeWarning
            If any entry is NaN or infinite; results derived from such a
            matrix propagate the non-finite values.
        """
        arr = np.asarray(arr, dtype=DEFAULT_DTYPE)
        if arr.shape != (2, 2):
            raise ValueError(f"Matrix2x2 requires shape (2, 2), got {arr.shape}")

        if not np.all(np.isfinite(arr)):
            warnings.warn(
                f"Matrix has non-finite entries {arr.tolist()}; "
                f"analysis and trajectories will not be finite",
                RuntimeWarning,
            )

        return cls(float(arr[0, 0]), float(arr[0, 1]), float(arr[1, 0]), float(arr[1, 1]))

    def to_array(self) -> StateMatrix:
        return np.array([[self.a, self.b], [self.c, self.d]], dtype=DEFAULT_DTYPE)

    @property
    def trace(self) -> float:
        return self.a + self.d

    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    @property
    def discriminant(self) -> float:
        """tr² - 4·det; its sign decides real vs complex eigenvalues."""
        tr = self.trace
        return tr * tr - 4 * self.determinant

    def apply(self, p: Point) -> Point:
        """Matrix-vector product M·p."""
        return Point(self.a * p.x + self.b * p.y, self.c * p.x + self.d * p.y)


__all__ = [
    "ArrayLike",
    "StateVector",
    "StateMatrix",
    "ScalarLike",
    "DEFAULT_DTYPE",
    "EIGEN_TOLERANCE",
    "DIVERGENCE_BOUND",
    "DEFAULT_STEPS",
    "DEFAULT_STEP_SIZE",
    "Point",
    "Vector",
    "ComplexNumber",
    "ComplexVector",
    "Matrix2x2",
]
