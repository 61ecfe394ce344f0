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
Equilibrium Analysis Types

Result types for the eigen-analysis of the equilibrium at the origin of
v' = Mv:
- Classification: qualitative type of the equilibrium
- Stability: stability label accompanying each classification
- EquilibriumAnalysis: the full classifier result

Mathematical Background
-----------------------
For M = [[a, b], [c, d]]:
    tr   = a + d
    det  = ad - bc
    disc = tr² - 4·det

    λ₁,₂ = (tr ± √disc) / 2

The signs of det, disc and tr decide the portrait:
    det < 0                     → saddle
    det > 0, disc > 0           → node
    det > 0, disc < 0, tr = 0   → center
    det > 0, disc < 0, tr ≠ 0   → spiral
    det > 0, disc = 0           → proper/improper node
    det = 0                     → non-isolated equilibria

Usage
-----
>>> from phaseflow.types.analysis import Classification, EquilibriumAnalysis
>>>
>>> result: EquilibriumAnalysis = classify_equilibrium(M)
>>> if result['classification'] is Classification.SADDLE:
...     print(result['eigenvectors'])
"""

from enum import Enum
from typing import Optional, Tuple

import numpy as np
from typing_extensions import TypedDict

from .core import ComplexNumber, ComplexVector


class Classification(str, Enum):
    """
    Qualitative type of the equilibrium at the origin.

    Values are the display tags, so members compare equal to plain strings:

    >>> Classification.SADDLE == "Saddle Point"
    True
    """

    SADDLE = "Saddle Point"
    NODE = "Node"
    CENTER = "Center"
    SPIRAL = "Spiral Point"
    DEGENERATE_NODE = "Proper/Improper Node"
    NON_ISOLATED = "Degenerate (Non-isolated)"

    def __str__(self) -> str:
        return self.value


class Stability(str, Enum):
    """Stability label reported next to the classification."""

    UNSTABLE = "Unstable"
    STABLE = "Stable"
    SOURCE = "Unstable (Source)"
    SINK = "Stable (Sink)"
    NEUTRALLY_STABLE = "Neutrally Stable"
    SPIRAL_SOURCE = "Unstable (Spiral Source)"
    SPIRAL_SINK = "Stable (Spiral Sink)"
    MARGINALLY_STABLE = "Marginally Stable"

    def __str__(self) -> str:
        return self.value


EigenvaluePair = Tuple[ComplexNumber, ComplexNumber]
"""(λ₁, λ₂); for real eigenvalues λ₁ uses +√disc, for complex ones Im(λ₁) > 0."""

EigenvectorPair = Tuple[ComplexVector, ComplexVector]
"""Unit eigenvectors matching EigenvaluePair, real case only."""


class EquilibriumAnalysis(TypedDict):
    """
    Equilibrium classification result.

    Recomputed on demand for each matrix; never cached inside the library.

    Fields
    ------
    trace : float
        a + d
    determinant : float
        ad - bc
    discriminant : float
        trace² - 4·determinant
    eigenvalues : EigenvaluePair
        Real pair when discriminant >= 0, complex-conjugate pair otherwise
    eigenvectors : Optional[EigenvectorPair]
        One real unit eigenvector per eigenvalue when discriminant >= 0,
        None when the eigenvalues are complex
    classification : Classification
        Qualitative type of the origin
    stability : Stability
        Stability label

    Examples
    --------
    >>> result = classify_equilibrium(Matrix2x2(1, 0, 0, -1))
    >>> result['classification']
    <Classification.SADDLE: 'Saddle Point'>
    >>> result['eigenvectors'][0].real_part()
    Point(x=1.0, y=0.0)
    """

    trace: float
    determinant: float
    discriminant: float
    eigenvalues: EigenvaluePair
    eigenvectors: Optional[EigenvectorPair]
    classification: Classification
    stability: Stability


class EquilibriumInvariants(TypedDict):
    """Scalar invariants of a 2×2 matrix."""

    trace: float
    determinant: float
    discriminant: float


class DirectionField(TypedDict):
    """
    Vector field sampled on a square grid.

    All arrays share the grid shape (n, n) with n = resolution + 1;
    x varies along axis 0 and y along axis 1.

    Fields
    ------
    x, y : np.ndarray
        Grid coordinates
    dx, dy : np.ndarray
        Unit direction of M·p, zero where the field vanishes
    angle : np.ndarray
        atan2 of the raw field
    magnitude : np.ndarray
        |M·p|
    """

    x: np.ndarray
    y: np.ndarray
    dx: np.ndarray
    dy: np.ndarray
    angle: np.ndarray
    magnitude: np.ndarray


__all__ = [
    "Classification",
    "Stability",
    "EigenvaluePair",
    "EigenvectorPair",
    "EquilibriumAnalysis",
    "EquilibriumInvariants",
    "DirectionField",
]
