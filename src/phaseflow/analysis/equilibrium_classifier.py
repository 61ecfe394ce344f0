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
Equilibrium Classifier

Pure stateless functions classifying the equilibrium at the origin of
v' = Mv from the invariants and the spectrum of M.

Mathematical Background
-----------------------
    tr   = a + d
    det  = ad - bc
    disc = tr² - 4·det

Eigenvalues:
    disc >= 0:  λ₁,₂ = (tr ± √disc) / 2                 (real)
    disc <  0:  λ₁,₂ = tr/2 ± i·√(-disc)/2               (complex pair)

Eigenvectors (real case only) solve (M - λI)v = 0 by picking the first
row of M - λI that is not numerically zero.

Tolerances
----------
The determinant and discriminant branch boundaries use exact comparisons
against zero. EIGEN_TOLERANCE (1e-9) applies only to the trace test that
separates a center from a spiral and to the row-degeneracy tests of the
eigenvector solver. Matrices whose discriminant is zero only up to
rounding therefore classify as nodes or spirals, not as degenerate nodes.

Usage
-----
>>> from phaseflow.analysis.equilibrium_classifier import classify_equilibrium
>>>
>>> result = classify_equilibrium(Matrix2x2(-1, -2, 2, -1))
>>> result['classification'], result['stability']
(<Classification.SPIRAL: 'Spiral Point'>, <Stability.SPIRAL_SINK: 'Stable (Spiral Sink)'>)
>>> result['eigenvectors'] is None
True
"""

import math
from typing import Tuple, Union

from phaseflow.types.analysis import (
    Classification,
    EigenvaluePair,
    EquilibriumAnalysis,
    EquilibriumInvariants,
    Stability,
)
from phaseflow.types.core import (
    EIGEN_TOLERANCE,
    ArrayLike,
    ComplexNumber,
    ComplexVector,
    Matrix2x2,
)


def _as_matrix(matrix: Union[Matrix2x2, ArrayLike]) -> Matrix2x2:
    if isinstance(matrix, Matrix2x2):
        return matrix
    return Matrix2x2.from_array(matrix)


# ============================================================================
# Invariants and Spectrum
# ============================================================================


def compute_invariants(matrix: Union[Matrix2x2, ArrayLike]) -> EquilibriumInvariants:
    """
    Trace, determinant and discriminant of a 2×2 matrix.

    The discriminant is computed from the returned trace and determinant,
    so discriminant == trace*trace - 4*determinant holds exactly.
    """
    M = _as_matrix(matrix)
    tr = M.a + M.d
    det = M.a * M.d - M.b * M.c
    disc = tr * tr - 4 * det

    return {"trace": tr, "determinant": det, "discriminant": disc}


def compute_eigenvalues(trace: float, discriminant: float) -> EigenvaluePair:
    """
    Eigenvalues from the trace and the discriminant.

    Parameters
    ----------
    trace : float
        Trace of M
    discriminant : float
        trace² - 4·det

    Returns
    -------
    EigenvaluePair
        Real case: ((tr + √disc)/2, (tr - √disc)/2), the + root first
        whatever its magnitude. Complex case: the positive-imaginary
        member first.

    Examples
    --------
    >>> compute_eigenvalues(-3.0, 1.0)
    (ComplexNumber(re=-1.0, im=0.0), ComplexNumber(re=-2.0, im=0.0))
    >>> compute_eigenvalues(0.0, -16.0)
    (ComplexNumber(re=0.0, im=2.0), ComplexNumber(re=0.0, im=-2.0))
    """
    if discriminant >= 0:
        root = math.sqrt(discriminant)
        return (
            ComplexNumber((trace + root) / 2, 0.0),
            ComplexNumber((trace - root) / 2, 0.0),
        )

    re = trace / 2
    im = math.sqrt(-discriminant) / 2
    return (ComplexNumber(re, im), ComplexNumber(re, -im))


def compute_eigenvector(
    matrix: Union[Matrix2x2, ArrayLike],
    eigenvalue: float,
    tol: float = EIGEN_TOLERANCE,
) -> ComplexVector:
    """
    Real unit eigenvector for a real eigenvalue.

    Solves (M - λI)v = 0 using the first usable row:

    1. Row (a-λ, b) with |b| > tol: v ∝ (-b, a-λ), normalized
    2. Row with |b| <= tol < |a-λ|: v = (0, 1)
    3. Row (c, d-λ) with |c| > tol: v ∝ (-(d-λ)/c, 1), normalized
    4. M - λI vanishes: v = (1, 0)

    Parameters
    ----------
    matrix : Matrix2x2 or array-like (2, 2)
        System matrix
    eigenvalue : float
        Real eigenvalue of matrix
    tol : float
        Row degeneracy tolerance

    Returns
    -------
    ComplexVector
        Unit vector with zero imaginary parts

    Examples
    --------
    >>> compute_eigenvector(Matrix2x2(1, 0, 0, -1), -1.0).real_part()
    Point(x=0.0, y=1.0)
    >>> compute_eigenvector(Matrix2x2(0, 0, 0, 0), 0.0).real_part()
    Point(x=1.0, y=0.0)
    """
    M = _as_matrix(matrix)
    row_a = M.a - eigenvalue
    row_b = M.b

    if abs(row_b) > tol:
        mag = math.hypot(row_b, row_a)
        return ComplexVector.from_real(-row_b / mag, row_a / mag)

    if abs(row_a) > tol:
        return ComplexVector.from_real(0.0, 1.0)

    # First row vanishes; fall back to the second
    row_c = M.c
    row_d = M.d - eigenvalue
    if abs(row_c) > tol:
        x = -row_d / row_c
        mag = math.hypot(x, 1.0)
        return ComplexVector.from_real(x / mag, 1.0 / mag)

    # M - λI is zero: every vector is an eigenvector
    return ComplexVector.from_real(1.0, 0.0)


# ============================================================================
# Classification
# ============================================================================


def classify_type(
    trace: float,
    determinant: float,
    discriminant: float,
    tol: float = EIGEN_TOLERANCE,
) -> Tuple[Classification, Stability]:
    """
    Ordered decision tree over the invariants; first match wins.

    ======================  ==========================  ==========================
    Condition               Classification              Stability
    ======================  ==========================  ==========================
    det < 0                 Saddle Point                Unstable
    det > 0, disc > 0       Node                        Source if tr > 0 else Sink
    det > 0, disc < 0,      Center                      Neutrally Stable
    |tr| < tol
    det > 0, disc < 0       Spiral Point                Spiral Source / Spiral Sink
    det > 0, disc == 0      Proper/Improper Node        Unstable / Stable
    det == 0                Degenerate (Non-isolated)   Marginally Stable
    ======================  ==========================  ==========================

    Non-finite invariants fall through to the last row.
    """
    if determinant < 0:
        return Classification.SADDLE, Stability.UNSTABLE

    if determinant > 0:
        if discriminant > 0:
            stability = Stability.SOURCE if trace > 0 else Stability.SINK
            return Classification.NODE, stability
        if discriminant < 0:
            if abs(trace) < tol:
                return Classification.CENTER, Stability.NEUTRALLY_STABLE
            stability = Stability.SPIRAL_SOURCE if trace > 0 else Stability.SPIRAL_SINK
            return Classification.SPIRAL, stability
        stability = Stability.UNSTABLE if trace > 0 else Stability.STABLE
        return Classification.DEGENERATE_NODE, stability

    return Classification.NON_ISOLATED, Stability.MARGINALLY_STABLE


def classify_equilibrium(matrix: Union[Matrix2x2, ArrayLike]) -> EquilibriumAnalysis:
    """
    Classify the equilibrium at the origin of v' = Mv.

    Total over finite real matrices; never raises for a valid Matrix2x2.

    Parameters
    ----------
    matrix : Matrix2x2 or array-like (2, 2)
        System matrix

    Returns
    -------
    EquilibriumAnalysis
        Invariants, eigenvalues, eigenvectors (None when the eigenvalues
        are complex), classification and stability

    Examples
    --------
    >>> result = classify_equilibrium(Matrix2x2(1, 0, 0, -1))
    >>> result['classification'], result['stability']
    (<Classification.SADDLE: 'Saddle Point'>, <Stability.UNSTABLE: 'Unstable'>)
    >>> [v.real_part() for v in result['eigenvectors']]
    [Point(x=1.0, y=0.0), Point(x=0.0, y=1.0)]
    """
    M = _as_matrix(matrix)
    invariants = compute_invariants(M)
    tr = invariants["trace"]
    det = invariants["determinant"]
    disc = invariants["discriminant"]

    eigenvalues = compute_eigenvalues(tr, disc)

    if disc >= 0:
        eigenvectors = (
            compute_eigenvector(M, eigenvalues[0].re),
            compute_eigenvector(M, eigenvalues[1].re),
        )
    else:
        # Complex eigenvectors have no real eigenline to show
        eigenvectors = None

    classification, stability = classify_type(tr, det, disc)

    result: EquilibriumAnalysis = {
        "trace": tr,
        "determinant": det,
        "discriminant": disc,
        "eigenvalues": eigenvalues,
        "eigenvectors": eigenvectors,
        "classification": classification,
        "stability": stability,
    }

    return result


classify = classify_equilibrium


__all__ = [
    "compute_invariants",
    "compute_eigenvalues",
    "compute_eigenvector",
    "classify_type",
    "classify_equilibrium",
    "classify",
]
