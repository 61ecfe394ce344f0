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
Linear Planar System - v' = Mv

Wraps a Matrix2x2 as a callable vector field for the integrator and the
direction field sampler, with a symbolic view for display and checks.

Dynamics:
    dx/dt = a*x + b*y
    dy/dt = c*x + d*y

The system is autonomous and time-invariant: no control input, and the
matrix is fixed for the lifetime of the instance.
"""

from typing import Tuple, Union

import numpy as np
import sympy as sp

from phaseflow.types.core import (
    DEFAULT_DTYPE,
    ArrayLike,
    Matrix2x2,
    Point,
    StateMatrix,
    StateVector,
)


class LinearPlanarSystem:
    """
    Planar linear autonomous system v' = Mv.

    Parameters
    ----------
    matrix : Matrix2x2 or array-like
        System matrix; (2, 2) arrays are converted with Matrix2x2.from_array

    Examples
    --------
    >>> system = LinearPlanarSystem(Matrix2x2(0.0, -2.0, 2.0, 0.0))
    >>> system(np.array([1.0, 0.0]))
    array([0., 2.])
    >>> system.field(Point(0.0, 1.0))
    Point(x=-2.0, y=0.0)
    >>>
    >>> # Batched states (N, 2)
    >>> system(np.array([[1.0, 0.0], [0.0, 1.0]]))
    array([[ 0.,  2.],
           [-2.,  0.]])
    """

    nx = 2
    nu = 0
    is_autonomous = True

    def __init__(self, matrix: Union[Matrix2x2, ArrayLike]):
        if not isinstance(matrix, Matrix2x2):
            matrix = Matrix2x2.from_array(matrix)
        self._matrix = matrix
        self._A = matrix.to_array()

    @property
    def matrix(self) -> Matrix2x2:
        return self._matrix

    @property
    def A(self) -> StateMatrix:
        """Copy of the system matrix as a NumPy array."""
        return self._A.copy()

    def __call__(self, x: StateVector) -> StateVector:
        """
        Evaluate the vector field f(x) = Mx.

        Parameters
        ----------
        x : np.ndarray
            State (2,) or batch of states (N, 2)

        Returns
        -------
        np.ndarray
            Velocity with the same shape as x
        """
        x = np.asarray(x, dtype=DEFAULT_DTYPE)
        if x.ndim == 0 or x.shape[-1] != 2:
            raise ValueError(f"State must have trailing dimension 2, got shape {x.shape}")
        M = self._matrix
        px = x[..., 0]
        py = x[..., 1]
        return np.stack([M.a * px + M.b * py, M.c * px + M.d * py], axis=-1)

    def field(self, p: Point) -> Point:
        """Velocity at a single plane point."""
        return self._matrix.apply(p)

    # ========================================================================
    # Symbolic View
    # ========================================================================

    def symbolic(self) -> Tuple[sp.Matrix, Tuple[sp.Symbol, sp.Symbol]]:
        """
        Symbolic right-hand side.

        Returns
        -------
        f_sym : sp.Matrix
            Column (2, 1) of the dynamics in the state symbols
        state_vars : Tuple[sp.Symbol, sp.Symbol]
            The symbols (x, y)
        """
        x, y = sp.symbols("x y", real=True)
        M = self._matrix
        f_sym = sp.Matrix(
            [
                [sp.nsimplify(M.a) * x + sp.nsimplify(M.b) * y],
                [sp.nsimplify(M.c) * x + sp.nsimplify(M.d) * y],
            ],
        )
        return f_sym, (x, y)

    def equations(self) -> Tuple[str, str]:
        """
        Human-readable system equations.

        Zero terms drop out and unit coefficients are implicit:

        >>> LinearPlanarSystem(Matrix2x2(1, -2, 3, -4)).equations()
        ("x' = x - 2*y", "y' = 3*x - 4*y")
        """
        f_sym, _ = self.symbolic()
        return (f"x' = {sp.sstr(f_sym[0])}", f"y' = {sp.sstr(f_sym[1])}")

    def characteristic_polynomial(self) -> sp.Poly:
        """det(λI - M) = λ² - tr·λ + det, in the symbol `lambda`."""
        lam = sp.Symbol("lambda")
        M = sp.Matrix(
            [
                [sp.nsimplify(self._matrix.a), sp.nsimplify(self._matrix.b)],
                [sp.nsimplify(self._matrix.c), sp.nsimplify(self._matrix.d)],
            ],
        )
        return M.charpoly(lam)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LinearPlanarSystem):
            return NotImplemented
        return self._matrix == other._matrix

    def __hash__(self) -> int:
        return hash(self._matrix)

    def __repr__(self) -> str:
        M = self._matrix
        return f"LinearPlanarSystem(a={M.a}, b={M.b}, c={M.c}, d={M.d})"
