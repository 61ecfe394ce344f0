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
Fixed-Step Integrators

Classic fourth-order Runge-Kutta for v' = Mv with a divergence cutoff,
in two views sharing one code path:

- RK4Integrator: class interface on NumPy states, returns an
  IntegrationResult with diagnostics
- integrate(): pure function on Matrix2x2 / Point values, returns the
  ordered list of plane points

Divergence Cutoff
-----------------
After every step the new state is checked; once |x| or |y| exceeds the
bound (20 by default) integration stops and that state is discarded.
This is the only early exit. Callers wanting to bound the work of very
large step counts must impose their own timeout.
"""

import numbers
import time
from typing import List, Optional, Union

import numpy as np

from phaseflow.numerical_integration.integrator_base import IntegratorBase
from phaseflow.systems.linear_planar_system import LinearPlanarSystem
from phaseflow.types.core import (
    DEFAULT_DTYPE,
    DEFAULT_STEP_SIZE,
    DEFAULT_STEPS,
    ArrayLike,
    Matrix2x2,
    Point,
    ScalarLike,
    StateVector,
)
from phaseflow.types.trajectories import IntegrationResult, PointSequence


def _check_steps(steps) -> int:
    if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
        raise TypeError(f"steps must be an integer, got {type(steps).__name__}")
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")
    return int(steps)


class RK4Integrator(IntegratorBase):
    """
    Classic 4th-order Runge-Kutta integrator.

    Algorithm (h = ±dt):
        k1 = f(x_k)
        k2 = f(x_k + (h/2)*k1)
        k3 = f(x_k + (h/2)*k2)
        k4 = f(x_k + h*k3)
        x_{k+1} = x_k + (h/6) * (k1 + 2*k2 + 2*k3 + k4)

    Characteristics:
    - Order: 4 (error ∝ dt⁴)
    - Function evaluations: 4 per step
    - Fixed step; no error control

    Examples
    --------
    >>> system = LinearPlanarSystem(Matrix2x2(0.0, -2.0, 2.0, 0.0))
    >>> integrator = RK4Integrator(system, dt=0.05)
    >>> x_next = integrator.step(np.array([1.0, 0.0]))
    >>>
    >>> result = integrator.integrate(np.array([1.0, 0.0]), steps=200)
    >>> result['x'].shape
    (201, 2)
    >>> result['nfev']
    800
    >>>
    >>> # Backward in time
    >>> result = integrator.integrate(np.array([1.0, 0.0]), steps=200, forward=False)
    >>> result['t'][-1]
    -10.0
    """

    def step(self, x: StateVector, dt: Optional[ScalarLike] = None) -> StateVector:
        """
        Take one RK4 step using four function evaluations.

        Parameters
        ----------
        x : np.ndarray
            Current state (2,) or (N, 2)
        dt : Optional[float]
            Signed step size (uses self.dt if None); negative steps
            integrate backward in time

        Returns
        -------
        np.ndarray
            Next state after RK4 step
        """
        h = dt if dt is not None else self.dt

        k1 = self._evaluate_dynamics(x)
        k2 = self._evaluate_dynamics(x + (h / 2) * k1)
        k3 = self._evaluate_dynamics(x + (h / 2) * k2)
        k4 = self._evaluate_dynamics(x + h * k3)

        x_next = x + (h / 6) * (k1 + 2 * k2 + 2 * k3 + k4)

        self._stats["total_steps"] += 1

        return x_next

    def integrate(self, x0: StateVector, steps: int, forward: bool = True) -> IntegrationResult:
        """
        Integrate `steps` fixed RK4 steps from x0.

        Parameters
        ----------
        x0 : np.ndarray
            Initial state (2,)
        steps : int
            Number of steps, non-negative
        forward : bool
            Time direction

        Returns
        -------
        IntegrationResult
            x[0] is x0; holds fewer than steps + 1 samples when the
            divergence cutoff fired

        Raises
        ------
        TypeError
            If steps is not an integer
        ValueError
            If steps is negative or x0 is not a planar state
        """
        steps = _check_steps(steps)
        x0 = np.asarray(x0, dtype=DEFAULT_DTYPE)
        if x0.shape != (2,):
            raise ValueError(f"x0 must have shape (2,), got {x0.shape}")

        start_time = time.time()
        h = self.dt if forward else -self.dt

        trajectory = [x0]
        x = x0
        nsteps = 0
        diverged = False

        for _ in range(steps):
            x = self.step(x, dt=h)
            nsteps += 1
            if self._exceeds_bound(x):
                diverged = True
                break
            trajectory.append(x)

        x_traj = np.stack(trajectory)
        t_points = h * np.arange(len(trajectory), dtype=DEFAULT_DTYPE)

        elapsed = time.time() - start_time
        self._stats["total_time"] += elapsed

        if diverged:
            message = (
                f"RK4 integration stopped at step {nsteps}: state left "
                f"the box |x|, |y| <= {self.divergence_bound}"
            )
        else:
            message = "RK4 integration completed"

        result: IntegrationResult = {
            "t": t_points,
            "x": x_traj,
            "success": True,
            "message": message,
            "nfev": 4 * nsteps,
            "nsteps": nsteps,
            "diverged": diverged,
            "integration_time": elapsed,
            "solver": self.name,
        }

        return result

    @property
    def name(self) -> str:
        return "RK4 (Classic)"


# ============================================================================
# Functional Interface
# ============================================================================


def integrate(
    matrix: Union[Matrix2x2, ArrayLike],
    initial: Union[Point, ArrayLike],
    steps: int = DEFAULT_STEPS,
    step_size: float = DEFAULT_STEP_SIZE,
    forward: bool = True,
) -> PointSequence:
    """
    Integrate v' = Mv from an initial point with fixed-step RK4.

    Pure and deterministic: identical inputs give identical output.

    Parameters
    ----------
    matrix : Matrix2x2 or array-like (2, 2)
        System matrix; any real matrix, including singular ones
    initial : Point or array-like (2,)
        Starting point; always the first element of the output
    steps : int
        Number of RK4 steps (default: 200)
    step_size : float
        Positive step size (default: 0.05)
    forward : bool
        Integrate forward (True) or backward (False) in time

    Returns
    -------
    List[Point]
        [initial, p1, p2, ...] with at most steps + 1 points; shorter when
        the trajectory left the box |x|, |y| <= 20

    Examples
    --------
    >>> M = Matrix2x2(1.0, 0.0, 0.0, -1.0)
    >>> integrate(M, Point(1.0, 1.0), steps=0)
    [Point(x=1.0, y=1.0)]
    >>> len(integrate(M, Point(1.0, 0.0), steps=200))  # grows like e^t
    60
    """
    if not isinstance(initial, Point):
        initial = Point.from_array(initial)

    integrator = RK4Integrator(LinearPlanarSystem(matrix), dt=step_size)
    result = integrator.integrate(initial.to_array(), steps, forward=forward)

    points: List[Point] = [initial]
    points.extend(Point(float(x), float(y)) for x, y in result["x"][1:])
    return points


__all__ = [
    "RK4Integrator",
    "integrate",
]
