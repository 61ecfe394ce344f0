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
Integrator Base - Abstract Interface for Fixed-Step Integration

Defines the interface shared by the fixed-step integrators of linear
planar systems: single steps on NumPy states, multi-step integration with
a divergence cutoff, and evaluation statistics.

Result Types
------------
integrate() returns the IntegrationResult TypedDict from
phaseflow.types.trajectories.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from phaseflow.types.core import DIVERGENCE_BOUND, ScalarLike, StateVector
from phaseflow.types.trajectories import IntegrationResult

if TYPE_CHECKING:
    from phaseflow.systems.linear_planar_system import LinearPlanarSystem


class IntegratorBase(ABC):
    """
    Abstract base class for fixed-step integrators.

    All integrators must implement:
    - step(): Single integration step
    - integrate(): Multi-step integration from an initial state
    - name: Integrator name for display

    Parameters
    ----------
    system : LinearPlanarSystem
        Vector field to integrate
    dt : float
        Positive step size; direction is chosen per integrate() call
    **options : dict
        - divergence_bound : float
            Integration stops once |x| or |y| exceeds this (default: 20.0)

    Raises
    ------
    ValueError
        If dt is not a positive real or divergence_bound is not positive
    """

    def __init__(self, system: "LinearPlanarSystem", dt: ScalarLike, **options):
        if not dt > 0:
            raise ValueError(f"Step size dt must be positive, got {dt}")

        self.system = system
        self.dt = float(dt)
        self.options = options

        self.divergence_bound = float(options.get("divergence_bound", DIVERGENCE_BOUND))
        if not self.divergence_bound > 0:
            raise ValueError(
                f"divergence_bound must be positive, got {self.divergence_bound}"
            )

        # Statistics
        self._stats = {
            "total_steps": 0,
            "total_fev": 0,  # Function evaluations
            "total_time": 0.0,
        }

    @abstractmethod
    def step(self, x: StateVector, dt: Optional[ScalarLike] = None) -> StateVector:
        """
        Take one integration step: x(t) → x(t + dt).

        Parameters
        ----------
        x : np.ndarray
            Current state (2,) or (N, 2)
        dt : Optional[float]
            Signed step size (uses self.dt if None)

        Returns
        -------
        np.ndarray
            Next state, same shape as x
        """

    @abstractmethod
    def integrate(self, x0: StateVector, steps: int, forward: bool = True) -> IntegrationResult:
        """
        Integrate a fixed number of steps from x0.

        Parameters
        ----------
        x0 : np.ndarray
            Initial state (2,)
        steps : int
            Number of steps, non-negative
        forward : bool
            Integrate forward (dt) or backward (-dt) in time

        Returns
        -------
        IntegrationResult
            TypedDict with the samples accepted before any divergence cutoff
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable integrator name."""

    # ========================================================================
    # Common Utilities (Shared by All Integrators)
    # ========================================================================

    def _evaluate_dynamics(self, x: StateVector) -> StateVector:
        """Evaluate the vector field, counting evaluations."""
        self._stats["total_fev"] += 1
        return self.system(x)

    def _exceeds_bound(self, x: StateVector) -> bool:
        return bool(abs(x[0]) > self.divergence_bound or abs(x[1]) > self.divergence_bound)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get integration statistics.

        Returns
        -------
        dict
            - 'total_steps': Total integration steps taken
            - 'total_fev': Total function evaluations
            - 'total_time': Total integration time
            - 'avg_fev_per_step': Average function evaluations per step
        """
        avg_fev = self._stats["total_fev"] / max(1, self._stats["total_steps"])

        return {
            **self._stats,
            "avg_fev_per_step": avg_fev,
        }

    def reset_stats(self):
        """Reset integration statistics to zero."""
        self._stats["total_steps"] = 0
        self._stats["total_fev"] = 0
        self._stats["total_time"] = 0.0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"dt={self.dt}, divergence_bound={self.divergence_bound})"
        )

    def __str__(self) -> str:
        return f"{self.name} (dt={self.dt:.4f})"
