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
Phase Plane Analysis Wrapper

Thin wrapper bundling the classifier, the integrator and the direction
field sampler for a single matrix.

Design Philosophy
-----------------
- Composition not inheritance
- Thin wrapper (no state beyond its arguments, no caching)
- Routes to the pure functions
- One instance per matrix: when the matrix changes, build a new wrapper
  and discard every trajectory traced with the old one

Usage
-----
>>> from phaseflow.analysis.phase_plane_analysis import PhasePlaneAnalysis
>>>
>>> analysis = PhasePlaneAnalysis(Matrix2x2(-1, -2, 2, -1))
>>> analysis.equilibrium()['classification']
<Classification.SPIRAL: 'Spiral Point'>
>>> traj = analysis.trajectory(Point(2.0, 0.0))
>>> field = analysis.direction_field()
"""

from typing import Optional, Tuple, Union

from phaseflow.analysis.direction_field import sample_direction_field
from phaseflow.analysis.equilibrium_classifier import classify_equilibrium
from phaseflow.numerical_integration.fixed_step_integrators import integrate
from phaseflow.numerical_integration.trajectory_builder import trace_trajectory
from phaseflow.systems.linear_planar_system import LinearPlanarSystem
from phaseflow.types.analysis import DirectionField, EquilibriumAnalysis
from phaseflow.types.core import ArrayLike, Matrix2x2, Point
from phaseflow.types.trajectories import (
    TRAJECTORY_STEP_SIZE,
    TRAJECTORY_STEPS,
    PointSequence,
    Trajectory,
)


class PhasePlaneAnalysis:
    """
    Phase plane tools for one system matrix.

    Parameters
    ----------
    matrix : Matrix2x2 or array-like (2, 2)
        System matrix
    steps : int
        RK4 steps per direction for integrate() and trajectory()
    step_size : float
        RK4 step size

    Attributes
    ----------
    system : LinearPlanarSystem
        The vector field
    """

    def __init__(
        self,
        matrix: Union[Matrix2x2, ArrayLike],
        steps: int = TRAJECTORY_STEPS,
        step_size: float = TRAJECTORY_STEP_SIZE,
    ):
        self.system = LinearPlanarSystem(matrix)
        self.steps = steps
        self.step_size = step_size

    @property
    def matrix(self) -> Matrix2x2:
        return self.system.matrix

    def equilibrium(self) -> EquilibriumAnalysis:
        """Routes to classify_equilibrium()."""
        return classify_equilibrium(self.matrix)

    def integrate(self, initial: Union[Point, ArrayLike], forward: bool = True) -> PointSequence:
        """One-directional RK4 run from `initial`."""
        return integrate(self.matrix, initial, self.steps, self.step_size, forward=forward)

    def trajectory(
        self,
        initial: Union[Point, ArrayLike],
        color: Optional[str] = None,
        trajectory_id: Optional[str] = None,
    ) -> Trajectory:
        """Full flow line through `initial`; routes to trace_trajectory()."""
        return trace_trajectory(
            self.matrix,
            initial,
            steps=self.steps,
            step_size=self.step_size,
            color=color,
            trajectory_id=trajectory_id,
        )

    def direction_field(self, extent: float = 5.0, resolution: int = 15) -> DirectionField:
        return sample_direction_field(self.system, extent=extent, resolution=resolution)

    def equations(self) -> Tuple[str, str]:
        return self.system.equations()

    def __repr__(self) -> str:
        M = self.matrix
        return (
            f"PhasePlaneAnalysis(a={M.a}, b={M.b}, c={M.c}, d={M.d}, "
            f"steps={self.steps}, step_size={self.step_size})"
        )


__all__ = ["PhasePlaneAnalysis"]
