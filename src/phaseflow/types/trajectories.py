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
Trajectory Types

Types for integrated solution curves of v' = Mv:
- PointSequence: time-ordered plane samples
- Trajectory: a displayed flow line through an initial point
- IntegrationResult: array trajectory plus solver diagnostics

Shape Convention
----------------
Array trajectories are time-major, (T, 2): x[k] is the state at sample k.

Usage
-----
>>> from phaseflow.types.trajectories import Trajectory
>>>
>>> traj: Trajectory = trace_trajectory(M, Point(1.0, 0.0))
>>> traj['points'][0], traj['initial']
"""

from typing import List, Tuple

import numpy as np
from typing_extensions import TypedDict

from .core import Point

PointSequence = List[Point]
"""Ordered plane samples; index 0 is the initial point."""

StateTrajectory = np.ndarray
"""Array trajectory, shape (T, 2)."""

TimePoints = np.ndarray
"""Sample times, shape (T,). Negative for backward integration."""

# Settings for click-placed flow lines, finer and longer than the
# integrator defaults.
TRAJECTORY_STEPS = 300
TRAJECTORY_STEP_SIZE = 0.03


class Trajectory(TypedDict):
    """
    Flow line through an initial point.

    Built by concatenating a time-reversed backward integration with a
    forward integration from the same point. Immutable once built; a
    trajectory belongs to the matrix it was integrated under and is
    discarded, not recomputed, when that matrix changes.

    Fields
    ------
    id : str
        Short random identifier
    points : Tuple[Point, ...]
        Time-ordered samples; contains `initial` exactly once
    initial : Point
        The point the flow line passes through
    color : str
        Display color (CSS color string)
    """

    id: str
    points: Tuple[Point, ...]
    initial: Point
    color: str


class IntegrationResult(TypedDict, total=False):
    """
    Result from fixed-step integration.

    Attributes
    ----------
    t : TimePoints
        Sample times (T,), starting at 0 and signed by direction
    x : StateTrajectory
        State trajectory (T, 2)
    success : bool
        Always True; the integrator is total over finite input
    message : str
        Status message (mentions the divergence cutoff when it fired)
    nfev : int
        Number of vector field evaluations (4 per step)
    nsteps : int
        Number of completed steps, including the rejected diverging one
    diverged : bool
        Whether the divergence cutoff stopped integration early
    integration_time : float
        Computation time in seconds
    solver : str
        Name of the integrator

    Examples
    --------
    >>> result = integrator.integrate(np.array([1.0, 0.0]), steps=200)
    >>> result['x'].shape
    (201, 2)
    >>> result['diverged']
    False
    """

    t: TimePoints
    x: StateTrajectory
    success: bool
    message: str
    nfev: int
    nsteps: int
    diverged: bool
    integration_time: float
    solver: str


__all__ = [
    "PointSequence",
    "StateTrajectory",
    "TimePoints",
    "TRAJECTORY_STEPS",
    "TRAJECTORY_STEP_SIZE",
    "Trajectory",
    "IntegrationResult",
]
