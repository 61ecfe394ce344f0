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
Trajectory Builder - Bidirectional Flow Lines

Composes a backward and a forward integration from the same initial point
into one time-ordered flow line:

    backward = integrate(M, p0, forward=False)   # [p0, p(-h), p(-2h), ...]
    forward  = integrate(M, p0, forward=True)    # [p0, p(h), p(2h), ...]

    points = reversed(backward)[:-1] + forward
           = [..., p(-2h), p(-h), p0, p(h), p(2h), ...]

The reversed backward run ends with p0, which is also the first forward
sample, so it is dropped once. Either half may be shorter than the other
when the divergence cutoff fired in that direction.
"""

import random
import string
from typing import Optional, Sequence, Tuple, Union

from phaseflow.numerical_integration.fixed_step_integrators import integrate
from phaseflow.types.core import ArrayLike, Matrix2x2, Point
from phaseflow.types.trajectories import (
    TRAJECTORY_STEP_SIZE,
    TRAJECTORY_STEPS,
    Trajectory,
)
from phaseflow.visualization.themes import random_trajectory_color

_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_trajectory_id(length: int = 9) -> str:
    """Short random base-36 identifier."""
    return "".join(random.choices(_ID_ALPHABET, k=length))


def compose_bidirectional(
    backward: Sequence[Point], forward: Sequence[Point]
) -> Tuple[Point, ...]:
    """
    Join a backward and a forward run that share their first point.

    Parameters
    ----------
    backward : Sequence[Point]
        Backward-in-time samples, starting at the initial point
    forward : Sequence[Point]
        Forward-in-time samples, starting at the same initial point

    Returns
    -------
    Tuple[Point, ...]
        Time-ordered samples with the initial point appearing once

    Raises
    ------
    ValueError
        If either run is empty or the runs start at different points
    """
    if not backward or not forward:
        raise ValueError("Both runs must contain at least the initial point")
    if backward[0] != forward[0]:
        raise ValueError(
            f"Runs must share their initial point, got {backward[0]} and {forward[0]}"
        )
    return tuple(reversed(backward[1:])) + tuple(forward)


def trace_trajectory(
    matrix: Union[Matrix2x2, ArrayLike],
    initial: Union[Point, ArrayLike],
    steps: int = TRAJECTORY_STEPS,
    step_size: float = TRAJECTORY_STEP_SIZE,
    color: Optional[str] = None,
    trajectory_id: Optional[str] = None,
) -> Trajectory:
    """
    Build the full flow line of v' = Mv through a point.

    Parameters
    ----------
    matrix : Matrix2x2 or array-like (2, 2)
        System matrix
    initial : Point or array-like (2,)
        Point the flow line passes through
    steps : int
        RK4 steps in each direction (default: 300)
    step_size : float
        Step size (default: 0.03)
    color : Optional[str]
        Display color; a random hue when None
    trajectory_id : Optional[str]
        Identifier; a fresh 9-character id when None

    Returns
    -------
    Trajectory
        At most 2*steps + 1 points, `initial` exactly once

    Examples
    --------
    >>> traj = trace_trajectory(Matrix2x2(0, -2, 2, 0), Point(1.0, 0.0))
    >>> len(traj['points'])
    601
    >>> traj['points'][300] == traj['initial']
    True
    """
    if not isinstance(initial, Point):
        initial = Point.from_array(initial)

    forward = integrate(matrix, initial, steps, step_size, forward=True)
    backward = integrate(matrix, initial, steps, step_size, forward=False)

    return {
        "id": trajectory_id if trajectory_id is not None else new_trajectory_id(),
        "points": compose_bidirectional(backward, forward),
        "initial": initial,
        "color": color if color is not None else random_trajectory_color(),
    }


__all__ = [
    "new_trajectory_id",
    "compose_bidirectional",
    "trace_trajectory",
]
