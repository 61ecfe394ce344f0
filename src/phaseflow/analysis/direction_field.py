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
Direction Field Sampler

Samples the vector field of v' = Mv on a square grid centered on the
origin, returning unit directions for arrow glyphs along with the raw
magnitudes for shading.
"""

from typing import Union

import numpy as np

from phaseflow.systems.linear_planar_system import LinearPlanarSystem
from phaseflow.types.analysis import DirectionField
from phaseflow.types.core import ArrayLike, Matrix2x2


def sample_direction_field(
    matrix: Union[Matrix2x2, ArrayLike, LinearPlanarSystem],
    extent: float = 5.0,
    resolution: int = 15,
) -> DirectionField:
    """
    Sample M·p on the grid [-extent, extent]² with resolution + 1 points per axis.

    Parameters
    ----------
    matrix : Matrix2x2, array-like (2, 2) or LinearPlanarSystem
        System to sample
    extent : float
        Half-width of the square window (default: 5.0)
    resolution : int
        Number of grid intervals per axis (default: 15)

    Returns
    -------
    DirectionField
        Arrays of shape (resolution + 1, resolution + 1); dx, dy are unit
        directions, exactly zero where the field vanishes

    Raises
    ------
    ValueError
        If extent is not positive or resolution < 1

    Examples
    --------
    >>> field = sample_direction_field(Matrix2x2(0, -2, 2, 0))
    >>> field['x'].shape
    (16, 16)
    >>> field['magnitude'][7, 7] > 0
    True
    """
    if not extent > 0:
        raise ValueError(f"extent must be positive, got {extent}")
    if resolution < 1:
        raise ValueError(f"resolution must be at least 1, got {resolution}")

    system = matrix if isinstance(matrix, LinearPlanarSystem) else LinearPlanarSystem(matrix)

    axis = np.linspace(-extent, extent, resolution + 1)
    x, y = np.meshgrid(axis, axis, indexing="ij")

    velocity = system(np.stack([x, y], axis=-1))
    vx = velocity[..., 0]
    vy = velocity[..., 1]

    magnitude = np.hypot(vx, vy)
    # Unit directions; zero vector where the field vanishes
    safe = np.where(magnitude == 0, 1.0, magnitude)
    dx = np.where(magnitude == 0, 0.0, vx / safe)
    dy = np.where(magnitude == 0, 0.0, vy / safe)

    return {
        "x": x,
        "y": y,
        "dx": dx,
        "dy": dy,
        "angle": np.arctan2(vy, vx),
        "magnitude": magnitude,
    }


__all__ = ["sample_direction_field"]
