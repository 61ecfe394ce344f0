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
Preset Systems

Named matrices covering the common equilibrium types, with factory
functions returning ready-made LinearPlanarSystem instances.

Presets
-------
- saddle:      [[1, 0], [0, -1]]   λ = 1, -1
- spiral_sink: [[-1, -2], [2, -1]] λ = -1 ± 2j
- stable_node: [[-2, 0], [0, -1]]  λ = -1, -2
- center:      [[0, -2], [2, 0]]   λ = ±2j
"""

from typing import Dict, List

from phaseflow.systems.linear_planar_system import LinearPlanarSystem
from phaseflow.types.core import Matrix2x2

PRESETS: Dict[str, Matrix2x2] = {
    "saddle": Matrix2x2(a=1.0, b=0.0, c=0.0, d=-1.0),
    "spiral_sink": Matrix2x2(a=-1.0, b=-2.0, c=2.0, d=-1.0),
    "stable_node": Matrix2x2(a=-2.0, b=0.0, c=0.0, d=-1.0),
    "center": Matrix2x2(a=0.0, b=-2.0, c=2.0, d=0.0),
}


def list_presets() -> List[str]:
    """Names of the available presets, in display order."""
    return list(PRESETS.keys())


def get_preset(name: str) -> Matrix2x2:
    """
    Look up a preset matrix by name.

    Raises
    ------
    ValueError
        If the name is unknown
    """
    if name not in PRESETS:
        raise ValueError(f"Unknown preset '{name}'. Available: {list_presets()}")
    return PRESETS[name]


# ============================================================================
# Convenience Factory Functions
# ============================================================================


def create_saddle() -> LinearPlanarSystem:
    """Saddle: one growing and one decaying direction along the axes."""
    return LinearPlanarSystem(PRESETS["saddle"])


def create_spiral_sink() -> LinearPlanarSystem:
    """Stable spiral with λ = -1 ± 2j."""
    return LinearPlanarSystem(PRESETS["spiral_sink"])


def create_stable_node() -> LinearPlanarSystem:
    return LinearPlanarSystem(PRESETS["stable_node"])


def create_center() -> LinearPlanarSystem:
    """
    Undamped rotation with λ = ±2j.

    Orbits are closed: x² + y² is conserved.
    """
    return LinearPlanarSystem(PRESETS["center"])


def create_oscillatory(omega: float = 2.0, damping: float = 0.1) -> LinearPlanarSystem:
    """
    Damped rotation with λ = -damping ± j·omega.

    Parameters
    ----------
    omega : float
        Angular frequency (rad/s)
    damping : float
        Decay rate; negative values give a spiral source
    """
    return LinearPlanarSystem(Matrix2x2(a=-damping, b=-omega, c=omega, d=-damping))


__all__ = [
    "PRESETS",
    "list_presets",
    "get_preset",
    "create_saddle",
    "create_spiral_sink",
    "create_stable_node",
    "create_center",
    "create_oscillatory",
]
