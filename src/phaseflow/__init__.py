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
PhaseFlow
=========

Numerical core for phase portraits of planar linear systems v' = Mv:

- Trajectory integration: fixed-step RK4, forward or backward in time,
  with a divergence cutoff
- Equilibrium classification: trace, determinant, discriminant,
  eigenvalues, eigenvectors, type and stability of the origin

Quick Start
-----------
>>> from phaseflow import Matrix2x2, Point, classify, integrate, trace_trajectory
>>>
>>> M = Matrix2x2(a=-1.0, b=-2.0, c=2.0, d=-1.0)
>>> classify(M)['classification']
<Classification.SPIRAL: 'Spiral Point'>
>>>
>>> points = integrate(M, Point(2.0, 0.0), steps=200, step_size=0.05)
>>> points[0]
Point(x=2.0, y=0.0)
>>>
>>> traj = trace_trajectory(M, Point(2.0, 0.0))

Authors
-------
Gil Benezer

License
-------
GNU Affero General Public License v3.0
"""

__version__ = "0.1.0"

from .types import (
    Classification,
    ComplexNumber,
    ComplexVector,
    DirectionField,
    EquilibriumAnalysis,
    IntegrationResult,
    Matrix2x2,
    Point,
    Stability,
    Trajectory,
    Vector,
)
from .systems import (
    PRESETS,
    LinearPlanarSystem,
    create_center,
    create_oscillatory,
    create_saddle,
    create_spiral_sink,
    create_stable_node,
    get_preset,
    list_presets,
)
from .visualization import ColorSchemes, hsl_color, trajectory_color
from .numerical_integration import (
    RK4Integrator,
    compose_bidirectional,
    integrate,
    trace_trajectory,
)
from .analysis import (
    PhasePlaneAnalysis,
    classify,
    classify_equilibrium,
    compute_eigenvalues,
    compute_eigenvector,
    compute_invariants,
    sample_direction_field,
)

__all__ = [
    "__version__",
    # Types
    "Matrix2x2",
    "Point",
    "Vector",
    "ComplexNumber",
    "ComplexVector",
    "Classification",
    "Stability",
    "EquilibriumAnalysis",
    "DirectionField",
    "Trajectory",
    "IntegrationResult",
    # Systems
    "LinearPlanarSystem",
    "PRESETS",
    "list_presets",
    "get_preset",
    "create_saddle",
    "create_spiral_sink",
    "create_stable_node",
    "create_center",
    "create_oscillatory",
    # Integration
    "RK4Integrator",
    "integrate",
    "compose_bidirectional",
    "trace_trajectory",
    # Analysis
    "PhasePlaneAnalysis",
    "classify",
    "classify_equilibrium",
    "compute_invariants",
    "compute_eigenvalues",
    "compute_eigenvector",
    "sample_direction_field",
    # Colors
    "ColorSchemes",
    "trajectory_color",
    "hsl_color",
]
