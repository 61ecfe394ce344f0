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
Types Module - Type Definitions for PhaseFlow

Central import point for the value types and result records.

Module Organization
------------------
- core: Matrix2x2, Point, ComplexNumber, ComplexVector, constants
- analysis: Classification, Stability, EquilibriumAnalysis, DirectionField
- trajectories: Trajectory, IntegrationResult, PointSequence
"""

from .analysis import (
    Classification,
    DirectionField,
    EigenvaluePair,
    EigenvectorPair,
    EquilibriumAnalysis,
    EquilibriumInvariants,
    Stability,
)
from .core import (
    DEFAULT_DTYPE,
    DEFAULT_STEP_SIZE,
    DEFAULT_STEPS,
    DIVERGENCE_BOUND,
    EIGEN_TOLERANCE,
    ArrayLike,
    ComplexNumber,
    ComplexVector,
    Matrix2x2,
    Point,
    ScalarLike,
    StateMatrix,
    StateVector,
    Vector,
)
from .trajectories import (
    TRAJECTORY_STEP_SIZE,
    TRAJECTORY_STEPS,
    IntegrationResult,
    PointSequence,
    StateTrajectory,
    TimePoints,
    Trajectory,
)

__all__ = [
    # Core
    "ArrayLike",
    "StateVector",
    "StateMatrix",
    "ScalarLike",
    "DEFAULT_DTYPE",
    "EIGEN_TOLERANCE",
    "DIVERGENCE_BOUND",
    "DEFAULT_STEPS",
    "DEFAULT_STEP_SIZE",
    "Point",
    "Vector",
    "ComplexNumber",
    "ComplexVector",
    "Matrix2x2",
    # Analysis
    "Classification",
    "Stability",
    "EigenvaluePair",
    "EigenvectorPair",
    "EquilibriumAnalysis",
    "EquilibriumInvariants",
    "DirectionField",
    # Trajectories
    "PointSequence",
    "StateTrajectory",
    "TimePoints",
    "TRAJECTORY_STEPS",
    "TRAJECTORY_STEP_SIZE",
    "Trajectory",
    "IntegrationResult",
]
