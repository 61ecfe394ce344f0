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
Analysis - equilibrium classification and phase plane sampling.

>>> from phaseflow.analysis import classify_equilibrium, PhasePlaneAnalysis
>>>
>>> # Functional interface
>>> result = classify_equilibrium(Matrix2x2(0, -2, 2, 0))
>>> result['classification']
<Classification.CENTER: 'Center'>
>>>
>>> # Object-oriented interface
>>> analysis = PhasePlaneAnalysis(Matrix2x2(0, -2, 2, 0))
>>> analysis.equilibrium()['stability']
<Stability.NEUTRALLY_STABLE: 'Neutrally Stable'>
"""

from .direction_field import sample_direction_field
from .equilibrium_classifier import (
    classify,
    classify_equilibrium,
    classify_type,
    compute_eigenvalues,
    compute_eigenvector,
    compute_invariants,
)
from .phase_plane_analysis import PhasePlaneAnalysis

__all__ = [
    "PhasePlaneAnalysis",
    "classify",
    "classify_equilibrium",
    "classify_type",
    "compute_eigenvalues",
    "compute_eigenvector",
    "compute_invariants",
    "sample_direction_field",
]
