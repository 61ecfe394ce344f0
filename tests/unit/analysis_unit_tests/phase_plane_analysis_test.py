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
Unit Tests for PhasePlaneAnalysis Wrapper

Tests that the wrapper routes to the pure functions without adding
state of its own.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from phaseflow.analysis.direction_field import sample_direction_field
from phaseflow.analysis.equilibrium_classifier import classify_equilibrium
from phaseflow.analysis.phase_plane_analysis import PhasePlaneAnalysis
from phaseflow.numerical_integration.fixed_step_integrators import integrate
from phaseflow.numerical_integration.trajectory_builder import trace_trajectory
from phaseflow.types.analysis import Classification
from phaseflow.types.core import Matrix2x2, Point

SPIRAL_SINK = Matrix2x2(-1, -2, 2, -1)


@pytest.fixture
def analysis():
    return PhasePlaneAnalysis(SPIRAL_SINK)


class TestPhasePlaneAnalysis:
    """Test routing to the functional interface"""

    def test_defaults(self, analysis):
        assert analysis.matrix == SPIRAL_SINK
        assert analysis.steps == 300
        assert analysis.step_size == 0.03

    def test_from_array(self):
        analysis = PhasePlaneAnalysis(np.array([[0.0, -2.0], [2.0, 0.0]]))
        assert analysis.equilibrium()["classification"] is Classification.CENTER

    def test_equilibrium(self, analysis):
        assert analysis.equilibrium() == classify_equilibrium(SPIRAL_SINK)

    @pytest.mark.parametrize("forward", [True, False])
    def test_integrate(self, analysis, forward):
        p0 = Point(1.0, 0.5)
        assert analysis.integrate(p0, forward=forward) == integrate(
            SPIRAL_SINK, p0, 300, 0.03, forward=forward
        )

    def test_trajectory(self, analysis):
        p0 = Point(2.0, 0.0)

        traj = analysis.trajectory(p0, color="blue", trajectory_id="t1")
        expected = trace_trajectory(SPIRAL_SINK, p0, color="blue", trajectory_id="t1")

        assert traj == expected

    def test_custom_step_settings(self):
        analysis = PhasePlaneAnalysis(SPIRAL_SINK, steps=10, step_size=0.1)

        assert len(analysis.integrate(Point(1.0, 0.0))) == 11
        assert len(analysis.trajectory(Point(1.0, 0.0))["points"]) == 21

    def test_direction_field(self, analysis):
        field = analysis.direction_field(extent=3.0, resolution=6)
        expected = sample_direction_field(SPIRAL_SINK, extent=3.0, resolution=6)

        for key in expected:
            assert_allclose(field[key], expected[key])

    def test_equations(self, analysis):
        assert analysis.equations() == ("x' = -x - 2*y", "y' = 2*x - y")

    def test_repeated_calls_agree(self, analysis):
        first = analysis.integrate(Point(0.3, 0.3))
        second = analysis.integrate(Point(0.3, 0.3))
        assert first == second

    def test_repr(self, analysis):
        assert repr(analysis).startswith("PhasePlaneAnalysis(a=-1.0, b=-2.0, c=2.0, d=-1.0")
