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
Tests for the top-level phaseflow namespace.
"""

import phaseflow
from phaseflow import Classification, Matrix2x2, Point, Stability


def test_public_names_resolve():
    for name in phaseflow.__all__:
        assert hasattr(phaseflow, name), name


def test_version():
    assert phaseflow.__version__ == "0.1.0"


def test_classify_alias():
    assert phaseflow.classify is phaseflow.classify_equilibrium


def test_quick_start():
    M = Matrix2x2(a=-1.0, b=-2.0, c=2.0, d=-1.0)

    result = phaseflow.classify(M)
    assert result["classification"] is Classification.SPIRAL
    assert result["stability"] is Stability.SPIRAL_SINK

    points = phaseflow.integrate(M, Point(2.0, 0.0), steps=200, step_size=0.05)
    assert points[0] == Point(2.0, 0.0)
    assert len(points) == 201

    traj = phaseflow.trace_trajectory(M, Point(2.0, 0.0))
    assert traj["initial"] in traj["points"]
