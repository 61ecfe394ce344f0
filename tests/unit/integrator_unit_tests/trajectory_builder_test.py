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
Unit tests for bidirectional trajectory construction

Tests cover:
1. compose_bidirectional ordering and validation
2. trace_trajectory point counts and time ordering
3. Identifier and color defaults
"""

import random
import re

import numpy as np
import pytest
from numpy.testing import assert_allclose

from phaseflow.numerical_integration.fixed_step_integrators import integrate
from phaseflow.numerical_integration.trajectory_builder import (
    compose_bidirectional,
    new_trajectory_id,
    trace_trajectory,
)
from phaseflow.types.core import Matrix2x2, Point

SADDLE = Matrix2x2(1, 0, 0, -1)
SPIRAL_SINK = Matrix2x2(-1, -2, 2, -1)
CENTER = Matrix2x2(0, -2, 2, 0)


# ============================================================================
# Test Class 1: compose_bidirectional
# ============================================================================


class TestComposeBidirectional:
    """Test joining backward and forward runs"""

    def test_ordering(self):
        p0 = Point(0.0, 0.0)
        backward = [p0, Point(-1, 0), Point(-2, 0)]
        forward = [p0, Point(1, 0), Point(2, 0)]

        points = compose_bidirectional(backward, forward)

        assert points == (Point(-2, 0), Point(-1, 0), p0, Point(1, 0), Point(2, 0))

    def test_initial_appears_once(self):
        p0 = Point(1.0, 1.0)
        points = compose_bidirectional([p0, Point(0, 0)], [p0, Point(2, 2), Point(3, 3)])

        assert points.count(p0) == 1
        assert len(points) == 4

    def test_single_point_runs(self):
        p0 = Point(5.0, 5.0)
        assert compose_bidirectional([p0], [p0]) == (p0,)

    def test_empty_run_raises(self):
        with pytest.raises(ValueError, match="at least"):
            compose_bidirectional([], [Point(0, 0)])

    def test_mismatched_start_raises(self):
        with pytest.raises(ValueError, match="initial point"):
            compose_bidirectional([Point(0, 0)], [Point(1, 0)])


# ============================================================================
# Test Class 2: trace_trajectory
# ============================================================================


class TestTraceTrajectory:
    """Test full flow lines through a point"""

    def test_structure(self):
        traj = trace_trajectory(CENTER, Point(1.0, 0.0), color="red", trajectory_id="abc")

        assert set(traj) == {"id", "points", "initial", "color"}
        assert traj["id"] == "abc"
        assert traj["color"] == "red"
        assert traj["initial"] == Point(1.0, 0.0)
        assert isinstance(traj["points"], tuple)

    def test_center_uses_all_steps(self):
        p0 = Point(1.0, 0.0)
        traj = trace_trajectory(CENTER, p0)

        assert len(traj["points"]) == 601
        assert traj["points"][300] == p0

    def test_initial_appears_exactly_once(self):
        p0 = Point(1.0, 0.0)
        traj = trace_trajectory(CENTER, p0)

        assert sum(1 for p in traj["points"] if p == p0) == 1

    def test_matches_integrate_halves(self):
        p0 = Point(0.5, -0.5)
        steps, h = 40, 0.03

        traj = trace_trajectory(SPIRAL_SINK, p0, steps=steps, step_size=h)
        forward = integrate(SPIRAL_SINK, p0, steps, h, forward=True)
        backward = integrate(SPIRAL_SINK, p0, steps, h, forward=False)

        assert traj["points"] == tuple(reversed(backward[1:])) + tuple(forward)

    def test_saddle_diverges_both_ways(self):
        # x grows like e^t forward, y grows like e^t backward
        traj = trace_trajectory(SADDLE, Point(1.0, 1.0))
        points = traj["points"]

        assert len(points) == 199
        assert points[99] == Point(1.0, 1.0)
        assert all(abs(p.x) <= 20 and abs(p.y) <= 20 for p in points)

    def test_spiral_sink_is_time_ordered(self):
        traj = trace_trajectory(SPIRAL_SINK, Point(1.0, 0.0))

        norms = np.array([p.norm() for p in traj["points"]])
        # Distance to the origin shrinks along the flow
        assert np.all(np.diff(norms) < 0)

    def test_center_orbit(self):
        traj = trace_trajectory(CENTER, Point(0.0, 2.0))

        radii = np.array([p.norm() for p in traj["points"]])
        assert_allclose(radii, 2.0, rtol=1e-4)

    def test_accepts_arrays(self):
        traj = trace_trajectory(np.array([[0, -2], [2, 0]]), np.array([1.0, 0.0]), steps=5)

        assert traj["initial"] == Point(1.0, 0.0)
        assert len(traj["points"]) == 11

    def test_zero_steps(self):
        p0 = Point(2.0, 3.0)
        assert trace_trajectory(SADDLE, p0, steps=0)["points"] == (p0,)


# ============================================================================
# Test Class 3: Defaults
# ============================================================================


class TestDefaults:
    """Test generated identifiers and colors"""

    def test_new_id_format(self):
        ident = new_trajectory_id()
        assert re.fullmatch(r"[a-z0-9]{9}", ident)

    def test_new_id_length(self):
        assert len(new_trajectory_id(length=4)) == 4

    def test_ids_differ(self):
        random.seed(0)
        ids = {new_trajectory_id() for _ in range(50)}
        assert len(ids) == 50

    def test_default_id_and_color(self):
        traj = trace_trajectory(CENTER, Point(1.0, 0.0), steps=3)

        assert re.fullmatch(r"[a-z0-9]{9}", traj["id"])
        assert re.fullmatch(r"hsl\([\d.]+, 65%, 45%\)", traj["color"])

    def test_points_do_not_depend_on_color_or_id(self):
        a = trace_trajectory(SPIRAL_SINK, Point(1.0, 1.0), steps=20)
        b = trace_trajectory(SPIRAL_SINK, Point(1.0, 1.0), steps=20, color="#000", trajectory_id="x")

        assert a["points"] == b["points"]
