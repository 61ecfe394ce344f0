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
Unit Tests for Preset Systems

Tests the preset table, lookup, and factory functions, and checks that
each preset lands in the equilibrium class its name promises.
"""

import pytest

from phaseflow.analysis.equilibrium_classifier import classify_equilibrium
from phaseflow.systems.linear_planar_system import LinearPlanarSystem
from phaseflow.systems.presets import (
    PRESETS,
    create_center,
    create_oscillatory,
    create_saddle,
    create_spiral_sink,
    create_stable_node,
    get_preset,
    list_presets,
)
from phaseflow.types.analysis import Classification, Stability
from phaseflow.types.core import Matrix2x2


class TestPresetTable:
    """Test preset lookup"""

    def test_names_in_order(self):
        assert list_presets() == ["saddle", "spiral_sink", "stable_node", "center"]

    @pytest.mark.parametrize(
        "name, matrix",
        [
            ("saddle", Matrix2x2(1, 0, 0, -1)),
            ("spiral_sink", Matrix2x2(-1, -2, 2, -1)),
            ("stable_node", Matrix2x2(-2, 0, 0, -1)),
            ("center", Matrix2x2(0, -2, 2, 0)),
        ],
    )
    def test_preset_values(self, name, matrix):
        assert get_preset(name) == matrix

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown preset 'node'"):
            get_preset("node")

    def test_unknown_preset_lists_available(self):
        with pytest.raises(ValueError, match="spiral_sink"):
            get_preset("spiral")


class TestPresetClassification:
    """Each preset classifies as its name says"""

    @pytest.mark.parametrize(
        "name, classification, stability",
        [
            ("saddle", Classification.SADDLE, Stability.UNSTABLE),
            ("spiral_sink", Classification.SPIRAL, Stability.SPIRAL_SINK),
            ("stable_node", Classification.NODE, Stability.SINK),
            ("center", Classification.CENTER, Stability.NEUTRALLY_STABLE),
        ],
    )
    def test_classification(self, name, classification, stability):
        result = classify_equilibrium(PRESETS[name])

        assert result["classification"] is classification
        assert result["stability"] is stability


class TestFactories:
    """Test factory functions"""

    @pytest.mark.parametrize(
        "factory, name",
        [
            (create_saddle, "saddle"),
            (create_spiral_sink, "spiral_sink"),
            (create_stable_node, "stable_node"),
            (create_center, "center"),
        ],
    )
    def test_factory_matches_preset(self, factory, name):
        system = factory()

        assert isinstance(system, LinearPlanarSystem)
        assert system.matrix == PRESETS[name]

    def test_oscillatory_default(self):
        assert create_oscillatory().matrix == Matrix2x2(-0.1, -2.0, 2.0, -0.1)

    def test_oscillatory_without_damping_is_center(self):
        result = classify_equilibrium(create_oscillatory(omega=3.0, damping=0.0).matrix)
        assert result["classification"] is Classification.CENTER

    def test_oscillatory_negative_damping_is_source(self):
        result = classify_equilibrium(create_oscillatory(omega=1.0, damping=-0.5).matrix)
        assert result["stability"] is Stability.SPIRAL_SOURCE
