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
Trajectory Color Schemes

Color palettes for the display color carried by every Trajectory, and for
shading direction-field arrows by field magnitude. Colors are plain CSS
strings; no plotting library is involved.

Main Class
----------
ColorSchemes : Color palette definitions
    PLOTLY : Plotly categorical colors
    D3 : D3.js Category10 colors
    COLORBLIND_SAFE : Wong palette (colorblind accessible)
    TABLEAU : Tableau 10 palette
    SEQUENTIAL_BLUE : Blue gradient for magnitudes

Usage
-----
>>> from phaseflow.visualization.themes import ColorSchemes, hsl_color
>>>
>>> ColorSchemes.get_colors('tableau', n_colors=3)
['#4E79A7', '#F28E2B', '#E15759']
>>> hsl_color(120)
'hsl(120, 65%, 45%)'
"""

import random
from typing import Dict, List, Optional

import numpy as np


class ColorSchemes:
    """
    Predefined color palettes.

    Categorical palettes color distinct trajectories; the sequential
    palette encodes field magnitude.
    """

    PLOTLY = [
        "#636EFA",  # Blue
        "#EF553B",  # Red
        "#00CC96",  # Green
        "#AB63FA",  # Purple
        "#FFA15A",  # Orange
        "#19D3F3",  # Cyan
        "#FF6692",  # Pink
        "#B6E880",  # Light green
        "#FF97FF",  # Light purple
        "#FECB52",  # Yellow
    ]

    D3 = [
        "#1f77b4",  # Blue
        "#ff7f0e",  # Orange
        "#2ca02c",  # Green
        "#d62728",  # Red
        "#9467bd",  # Purple
        "#8c564b",  # Brown
        "#e377c2",  # Pink
        "#7f7f7f",  # Gray
        "#bcbd22",  # Yellow-green
        "#17becf",  # Cyan
    ]

    COLORBLIND_SAFE = [
        "#0173B2",  # Blue
        "#DE8F05",  # Orange
        "#029E73",  # Green
        "#CC78BC",  # Pink
        "#CA9161",  # Tan
        "#949494",  # Gray
        "#ECE133",  # Yellow
        "#56B4E9",  # Sky blue
    ]

    TABLEAU = [
        "#4E79A7",  # Blue
        "#F28E2B",  # Orange
        "#E15759",  # Red
        "#76B7B2",  # Teal
        "#59A14F",  # Green
        "#EDC948",  # Yellow
        "#B07AA1",  # Purple
        "#FF9DA7",  # Pink
        "#9C755F",  # Brown
        "#BAB0AC",  # Gray
    ]

    SEQUENTIAL_BLUE = [
        "#f7fbff",  # Lightest
        "#deebf7",
        "#c6dbef",
        "#9ecae1",
        "#6baed6",
        "#4292c6",
        "#2171b5",
        "#08519c",
        "#08306b",  # Darkest
    ]

    @staticmethod
    def _palettes() -> Dict[str, List[str]]:
        return {
            "plotly": ColorSchemes.PLOTLY,
            "d3": ColorSchemes.D3,
            "colorblind_safe": ColorSchemes.COLORBLIND_SAFE,
            "wong": ColorSchemes.COLORBLIND_SAFE,
            "tableau": ColorSchemes.TABLEAU,
            "sequential_blue": ColorSchemes.SEQUENTIAL_BLUE,
        }

    @staticmethod
    def get_colors(scheme: str = "tableau", n_colors: Optional[int] = None) -> List[str]:
        """
        Get color palette by name.

        Parameters
        ----------
        scheme : str
            'plotly', 'd3', 'colorblind_safe' (or 'wong'), 'tableau',
            'sequential_blue'; case, dashes and spaces are ignored
        n_colors : Optional[int]
            Number of colors needed; cycles through the palette if more
            than available

        Returns
        -------
        List[str]
            Hex color codes

        Raises
        ------
        ValueError
            If scheme name is not recognized
        """
        scheme_key = scheme.lower().replace("-", "_").replace(" ", "_")
        palettes = ColorSchemes._palettes()

        if scheme_key not in palettes:
            raise ValueError(
                f"Unknown color scheme '{scheme}'. Available: {sorted(palettes.keys())}"
            )
        palette = palettes[scheme_key]

        if n_colors is None:
            return palette.copy()
        return [palette[i % len(palette)] for i in range(n_colors)]


def trajectory_color(index: int, scheme: str = "tableau") -> str:
    """Color for the index-th trajectory, cycling through the palette."""
    palette = ColorSchemes.get_colors(scheme)
    return palette[index % len(palette)]


def hsl_color(hue: float, saturation: float = 65, lightness: float = 45) -> str:
    """
    CSS hsl() color string.

    The hue wraps into [0, 360).
    """
    return f"hsl({hue % 360:g}, {saturation:g}%, {lightness:g}%)"


def random_trajectory_color(rng: Optional[random.Random] = None) -> str:
    """Random hue at fixed saturation and lightness."""
    rng = rng or random
    return hsl_color(rng.uniform(0, 360))


def magnitude_colors(magnitude: np.ndarray, max_magnitude: float = 10.0) -> np.ndarray:
    """
    Map field magnitudes onto the sequential blue palette.

    Magnitudes are clipped to [0, max_magnitude]; zero maps to the lightest
    color and max_magnitude (or more) to the darkest.

    Returns
    -------
    np.ndarray
        Array of hex strings with the shape of `magnitude`
    """
    if not max_magnitude > 0:
        raise ValueError(f"max_magnitude must be positive, got {max_magnitude}")
    palette = np.array(ColorSchemes.SEQUENTIAL_BLUE)
    scaled = np.clip(np.asarray(magnitude, dtype=float) / max_magnitude, 0.0, 1.0)
    idx = np.round(scaled * (len(palette) - 1)).astype(int)
    return palette[idx]


__all__ = [
    "ColorSchemes",
    "trajectory_color",
    "hsl_color",
    "random_trajectory_color",
    "magnitude_colors",
]
