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
Visualization helpers - display colors for trajectories and fields.
"""

from .themes import (
    ColorSchemes,
    hsl_color,
    magnitude_colors,
    random_trajectory_color,
    trajectory_color,
)

__all__ = [
    "ColorSchemes",
    "trajectory_color",
    "hsl_color",
    "random_trajectory_color",
    "magnitude_colors",
]
