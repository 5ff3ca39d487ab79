# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of gefparse.

# gefparse is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# gefparse is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with gefparse.  If not, see <https://www.gnu.org/licenses/>.


"""Default chart axes for CPT data.

Picks the depth axis and the primary measurement axis from COLUMNINFO
quantity numbers, and lists the depth-like columns a viewer can switch the
vertical axis to.
"""

from dataclasses import dataclass

from gefparse.coordinates import height_system
from gefparse.datamodel import (
    CONE_RESISTANCE,
    CORRECTED_CONE_RESISTANCE,
    CORRECTED_DEPTH,
    DEFAULT_HEIGHT_SYSTEM,
    ELEVATION,
    FRICTION_NUMBER,
    PENETRATION_LENGTH,
    TRUE_DEPTH,
)
from gefparse.tables.cpt import COLUMN_QUANTITIES

from .cpt import find_depth_column
from .headers import find_column_by_quantity


@dataclass(frozen=True)
class ChartColumn:
    key: str
    unit: str
    name: str


def unit_code(unit):
    """Leading unit token, e.g. ``"MPa (megaPascal)"`` -> ``"MPa"``."""
    parts = unit.split()
    return parts[0] if parts else unit


def display_name(col):
    quantity = COLUMN_QUANTITIES.get(col.quantity_number)
    if quantity is None:
        return col.name
    if quantity.get("symbol"):
        return f"{quantity['name']} ({quantity['symbol']})"
    return quantity["name"]


def chart_column(col):
    return ChartColumn(key=col.name, unit=unit_code(col.unit), name=display_name(col))


def detect_chart_axes(column_info, data, z_id=None):
    """Return ``{"y_axis", "x_axis", "available_columns", "y_axis_options"}``."""
    column_info = list(column_info)
    y_col = (
        find_column_by_quantity(column_info, PENETRATION_LENGTH)
        or find_column_by_quantity(column_info, CORRECTED_DEPTH)
        or find_depth_column(column_info)
    )
    candidates = [col for col in column_info if y_col is None or col.col_num != y_col.col_num]
    x_col = (
        find_column_by_quantity(candidates, CONE_RESISTANCE)
        or find_column_by_quantity(candidates, CORRECTED_CONE_RESISTANCE)
        or find_column_by_quantity(candidates, FRICTION_NUMBER)
        or (candidates[0] if candidates else None)
    )

    y_options = []
    if y_col is not None:
        y_options.append(chart_column(y_col))
    corrected = find_column_by_quantity(column_info, CORRECTED_DEPTH)
    if corrected is not None and (y_col is None or corrected.col_num != y_col.col_num):
        y_options.append(chart_column(corrected))

    columns = set(data.columns) if data is not None and len(data) else set()
    if TRUE_DEPTH in columns:
        y_options.append(ChartColumn(key=TRUE_DEPTH, unit="m", name="True Depth (inclination corrected)"))
    if ELEVATION in columns and z_id is not None:
        system = height_system(z_id.height_system_code) or height_system(DEFAULT_HEIGHT_SYSTEM)
        y_options.append(ChartColumn(key=ELEVATION, unit=f"m {system['name']}", name=f"Elevation ({system['name']})"))

    return {
        "y_axis": y_options[0] if y_options else None,
        "x_axis": chart_column(x_col) if x_col is not None else None,
        "available_columns": [chart_column(col) for col in column_info],
        "y_axis_options": y_options,
    }
