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


"""Depth correction for CPT data.

Adds computed columns to a parsed CPT frame:

- trueDepth: inclination-corrected depth, positive and increasing downward.
  A corrected-depth column (quantity 11) is used as-is; otherwise penetration
  length (quantity 1) is integrated with the resultant inclination
  (quantity 8) as ``cumsum(cos(inclination) * |delta penetration|)``.
- elevation: ``ZID height - trueDepth`` relative to the file's height datum.
- isVoid / preExcavatedDepth: rows above the pre-excavated depth
  (MEASUREMENTVAR 13) are flagged void, since no soil was tested there.

Missing penetration or inclination readings count as zero.
"""

import logging
import math

import numpy as np

from gefparse.datamodel import (
    CORRECTED_DEPTH,
    ELEVATION,
    INCLINATION,
    IS_VOID,
    PENETRATION_LENGTH,
    PRE_EXCAVATED_DEPTH,
    PRE_EXCAVATED_DEPTH_VAR,
    TRUE_DEPTH,
)

from .headers import find_column_by_quantity, to_float

logger = logging.getLogger(__name__)


def _column_values(frame, col):
    return frame[col.name].fillna(0.0).to_numpy(dtype=float)


def calculate_true_depth(frame, column_info):
    """Return the true depth as a numpy array, or None when no depth column exists."""
    corrected = find_column_by_quantity(column_info, CORRECTED_DEPTH)
    if corrected is not None:
        return np.abs(_column_values(frame, corrected))

    penetration_col = find_column_by_quantity(column_info, PENETRATION_LENGTH)
    if penetration_col is None:
        return None
    penetration = _column_values(frame, penetration_col)

    inclination_col = find_column_by_quantity(column_info, INCLINATION)
    if inclination_col is None:
        return np.abs(penetration)
    if len(penetration) == 0:
        return penetration

    inclination = _column_values(frame, inclination_col)
    steps = np.cos(np.radians(inclination[1:])) * np.abs(np.diff(penetration))
    return np.concatenate(([abs(penetration[0])], steps)).cumsum()


def pre_excavated_depth(measurement_vars):
    """Pre-excavated depth from MEASUREMENTVAR 13, or 0 when absent or not numeric."""
    for mv in measurement_vars or ():
        if mv.id == PRE_EXCAVATED_DEPTH_VAR:
            value = to_float(mv.value)
            return 0.0 if math.isnan(value) else value
    return 0.0


def add_computed_depth_columns(rows, column_info, z_id=None, measurement_vars=None):
    """Return a copy of ``rows`` with trueDepth, elevation and void columns added.

    ``trueDepth`` is only added when a depth column exists, and ``elevation``
    only when a ZID is also given. ``isVoid`` is always present;
    ``preExcavatedDepth`` only when the pre-excavated depth is positive.
    """
    result = rows.copy()

    true_depth = calculate_true_depth(result, column_info)
    if true_depth is not None:
        result[TRUE_DEPTH] = true_depth
        if z_id is not None:
            result[ELEVATION] = z_id.height - true_depth

    depth = pre_excavated_depth(measurement_vars)
    if depth > 0:
        penetration_col = find_column_by_quantity(column_info, PENETRATION_LENGTH)
        if penetration_col is not None:
            penetration = _column_values(result, penetration_col)
        else:
            penetration = np.zeros(len(result))
        result[IS_VOID] = penetration < depth
        result[PRE_EXCAVATED_DEPTH] = depth
        logger.debug("Flagged %d rows above pre-excavated depth %.3f", int(result[IS_VOID].sum()), depth)
    else:
        result[IS_VOID] = np.zeros(len(result), dtype=bool)

    return result
