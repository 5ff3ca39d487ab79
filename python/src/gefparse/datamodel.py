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


"""
gefparse data model

Column names and numeric codes shared by the CPT and BORE pipelines, so that
parsers, depth correction, validation and chart helpers agree on keys.
"""

from enum import Enum


class FileType(Enum):
    CPT = "CPT"
    BORE = "BORE"


class Extension(Enum):
    STANDARD = "standard"
    DUTCH = "dutch"
    BELGIAN = "belgian"


# Computed CPT columns
TRUE_DEPTH = "trueDepth"
ELEVATION = "elevation"
IS_VOID = "isVoid"
PRE_EXCAVATED_DEPTH = "preExcavatedDepth"

# BORE layer columns
DEPTH_TOP = "depthTop"
DEPTH_BOTTOM = "depthBottom"
SOIL_CODE = "soilCode"
ADDITIONAL_CODES = "additionalCodes"
DESCRIPTION = "description"
SAND_MEDIAN = "sandMedian"
GRAVEL_MEDIAN = "gravelMedian"
CLAY_PERCENT = "clayPercent"
SILT_PERCENT = "siltPercent"
SAND_PERCENT = "sandPercent"
GRAVEL_PERCENT = "gravelPercent"
ORGANIC_PERCENT = "organicPercent"

# Numeric bore fields that follow depth top/bottom, in record order
BORE_NUMERIC_FIELDS = [
    SAND_MEDIAN,
    GRAVEL_MEDIAN,
    CLAY_PERCENT,
    SILT_PERCENT,
    SAND_PERCENT,
    GRAVEL_PERCENT,
    ORGANIC_PERCENT,
]

BORE_LAYER_COLUMNS = [DEPTH_TOP, DEPTH_BOTTOM, SOIL_CODE, ADDITIONAL_CODES, DESCRIPTION] + BORE_NUMERIC_FIELDS

# GEF column quantity numbers (COLUMNINFO fourth field)
QUANTITY_UNKNOWN = 0
PENETRATION_LENGTH = 1
CONE_RESISTANCE = 2
FRICTION_RESISTANCE = 3
FRICTION_NUMBER = 4
PORE_PRESSURE_U2 = 6
INCLINATION = 8
CORRECTED_DEPTH = 11
CORRECTED_CONE_RESISTANCE = 13

# Quantities a CPT is expected to carry
REQUIRED_CPT_QUANTITIES = [PENETRATION_LENGTH, CONE_RESISTANCE]

# BORE COLUMNINFO quantity numbers for layer boundaries
BORE_DEPTH_TOP_QUANTITY = 1
BORE_DEPTH_BOTTOM_QUANTITY = 2

# MEASUREMENTVAR id holding the pre-excavated depth
PRE_EXCAVATED_DEPTH_VAR = 13

# Name fragments of a depth-like column (matched case-insensitively, unit must be "m")
DEPTH_KEYWORDS = ["penetration", "sondeer", "length", "diepte", "lengte"]
DEPTH_UNIT = "m"

DEFAULT_COORDINATE_SYSTEM = "31000"
DEFAULT_HEIGHT_SYSTEM = "31000"
DEFAULT_DELTA = 0.01
DEFAULT_BORE_SEPARATOR = ";"
DEFAULT_RECORD_SEPARATOR = "!"

# Values treated as "not provided" in measurement blocks
EMPTY_VALUES = ["", "-", "0"]

# Specimen numbering used by SPECIMENVAR/SPECIMENTEXT offsets
MAX_SPECIMENS = 200
SPECIMEN_STRIDE = 7
