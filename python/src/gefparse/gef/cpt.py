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


"""CPT data block decoding.

The data block becomes a DataFrame with one float column per COLUMNINFO
entry, in declared order. Void sentinels and unparsable tokens are NaN.
"""

import logging
import math
from dataclasses import dataclass

import numpy as np
import pandas as pd

from gefparse.datamodel import DEPTH_KEYWORDS, DEPTH_UNIT

from .headers import to_float

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreExcavationLayer:
    depth_top: float
    depth_bottom: float
    description: str


def is_depth_column(col):
    name = col.name.lower()
    return col.unit == DEPTH_UNIT and any(keyword in name for keyword in DEPTH_KEYWORDS)


def find_depth_column(column_info):
    for col in column_info:
        if is_depth_column(col):
            return col
    return None


def split_data_lines(raw_block, record_separator=None):
    """Return the non-blank, trimmed lines of a data block."""
    lines = []
    for line in raw_block.splitlines():
        line = line.strip()
        if record_separator and line.endswith(record_separator):
            line = line[: -len(record_separator)].rstrip()
        if line:
            lines.append(line)
    return lines


def split_tokens(line, separator=None):
    if separator is None or separator.strip() == "":
        return line.split()
    return [token.strip() for token in line.split(separator)]


def parse_cpt_data(raw_block, headers):
    """Decode a CPT data block into a DataFrame keyed by column name.

    Each column reads the token at its declared COLUMNINFO number, so a
    dropped COLUMNINFO row never shifts the other columns. Lines shorter than
    the declared columns leave trailing values NaN. A value exactly equal to
    its column's COLUMNVOID sentinel becomes NaN. The depth column (a depth
    keyword in its name, unit ``m``) is made non-negative.
    """
    column_info = list(headers.column_info)
    names = [col.name for col in column_info]
    lines = split_data_lines(raw_block or "", headers.record_separator)

    values = np.full((len(lines), len(names)), np.nan, dtype=float)
    for row_index, line in enumerate(lines):
        tokens = split_tokens(line, headers.column_separator)
        for col_index, col in enumerate(column_info):
            if col.col_num <= len(tokens):
                values[row_index, col_index] = to_float(tokens[col.col_num - 1])

    void_values = headers.void_values()
    for col_index, col in enumerate(column_info):
        void = void_values.get(col.col_num)
        if void is None or math.isnan(void):
            continue
        column = values[:, col_index]
        column[column == void] = np.nan

    frame = pd.DataFrame({name: values[:, i] for i, name in enumerate(names)}, columns=list(dict.fromkeys(names)))

    depth_col = find_depth_column(column_info)
    if depth_col is not None:
        frame[depth_col.name] = frame[depth_col.name].abs()

    logger.debug("Parsed %d CPT rows with %d columns", len(frame), len(frame.columns))
    return frame


def parse_pre_excavation_layers(headers):
    """Build layers from SPECIMENVAR entries; each value is a cumulative bottom depth."""
    layers = []
    previous_depth = 0.0
    for sv in sorted(headers.specimen_var, key=lambda v: v.id):
        layers.append(PreExcavationLayer(previous_depth, sv.value, sv.description or sv.unit))
        previous_depth = sv.value
    return layers
