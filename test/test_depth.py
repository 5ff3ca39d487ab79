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

import math

import numpy as np
import pandas as pd
import pytest

from gefparse.datamodel import ELEVATION, IS_VOID, PRE_EXCAVATED_DEPTH, TRUE_DEPTH
from gefparse.gef.cpt import parse_cpt_data
from gefparse.gef.depth import add_computed_depth_columns, calculate_true_depth, pre_excavated_depth
from gefparse.gef.headers import ColumnInfo, MeasurementVar, ZId, parse_headers
from gefparse.gef.tokenizer import tokenize


PENETRATION = ColumnInfo(1, "m", "Sondeerlengte", 1)
CONE = ColumnInfo(2, "MPa", "Conuswaarde", 2)
INCLINATION = ColumnInfo(3, "graden", "Helling", 8)
CORRECTED = ColumnInfo(4, "m", "Gecorrigeerde diepte", 11)


def _frame(**columns):
    return pd.DataFrame({name: np.asarray(values, dtype=float) for name, values in columns.items()})


def test_true_depth_equals_penetration_without_inclination():
    frame = _frame(Sondeerlengte=[0.5, 1.0, 1.5])
    result = add_computed_depth_columns(frame, [PENETRATION])
    assert result[TRUE_DEPTH].tolist() == [0.5, 1.0, 1.5]
    assert ELEVATION not in result.columns


def test_elevation_is_height_minus_depth():
    frame = _frame(Sondeerlengte=[2.0])
    result = add_computed_depth_columns(frame, [PENETRATION], z_id=ZId("31000", 5.0))
    assert result[ELEVATION].iloc[0] == pytest.approx(3.0)


def test_inclination_shortens_depth_steps():
    frame = _frame(Sondeerlengte=[1.0, 2.0, 3.0], Helling=[0.0, 60.0, 0.0])
    depth = calculate_true_depth(frame, [PENETRATION, INCLINATION])
    assert depth == pytest.approx([1.0, 1.5, 2.5])


def test_true_depth_is_monotonic_for_sample(cpt_text):
    raw = tokenize(cpt_text)
    headers, _ = parse_headers(raw.headers)
    frame = parse_cpt_data(raw.data, headers)
    result = add_computed_depth_columns(frame, headers.column_info, headers.z_id, headers.measurement_var)

    expected = [
        0.5,
        0.5 + 0.5 * math.cos(math.radians(10)),
        0.5 + 0.5 * (math.cos(math.radians(10)) + math.cos(math.radians(20))),
        0.5 + 0.5 * (math.cos(math.radians(10)) + math.cos(math.radians(20)) + math.cos(math.radians(30))),
    ]
    assert result[TRUE_DEPTH].tolist() == pytest.approx(expected)
    assert np.all(np.diff(result[TRUE_DEPTH].to_numpy()) >= 0)
    assert result[TRUE_DEPTH].iloc[-1] <= result["Sondeerlengte"].iloc[-1]
    assert result[ELEVATION].tolist() == pytest.approx([-1.5 - d for d in expected])


def test_missing_readings_count_as_zero():
    frame = _frame(Sondeerlengte=[1.0, 2.0], Helling=[0.0, np.nan])
    depth = calculate_true_depth(frame, [PENETRATION, INCLINATION])
    assert depth == pytest.approx([1.0, 2.0])


def test_corrected_depth_column_is_used_directly():
    frame = _frame(Sondeerlengte=[1.0, 2.0], Helling=[30.0, 30.0], **{"Gecorrigeerde diepte": [-0.9, -1.8]})
    depth = calculate_true_depth(frame, [PENETRATION, INCLINATION, CORRECTED])
    assert depth.tolist() == pytest.approx([0.9, 1.8])


def test_no_depth_column_means_no_true_depth():
    frame = _frame(Conuswaarde=[1.0, 2.0])
    result = add_computed_depth_columns(frame, [CONE], z_id=ZId("31000", 1.0))
    assert TRUE_DEPTH not in result.columns
    assert ELEVATION not in result.columns
    assert result[IS_VOID].tolist() == [False, False]


def test_empty_frame():
    frame = _frame(Sondeerlengte=[], Helling=[])
    result = add_computed_depth_columns(frame, [PENETRATION, INCLINATION])
    assert result.empty
    assert TRUE_DEPTH in result.columns


def test_pre_excavated_rows_are_void():
    frame = _frame(Sondeerlengte=[1.0, 1.5, 2.0])
    result = add_computed_depth_columns(frame, [PENETRATION], measurement_vars=[MeasurementVar(13, "1.5", "m")])
    assert result[IS_VOID].tolist() == [True, False, False]
    assert (result[PRE_EXCAVATED_DEPTH] == 1.5).all()


def test_no_pre_excavation_column_without_depth():
    frame = _frame(Sondeerlengte=[1.0])
    result = add_computed_depth_columns(frame, [PENETRATION], measurement_vars=[MeasurementVar(13, "0")])
    assert PRE_EXCAVATED_DEPTH not in result.columns
    assert result[IS_VOID].tolist() == [False]


def test_input_frame_is_not_modified():
    frame = _frame(Sondeerlengte=[1.0])
    add_computed_depth_columns(frame, [PENETRATION], z_id=ZId("31000", 0.0))
    assert list(frame.columns) == ["Sondeerlengte"]


@pytest.mark.parametrize(
    "value, expected",
    [("1.50", 1.5), ("n.v.t.", 0.0), ("-", 0.0)],
)
def test_pre_excavated_depth_value(value, expected):
    assert pre_excavated_depth([MeasurementVar(13, value)]) == expected


def test_pre_excavated_depth_absent():
    assert pre_excavated_depth([MeasurementVar(1, "1000")]) == 0.0
    assert pre_excavated_depth(None) == 0.0
