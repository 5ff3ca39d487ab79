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

import pytest

from gefparse.gef.cpt import (
    find_depth_column,
    parse_cpt_data,
    parse_pre_excavation_layers,
    split_data_lines,
    split_tokens,
)
from gefparse.gef.headers import ColumnInfo, parse_headers
from gefparse.gef.tokenizer import tokenize


def _headers(**raw):
    headers, _ = parse_headers(raw)
    return headers


THREE_COLUMNS = {
    "COLUMNINFO": [
        ["1", "m", "Sondeerlengte", "1"],
        ["2", "MPa", "Conuswaarde", "2"],
        ["3", "MPa", "Wrijvingsweerstand", "3"],
    ],
    "COLUMNVOID": [["2", "-9999"]],
}


def test_sample_file_rows_and_voids(cpt_text):
    raw = tokenize(cpt_text)
    headers, _ = parse_headers(raw.headers)
    frame = parse_cpt_data(raw.data, headers)

    assert list(frame.columns) == ["Sondeerlengte", "Conuswaarde", "Wrijvingsweerstand", "Helling"]
    assert len(frame) == 4
    assert math.isnan(frame["Conuswaarde"].iloc[0])
    assert math.isnan(frame["Wrijvingsweerstand"].iloc[2])
    assert frame["Conuswaarde"].iloc[3] == pytest.approx(3.6)
    assert frame["Helling"].tolist() == [0.0, 10.0, 20.0, 30.0]


def test_void_match_is_exact():
    headers = _headers(**THREE_COLUMNS)
    frame = parse_cpt_data("1.0 -9999 0.1\n2.0 -9999.0001 0.2", headers)
    assert math.isnan(frame["Conuswaarde"].iloc[0])
    assert frame["Conuswaarde"].iloc[1] == pytest.approx(-9999.0001)


def test_void_only_applies_to_its_column():
    headers = _headers(**THREE_COLUMNS)
    frame = parse_cpt_data("-9999 1.0 -9999", headers)
    assert frame["Wrijvingsweerstand"].iloc[0] == -9999.0


def test_depth_column_is_made_positive():
    headers = _headers(**THREE_COLUMNS)
    frame = parse_cpt_data("-1.5 1.0 0.1\n-2.0 1.1 0.1", headers)
    assert frame["Sondeerlengte"].tolist() == [1.5, 2.0]


def test_short_lines_leave_trailing_values_missing():
    headers = _headers(**THREE_COLUMNS)
    frame = parse_cpt_data("1.0 2.0", headers)
    assert frame["Conuswaarde"].iloc[0] == 2.0
    assert math.isnan(frame["Wrijvingsweerstand"].iloc[0])


def test_extra_tokens_are_ignored():
    headers = _headers(**THREE_COLUMNS)
    frame = parse_cpt_data("1.0 2.0 3.0 4.0 5.0", headers)
    assert frame.shape == (1, 3)


def test_unparsable_tokens_are_missing():
    headers = _headers(**THREE_COLUMNS)
    frame = parse_cpt_data("1.0 abc 0.1", headers)
    assert math.isnan(frame["Conuswaarde"].iloc[0])


def test_blank_lines_are_skipped():
    headers = _headers(**THREE_COLUMNS)
    frame = parse_cpt_data("\n1.0 2.0 0.1\n\n   \n2.0 3.0 0.2\n", headers)
    assert len(frame) == 2


def test_empty_data_block():
    headers = _headers(**THREE_COLUMNS)
    frame = parse_cpt_data("", headers)
    assert frame.empty
    assert list(frame.columns) == ["Sondeerlengte", "Conuswaarde", "Wrijvingsweerstand"]


def test_explicit_column_separator():
    raw = dict(THREE_COLUMNS, COLUMNSEPARATOR=[[";"]])
    headers = _headers(**raw)
    frame = parse_cpt_data("1.0;2.0;0.1;\n2.0;;0.2;", headers)
    assert frame["Sondeerlengte"].tolist() == [1.0, 2.0]
    assert math.isnan(frame["Conuswaarde"].iloc[1])
    assert frame["Wrijvingsweerstand"].iloc[1] == pytest.approx(0.2)


def test_split_data_lines_strips_record_separator():
    assert split_data_lines("1 2 3 !\n4 5 6!\n!\n", "!") == ["1 2 3", "4 5 6"]


def test_split_tokens_whitespace_default():
    assert split_tokens("  1.0\t2.0   3.0 ") == ["1.0", "2.0", "3.0"]
    assert split_tokens("1.0 2.0", " ") == ["1.0", "2.0"]


def test_find_depth_column_requires_metre_unit():
    columns = [ColumnInfo(1, "cm", "diepte", 1), ColumnInfo(2, "m", "Penetration length", 1)]
    assert find_depth_column(columns).col_num == 2
    assert find_depth_column([ColumnInfo(1, "MPa", "qc", 2)]) is None


def test_pre_excavation_layers_are_cumulative():
    headers = _headers(SPECIMENVAR=[["2", "1.20", "m", "zand"], ["1", "0.50", "m", "klinker"]])
    layers = parse_pre_excavation_layers(headers)
    assert [(l.depth_top, l.depth_bottom, l.description) for l in layers] == [
        (0.0, 0.5, "klinker"),
        (0.5, 1.2, "zand"),
    ]


def test_values_follow_declared_column_numbers():
    headers = _headers(
        COLUMNINFO=[["1", "m", "Sondeerlengte", "1"], ["2"], ["3", "MPa", "Wrijving", "3"]],
        COLUMNVOID=[["3", "-9999"]],
    )
    frame = parse_cpt_data("1.0 5.0 0.1\n2.0 6.0 -9999", headers)
    assert list(frame.columns) == ["Sondeerlengte", "Wrijving"]
    assert frame["Sondeerlengte"].tolist() == [1.0, 2.0]
    assert frame["Wrijving"].iloc[0] == pytest.approx(0.1)
    assert math.isnan(frame["Wrijving"].iloc[1])


def test_column_beyond_short_line_is_missing():
    headers = _headers(COLUMNINFO=[["1", "m", "Sondeerlengte", "1"], ["3", "MPa", "Wrijving", "3"]])
    frame = parse_cpt_data("1.0 5.0", headers)
    assert math.isnan(frame["Wrijving"].iloc[0])
