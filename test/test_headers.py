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

from gefparse.gef.headers import parse_headers, to_float, to_int
from gefparse.gef.tokenizer import tokenize


def _ids(warnings):
    return [w["id"] for w in warnings]


def test_to_float_reads_leading_number():
    assert to_float("1.5E+01") == 15.0
    assert to_float(" -0.25m") == -0.25
    assert math.isnan(to_float("abc"))
    assert math.isnan(to_float(None))


def test_to_int_defaults():
    assert to_int("007") == 7
    assert to_int("x", default=0) == 0


def test_parse_headers_from_sample(cpt_text):
    headers, warnings = parse_headers(tokenize(cpt_text).headers)
    assert warnings == []
    assert headers.gef_id.major == 1
    assert headers.report_code.code == "GEF-CPT-Report"
    assert headers.company_id.name == "Sondeerbedrijf B.V."
    assert headers.company_id.country_code == "31"
    assert headers.start_date.isoformat() == "2024-03-18"
    assert headers.start_time.isoformat() == "09:05:00"
    assert headers.column == 4
    assert [c.quantity_number for c in headers.column_info] == [1, 2, 3, 8]
    assert headers.column_info[0].unit == "m"
    assert headers.void_values() == {2: -9999.0, 3: -9999.0}
    assert headers.column_by_quantity(8).name == "Helling"
    assert headers.column_by_quantity(11) is None
    assert headers.column_min_max[0].max == 2.0
    assert headers.measurement_var_value(13) == 0.8
    assert headers.measurement_var_by_id(1).description == ""
    assert headers.measurement_text_by_id(1).text == "Gemeente Amsterdam"
    assert headers.comment == ("sondering gestopt, maximale helling",)
    assert headers.record_separator == "!"


def test_xyid_defaults_uncertainty():
    headers, _ = parse_headers({"XYID": [["31000", "155000", "463000"]]})
    assert headers.xy_id.x == 155000.0
    assert headers.xy_id.delta_x == 0.01
    assert headers.xy_id.delta_y == 0.01


@pytest.mark.parametrize("row", [[], ["31000", "155000"], ["", " ", ""]])
def test_short_or_blank_xyid_is_absent(row):
    headers, warnings = parse_headers({"XYID": [row]})
    assert headers.xy_id is None
    assert warnings == []


def test_unknown_coordinate_system_falls_back_with_warning():
    headers, warnings = parse_headers({"XYID": [["99999", "1", "2"]]})
    assert headers.xy_id.coordinate_system_code == "31000"
    assert warnings[0]["id"] == "unknownCoordinateSystem"
    assert warnings[0]["params"]["code"] == "99999"


def test_unparsable_xyid_coordinates_are_absent():
    headers, warnings = parse_headers({"XYID": [["31000", "abc", "463000"]]})
    assert headers.xy_id is None
    assert _ids(warnings) == ["invalidXyidHeader"]


def test_zid_keeps_raw_code_and_defaults():
    headers, _ = parse_headers({"ZID": [["12345"]]})
    assert headers.z_id.height_system_code == "12345"
    assert headers.z_id.height == 0.0
    assert headers.z_id.delta_z == 0.01


def test_zero_height_is_kept():
    headers, _ = parse_headers({"ZID": [["31000", "0.00", "0.05"]]})
    assert headers.z_id.height == 0.0
    assert headers.z_id.delta_z == 0.05


def test_columninfo_without_quantity_defaults_to_zero():
    raw = {"COLUMNINFO": [["1", "m", "diepte", "1"], ["2", "MPa", "qc"], ["3", "MPa", "fs"]]}
    headers, warnings = parse_headers(raw)
    assert [c.quantity_number for c in headers.column_info] == [1, 0, 0]
    # the missing quantity is reported once, by the structural checks
    assert warnings == []


def test_bad_columnvoid_entries_are_dropped():
    raw = {"COLUMNVOID": [["1", "-9999"], ["x", "-9999"], ["3"]]}
    headers, warnings = parse_headers(raw)
    assert headers.void_values() == {1: -9999.0}
    assert _ids(warnings) == ["invalidHeader", "invalidHeader"]


def test_dates_are_not_range_checked():
    headers, _ = parse_headers({"STARTDATE": [["2024", "13", "0"]]})
    assert headers.start_date.month == 13
    assert headers.start_date.day == 0


def test_placeholder_start_time_is_absent():
    headers, _ = parse_headers({"STARTTIME": [["-", "-", "-"]]})
    assert headers.start_time is None


def test_start_time_without_seconds():
    headers, _ = parse_headers({"STARTTIME": [["14", "30"]]})
    assert headers.start_time.isoformat() == "14:30"


def test_measurement_var_defaults():
    headers, _ = parse_headers({"MEASUREMENTVAR": [["13", "1.50"]]})
    mv = headers.measurement_var[0]
    assert (mv.id, mv.value, mv.unit, mv.description) == (13, "1.50", "-", "")


def test_measurement_text_keeps_extra_tokens():
    headers, _ = parse_headers({"MEASUREMENTTEXT": [["5", "Straat 1", "Delft"]]})
    assert headers.measurement_text[0].extra == ("Delft",)


def test_specimen_var_requires_numeric_value():
    headers, warnings = parse_headers({"SPECIMENVAR": [["11", "0.5", "m"], ["12", "-"]]})
    assert [sv.id for sv in headers.specimen_var] == [11]
    assert _ids(warnings) == ["invalidHeader"]


def test_report_code_with_missing_version():
    headers, _ = parse_headers({"REPORTCODE": [["GEF-BORE-Report"]]})
    assert headers.report_code.code == "GEF-BORE-Report"
    assert headers.report_code.major == 0


def test_short_columninfo_row_is_dropped():
    raw = {"COLUMNINFO": [["1", "m", "Sondeerlengte", "1"], ["2"], ["3", "MPa", "Wrijving", "3"]]}
    headers, warnings = parse_headers(raw)
    assert [c.col_num for c in headers.column_info] == [1, 3]
    assert [w["id"] for w in warnings] == ["invalidHeader"]
