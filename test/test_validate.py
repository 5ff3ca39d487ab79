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

import pytest

from gefparse.config import ParseConfig
from gefparse.datamodel import FileType
from gefparse.gef.cpt import parse_cpt_data
from gefparse.gef.depth import add_computed_depth_columns
from gefparse.gef.headers import parse_headers
from gefparse.gef.parse import parse_gef
from gefparse.gef.tokenizer import tokenize
from gefparse.gef.validate import (
    generate_warnings,
    make_warning,
    merge_warnings,
    quantity_name,
    validate_column_ranges,
    validate_quantities,
    validate_zid,
    with_filename,
)


def _ids(warnings):
    return [w["id"] for w in warnings]


@pytest.fixture
def sample(cpt_text):
    raw = tokenize(cpt_text)
    headers, _ = parse_headers(raw.headers)
    data = parse_cpt_data(raw.data, headers)
    data = add_computed_depth_columns(data, headers.column_info, headers.z_id, headers.measurement_var)
    return raw, headers, data


def test_sample_is_clean_by_default(sample):
    raw, headers, data = sample
    assert generate_warnings("cpt.gef", headers, raw.headers, data) == []


def test_void_rows_excluded_from_range_check(sample):
    _, headers, data = sample
    # first row (0.50 m) lies above the pre-excavated depth and below the declared minimum
    assert validate_column_ranges("cpt.gef", headers, data, exclude_void=True) == []


def test_void_rows_included_in_range_check(sample):
    _, headers, data = sample
    (warning,) = validate_column_ranges("cpt.gef", headers, data, exclude_void=False)
    assert warning["id"] == "columnRangeViolation"
    assert warning["filename"] == "cpt.gef"
    assert warning["params"]["column"] == 1
    assert warning["params"]["actualMin"] == 0.5
    assert warning["params"]["declaredMin"] == 0.8


def test_range_check_follows_config(sample):
    raw, headers, data = sample
    config = ParseConfig(exclude_void_from_range_checks=False)
    warnings = generate_warnings("cpt.gef", headers, raw.headers, data, config=config)
    assert _ids(warnings) == ["columnRangeViolation"]


def test_missing_position_headers():
    raw = {"COLUMNINFO": [["1", "m", "Sondeerlengte", "1"], ["2", "MPa", "qc", "2"]]}
    headers, _ = parse_headers(raw)
    assert _ids(generate_warnings("a.gef", headers, raw)) == ["missingZidHeader", "missingXyidHeader"]


@pytest.mark.parametrize(
    "row, expected",
    [
        (["31000", "1.5"], []),
        (["31000"], ["zidWithoutHeight"]),
        (["99999", "1.5"], ["unknownHeightSystem"]),
        ([" "], ["missingZidHeader"]),
    ],
)
def test_validate_zid(row, expected):
    assert _ids(validate_zid("a.gef", {"ZID": [row]}, "31000")) == expected


def test_unknown_height_system_params():
    (warning,) = validate_zid("a.gef", {"ZID": [["99999", "1.5"]]}, "31000")
    assert warning["params"] == {"heightCode": "99999", "defaultCode": "31000"}


def test_missing_quantities_and_column_count():
    raw = {
        "ZID": [["31000", "0.0"]],
        "XYID": [["31000", "1", "2"]],
        "COLUMN": [["3"]],
        "COLUMNINFO": [["1", "m", "Sondeerlengte", "1"], ["2", "MPa", "qc"]],
    }
    headers, _ = parse_headers(raw)
    warnings = generate_warnings("a.gef", headers, raw)
    assert _ids(warnings) == ["missingColumnInfoQuantity", "columnCountMismatch", "missingRequiredQuantity"]
    assert warnings[1]["params"] == {"declared": 3, "described": 2}
    assert warnings[2]["params"]["quantityNumber"] == 2


def test_duplicate_quantity():
    headers, _ = parse_headers(
        {"COLUMNINFO": [["1", "m", "a", "1"], ["2", "MPa", "b", "2"], ["3", "MPa", "c", "2"]]}
    )
    (warning,) = validate_quantities("a.gef", headers.column_info)
    assert warning["id"] == "duplicateQuantity"
    assert warning["params"]["columns"] == [2, 3]


def test_bore_skips_cpt_checks():
    raw = {"ZID": [["31000", "0.0"]], "XYID": [["31000", "1", "2"]], "COLUMNINFO": [["1", "m", "top", "1"]]}
    headers, _ = parse_headers(raw)
    assert generate_warnings("b.gef", headers, raw, file_type=FileType.BORE) == []


def test_merge_warnings_drops_repeats():
    a = make_warning("missingColumnInfoQuantity", "a.gef", count=1)
    b = make_warning("missingZidHeader", "a.gef")
    assert merge_warnings([a], [dict(a), b]) == [a, b]


def test_with_filename():
    (stamped,) = with_filename([make_warning("x", value=1)], "f.gef")
    assert stamped == {"id": "x", "filename": "f.gef", "params": {"value": 1}}


def test_quantity_name():
    assert quantity_name(1) == "Penetration length"
    assert quantity_name(9999) == "Quantity 9999"


def test_missing_quantity_reported_once(make_gef):
    text = make_gef(
        [
            "COLUMNINFO= 1, m, Sondeerlengte, 1",
            "COLUMNINFO= 2, MPa, Conuswaarde",
            "COLUMNINFO= 3",
            "XYID= 31000, 155000, 463000",
            "ZID= 31000, 0.0",
        ],
        ["1.0 2.0 3.0"],
    )
    result = parse_gef(text, "a.gef", projector=lambda *args: (5.0, 52.0))
    missing = [w for w in result.warnings if w["id"] == "missingColumnInfoQuantity"]
    assert missing == [make_warning("missingColumnInfoQuantity", "a.gef", count=1)]
    assert "invalidHeader" in _ids(result.warnings)
