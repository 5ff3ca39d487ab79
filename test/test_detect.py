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

from gefparse.datamodel import Extension, FileType
from gefparse.errors import UnsupportedFileType
from gefparse.gef.detect import detect_extension, detect_file_type, detect_headers_extension
from gefparse.gef.headers import parse_headers
from gefparse.tables import extension_only_ids, measurement_tables


@pytest.mark.parametrize(
    "report_code, expected",
    [
        ("GEF-CPT-Report", FileType.CPT),
        ("gef-cpt-report", FileType.CPT),
        ("GEF-BORE-Report", FileType.BORE),
        ("GEF-BOREHOLE-Report", FileType.BORE),
        (None, FileType.CPT),
        ("", FileType.CPT),
        ("SOMETHING-ELSE", FileType.CPT),
    ],
)
def test_detect_file_type(report_code, expected):
    assert detect_file_type(report_code) is expected


@pytest.mark.parametrize(
    "report_code, reason",
    [
        ("GEF-DISS-Report", "dissipationTestNotSupported"),
        ("GEF-SIEVE-Report", "sieveTestNotSupported"),
    ],
)
def test_unsupported_report_codes(report_code, reason):
    with pytest.raises(UnsupportedFileType) as excinfo:
        detect_file_type(report_code)
    assert excinfo.value.reason == reason
    assert excinfo.value.report_code == report_code


def test_extension_defaults_to_standard():
    assert detect_extension() is Extension.STANDARD
    assert detect_extension([1, 4, 43], [1, 13]) is Extension.STANDARD


def test_dutch_text_id_selects_dutch():
    assert detect_extension([1, 101]) is Extension.DUTCH


def test_belgian_text_id_selects_belgian():
    assert detect_extension([135]) is Extension.BELGIAN


def test_dutch_wins_when_both_present():
    assert detect_extension([101, 135]) is Extension.DUTCH


def test_shared_extension_id_does_not_decide():
    only = extension_only_ids()
    assert 130 not in only[Extension.DUTCH][1]
    assert 130 not in only[Extension.BELGIAN][1]
    assert detect_extension([], [130]) is Extension.STANDARD


def test_detect_from_headers():
    headers, _ = parse_headers({"MEASUREMENTTEXT": [["135", "2024-01-01"]]})
    assert detect_headers_extension(headers) is Extension.BELGIAN


def test_extension_tables_include_standard_entries():
    tables = measurement_tables(FileType.CPT, Extension.DUTCH)
    assert 1 in tables.texts
    assert 101 in tables.texts
    assert 101 not in measurement_tables(FileType.CPT).texts


def test_bore_tables_ignore_extension():
    assert measurement_tables(FileType.BORE, Extension.BELGIAN) is measurement_tables(FileType.BORE)
