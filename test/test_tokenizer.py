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

from gefparse.errors import TokenizerError
from gefparse.gef.tokenizer import decode_gef_bytes, tokenize


def test_tokenize_splits_headers_and_data(cpt_text):
    raw = tokenize(cpt_text)
    assert raw.headers["GEFID"] == [["1", "1", "0"]]
    assert len(raw.headers["COLUMNINFO"]) == 4
    assert raw.headers["COLUMNINFO"][1] == ["2", "MPa", "Conuswaarde", "2"]
    assert raw.data.strip().splitlines()[0].startswith("0.50")
    assert "#" not in raw.data


def test_tokenize_keeps_separator_values_whole(make_gef):
    text = make_gef(["COLUMNSEPARATOR= ,", "RECORDSEPARATOR= !", "COLUMNINFO= 1, m, diepte, 1"], ["1.0,2.0"])
    raw = tokenize(text)
    assert raw.headers["COLUMNSEPARATOR"] == [[","]]
    assert raw.headers["RECORDSEPARATOR"] == [["!"]]


def test_tokenize_without_eoh_treats_first_non_header_line_as_data():
    raw = tokenize("#GEFID= 1, 1, 0\n#COLUMNINFO= 1, m, diepte, 1\n1.0\n2.0\n")
    assert raw.data.splitlines() == ["1.0", "2.0"]


def test_tokenize_strips_byte_order_mark(make_gef):
    raw = tokenize("\ufeff" + make_gef(["GEFID= 1, 1, 0"]))
    assert "GEFID" in raw.headers


def test_tokenize_rejects_text_without_headers():
    with pytest.raises(TokenizerError):
        tokenize("1.0 2.0\n3.0 4.0\n")


def test_decode_falls_back_to_cp1252():
    content = "#COMPANYID= Grönte B.V.\n".encode("cp1252")
    assert "Grönte" in decode_gef_bytes(content)


def test_decode_replaces_undecodable_bytes_without_fallback():
    text = decode_gef_bytes(b"#TESTID= A\xff\n", fallback_encoding=None)
    assert text.startswith("#TESTID= A")
    assert "\ufffd" in text
