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
from pathlib import Path

import pytest

import gefparse
from gefparse import ParseConfig, TokenizerError, UnsupportedFileType
from gefparse.datamodel import ELEVATION, IS_VOID, PRE_EXCAVATED_DEPTH, TRUE_DEPTH
from gefparse.gef.model import GefBoreData, GefCptData
from gefparse.gef.parse import parse_gef, parse_gef_bytes, parse_gef_file, try_parse_gef
from gefparse.gef.tokenizer import tokenize

DATA_DIR = Path(__file__).parent / "data"


def _ids(warnings):
    return [w["id"] for w in warnings]


def test_minimal_cpt(make_gef):
    text = make_gef(["COLUMNINFO= 1, m, Sondeerlengte, 1"], ["1.234"])
    result = parse_gef(text, "minimal.gef")

    assert isinstance(result, GefCptData)
    assert len(result.data) == 1
    assert result.data["Sondeerlengte"].iloc[0] == 1.234
    assert result.data[TRUE_DEPTH].iloc[0] == 1.234
    assert ELEVATION not in result.data.columns
    assert result.processed["wgs84"] is None
    ids = _ids(result.warnings)
    assert "missingZidHeader" in ids
    assert "missingXyidHeader" in ids
    assert all(w["filename"] == "minimal.gef" for w in result.warnings)


def test_sample_cpt(cpt_text, fixed_projector):
    result = parse_gef(cpt_text, "cpt_inclined.gef", projector=fixed_projector)

    assert result.warnings == []
    assert len(result.data) == 4
    assert result.data[IS_VOID].tolist() == [True, False, False, False]
    assert (result.data[PRE_EXCAVATED_DEPTH] == 0.8).all()
    assert len(result.valid_rows()) == 3
    assert result.data[ELEVATION].iloc[0] == pytest.approx(-2.0)
    assert result.processed["wgs84"] == {"lat": 52.37, "lon": 4.9}
    assert result.processed["testId"] == "CPT-07"
    assert result.pre_excavation_layers == []


def test_sample_chart_axes(cpt_text, fixed_projector):
    axes = parse_gef(cpt_text, projector=fixed_projector).chart_axes

    assert axes["y_axis"].key == "Sondeerlengte"
    assert axes["y_axis"].name == "Penetration length"
    assert axes["x_axis"].key == "Conuswaarde"
    assert axes["x_axis"].name == "Measured cone resistance (qc)"
    assert [c.key for c in axes["y_axis_options"]] == ["Sondeerlengte", TRUE_DEPTH, ELEVATION]
    assert axes["y_axis_options"][2].unit == "m Normaal Amsterdams Peil"
    assert len(axes["available_columns"]) == 4


def test_header_warnings_are_merged_without_repeats(make_gef):
    text = make_gef(
        [
            "COLUMNINFO= 1, m, Sondeerlengte, 1",
            "COLUMNINFO= 2, MPa, Conuswaarde",
            "XYID= 31000, 155000, 463000",
            "ZID= 31000, 0.0",
        ],
        ["1.0 2.0"],
    )
    result = parse_gef(text, "a.gef", projector=lambda *args: (5.0, 52.0))
    assert _ids(result.warnings).count("missingColumnInfoQuantity") == 1


def test_to_dict(cpt_text, fixed_projector):
    result = parse_gef(cpt_text, "x.gef", projector=fixed_projector)
    payload = result.to_dict()
    assert payload["fileType"] == "CPT"
    assert payload["processed"]["filename"] == "x.gef"
    assert "x.gef" in repr(result)


def test_sample_bore(bore_text, fixed_projector):
    result = parse_gef(bore_text, "bore_sample.gef", projector=fixed_projector)

    assert isinstance(result, GefBoreData)
    first = result.layers.iloc[0]
    assert first["depthTop"] == 0.0
    assert first["depthBottom"] == 1.5
    assert first["soilCode"] == "Zs1"
    assert first["additionalCodes"] == ["g1"]
    assert first["description"] == "bruin zand met grind"
    assert [s.specimen_number for s in result.specimens] == [1, 3]
    assert result.processed["fileType"] == "BORE"
    assert result.warnings == []


@pytest.mark.parametrize("report_code", ["GEF-DISS-Report", "GEF-SIEVE-Report"])
def test_unsupported_report_types(make_gef, report_code):
    text = make_gef([f"REPORTCODE= {report_code}, 1, 0, 0", "COLUMNINFO= 1, s, tijd, 12"], ["1.0"])
    with pytest.raises(UnsupportedFileType):
        parse_gef(text, "diss.gef")


def test_text_without_headers():
    with pytest.raises(TokenizerError):
        parse_gef("1.0 2.0\n3.0 4.0\n")


def test_failing_tokenizer_is_wrapped():
    def tokenizer(text):
        raise RuntimeError("broken")

    with pytest.raises(TokenizerError, match="broken"):
        parse_gef("#GEFID= 1, 1, 0\n", "f.gef", tokenizer=tokenizer)


def test_mapping_tokenizer(cpt_text, fixed_projector):
    def tokenizer(text):
        raw = tokenize(text)
        return {"headers": {key.lower(): rows for key, rows in raw.headers.items()}, "data": raw.data}

    result = parse_gef(cpt_text, tokenizer=tokenizer, projector=fixed_projector)
    assert len(result.data) == 4
    assert result.processed["projectId"] == "P2024-031"


def test_try_parse_gef_success(make_gef):
    result, error = try_parse_gef(make_gef(["COLUMNINFO= 1, m, Sondeerlengte, 1"], ["1.0"]), "ok.gef")
    assert error is None
    assert isinstance(result, GefCptData)


def test_try_parse_gef_failure(make_gef):
    result, error = try_parse_gef(make_gef(["REPORTCODE= GEF-DISS-Report"]), "diss.gef")
    assert result is None
    assert isinstance(error, UnsupportedFileType)
    assert error.reason == "dissipationTestNotSupported"


def test_parse_bytes_with_windows_1252(make_gef):
    text = make_gef(["COLUMNINFO= 1, m, Sondeerlengte, 1", "MEASUREMENTTEXT= 1, Gemeente Grönte"], ["1.0"])
    result = parse_gef_bytes(text.encode("cp1252"), "w.gef")
    (item,) = [t for t in result.processed["texts"] if t["id"] == 1]
    assert item["value"] == "Gemeente Grönte"


def test_parse_file(fixed_projector):
    result = parse_gef_file(DATA_DIR / "bore_sample.gef", projector=fixed_projector)
    assert result.processed["filename"] == "bore_sample.gef"
    assert len(result.layers) == 3


def test_config_locale(cpt_text, fixed_projector):
    config = ParseConfig().update(locale="nl")
    result = parse_gef(cpt_text, projector=fixed_projector, config=config)
    labels = {t["id"]: t["label"] for t in result.processed["texts"]}
    assert labels[1] == "Opdrachtgever"


def test_config_rejects_unknown_setting():
    with pytest.raises(ValueError):
        ParseConfig().update(colour="red")


def test_package_exports():
    assert gefparse.parse_gef is parse_gef
    assert isinstance(gefparse.__version__, str)


def test_nan_rows_survive(make_gef):
    text = make_gef(
        ["COLUMNINFO= 1, m, Sondeerlengte, 1", "COLUMNINFO= 2, MPa, Conuswaarde, 2", "COLUMNVOID= 2, -1"],
        ["1.0 -1", "2.0 3.5"],
    )
    result = parse_gef(text)
    assert math.isnan(result.data["Conuswaarde"].iloc[0])
    assert result.data[TRUE_DEPTH].tolist() == [1.0, 2.0]
