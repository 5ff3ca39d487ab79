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


"""GEF-BORE layer and specimen decoding.

Bore data records are separated by the record separator (``!``), not by
newlines. Each record holds the numeric COLUMNINFO fields followed by
quoted text fields: the NEN 5104 soil code, additional codes, and often a
free-text description as the last field.

Specimens are not stored in the data block. They are spread over
SPECIMENVAR and SPECIMENTEXT entries whose ids follow ``offset + 7 * k``
for specimen number ``k`` in 1..200.
"""

import logging
import math
import re
from dataclasses import dataclass

import numpy as np
import pandas as pd

from gefparse.datamodel import (
    ADDITIONAL_CODES,
    BORE_DEPTH_BOTTOM_QUANTITY,
    BORE_DEPTH_TOP_QUANTITY,
    BORE_LAYER_COLUMNS,
    BORE_NUMERIC_FIELDS,
    DEFAULT_BORE_SEPARATOR,
    DEPTH_BOTTOM,
    DEPTH_TOP,
    DESCRIPTION,
    MAX_SPECIMENS,
    SOIL_CODE,
    SPECIMEN_STRIDE,
)
from gefparse.tables.codes import ALL_CODES, NEN5104_SOIL_CODES, SOIL_TYPE_NAMES, SPECIMEN_CODES

from .headers import to_float

logger = logging.getLogger(__name__)

SPECIMEN_VAR_OFFSETS = {
    "depth_top": 4,
    "depth_bottom": 5,
    "diameter_monster": 6,
    "diameter_monstersteekapparaat": 7,
}

SPECIMEN_TEXT_OFFSETS = {
    "monstercode": 4,
    "monsterdatum": 5,
    "monstertijd": 6,
    "geroerd_ongeroerd": 7,
    "monstersteekapparaat": 8,
    "dik_dunwandig": 9,
    "monstermethode": 10,
}

# SPECIMENTEXT ids holding general remarks about the sampling
REMARK_TEXT_IDS = range(1, 6)

# A trailing text field longer than this (or containing a space) is a description
DESCRIPTION_MAX_CODE_LENGTH = 10

MAIN_SOIL_TYPES = "GZLKV"
_MODIFIER_RE = re.compile(r"([a-z])(\d?)")


@dataclass(frozen=True)
class BoreSpecimen:
    specimen_number: int
    depth_top: float = 0.0
    depth_bottom: float = 0.0
    diameter_monster: float = None
    diameter_monstersteekapparaat: float = None
    monstercode: str = None
    monsterdatum: str = None
    monstertijd: str = None
    geroerd_ongeroerd: str = None
    monstersteekapparaat: str = None
    dik_dunwandig: str = None
    monstermethode: str = None
    remarks: tuple = None


def _check_specimen_number(k):
    if not 1 <= k <= MAX_SPECIMENS:
        raise ValueError(f"Specimen number must be between 1 and {MAX_SPECIMENS}, got {k}")


def specimen_var_id(field_name, k):
    """SPECIMENVAR id of ``field_name`` for specimen ``k``."""
    _check_specimen_number(k)
    return SPECIMEN_VAR_OFFSETS[field_name] + SPECIMEN_STRIDE * k


def specimen_text_id(field_name, k):
    """SPECIMENTEXT id of ``field_name`` for specimen ``k``."""
    _check_specimen_number(k)
    return SPECIMEN_TEXT_OFFSETS[field_name] + SPECIMEN_STRIDE * k


def _strip_quotes(token):
    if token.startswith("'"):
        token = token[1:]
    if token.endswith("'"):
        token = token[:-1]
    return token.strip()


def _boundary_index(column_info, quantity_number, keyword, default):
    for col in column_info:
        if col.quantity_number == quantity_number or keyword in col.name.lower():
            return col.col_num - 1
    return default


def split_records(raw_block, record_separator):
    records = (record.strip() for record in (raw_block or "").split(record_separator))
    return [record for record in records if record]


def numeric_field_count(headers):
    """Number of leading numeric fields in a bore record.

    The highest declared COLUMNINFO number wins over the count of parsed rows,
    so a dropped COLUMNINFO row does not pull text fields into the numbers.
    """
    highest = max((col.col_num for col in headers.column_info), default=0)
    return max(highest, headers.column or 0)


def parse_bore_record(record, n_numeric, void_values, separator, depth_indices):
    """Decode one bore record into a layer dict.

    The first ``n_numeric`` fields are numbers addressed by column number
    (index + 1); the rest are text fields.
    """
    parts = [part.strip() for part in record.split(separator)]
    parts = [part for part in parts if part]

    # None marks a void value; NaN an unparsable one
    numeric = []
    for index, token in enumerate(parts[:n_numeric]):
        value = to_float(token)
        numeric.append(None if value == void_values.get(index + 1) else value)

    texts = [_strip_quotes(part) for part in parts[n_numeric:]]
    texts = [text for text in texts if text]

    def numeric_at(index):
        if index < len(numeric) and numeric[index] is not None:
            return numeric[index]
        return None

    top_index, bottom_index = depth_indices
    depth_top = numeric_at(top_index)
    depth_bottom = numeric_at(bottom_index)

    additional = texts[1:]
    description = None
    if additional:
        last = additional[-1]
        if " " in last or len(last) > DESCRIPTION_MAX_CODE_LENGTH:
            description = additional.pop()

    layer = {
        DEPTH_TOP: 0.0 if depth_top is None else depth_top,
        DEPTH_BOTTOM: 0.0 if depth_bottom is None else depth_bottom,
        SOIL_CODE: texts[0] if texts else "",
        ADDITIONAL_CODES: additional,
        DESCRIPTION: description,
    }
    for offset, name in enumerate(BORE_NUMERIC_FIELDS, start=2):
        value = numeric_at(offset)
        layer[name] = np.nan if value is None else value
    return layer


def parse_bore_data(raw_block, headers):
    """Decode the bore data block into a layer DataFrame.

    Returns ``(layers, headers)``; layers has one row per record with the
    columns in :data:`gefparse.datamodel.BORE_LAYER_COLUMNS`.
    """
    column_info = list(headers.column_info)
    n_numeric = numeric_field_count(headers)
    separator = headers.column_separator or DEFAULT_BORE_SEPARATOR
    void_values = headers.void_values()
    depth_indices = (
        _boundary_index(column_info, BORE_DEPTH_TOP_QUANTITY, "bovenkant", 0),
        _boundary_index(column_info, BORE_DEPTH_BOTTOM_QUANTITY, "onderkant", 1),
    )

    layers = [
        parse_bore_record(record, n_numeric, void_values, separator, depth_indices)
        for record in split_records(raw_block, headers.record_separator)
    ]
    frame = pd.DataFrame(layers, columns=BORE_LAYER_COLUMNS)
    for name in [DEPTH_TOP, DEPTH_BOTTOM] + BORE_NUMERIC_FIELDS:
        frame[name] = frame[name].astype(float)
    logger.debug("Parsed %d bore layers", len(frame))
    return frame, headers


def parse_bore_specimens(headers):
    """Collect specimens from SPECIMENVAR/SPECIMENTEXT.

    Specimen ``k`` exists only when at least one of its ids is present, so
    numbering may have gaps. Remarks (SPECIMENTEXT 1-5) are attached to the
    first specimen.
    """
    var_map = {sv.id: sv for sv in headers.specimen_var}
    text_map = {st.id: st for st in headers.specimen_text}
    remarks = tuple(text_map[i].text for i in REMARK_TEXT_IDS if i in text_map and text_map[i].text)

    specimens = []
    for k in range(1, MAX_SPECIMENS + 1):
        var_ids = {name: specimen_var_id(name, k) for name in SPECIMEN_VAR_OFFSETS}
        text_ids = {name: specimen_text_id(name, k) for name in SPECIMEN_TEXT_OFFSETS}
        if not any(i in var_map for i in var_ids.values()) and not any(i in text_map for i in text_ids.values()):
            continue

        def var_value(name, default=None):
            sv = var_map.get(var_ids[name])
            return default if sv is None else sv.value

        texts = {name: text_map[i].text if i in text_map else None for name, i in text_ids.items()}
        specimens.append(
            BoreSpecimen(
                specimen_number=k,
                depth_top=var_value("depth_top", 0.0),
                depth_bottom=var_value("depth_bottom", 0.0),
                diameter_monster=var_value("diameter_monster"),
                diameter_monstersteekapparaat=var_value("diameter_monstersteekapparaat"),
                remarks=None if specimens else remarks,
                **texts,
            )
        )
    return specimens


def decode_bore_code(code):
    """Dutch description of a GEF-BORE code, or the code itself when unknown."""
    stripped = code.strip()
    return ALL_CODES.get(stripped.upper()) or ALL_CODES.get(stripped) or code


def decode_specimen_code(field_name, code):
    """Description of a coded specimen field (``geroerd_ongeroerd``, ``monstermethode``, ...).

    Unknown fields and codes return ``code`` unchanged.
    """
    if code is None:
        return None
    stripped = code.strip().upper()
    for option in SPECIMEN_CODES.get(field_name, ()):
        if option["code"] == stripped:
            return option["description"]
    return code


def soil_code_from_description(description):
    """Main soil type code (G, V, K, L, Z) named in a Dutch description, else NBE."""
    lower = description.lower()
    for keyword, soil_code in (("grind", "G"), ("veen", "V"), ("klei", "K"), ("leem", "L"), ("zand", "Z")):
        if keyword in lower:
            return soil_code
    return "NBE"


def _modifier_description(main, modifier):
    combined = NEN5104_SOIL_CODES.get(main + modifier)
    if combined and ", " in combined:
        return combined.split(", ", 1)[1]
    return NEN5104_SOIL_CODES.get(modifier, modifier)


def decode_soil_code(code):
    """Split a NEN 5104 soil code such as ``Kz3h2`` into main type and admixtures.

    >>> decode_soil_code("Zs1")["description"]
    'Zand (Sand), zwak siltig'
    """
    code = (code or "").strip()
    result = {"code": code, "main": None, "mainName": None, "admixtures": [], "description": code}
    if not code:
        return result
    if code in SOIL_TYPE_NAMES:
        result.update(main=code, mainName=SOIL_TYPE_NAMES[code], description=SOIL_TYPE_NAMES[code])
        return result
    main = code[0]
    if main not in MAIN_SOIL_TYPES:
        result["description"] = decode_bore_code(code)
        return result

    admixtures = []
    rest = code[1:]
    for match in _MODIFIER_RE.finditer(rest):
        modifier = match.group(0)
        admixtures.append({"code": modifier, "description": _modifier_description(main, modifier)})
    if "".join(a["code"] for a in admixtures) != rest:
        # Not a NEN 5104 composition; fall back to the flat code tables
        result["description"] = decode_bore_code(code)
        return result

    main_name = SOIL_TYPE_NAMES[main]
    result.update(
        main=main,
        mainName=main_name,
        admixtures=admixtures,
        description=", ".join([main_name] + [a["description"] for a in admixtures]),
    )
    return result
