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


"""Typed GEF header structures and the lenient header parser.

:func:`parse_headers` turns the raw keyword -> rows map produced by the
tokenizer into a frozen :class:`GefHeaders`. Malformed optional headers
never abort the parse: they are dropped (or replaced by a documented
default) and reported in the returned warning list.
"""

import logging
import math
import re
from dataclasses import dataclass, field

from gefparse.coordinates import coordinate_system
from gefparse.datamodel import (
    DEFAULT_COORDINATE_SYSTEM,
    DEFAULT_DELTA,
    DEFAULT_RECORD_SEPARATOR,
    QUANTITY_UNKNOWN,
)

from .validate import make_warning

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"^\s*[+-]?\d+")
_FLOAT_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def to_float(token):
    """Parse the leading number of a token, returning NaN when there is none."""
    if token is None:
        return math.nan
    match = _FLOAT_RE.match(str(token))
    if match is None:
        return math.nan
    return float(match.group(0))


def to_int(token, default=None):
    if token is None:
        return default
    match = _INT_RE.match(str(token))
    if match is None:
        return default
    return int(match.group(0))


@dataclass(frozen=True)
class GefId:
    major: int
    minor: int
    patch: int


@dataclass(frozen=True)
class ReportCode:
    code: str
    major: int = 0
    minor: int = 0
    patch: int = 0
    extra: tuple = ()


@dataclass(frozen=True)
class CompanyId:
    name: str
    address: str = None
    country_code: str = None


@dataclass(frozen=True)
class GefDate:
    year: int
    month: int
    day: int

    def isoformat(self):
        return f"{self.year}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class GefTime:
    hour: int
    minute: int
    second: int = None

    def isoformat(self):
        parts = [f"{self.hour:02d}", f"{self.minute:02d}"]
        if self.second is not None:
            parts.append(f"{self.second:02d}")
        return ":".join(parts)


@dataclass(frozen=True)
class XyId:
    coordinate_system_code: str
    x: float
    y: float
    delta_x: float = DEFAULT_DELTA
    delta_y: float = DEFAULT_DELTA


@dataclass(frozen=True)
class ZId:
    height_system_code: str
    height: float = 0.0
    delta_z: float = DEFAULT_DELTA


@dataclass(frozen=True)
class ColumnInfo:
    col_num: int
    unit: str
    name: str
    quantity_number: int = QUANTITY_UNKNOWN


@dataclass(frozen=True)
class ColumnVoid:
    column_number: int
    void_value: float


@dataclass(frozen=True)
class ColumnMinMax:
    column_number: int
    min: float
    max: float


@dataclass(frozen=True)
class MeasurementVar:
    id: int
    value: str
    unit: str = "-"
    description: str = ""


@dataclass(frozen=True)
class MeasurementText:
    id: int
    text: str
    extra: tuple = ()


@dataclass(frozen=True)
class SpecimenVar:
    id: int
    value: float
    unit: str = "-"
    description: str = ""


@dataclass(frozen=True)
class SpecimenText:
    id: int
    text: str
    extra: tuple = ()


@dataclass(frozen=True)
class GefHeaders:
    gef_id: GefId = None
    report_code: ReportCode = None
    project_id: str = None
    test_id: str = None
    company_id: CompanyId = None
    xy_id: XyId = None
    z_id: ZId = None
    start_date: GefDate = None
    start_time: GefTime = None
    file_date: GefDate = None
    file_owner: str = None
    os: str = None
    column: int = None
    column_info: tuple = ()
    column_separator: str = None
    record_separator: str = DEFAULT_RECORD_SEPARATOR
    column_void: tuple = ()
    column_min_max: tuple = ()
    last_scan: int = None
    data_format: str = None
    measurement_var: tuple = ()
    measurement_text: tuple = ()
    specimen_var: tuple = ()
    specimen_text: tuple = ()
    comment: tuple = field(default=())

    def measurement_var_by_id(self, var_id):
        for mv in self.measurement_var:
            if mv.id == var_id:
                return mv
        return None

    def measurement_var_value(self, var_id):
        """Numeric value of a MEASUREMENTVAR, or None when absent or not a number."""
        mv = self.measurement_var_by_id(var_id)
        if mv is None:
            return None
        value = to_float(mv.value)
        return None if math.isnan(value) else value

    def measurement_text_by_id(self, text_id):
        for mt in self.measurement_text:
            if mt.id == text_id:
                return mt
        return None

    def column_by_quantity(self, quantity_number):
        return find_column_by_quantity(self.column_info, quantity_number)

    def void_values(self):
        """Map of 1-based column number to its void sentinel."""
        return {cv.column_number: cv.void_value for cv in self.column_void}


def find_column_by_quantity(column_info, quantity_number):
    for col in column_info:
        if col.quantity_number == quantity_number:
            return col
    return None


def _first_row(raw, key):
    rows = raw.get(key) or []
    return rows[0] if rows else None


def _first_value(raw, key):
    row = _first_row(raw, key)
    if not row or not row[0]:
        return None
    return row[0]


def _optional(row, index):
    if len(row) > index and row[index] != "":
        return row[index]
    return None


def _parse_date(row):
    if not row or len(row) < 3:
        return None
    year, month, day = (to_int(token) for token in row[:3])
    if year is None or month is None or day is None:
        return None
    return GefDate(year, month, day)


def _parse_time(row):
    if not row or len(row) < 2:
        return None
    if any(token == "-" for token in row[:3]):
        return None
    hour, minute = to_int(row[0]), to_int(row[1])
    if hour is None or minute is None:
        return None
    second = to_int(row[2]) if len(row) > 2 and row[2] else None
    return GefTime(hour, minute, second)


def _parse_xyid(row, default_code, warnings):
    if not row or len(row) < 3 or all(token.strip() == "" for token in row):
        return None
    code = row[0].strip()
    x, y = to_float(row[1]), to_float(row[2])
    if math.isnan(x) or math.isnan(y):
        warnings.append(make_warning("invalidXyidHeader", values=list(row)))
        return None
    if coordinate_system(code) is None:
        warnings.append(make_warning("unknownCoordinateSystem", code=code, defaultCode=default_code))
        code = default_code
    delta_x = to_float(row[3]) if _optional(row, 3) else DEFAULT_DELTA
    delta_y = to_float(row[4]) if _optional(row, 4) else DEFAULT_DELTA
    return XyId(
        code,
        x,
        y,
        DEFAULT_DELTA if math.isnan(delta_x) else delta_x,
        DEFAULT_DELTA if math.isnan(delta_y) else delta_y,
    )


def _parse_zid(row, warnings):
    if not row or not row[0].strip():
        return None
    height = to_float(row[1]) if _optional(row, 1) else 0.0
    if math.isnan(height):
        warnings.append(make_warning("invalidHeader", header="ZID", values=list(row)))
        height = 0.0
    delta_z = to_float(row[2]) if _optional(row, 2) else DEFAULT_DELTA
    return ZId(row[0].strip(), height, DEFAULT_DELTA if math.isnan(delta_z) else delta_z)


def _parse_column_info(rows, warnings):
    columns = []
    for row in rows:
        col_num = to_int(row[0]) if row else None
        if len(row) < 3 or col_num is None or col_num < 1:
            warnings.append(make_warning("invalidHeader", header="COLUMNINFO", values=list(row)))
            continue
        quantity = to_int(_optional(row, 3), QUANTITY_UNKNOWN)
        columns.append(ColumnInfo(col_num, row[1], row[2], max(quantity, QUANTITY_UNKNOWN)))
    return tuple(columns)


def _parse_numeric_rows(rows, header, width, warnings):
    parsed = []
    for row in rows:
        if len(row) < width:
            warnings.append(make_warning("invalidHeader", header=header, values=list(row)))
            continue
        column_number = to_int(row[0])
        values = [to_float(token) for token in row[1:width]]
        if column_number is None or any(math.isnan(v) for v in values):
            warnings.append(make_warning("invalidHeader", header=header, values=list(row)))
            continue
        parsed.append((column_number, *values))
    return parsed


def _parse_measurement_vars(rows, warnings):
    result = []
    for row in rows:
        var_id = to_int(row[0]) if row else None
        if var_id is None or len(row) < 2:
            warnings.append(make_warning("invalidHeader", header="MEASUREMENTVAR", values=list(row)))
            continue
        unit = row[2] if len(row) > 2 else "-"
        description = row[3] if len(row) > 3 else ""
        result.append(MeasurementVar(var_id, row[1], unit, description))
    return tuple(result)


def _parse_texts(rows, header, cls, warnings):
    result = []
    for row in rows:
        text_id = to_int(row[0]) if row else None
        if text_id is None or len(row) < 2:
            warnings.append(make_warning("invalidHeader", header=header, values=list(row)))
            continue
        result.append(cls(text_id, row[1], tuple(row[2:])))
    return tuple(result)


def _parse_specimen_vars(rows, warnings):
    result = []
    for row in rows:
        var_id = to_int(row[0]) if row else None
        value = to_float(row[1]) if len(row) > 1 else math.nan
        if var_id is None or math.isnan(value):
            warnings.append(make_warning("invalidHeader", header="SPECIMENVAR", values=list(row)))
            continue
        unit = row[2] if len(row) > 2 else "-"
        description = row[3] if len(row) > 3 else ""
        result.append(SpecimenVar(var_id, value, unit, description))
    return tuple(result)


def _parse_report_code(row):
    if not row or not row[0]:
        return None
    numbers = [to_int(token, 0) for token in row[1:4]]
    numbers += [0] * (3 - len(numbers))
    return ReportCode(row[0], numbers[0], numbers[1], numbers[2], tuple(row[4:]))


def _parse_gef_id(row):
    if not row or len(row) < 3:
        return None
    major, minor, patch = (to_int(token) for token in row[:3])
    if major is None or minor is None or patch is None:
        return None
    return GefId(major, minor, patch)


def _parse_company(row):
    if not row or not row[0]:
        return None
    return CompanyId(row[0], _optional(row, 1), _optional(row, 2))


def parse_headers(raw, default_coordinate_system=DEFAULT_COORDINATE_SYSTEM):
    """Parse a raw header map into ``(GefHeaders, warnings)``.

    ``raw`` maps upper-case keywords to lists of token rows. Warnings are
    dicts built by :func:`gefparse.gef.validate.make_warning` without a
    filename; the caller stamps it.
    """
    warnings = []

    column_void = tuple(
        ColumnVoid(col, value)
        for col, value in _parse_numeric_rows(raw.get("COLUMNVOID", []), "COLUMNVOID", 2, warnings)
    )
    column_min_max = tuple(
        ColumnMinMax(col, lo, hi)
        for col, lo, hi in _parse_numeric_rows(raw.get("COLUMNMINMAX", []), "COLUMNMINMAX", 3, warnings)
    )

    comments = tuple(
        text for text in (", ".join(token for token in row if token) for row in raw.get("COMMENT", [])) if text
    )

    headers = GefHeaders(
        gef_id=_parse_gef_id(_first_row(raw, "GEFID")),
        report_code=_parse_report_code(_first_row(raw, "REPORTCODE")),
        project_id=_first_value(raw, "PROJECTID"),
        test_id=_first_value(raw, "TESTID"),
        company_id=_parse_company(_first_row(raw, "COMPANYID")),
        xy_id=_parse_xyid(_first_row(raw, "XYID"), default_coordinate_system, warnings),
        z_id=_parse_zid(_first_row(raw, "ZID"), warnings),
        start_date=_parse_date(_first_row(raw, "STARTDATE")),
        start_time=_parse_time(_first_row(raw, "STARTTIME")),
        file_date=_parse_date(_first_row(raw, "FILEDATE")),
        file_owner=_first_value(raw, "FILEOWNER"),
        os=_first_value(raw, "OS"),
        column=to_int(_first_value(raw, "COLUMN")),
        column_info=_parse_column_info(raw.get("COLUMNINFO", []), warnings),
        column_separator=_first_value(raw, "COLUMNSEPARATOR"),
        record_separator=_first_value(raw, "RECORDSEPARATOR") or DEFAULT_RECORD_SEPARATOR,
        column_void=column_void,
        column_min_max=column_min_max,
        last_scan=to_int(_first_value(raw, "LASTSCAN")),
        data_format=_first_value(raw, "DATAFORMAT"),
        measurement_var=_parse_measurement_vars(raw.get("MEASUREMENTVAR", []), warnings),
        measurement_text=_parse_texts(raw.get("MEASUREMENTTEXT", []), "MEASUREMENTTEXT", MeasurementText, warnings),
        specimen_var=_parse_specimen_vars(raw.get("SPECIMENVAR", []), warnings),
        specimen_text=_parse_texts(raw.get("SPECIMENTEXT", []), "SPECIMENTEXT", SpecimenText, warnings),
        comment=comments,
    )
    if warnings:
        logger.debug("Header parse produced %d warnings", len(warnings))
    return headers, warnings
