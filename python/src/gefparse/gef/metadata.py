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


"""Processed, display-ready metadata for a parsed GEF file.

Headers are cross-referenced with the code tables: coordinate and height
systems are named, the position is reprojected to WGS84, and every
MEASUREMENTVAR/MEASUREMENTTEXT entry is decoded against the dictionary for
the file type and extension. Entries in the ``reserved`` category and
values of ``""``, ``"-"`` or ``"0"`` are left out.
"""

import logging
import math
import re

from gefparse.config import ParseConfig
from gefparse.coordinates import coordinate_system, country_name, height_system, to_wgs84
from gefparse.datamodel import EMPTY_VALUES, Extension, FileType
from gefparse.tables import MeasurementKind, measurement_tables
from gefparse.tables.common import RESERVED_CATEGORY, category_group

from .detect import detect_headers_extension
from .headers import to_float

logger = logging.getLogger(__name__)

_KEY_SPLIT_RE = re.compile(r"[\s,()/-]+")


def description_to_key(description):
    """camelCase key for a table description, e.g. ``"Cone type"`` -> ``"coneType"``."""
    words = [word for word in _KEY_SPLIT_RE.split(description) if word]
    return "".join(
        word.lower() if index == 0 else word[:1].upper() + word[1:].lower() for index, word in enumerate(words)
    )


def _is_empty(value):
    return value is None or value.strip() in EMPTY_VALUES


def decode_standardized_code(entry, text, file_type, locale="en"):
    """Render ``text`` as ``"description (CODE)"`` when it is one of the entry's codes.

    CPT codes are matched against the upper-cased text, BORE codes
    case-insensitively.
    """
    if entry is None or not entry.standardized_codes:
        return text
    stripped = text.strip()
    for code in entry.standardized_codes:
        if file_type is FileType.BORE:
            matched = code.code.lower() == stripped.lower()
        else:
            matched = code.code == stripped.upper()
        if matched:
            description = code.description_nl if locale == "nl" and code.description_nl else code.description
            return f"{description} ({code.code})"
    return text


def _item(item_id, entry, label_default, value, raw_value, unit, locale):
    if entry is None:
        return {
            "id": item_id,
            "key": None,
            "label": label_default,
            "value": value,
            "rawValue": raw_value,
            "unit": unit,
            "category": None,
            "group": "other",
        }
    return {
        "id": item_id,
        "key": description_to_key(entry.description),
        "label": entry.label(locale),
        "value": value,
        "rawValue": raw_value,
        "unit": unit,
        "category": entry.category,
        "group": category_group(entry.category),
    }


def decode_measurement_vars(measurement_vars, variables, locale="en"):
    items = []
    for mv in measurement_vars:
        entry = variables.get(mv.id)
        if entry is not None and entry.category == RESERVED_CATEGORY:
            continue
        if _is_empty(mv.value):
            continue
        raw_value = mv.value.strip()
        value = raw_value
        if entry is not None and entry.kind is MeasurementKind.ENUM:
            value = entry.option_meaning(raw_value) or raw_value
        elif entry is None or entry.kind is MeasurementKind.NUMERIC:
            number = to_float(raw_value)
            value = raw_value if math.isnan(number) else number
        unit = mv.unit if mv.unit not in ("", "-") or entry is None else entry.unit
        if entry is None:
            logger.debug("MEASUREMENTVAR %d is not in the code tables", mv.id)
        items.append(_item(mv.id, entry, mv.description or f"MEASUREMENTVAR {mv.id}", value, raw_value, unit, locale))
    return items


def decode_measurement_texts(measurement_texts, texts, file_type, locale="en"):
    items = []
    for mt in measurement_texts:
        entry = texts.get(mt.id)
        if entry is not None and entry.category == RESERVED_CATEGORY:
            continue
        if _is_empty(mt.text):
            continue
        raw_value = mt.text.strip()
        value = decode_standardized_code(entry, raw_value, file_type, locale)
        if entry is not None and entry.kind is MeasurementKind.ENUM:
            value = entry.option_meaning(raw_value) or value
        unit = entry.unit if entry is not None else None
        items.append(_item(mt.id, entry, f"MEASUREMENTTEXT {mt.id}", value, raw_value, unit, locale))
    return items


def _coordinate_system_info(xy_id):
    if xy_id is None:
        return None
    system = coordinate_system(xy_id.coordinate_system_code)
    if system is None:
        return None
    return {"code": system["code"], "name": system["name"], "nameEn": system["name_en"], "epsg": system.get("epsg")}


def _height_system_info(z_id, default_code):
    if z_id is None:
        return None
    system = height_system(z_id.height_system_code) or height_system(default_code)
    if system is None:
        return {"code": z_id.height_system_code, "name": None, "nameEn": None, "epsg": None}
    return {"code": system["code"], "name": system["name"], "nameEn": system["name_en"], "epsg": system.get("epsg")}


def _version(gef_id):
    if gef_id is None:
        return None
    return f"{gef_id.major}.{gef_id.minor}.{gef_id.patch}"


def process_metadata(filename, file_type, headers, config=None, projector=None, extension=None):
    """Build the processed metadata dict for a parsed file.

    ``extension`` is detected from the measurement ids when not given and is
    only meaningful for CPT files. Reprojection failures give
    ``wgs84 = None``.
    """
    config = config or ParseConfig()
    file_type = FileType(file_type)
    if file_type is FileType.CPT and extension is None:
        extension = detect_headers_extension(headers)
    tables = measurement_tables(file_type, extension or Extension.STANDARD)

    company = headers.company_id
    xy_id = headers.xy_id
    z_id = headers.z_id
    report_code = headers.report_code

    return {
        "filename": filename,
        "fileType": file_type.value,
        "extension": extension.value if file_type is FileType.CPT else None,
        "wgs84": to_wgs84(xy_id, projector),
        "projectId": headers.project_id,
        "testId": headers.test_id,
        "companyName": company.name if company else None,
        "companyAddress": company.address if company else None,
        "companyCountryCode": company.country_code if company else None,
        "companyCountry": country_name(company.country_code) if company else None,
        "startDate": headers.start_date.isoformat() if headers.start_date else None,
        "startTime": headers.start_time.isoformat() if headers.start_time else None,
        "coordinateSystem": _coordinate_system_info(xy_id),
        "originalX": xy_id.x if xy_id else None,
        "originalY": xy_id.y if xy_id else None,
        "xUncertainty": xy_id.delta_x if xy_id else None,
        "yUncertainty": xy_id.delta_y if xy_id else None,
        "heightSystem": _height_system_info(z_id, config.default_height_system),
        "surfaceElevation": z_id.height if z_id else None,
        "elevationUncertainty": z_id.delta_z if z_id else None,
        "gefVersion": _version(headers.gef_id),
        "reportCode": report_code.code if report_code else None,
        "reportCodeVersion": (
            f"{report_code.major}.{report_code.minor}.{report_code.patch}" if report_code else None
        ),
        "fileDate": headers.file_date.isoformat() if headers.file_date else None,
        "fileOwner": headers.file_owner,
        "operatingSystem": headers.os,
        "measurements": decode_measurement_vars(headers.measurement_var, tables.variables, config.locale),
        "texts": decode_measurement_texts(headers.measurement_text, tables.texts, file_type, config.locale),
        "comments": list(headers.comment),
    }
