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


"""Structural QA checks on parsed GEF files.

Warnings are plain dicts ``{"id", "filename", "params"}``. The id names the
condition and ``params`` carries the values a viewer needs to render a
localized message. None of these conditions stop a parse.
"""

import logging

from gefparse.config import ParseConfig
from gefparse.coordinates import height_system
from gefparse.datamodel import IS_VOID, REQUIRED_CPT_QUANTITIES, FileType
from gefparse.tables.cpt import COLUMN_QUANTITIES

logger = logging.getLogger(__name__)


def make_warning(warning_id, filename=None, **params):
    return {"id": warning_id, "filename": filename, "params": params}


def with_filename(warnings, filename):
    """Return copies of ``warnings`` stamped with ``filename``."""
    return [dict(w, filename=filename) for w in warnings]


def merge_warnings(*groups):
    """Concatenate warning lists, dropping exact repeats."""
    merged = []
    for group in groups:
        for warning in group:
            if warning not in merged:
                merged.append(warning)
    return merged


def quantity_name(quantity_number):
    quantity = COLUMN_QUANTITIES.get(quantity_number)
    return quantity["name"] if quantity else f"Quantity {quantity_number}"


def validate_zid(filename, raw, default_height_system):
    issues = []
    rows = raw.get("ZID") or []
    raw_zid = rows[0] if rows else None
    if not raw_zid or not any(token.strip() for token in raw_zid):
        issues.append(make_warning("missingZidHeader", filename))
        return issues
    height_code = raw_zid[0].strip()
    if height_code and height_system(height_code) is None:
        issues.append(
            make_warning("unknownHeightSystem", filename, heightCode=height_code, defaultCode=default_height_system)
        )
    if len(raw_zid) < 2 or not raw_zid[1].strip():
        issues.append(make_warning("zidWithoutHeight", filename))
    return issues


def validate_columns(filename, headers, raw):
    issues = []
    raw_columns = raw.get("COLUMNINFO") or []
    # Rows shorter than three tokens are dropped as invalidHeader by the header parser
    missing = sum(1 for row in raw_columns if len(row) == 3 and row[0].strip().isdigit())
    if missing:
        issues.append(make_warning("missingColumnInfoQuantity", filename, count=missing))
    if headers.column is not None and raw_columns and headers.column != len(headers.column_info):
        issues.append(
            make_warning("columnCountMismatch", filename, declared=headers.column, described=len(headers.column_info))
        )
    return issues


def validate_quantities(filename, column_info):
    issues = []
    by_quantity = {}
    for col in column_info:
        if col.quantity_number > 0:
            by_quantity.setdefault(col.quantity_number, []).append(col.col_num)
    for quantity_number, columns in by_quantity.items():
        if len(columns) > 1:
            issues.append(
                make_warning(
                    "duplicateQuantity",
                    filename,
                    quantityNumber=quantity_number,
                    quantity=quantity_name(quantity_number),
                    columns=columns,
                )
            )
    for quantity_number in REQUIRED_CPT_QUANTITIES:
        if quantity_number not in by_quantity:
            issues.append(
                make_warning(
                    "missingRequiredQuantity",
                    filename,
                    quantityNumber=quantity_number,
                    quantity=quantity_name(quantity_number),
                )
            )
    return issues


def validate_column_ranges(filename, headers, data, exclude_void=True):
    """Compare observed column ranges with the declared COLUMNMINMAX bounds.

    With ``exclude_void`` rows flagged ``isVoid`` (above the pre-excavated
    depth) are ignored.
    """
    issues = []
    if data is None or data.empty:
        return issues
    if exclude_void and IS_VOID in data.columns:
        data = data[~data[IS_VOID].astype(bool)]
    for bounds in headers.column_min_max:
        col = next((c for c in headers.column_info if c.col_num == bounds.column_number), None)
        if col is None or col.name not in data.columns:
            continue
        values = data[col.name].dropna()
        if values.empty:
            continue
        actual_min, actual_max = float(values.min()), float(values.max())
        if actual_min < bounds.min or actual_max > bounds.max:
            issues.append(
                make_warning(
                    "columnRangeViolation",
                    filename,
                    column=bounds.column_number,
                    name=col.name,
                    declaredMin=bounds.min,
                    declaredMax=bounds.max,
                    actualMin=actual_min,
                    actualMax=actual_max,
                )
            )
    return issues


def generate_warnings(filename, headers, raw, data=None, file_type=FileType.CPT, config=None):
    """Return the structural warnings for a parsed file.

    ``raw`` is the tokenizer's header map, needed because some checks (a ZID
    without height, COLUMNINFO without quantity) look at what was actually
    written rather than at the defaults filled in by the header parser.
    """
    config = config or ParseConfig()
    issues = validate_zid(filename, raw, config.default_height_system)
    if headers.xy_id is None:
        issues.append(make_warning("missingXyidHeader", filename))
    issues.extend(validate_columns(filename, headers, raw))

    if FileType(file_type) is FileType.CPT:
        issues.extend(validate_quantities(filename, headers.column_info))
        issues.extend(
            validate_column_ranges(filename, headers, data, exclude_void=config.exclude_void_from_range_checks)
        )

    for issue in issues:
        logger.info("%s: %s %s", filename, issue["id"], issue["params"] or "")
    return issues
