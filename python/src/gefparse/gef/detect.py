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


"""Report type and GEF extension detection."""

from gefparse.datamodel import Extension, FileType
from gefparse.errors import UnsupportedFileType
from gefparse.tables import extension_only_ids

DEFAULT_REPORT_CODE = "cpt"


def detect_file_type(report_code):
    """Classify a REPORTCODE as CPT or BORE.

    Dissipation and sieve reports raise :class:`UnsupportedFileType`. A
    missing report code is treated as a CPT.
    """
    code = (report_code or DEFAULT_REPORT_CODE).lower()
    if "diss" in code:
        raise UnsupportedFileType("dissipationTestNotSupported", report_code)
    if "siev" in code:
        raise UnsupportedFileType("sieveTestNotSupported", report_code)
    if "bore" in code:
        return FileType.BORE
    return FileType.CPT


def detect_extension(measurement_text_ids=(), measurement_var_ids=()):
    """Return the GEF extension implied by the measurement ids present.

    Only ids unique to one extension's dictionaries count; Dutch is checked
    before Belgian and the standard dictionaries are the fallback.
    """
    text_ids = set(measurement_text_ids or ())
    var_ids = set(measurement_var_ids or ())
    only = extension_only_ids()
    for extension in (Extension.DUTCH, Extension.BELGIAN):
        ext_text, ext_var = only[extension]
        if text_ids & ext_text or var_ids & ext_var:
            return extension
    return Extension.STANDARD


def detect_headers_extension(headers):
    return detect_extension(
        [mt.id for mt in headers.measurement_text],
        [mv.id for mv in headers.measurement_var],
    )
