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


"""Static GEF code tables.

Tables are keyed by the numeric measurement id used in MEASUREMENTVAR and
MEASUREMENTTEXT. Use :func:`measurement_tables` to select the dictionaries
for a file type and extension instead of importing dialect modules directly.
"""

from collections import namedtuple
from functools import lru_cache

from gefparse.datamodel import Extension, FileType

from . import belgian, bore, cpt, dutch
from .entry import MeasurementEntry, MeasurementKind, Option, StandardizedCode, merge_tables

MeasurementTables = namedtuple("MeasurementTables", ["variables", "texts"])

_CPT_TABLES = {
    Extension.STANDARD: MeasurementTables(cpt.MEASUREMENT_VARIABLES, cpt.MEASUREMENT_TEXTS),
    Extension.DUTCH: MeasurementTables(
        merge_tables(cpt.MEASUREMENT_VARIABLES, dutch.MEASUREMENT_VARIABLES),
        merge_tables(cpt.MEASUREMENT_TEXTS, dutch.MEASUREMENT_TEXTS),
    ),
    Extension.BELGIAN: MeasurementTables(
        merge_tables(cpt.MEASUREMENT_VARIABLES, belgian.MEASUREMENT_VARIABLES),
        merge_tables(cpt.MEASUREMENT_TEXTS, belgian.MEASUREMENT_TEXTS),
    ),
}

_BORE_TABLES = MeasurementTables(bore.MEASUREMENT_VARIABLES, bore.MEASUREMENT_TEXTS)


def measurement_tables(file_type, extension=Extension.STANDARD):
    """Return the variable and text tables for a file type and extension.

    BORE reports have their own dictionaries and ignore the extension.
    """
    file_type = FileType(file_type)
    if file_type is FileType.BORE:
        return _BORE_TABLES
    return _CPT_TABLES[Extension(extension)]


@lru_cache(maxsize=None)
def extension_only_ids():
    """Return the text and variable ids unique to the Dutch and Belgian extensions.

    Ids shared with the standard table or with the other extension are left out,
    so their presence alone never decides the extension.
    """
    std_text = set(cpt.MEASUREMENT_TEXTS)
    std_var = set(cpt.MEASUREMENT_VARIABLES)
    nl_text, nl_var = set(dutch.MEASUREMENT_TEXTS), set(dutch.MEASUREMENT_VARIABLES)
    be_text, be_var = set(belgian.MEASUREMENT_TEXTS), set(belgian.MEASUREMENT_VARIABLES)
    return {
        Extension.DUTCH: (
            frozenset(nl_text - std_text - be_text),
            frozenset(nl_var - std_var - be_var),
        ),
        Extension.BELGIAN: (
            frozenset(be_text - std_text - nl_text),
            frozenset(be_var - std_var - nl_var),
        ),
    }


__all__ = [
    "MeasurementEntry",
    "MeasurementKind",
    "MeasurementTables",
    "Option",
    "StandardizedCode",
    "extension_only_ids",
    "measurement_tables",
]
