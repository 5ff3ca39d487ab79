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


"""Result containers for parsed GEF files.

These keep the data tables together with the headers, warnings and
processed metadata of one file. A new parse always builds new objects.
"""

from gefparse.datamodel import IS_VOID, FileType


class GefCptData:
    file_type = FileType.CPT

    def __init__(self, data, headers, chart_axes=None, pre_excavation_layers=None, warnings=None, processed=None):
        self.data = data
        self.headers = headers
        self.chart_axes = chart_axes or {}
        self.pre_excavation_layers = list(pre_excavation_layers or [])
        self.warnings = list(warnings or [])
        self.processed = processed or {}

    def valid_rows(self):
        """Rows below the pre-excavated depth."""
        if IS_VOID not in self.data.columns:
            return self.data
        return self.data[~self.data[IS_VOID]]

    def to_dict(self):
        return {
            "fileType": self.file_type.value,
            "data": self.data,
            "headers": self.headers,
            "chartAxes": self.chart_axes,
            "preExcavationLayers": self.pre_excavation_layers,
            "warnings": self.warnings,
            "processed": self.processed,
        }

    def __repr__(self):
        return f"GefCptData(filename={self.processed.get('filename')!r}, rows={len(self.data)})"


class GefBoreData:
    file_type = FileType.BORE

    def __init__(self, layers, headers, specimens=None, warnings=None, processed=None):
        self.layers = layers
        self.headers = headers
        self.specimens = list(specimens or [])
        self.warnings = list(warnings or [])
        self.processed = processed or {}

    def to_dict(self):
        return {
            "fileType": self.file_type.value,
            "layers": self.layers,
            "specimens": self.specimens,
            "headers": self.headers,
            "warnings": self.warnings,
            "processed": self.processed,
        }

    def __repr__(self):
        return f"GefBoreData(filename={self.processed.get('filename')!r}, layers={len(self.layers)})"
