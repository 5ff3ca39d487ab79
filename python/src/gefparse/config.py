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


"""Parse settings passed through the GEF pipeline."""

from gefparse.datamodel import DEFAULT_COORDINATE_SYSTEM, DEFAULT_HEIGHT_SYSTEM


class ParseConfig:
    def __init__(
        self,
        locale="en",
        default_coordinate_system=DEFAULT_COORDINATE_SYSTEM,
        default_height_system=DEFAULT_HEIGHT_SYSTEM,
        exclude_void_from_range_checks=True,
        encoding="utf-8",
        fallback_encoding="cp1252",
    ):
        self.locale = locale
        self.default_coordinate_system = default_coordinate_system
        self.default_height_system = default_height_system
        self.exclude_void_from_range_checks = exclude_void_from_range_checks
        self.encoding = encoding
        self.fallback_encoding = fallback_encoding

    def update(self, **kwargs):
        for key, val in kwargs.items():
            if not hasattr(self, key):
                raise ValueError(f"Unknown parse setting: {key}")
            setattr(self, key, val)
        return self

    def to_dict(self):
        return {
            "locale": self.locale,
            "default_coordinate_system": self.default_coordinate_system,
            "default_height_system": self.default_height_system,
            "exclude_void_from_range_checks": self.exclude_void_from_range_checks,
            "encoding": self.encoding,
            "fallback_encoding": self.fallback_encoding,
        }
