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


"""Entry types shared by the measurement variable and text tables.

Every table is built once at import time into a read-only mapping keyed by
numeric id. Whether an entry decodes as a number, free text, or an
enumeration is decided here, so lookups never need to inspect raw dicts.
"""

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class MeasurementKind(Enum):
    NUMERIC = "numeric"
    TEXT = "text"
    ENUM = "enum"


@dataclass(frozen=True)
class Option:
    value: int
    meaning: str


@dataclass(frozen=True)
class StandardizedCode:
    code: str
    description: str
    description_nl: str = None


@dataclass(frozen=True)
class MeasurementEntry:
    id: int
    description: str
    category: str
    kind: MeasurementKind
    unit: str = None
    description_nl: str = None
    options: tuple = ()
    standardized_codes: tuple = ()
    data_type: str = None
    default_value: object = None
    example: str = None

    def label(self, locale="en"):
        if locale == "nl" and self.description_nl:
            return self.description_nl
        return self.description

    def option_meaning(self, value):
        """Return the meaning for an enumerated value, or None when it is not an option.

        Numeric options match numerically, so ``"1.000000"`` selects option ``1``.
        """
        text = str(value).strip()
        number = _as_number(text)
        for option in self.options:
            if isinstance(option.value, (int, float)) and not isinstance(option.value, bool):
                if number is not None and number == option.value:
                    return option.meaning
            elif str(option.value) == text:
                return option.meaning
        return None


def _as_number(text):
    try:
        number = float(text)
    except ValueError:
        return None
    return None if math.isnan(number) else number


def _kind_for(raw, is_text):
    if raw.get("options"):
        return MeasurementKind.ENUM
    if is_text or raw.get("data_type") == "string":
        return MeasurementKind.TEXT
    return MeasurementKind.NUMERIC


def build_entry(raw, is_text=False):
    return MeasurementEntry(
        id=int(raw["id"]),
        description=raw.get("description", ""),
        category=raw.get("category", "general"),
        kind=_kind_for(raw, is_text),
        unit=raw.get("unit"),
        description_nl=raw.get("description_nl"),
        options=tuple(Option(o["value"], o["meaning"]) for o in raw.get("options") or ()),
        standardized_codes=tuple(
            StandardizedCode(c["code"], c["description"], c.get("description_nl"))
            for c in raw.get("standardized_codes") or ()
        ),
        data_type=raw.get("data_type"),
        default_value=raw.get("default_value"),
        example=raw.get("example"),
    )


def build_table(raws, is_text=False):
    """Build an immutable id -> MeasurementEntry mapping from raw table rows."""
    table = {}
    for raw in raws:
        entry = build_entry(raw, is_text=is_text)
        table[entry.id] = entry
    return MappingProxyType(table)


def merge_tables(*tables):
    """Overlay tables left to right into a new immutable mapping."""
    merged = {}
    for table in tables:
        merged.update(table)
    return MappingProxyType(merged)
