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

"""Measurement variable/text tables for GEF-BORE reports."""

from .codes import DRILLING_METHOD_STANDARDIZED_CODES
from .common import HEIGHT_DETERMINATION_CODES, PLACE_DETERMINATION_CODES
from .entry import build_table

MEASUREMENT_VARIABLES = build_table([
    {
        "id": 13,
        "unit": "m",
        "description": "Voorgegraven diepte",
        "category": "borehole_geometry",
        "data_type": "float",
    },
    {
        "id": 16,
        "unit": "m",
        "description": "Einddiepte",
        "category": "borehole_geometry",
        "data_type": "float",
    },
    {
        "id": 18,
        "unit": "m",
        "description": "Grondwaterstand direct na boring",
        "category": "groundwater",
        "data_type": "float",
    },
    {
        "id": 14,
        "unit": "m",
        "description": "GHG (gemiddeld hoogste grondwaterstand)",
        "category": "groundwater",
        "data_type": "float",
    },
    {
        "id": 19,
        "unit": "-",
        "description": "Aantal peilbuizen",
        "category": "monitoring_wells",
        "data_type": "integer",
    },
    {
        "id": 31,
        "unit": "m",
        "description": "Diepte onderkant boortraject 1",
        "category": "drilling_segments",
        "data_type": "float",
    },
    {
        "id": 33,
        "unit": "m",
        "description": "Diepte onderkant boortraject 2",
        "category": "drilling_segments",
        "data_type": "float",
    },
    {
        "id": 35,
        "unit": "m",
        "description": "Diepte onderkant boortraject 3",
        "category": "drilling_segments",
        "data_type": "float",
    },
    {
        "id": 37,
        "unit": "m",
        "description": "Diepte onderkant boortraject 4",
        "category": "drilling_segments",
        "data_type": "float",
    },
    {
        "id": 39,
        "unit": "m",
        "description": "Diepte onderkant boortraject 5",
        "category": "drilling_segments",
        "data_type": "float",
    },
    {
        "id": 41,
        "unit": "m",
        "description": "Diepte onderkant boortraject 6",
        "category": "drilling_segments",
        "data_type": "float",
    },
    {
        "id": 43,
        "unit": "m",
        "description": "Diepte onderkant boortraject 7",
        "category": "drilling_segments",
        "data_type": "float",
    },
    {
        "id": 45,
        "unit": "m",
        "description": "Diepte onderkant boortraject 8",
        "category": "drilling_segments",
        "data_type": "float",
    },
    {
        "id": 47,
        "unit": "m",
        "description": "Diepte onderkant boortraject 9",
        "category": "drilling_segments",
        "data_type": "float",
    },
    {
        "id": 49,
        "unit": "m",
        "description": "Diepte onderkant boortraject 10",
        "category": "drilling_segments",
        "data_type": "float",
    },
    {
        "id": 32,
        "unit": "mm",
        "description": "Boorbuisdiameter boortraject 1",
        "category": "drilling_equipment",
        "data_type": "float",
    },
    {
        "id": 34,
        "unit": "mm",
        "description": "Boorbuisdiameter boortraject 2",
        "category": "drilling_equipment",
        "data_type": "float",
    },
    {
        "id": 36,
        "unit": "mm",
        "description": "Boorbuisdiameter boortraject 3",
        "category": "drilling_equipment",
        "data_type": "float",
    },
    {
        "id": 38,
        "unit": "mm",
        "description": "Boorbuisdiameter boortraject 4",
        "category": "drilling_equipment",
        "data_type": "float",
    },
    {
        "id": 40,
        "unit": "mm",
        "description": "Boorbuisdiameter boortraject 5",
        "category": "drilling_equipment",
        "data_type": "float",
    },
    {
        "id": 42,
        "unit": "mm",
        "description": "Boorbuisdiameter boortraject 6",
        "category": "drilling_equipment",
        "data_type": "float",
    },
    {
        "id": 44,
        "unit": "mm",
        "description": "Boorbuisdiameter boortraject 7",
        "category": "drilling_equipment",
        "data_type": "float",
    },
    {
        "id": 46,
        "unit": "mm",
        "description": "Boorbuisdiameter boortraject 8",
        "category": "drilling_equipment",
        "data_type": "float",
    },
    {
        "id": 48,
        "unit": "mm",
        "description": "Boorbuisdiameter boortraject 9",
        "category": "drilling_equipment",
        "data_type": "float",
    },
    {
        "id": 50,
        "unit": "mm",
        "description": "Boorbuisdiameter boortraject 10",
        "category": "drilling_equipment",
        "data_type": "float",
    },
])

MEASUREMENT_TEXTS = build_table(is_text=True, raws=[
    {
        "id": 1,
        "description": "Opdrachtgever",
        "category": "project_info",
        "required": False,
        "standardized_codes": None,
    },
    {
        "id": 2,
        "description": "Doel onderzoek",
        "category": "project_info",
        "required": False,
        "standardized_codes": None,
    },
    {
        "id": 3,
        "description": "Plaatsnaam",
        "category": "location",
        "required": True,
        "standardized_codes": None,
    },
    {
        "id": 4,
        "description": "Voor toekomstig gebruik gereserveerd",
        "category": "reserved",
        "required": False,
        "standardized_codes": None,
    },
    {
        "id": 5,
        "description": "Datum boorbeschrijving",
        "category": "project_info",
        "required": True,
        "standardized_codes": None,
    },
    {
        "id": 6,
        "description": "Beschrijver lagen",
        "category": "personnel",
        "required": True,
        "standardized_codes": None,
    },
    {
        "id": 7,
        "description": "Lokaal coördinatensysteem",
        "category": "coordinates",
        "required": False,
        "standardized_codes": None,
    },
    {
        "id": 8,
        "description": "Lokaal referentiesysteem",
        "category": "reference_system",
        "required": False,
        "standardized_codes": None,
    },
    {
        "id": 9,
        "description": "Vast horizontaal niveau",
        "category": "reference_system",
        "required": True,
        "standardized_codes": None,
    },
    {
        "id": 10,
        "description": "Voor toekomstig gebruik gereserveerd",
        "category": "reserved",
        "required": False,
        "standardized_codes": None,
    },
    {
        "id": 11,
        "description": "Maaiveldhoogtebepaling",
        "category": "elevation_determination",
        "required": False,
        "standardized_codes": HEIGHT_DETERMINATION_CODES,
    },
    {
        "id": 12,
        "description": "Plaatsbepalingmethode",
        "category": "position_determination",
        "required": False,
        "standardized_codes": PLACE_DETERMINATION_CODES,
    },
    {
        "id": 13,
        "description": "Boorbedrijf",
        "category": "personnel",
        "required": True,
        "standardized_codes": None,
    },
    {
        "id": 14,
        "description": "Vertrouwelijkheid",
        "category": "data_management",
        "required": False,
        "standardized_codes": [
            {"code": "Ja", "description": "vertrouwelijk"},
            {"code": "Nee", "description": "openbaar"},
        ],
    },
    {
        "id": 15,
        "description": "Einddatum geheimhouding",
        "category": "data_management",
        "required": False,
        "standardized_codes": None,
    },
    {
        "id": 16,
        "description": "Datum boring",
        "category": "project_info",
        "required": True,
        "standardized_codes": None,
    },
    {
        "id": 17,
        "description": "Vochtigheidstoestand grond",
        "category": "sample_condition",
        "required": False,
        "standardized_codes": [
            {"code": "droog", "description": "droge grond"},
            {"code": "nat", "description": "veldvochtige grond"},
        ],
    },
    {
        "id": 18,
        "description": "Peilbuis aanwezigheid",
        "category": "monitoring_wells",
        "required": False,
        "standardized_codes": [
            {"code": "Ja", "description": "peilbuis aanwezig"},
            {"code": "Nee", "description": "peilbuis afwezig"},
        ],
    },
    {
        "id": 19,
        "description": "Einddatum boring",
        "category": "project_info",
        "required": False,
        "standardized_codes": None,
    },
    {
        "id": 20,
        "description": "Bij sondering",
        "category": "related_investigations",
        "required": False,
        "standardized_codes": None,
    },
    {
        "id": 21,
        "description": "Voor toekomstig gebruik gereserveerd",
        "category": "reserved",
        "required": False,
        "standardized_codes": None,
    },
    {
        "id": 22,
        "description": "Voor toekomstig gebruik gereserveerd",
        "category": "reserved",
        "required": False,
        "standardized_codes": None,
    },
    {
        "id": 23,
        "description": "Naam boormeester",
        "category": "personnel",
        "required": False,
        "standardized_codes": None,
    },
    {
        "id": 31,
        "description": "Boormethode boortraject 1",
        "category": "drilling_methods",
        "required": True,
        "standardized_codes": DRILLING_METHOD_STANDARDIZED_CODES,
    },
    {
        "id": 32,
        "description": "Boormethode boortraject 2",
        "category": "drilling_methods",
        "required": False,
        "standardized_codes": DRILLING_METHOD_STANDARDIZED_CODES,
    },
    {
        "id": 33,
        "description": "Boormethode boortraject 3",
        "category": "drilling_methods",
        "required": False,
        "standardized_codes": DRILLING_METHOD_STANDARDIZED_CODES,
    },
    {
        "id": 34,
        "description": "Boormethode boortraject 4",
        "category": "drilling_methods",
        "required": False,
        "standardized_codes": DRILLING_METHOD_STANDARDIZED_CODES,
    },
    {
        "id": 35,
        "description": "Boormethode boortraject 5",
        "category": "drilling_methods",
        "required": False,
        "standardized_codes": DRILLING_METHOD_STANDARDIZED_CODES,
    },
    {
        "id": 36,
        "description": "Boormethode boortraject 6",
        "category": "drilling_methods",
        "required": False,
        "standardized_codes": DRILLING_METHOD_STANDARDIZED_CODES,
    },
    {
        "id": 37,
        "description": "Boormethode boortraject 7",
        "category": "drilling_methods",
        "required": False,
        "standardized_codes": DRILLING_METHOD_STANDARDIZED_CODES,
    },
    {
        "id": 38,
        "description": "Boormethode boortraject 8",
        "category": "drilling_methods",
        "required": False,
        "standardized_codes": DRILLING_METHOD_STANDARDIZED_CODES,
    },
    {
        "id": 39,
        "description": "Boormethode boortraject 9",
        "category": "drilling_methods",
        "required": False,
        "standardized_codes": DRILLING_METHOD_STANDARDIZED_CODES,
    },
    {
        "id": 40,
        "description": "Boormethode boortraject 10",
        "category": "drilling_methods",
        "required": False,
        "standardized_codes": DRILLING_METHOD_STANDARDIZED_CODES,
    },
])
