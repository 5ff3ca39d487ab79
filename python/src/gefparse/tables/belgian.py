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

"""Belgian GEF extension (DOV/VOTB) measurement tables."""

from .entry import build_table

MEASUREMENT_VARIABLES = build_table([
    {
        "id": 155,
        "unit": "MPa",
        "description": "Nulpunt Qt voor de meting",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 156,
        "unit": "MPa",
        "description": "Nulpunt Qt na de meting",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 157,
        "unit": "°C",
        "description": "Nulpunt T voor de meting",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 158,
        "unit": "°C",
        "description": "Nulpunt T na de meting",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 130,
        "unit": "-",
        "description": "Indringing",
        "category": "dov_execution",
        "data_type": "float",
    },
    {
        "id": 131,
        "unit": "m",
        "description": "Dichtvallen sondeergat op",
        "category": "dov_execution",
        "data_type": "float",
    },
    {
        "id": 132,
        "unit": "m",
        "description": "Diepte plaatsen kleefvanger",
        "category": "dov_execution",
        "data_type": "float",
    },
    {
        "id": 133,
        "unit": "m",
        "description": "Diepte plaatsen verlengbuis",
        "category": "dov_execution",
        "data_type": "float",
    },
    {
        "id": 134,
        "unit": "-",
        "description": "Aantal buizen",
        "category": "dov_execution",
        "data_type": "float",
    },
    {
        "id": 135,
        "unit": "m",
        "description": "Gemeten sondeerlengte",
        "category": "dov_execution",
        "data_type": "float",
    },
    {
        "id": 138,
        "unit": "kN",
        "description": "Totale drukkracht bij einde sondering",
        "category": "dov_execution",
        "data_type": "float",
    },
    {
        "id": 139,
        "unit": "-",
        "description": "Conuspenetrometer klasse (NBN EN ISO 22476-1:2023)",
        "category": "dov_equipment",
        "data_type": "string",
    },
    {
        "id": 140,
        "unit": "kPa",
        "description": "Max. toelaatbare meetonzekerheid qc",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 141,
        "unit": "kPa/°C",
        "description": "Omgevingstemperatuurstabiliteit qc",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 142,
        "unit": "kPa/°C",
        "description": "Wisselende temperatuurstabiliteit qc",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 143,
        "unit": "kPa/N",
        "description": "Conusbelastingsinvloed qc",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 144,
        "unit": "kPa",
        "description": "Max. toelaatbare meetonzekerheid fs",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 145,
        "unit": "kPa/°C",
        "description": "Omgevingstemperatuurstabiliteit fs",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 146,
        "unit": "kPa/°C",
        "description": "Wisselende temperatuurstabiliteit fs",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 147,
        "unit": "kPa/N",
        "description": "Conusbelastingsinvloed fs",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 148,
        "unit": "kPa",
        "description": "Max. toelaatbare meetonzekerheid u",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 149,
        "unit": "kPa/°C",
        "description": "Omgevingstemperatuurstabiliteit u",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 150,
        "unit": "kPa/°C",
        "description": "Wisselende temperatuurstabiliteit u",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 151,
        "unit": "kPa/N",
        "description": "Conusbelastingsinvloed u",
        "category": "dov_calibration",
        "data_type": "float",
    },
    {
        "id": 200,
        "unit": "m",
        "description": "Voerbuis 1 tot",
        "category": "dov_guide_tubes",
        "data_type": "float",
    },
    {
        "id": 201,
        "unit": "m",
        "description": "Voerbuis 1 op",
        "category": "dov_guide_tubes",
        "data_type": "float",
    },
    {
        "id": 250,
        "unit": "m",
        "description": "Boring 0 van",
        "category": "dov_borings",
        "data_type": "float",
    },
    {
        "id": 251,
        "unit": "m",
        "description": "Boring 0 tot",
        "category": "dov_borings",
        "data_type": "float",
    },
    {
        "id": 300,
        "unit": "m",
        "description": "Optrekking 1",
        "category": "dov_retractions",
        "data_type": "float",
    },
    {
        "id": 350,
        "unit": "m",
        "description": "Stopzetting 1",
        "category": "dov_stops",
        "data_type": "float",
    },
    {
        "id": 351,
        "unit": "m",
        "description": "Stopzetting 2",
        "category": "dov_stops",
        "data_type": "float",
    },
    {
        "id": 352,
        "unit": "m",
        "description": "Stopzetting 3",
        "category": "dov_stops",
        "data_type": "float",
    },
    {
        "id": 353,
        "unit": "m",
        "description": "Stopzetting 4",
        "category": "dov_stops",
        "data_type": "float",
    },
    {
        "id": 354,
        "unit": "m",
        "description": "Stopzetting 5",
        "category": "dov_stops",
        "data_type": "float",
    },
])

MEASUREMENT_TEXTS = build_table(is_text=True, raws=[
    {
        "id": 100,
        "description": "Testtype",
        "category": "dov_execution",
        "example": "sondering",
    },
    {
        "id": 130,
        "description": "Watermeting tijdstip",
        "category": "dov_execution",
        "example": "voor sondering",
    },
    {
        "id": 131,
        "description": "Grondsoort bij conus",
        "category": "dov_execution",
        "example": "zand",
    },
    {
        "id": 132,
        "description": "Buisgewichtcorrectie",
        "category": "dov_execution",
        "example": "ja",
    },
    {
        "id": 133,
        "description": "Stanggewichtcorrectie",
        "category": "dov_execution",
        "example": "ja",
    },
    {
        "id": 134,
        "description": "Kalibratiedatum",
        "category": "dov_calibration",
        "example": "2019-01-15",
    },
    {
        "id": 135,
        "description": "Conus calibratie datum",
        "category": "dov_calibration",
        "example": "2019-01-15",
    },
    {
        "id": 136,
        "description": "Leverancier conus",
        "category": "dov_equipment",
        "example": "Fugro",
    },
    {
        "id": 137,
        "description": "Methode verzadiging voor U conus",
        "category": "dov_equipment",
        "example": "glycerine",
    },
    {
        "id": 138,
        "description": "Conustype",
        "category": "dov_equipment",
        "example": "electric",
    },
    {
        "id": 139,
        "description": "Opvullen van sondeergat",
        "category": "dov_execution",
        "example": "ja",
    },
    {
        "id": 140,
        "description": "Afwijkingen van de norm",
        "category": "dov_remarks",
        "example": "geen",
    },
    {
        "id": 141,
        "description": "Reden vroegtijdig stoppen",
        "category": "dov_remarks",
        "example": "obstakel",
    },
    {
        "id": 142,
        "description": "Hernemen sondering",
        "category": "dov_remarks",
        "example": "hervat na herpositionering",
    },
    {
        "id": 143,
        "description": "Speciale opstellingen",
        "category": "dov_remarks",
        "example": "platform gemonteerd",
    },
    {
        "id": 144,
        "description": "Waarneming tijdens uitvoering",
        "category": "dov_remarks",
        "example": "grondwater instroming waargenomen",
    },
])
