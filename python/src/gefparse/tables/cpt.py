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

"""CPT column quantities and standard measurement variable/text tables."""

from .common import HEIGHT_DETERMINATION_CODES, PLACE_DETERMINATION_CODES
from .entry import build_table

# Column quantity numbers as used in COLUMNINFO
COLUMN_QUANTITIES = {
    1: {
        "name": "Penetration length",
        "name_nl": "Sondeerlengte",
        "unit": "m",
        "description": "Depth of cone tip below fixed horizontal surface",
        "description_nl": "Diepte van conuspunt onder vast horizontaal oppervlak",
        "required": True,
        "category": "primary",
        "symbol": None,
    },
    2: {
        "name": "Measured cone resistance",
        "name_nl": "Gemeten conusweerstand",
        "unit": "MPa",
        "description": "Direct cone tip resistance measurement",
        "description_nl": "Directe conuspunt weerstandsmeting",
        "required": True,
        "category": "primary",
        "symbol": "qc",
    },
    3: {
        "name": "Friction resistance",
        "name_nl": "Wrijvingsweerstand",
        "unit": "MPa",
        "description": "Sleeve friction measurement",
        "description_nl": "Mantelwrijvingsmeting",
        "required": False,
        "category": "friction",
        "symbol": None,
    },
    4: {
        "name": "Friction number",
        "name_nl": "Wrijvingsgetal",
        "unit": "%",
        "description": "Friction ratio percentage",
        "description_nl": "Wrijvingsratio percentage",
        "required": False,
        "category": "friction",
        "symbol": None,
    },
    5: {
        "name": "Pore pressure u1",
        "name_nl": "Waterspanning u1",
        "unit": "MPa",
        "description": "Pore pressure at cone tip",
        "description_nl": "Waterspanning bij conuspunt",
        "required": False,
        "category": "pore_pressure",
        "symbol": "u1",
    },
    6: {
        "name": "Pore pressure u2",
        "name_nl": "Waterspanning u2",
        "unit": "MPa",
        "description": "Pore pressure at cone shoulder",
        "description_nl": "Waterspanning bij conusschouder",
        "required": False,
        "category": "pore_pressure",
        "symbol": "u2",
    },
    7: {
        "name": "Pore pressure u3",
        "name_nl": "Waterspanning u3",
        "unit": "MPa",
        "description": "Pore pressure at friction sleeve",
        "description_nl": "Waterspanning bij wrijvingsmantel",
        "required": False,
        "category": "pore_pressure",
        "symbol": "u3",
    },
    8: {
        "name": "Inclination (resultant)",
        "name_nl": "Helling (resultante)",
        "unit": "degrees",
        "description": "Total inclination from vertical",
        "description_nl": "Totale helling t.o.v. verticaal",
        "required": False,
        "category": "inclination",
        "symbol": None,
    },
    9: {
        "name": "Inclination N-S",
        "name_nl": "Helling N-Z",
        "unit": "degrees",
        "description": "North-South inclination component",
        "description_nl": "Noord-Zuid hellingscomponent",
        "required": False,
        "category": "inclination",
        "symbol": None,
    },
    10: {
        "name": "Inclination E-W",
        "name_nl": "Helling O-W",
        "unit": "degrees",
        "description": "East-West inclination component",
        "description_nl": "Oost-West hellingscomponent",
        "required": False,
        "category": "inclination",
        "symbol": None,
    },
    11: {
        "name": "Corrected depth",
        "name_nl": "Gecorrigeerde diepte",
        "unit": "m",
        "description": "Corrected depth below fixed horizontal surface",
        "description_nl": "Gecorrigeerde diepte onder vast horizontaal oppervlak",
        "required": False,
        "category": "calculated",
        "symbol": None,
    },
    12: {
        "name": "Time",
        "name_nl": "Tijd",
        "unit": "s",
        "description": "Time of measurement",
        "description_nl": "Tijd van meting",
        "required": False,
        "category": "measurement_info",
        "symbol": None,
    },
    13: {
        "name": "Corrected cone resistance",
        "name_nl": "Gecorrigeerde conusweerstand",
        "unit": "MPa",
        "description": "Cone resistance corrected for pore pressure effects",
        "description_nl": "Conusweerstand gecorrigeerd voor waterspanningseffecten",
        "required": False,
        "category": "calculated",
        "symbol": "qt",
    },
    14: {
        "name": "Net cone resistance",
        "name_nl": "Netto conusweerstand",
        "unit": "MPa",
        "description": "Net cone resistance",
        "description_nl": "Netto conusweerstand",
        "required": False,
        "category": "calculated",
        "symbol": "qn",
    },
    15: {
        "name": "Pore ratio",
        "name_nl": "Poriënratio",
        "unit": "-",
        "description": "Pore pressure ratio",
        "description_nl": "Waterspanningsratio",
        "required": False,
        "category": "calculated",
        "symbol": "Bq",
    },
    16: {
        "name": "Cone resistance number",
        "name_nl": "Conusweerstandsgetal",
        "unit": "-",
        "description": "Normalized cone resistance",
        "description_nl": "Genormaliseerde conusweerstand",
        "required": False,
        "category": "calculated",
        "symbol": "Nm",
    },
    17: {
        "name": "Weight per unit volume",
        "name_nl": "Volumegewicht",
        "unit": "kN/m³",
        "description": "Unit weight of soil",
        "description_nl": "Volumegewicht van grond",
        "required": False,
        "category": "soil_properties",
        "symbol": "γ",
    },
    18: {
        "name": "In-situ initial pore pressure",
        "name_nl": "In-situ initiële waterspanning",
        "unit": "MPa",
        "description": "Initial pore water pressure",
        "description_nl": "Initiële poriënwaterdruk",
        "required": False,
        "category": "soil_properties",
        "symbol": "u0",
    },
    19: {
        "name": "Total vertical soil pressure",
        "name_nl": "Totale verticale grondspanning",
        "unit": "MPa",
        "description": "Total overburden stress",
        "description_nl": "Totale deklaagspanning",
        "required": False,
        "category": "soil_properties",
        "symbol": "σv0",
    },
    20: {
        "name": "Effective vertical soil pressure",
        "name_nl": "Effectieve verticale grondspanning",
        "unit": "MPa",
        "description": "Effective overburden stress",
        "description_nl": "Effectieve deklaagspanning",
        "required": False,
        "category": "soil_properties",
        "symbol": "σ'v0",
    },
    21: {
        "name": "Inclination in X direction",
        "name_nl": "Helling in X-richting",
        "unit": "degrees",
        "description": "X-direction inclination component",
        "description_nl": "X-richting hellingscomponent",
        "required": False,
        "category": "inclination",
        "symbol": None,
    },
    22: {
        "name": "Inclination in Y direction",
        "name_nl": "Helling in Y-richting",
        "unit": "degrees",
        "description": "Y-direction inclination component",
        "description_nl": "Y-richting hellingscomponent",
        "required": False,
        "category": "inclination",
        "symbol": None,
    },
    23: {
        "name": "Electric conductivity",
        "name_nl": "Elektrische geleidbaarheid",
        "unit": "S/m",
        "description": "Electrical conductivity measurement",
        "description_nl": "Elektrische geleidbaarheidsmeting",
        "required": False,
        "category": "additional_measurements",
        "symbol": None,
    },
    24: {
        "name": "Reserved for future use",
        "name_nl": "Gereserveerd voor toekomstig gebruik",
        "unit": None,
        "description": "Reserved slot",
        "description_nl": "Gereserveerde positie",
        "required": False,
        "category": "reserved",
        "symbol": None,
    },
    25: {
        "name": "Reserved for future use",
        "name_nl": "Gereserveerd voor toekomstig gebruik",
        "unit": None,
        "description": "Reserved slot",
        "description_nl": "Gereserveerde positie",
        "required": False,
        "category": "reserved",
        "symbol": None,
    },
    26: {
        "name": "Reserved for future use",
        "name_nl": "Gereserveerd voor toekomstig gebruik",
        "unit": None,
        "description": "Reserved slot",
        "description_nl": "Gereserveerde positie",
        "required": False,
        "category": "reserved",
        "symbol": None,
    },
    27: {
        "name": "Reserved for future use",
        "name_nl": "Gereserveerd voor toekomstig gebruik",
        "unit": None,
        "description": "Reserved slot",
        "description_nl": "Gereserveerde positie",
        "required": False,
        "category": "reserved",
        "symbol": None,
    },
    28: {
        "name": "Reserved for future use",
        "name_nl": "Gereserveerd voor toekomstig gebruik",
        "unit": None,
        "description": "Reserved slot",
        "description_nl": "Gereserveerde positie",
        "required": False,
        "category": "reserved",
        "symbol": None,
    },
    29: {
        "name": "Reserved for future use",
        "name_nl": "Gereserveerd voor toekomstig gebruik",
        "unit": None,
        "description": "Reserved slot",
        "description_nl": "Gereserveerde positie",
        "required": False,
        "category": "reserved",
        "symbol": None,
    },
    30: {
        "name": "Reserved for future use",
        "name_nl": "Gereserveerd voor toekomstig gebruik",
        "unit": None,
        "description": "Reserved slot",
        "description_nl": "Gereserveerde positie",
        "required": False,
        "category": "reserved",
        "symbol": None,
    },
    31: {
        "name": "Magnetic field strength Bx",
        "name_nl": "Magnetische veldsterkte Bx",
        "unit": "nT",
        "description": "Magnetic field strength in X direction",
        "description_nl": "Magnetische veldsterkte in X-richting",
        "required": False,
        "category": "magnetic_measurements",
        "symbol": "Bx",
    },
    32: {
        "name": "Magnetic field strength By",
        "name_nl": "Magnetische veldsterkte By",
        "unit": "nT",
        "description": "Magnetic field strength in Y direction",
        "description_nl": "Magnetische veldsterkte in Y-richting",
        "required": False,
        "category": "magnetic_measurements",
        "symbol": "By",
    },
    33: {
        "name": "Magnetic field strength Bz",
        "name_nl": "Magnetische veldsterkte Bz",
        "unit": "nT",
        "description": "Magnetic field strength in Z direction",
        "description_nl": "Magnetische veldsterkte in Z-richting",
        "required": False,
        "category": "magnetic_measurements",
        "symbol": "Bz",
    },
    34: {
        "name": "Total magnetic field strength",
        "name_nl": "Totale magnetische veldsterkte",
        "unit": "nT",
        "description": "Total magnetic field strength",
        "description_nl": "Totale magnetische veldsterkte",
        "required": False,
        "category": "magnetic_measurements",
        "symbol": "Btot",
    },
    35: {
        "name": "Magnetic inclination",
        "name_nl": "Magnetische inclinatie",
        "unit": "degrees",
        "description": "Magnetic field inclination angle",
        "description_nl": "Magnetische veld inclinatiehoek",
        "required": False,
        "category": "magnetic_measurements",
        "symbol": None,
    },
    36: {
        "name": "Magnetic declination",
        "name_nl": "Magnetische declinatie",
        "unit": "degrees",
        "description": "Magnetic field declination angle",
        "description_nl": "Magnetische veld declinatiehoek",
        "required": False,
        "category": "magnetic_measurements",
        "symbol": None,
    },
    128: {
        "name": "Totale weerstand",
        "name_nl": "Totale weerstand",
        "unit": "MPa",
        "description": "Totale conusweerstand Qt",
        "description_nl": "Totale conusweerstand Qt",
        "required": False,
        "category": "dov_measurements",
        "symbol": "Qt",
    },
    129: {
        "name": "Temperatuur",
        "name_nl": "Temperatuur",
        "unit": "°C",
        "description": "Temperatuurmeting",
        "description_nl": "Temperatuurmeting",
        "required": False,
        "category": "dov_measurements",
        "symbol": "T",
    },
}

MEASUREMENT_VARIABLES = build_table([
    {
        "id": 1,
        "default_value": 1000,
        "unit": "mm²",
        "description": "Nominal surface area of cone tip",
        "description_nl": "Nominaal oppervlak van conuspunt",
        "category": "equipment",
        "data_type": "float",
    },
    {
        "id": 2,
        "default_value": 15000,
        "unit": "mm²",
        "description": "Nominal surface area of friction sleeve",
        "description_nl": "Nominaal oppervlak van wrijvingsmantel",
        "category": "equipment",
        "data_type": "float",
    },
    {
        "id": 3,
        "default_value": None,
        "unit": "-",
        "description": "Net surface area quotient of cone tip",
        "description_nl": "Netto oppervlaktequotiënt van conuspunt",
        "category": "equipment",
        "data_type": "float",
    },
    {
        "id": 4,
        "default_value": None,
        "unit": "-",
        "description": "Net surface area quotient of friction sleeve",
        "description_nl": "Netto oppervlaktequotiënt van wrijvingsmantel",
        "category": "equipment",
        "data_type": "float",
    },
    {
        "id": 5,
        "default_value": 100,
        "unit": "mm",
        "description": "Distance of cone to centre of friction sleeve",
        "description_nl": "Afstand van conus tot midden wrijvingsmantel",
        "category": "equipment",
        "data_type": "float",
    },
    {
        "id": 6,
        "default_value": None,
        "unit": "-",
        "description": "Friction present",
        "description_nl": "Wrijving aanwezig",
        "category": "capabilities",
        "data_type": "enum",
        "options": [{"value": 0, "meaning": "no"}, {"value": 1, "meaning": "yes"}],
    },
    {
        "id": 7,
        "default_value": None,
        "unit": "-",
        "description": "PPT u1 present",
        "description_nl": "PPT u1 aanwezig",
        "category": "capabilities",
        "data_type": "enum",
        "options": [{"value": 0, "meaning": "no"}, {"value": 1, "meaning": "yes"}],
    },
    {
        "id": 8,
        "default_value": None,
        "unit": "-",
        "description": "PPT u2 present",
        "description_nl": "PPT u2 aanwezig",
        "category": "capabilities",
        "data_type": "enum",
        "options": [{"value": 0, "meaning": "no"}, {"value": 1, "meaning": "yes"}],
    },
    {
        "id": 9,
        "default_value": None,
        "unit": "-",
        "description": "PPT u3 present",
        "description_nl": "PPT u3 aanwezig",
        "category": "capabilities",
        "data_type": "enum",
        "options": [{"value": 0, "meaning": "no"}, {"value": 1, "meaning": "yes"}],
    },
    {
        "id": 10,
        "default_value": None,
        "unit": "-",
        "description": "Inclination measurement present",
        "description_nl": "Hellingsmeting aanwezig",
        "category": "capabilities",
        "data_type": "enum",
        "options": [{"value": 0, "meaning": "no"}, {"value": 1, "meaning": "yes"}],
    },
    {
        "id": 11,
        "default_value": None,
        "unit": "-",
        "description": "Use of back-flow compensator",
        "description_nl": "Gebruik van terugstroomcompensator",
        "category": "equipment",
        "data_type": "enum",
        "options": [{"value": 0, "meaning": "no"}, {"value": 1, "meaning": "yes"}],
    },
    {
        "id": 12,
        "default_value": None,
        "unit": "-",
        "description": "Type of cone penetration test",
        "description_nl": "Type conuspenetratietest",
        "category": "test_type",
        "data_type": "enum",
        "options": [
            {"value": 0, "meaning": "electronic penetration test"},
            {"value": 1, "meaning": "mechanical discontinue"},
            {"value": 2, "meaning": "mechanical continue"},
        ],
    },
    {
        "id": 13,
        "default_value": None,
        "unit": "m",
        "description": "Pre-excavated depth",
        "description_nl": "Voorontgraven diepte",
        "category": "site_conditions",
        "data_type": "float",
    },
    {
        "id": 14,
        "default_value": None,
        "unit": "m",
        "description": "Groundwater level (with respect to datum of height system in ZID)",
        "description_nl": "Grondwaterstand (t.o.v. datum van hoogtestelsel in ZID)",
        "category": "site_conditions",
        "data_type": "float",
    },
    {
        "id": 15,
        "default_value": None,
        "unit": "m",
        "description": "Water depth (for offshore activities)",
        "description_nl": "Waterdiepte (voor offshore activiteiten)",
        "category": "site_conditions",
        "data_type": "float",
    },
    {
        "id": 16,
        "default_value": None,
        "unit": "m",
        "description": "End depth of penetration test",
        "description_nl": "Einddiepte van penetratietest",
        "category": "test_execution",
        "data_type": "float",
    },
    {
        "id": 17,
        "default_value": None,
        "unit": "-",
        "description": "Stop criteria",
        "description_nl": "Stopcriteria",
        "category": "test_execution",
        "data_type": "enum",
        "options": [
            {"value": 0, "meaning": "end depth reached"},
            {"value": 1, "meaning": "max. penetration force"},
            {"value": 2, "meaning": "cone value"},
            {"value": 3, "meaning": "max. friction value"},
            {"value": 4, "meaning": "max. PPT value"},
            {"value": 5, "meaning": "max. inclination value"},
            {"value": 6, "meaning": "obstacle"},
            {"value": 7, "meaning": "danger of buckling"},
        ],
    },
    {
        "id": 20,
        "default_value": None,
        "unit": "MPa",
        "description": "Zero measurement of cone before penetration test",
        "description_nl": "Nulmeting van conus vóór penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 21,
        "default_value": None,
        "unit": "MPa",
        "description": "Zero measurement of cone after penetration test",
        "description_nl": "Nulmeting van conus na penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 22,
        "default_value": None,
        "unit": "MPa",
        "description": "Zero measurement friction before penetration test",
        "description_nl": "Nulmeting wrijving vóór penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 23,
        "default_value": None,
        "unit": "MPa",
        "description": "Zero measurement friction after penetration test",
        "description_nl": "Nulmeting wrijving na penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 24,
        "default_value": None,
        "unit": "MPa",
        "description": "Zero measurement PPT u1 before penetration test",
        "description_nl": "Nulmeting PPT u1 vóór penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 25,
        "default_value": None,
        "unit": "MPa",
        "description": "Zero measurement PPT u1 after penetration test",
        "description_nl": "Nulmeting PPT u1 na penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 26,
        "default_value": None,
        "unit": "MPa",
        "description": "Zero measurement PPT u2 before penetration test",
        "description_nl": "Nulmeting PPT u2 vóór penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 27,
        "default_value": None,
        "unit": "MPa",
        "description": "Zero measurement PPT u2 after penetration test",
        "description_nl": "Nulmeting PPT u2 na penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 28,
        "default_value": None,
        "unit": "MPa",
        "description": "Zero measurement PPT u3 before penetration test",
        "description_nl": "Nulmeting PPT u3 vóór penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 29,
        "default_value": None,
        "unit": "MPa",
        "description": "Zero measurement PPT u3 after penetration test",
        "description_nl": "Nulmeting PPT u3 na penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 30,
        "default_value": None,
        "unit": "degrees",
        "description": "Zero measurement inclination before penetration test",
        "description_nl": "Nulmeting helling vóór penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 31,
        "default_value": None,
        "unit": "degrees",
        "description": "Zero measurement inclination after penetration test",
        "description_nl": "Nulmeting helling na penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 32,
        "default_value": None,
        "unit": "degrees",
        "description": "Zero measurement inclination NS before penetration test",
        "description_nl": "Nulmeting helling NZ vóór penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 33,
        "default_value": None,
        "unit": "degrees",
        "description": "Zero measurement inclination NS after penetration test",
        "description_nl": "Nulmeting helling NZ na penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 34,
        "default_value": None,
        "unit": "degrees",
        "description": "Zero measurement inclination EW before penetration test",
        "description_nl": "Nulmeting helling OW vóór penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 35,
        "default_value": None,
        "unit": "degrees",
        "description": "Zero measurement inclination EW after penetration test",
        "description_nl": "Nulmeting helling OW na penetratietest",
        "category": "calibration",
        "data_type": "float",
    },
    {
        "id": 41,
        "default_value": None,
        "unit": "km",
        "description": "Mileage",
        "description_nl": "Kilometrering",
        "category": "location",
        "data_type": "float",
    },
    {
        "id": 42,
        "default_value": None,
        "unit": "degrees",
        "description": "Orientation between X axis inclination and North",
        "description_nl": "Oriëntatie tussen X-as helling en Noord",
        "category": "location",
        "data_type": "float",
    },
])

MEASUREMENT_TEXTS = build_table(is_text=True, raws=[
    {
        "id": 1,
        "description": "Client",
        "description_nl": "Opdrachtgever",
        "category": "project_info",
        "example": "ABC Engineering Company",
    },
    {
        "id": 2,
        "description": "Name of the project",
        "description_nl": "Naam van het project",
        "category": "project_info",
        "example": "Highway A1 Extension",
    },
    {
        "id": 3,
        "description": "Name of the location",
        "description_nl": "Naam van de locatie",
        "category": "project_info",
        "example": "Rotterdam Port Area",
    },
    {
        "id": 4,
        "description": "Cone type and serial number",
        "description_nl": "Conustype en serienummer",
        "category": "equipment",
        "example": "Fugro Type A, Serial 12345",
    },
    {
        "id": 5,
        "description": "Mass and geometry of probe apparatus, including anchoring",
        "description_nl": "Massa en geometrie van sondeerinstallatie, inclusief verankering",
        "category": "equipment",
        "example": "Mass: 2500kg, Length: 15m, Anchoring: hydraulic",
    },
    {
        "id": 6,
        "description": "Applied standard, including class",
        "description_nl": "Toegepaste norm, inclusief klasse",
        "category": "standards",
        "example": "NEN 5140 Class 1, NEN 3680",
    },
    {
        "id": 7,
        "description": "Own coordinate system",
        "description_nl": "Eigen coördinatenstelsel",
        "category": "coordinates",
        "example": "Local site grid, origin at building corner",
    },
    {
        "id": 8,
        "description": "Own reference level",
        "description_nl": "Eigen referentieniveau",
        "category": "coordinates",
        "example": "Site datum +5.00m above MSL",
    },
    {
        "id": 9,
        "description": "Fixed horizontal level (usually: ground level or flow bed)",
        "description_nl": "Vast horizontaal niveau (meestal: maaiveld of stroombed)",
        "category": "coordinates",
        "example": "+2.35m NAP",
    },
    {
        "id": 10,
        "description": "Orientation direction biaxial inclination measurement (N-direction)",
        "description_nl": "Oriëntatierichting biaxiale hellingsmeting (N-richting)",
        "category": "measurements",
        "example": "North = 0°, magnetic declination +2°",
    },
    {
        "id": 11,
        "description": "Unusual circumstances",
        "description_nl": "Bijzondere omstandigheden",
        "category": "conditions",
        "example": "Heavy rain during test, vibrations from nearby construction",
    },
    {
        "id": 12,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 13,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 14,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 15,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 16,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 17,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 18,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 19,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 20,
        "description": "Correction method for zero drift",
        "description_nl": "Correctiemethode voor nuldrift",
        "category": "processing",
        "example": "Linear interpolation between pre/post zero measurements",
    },
    {
        "id": 21,
        "description": "Method for processing interruptions",
        "description_nl": "Methode voor verwerking van onderbrekingen",
        "category": "processing",
        "example": "Data gap filled using adjacent measurements",
    },
    {
        "id": 22,
        "description": "Remarks",
        "description_nl": "Opmerkingen",
        "category": "general",
        "example": "Test performed according to project specifications",
    },
    {
        "id": 23,
        "description": "Remarks",
        "description_nl": "Opmerkingen",
        "category": "general",
        "example": "Groundwater encountered at 3.2m depth",
    },
    {
        "id": 24,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 25,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 26,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 27,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 28,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 29,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 30,
        "description": "Calculation formula or reference for column number",
        "description_nl": "Berekeningsformule of referentie voor kolomnummer",
        "category": "calculations",
        "example": "Friction ratio = (fs/qc) × 100%",
    },
    {
        "id": 31,
        "description": "Calculation formula or reference for column number",
        "description_nl": "Berekeningsformule of referentie voor kolomnummer",
        "category": "calculations",
        "example": "Corrected cone resistance = qc + u2(1-a)",
    },
    {
        "id": 32,
        "description": "Calculation formula or reference for column number",
        "description_nl": "Berekeningsformule of referentie voor kolomnummer",
        "category": "calculations",
        "example": "Net cone resistance = qc - σvo",
    },
    {
        "id": 33,
        "description": "Calculation formula or reference for column number",
        "description_nl": "Berekeningsformule of referentie voor kolomnummer",
        "category": "calculations",
        "example": "Pore pressure ratio = (u2 - u0) / (qc - σvo)",
    },
    {
        "id": 34,
        "description": "Calculation formula or reference for column number",
        "description_nl": "Berekeningsformule of referentie voor kolomnummer",
        "category": "calculations",
        "example": "Soil behavior type index = sqrt((3.47-log10(Qt))^2 + (log10(Fr)+1.22)^2)",
    },
    {
        "id": 35,
        "description": "Calculation formula or reference for column number",
        "description_nl": "Berekeningsformule of referentie voor kolomnummer",
        "category": "calculations",
        "example": "Normalized cone resistance = (qc - σvo) / σ'vo",
    },
    {
        "id": 36,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 37,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 38,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 39,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 40,
        "description": "Reserved for future use",
        "description_nl": "Gereserveerd voor toekomstig gebruik",
        "category": "reserved",
        "example": None,
    },
    {
        "id": 41,
        "description": "Highway, railway or dike code",
        "description_nl": "Rijksweg-, spoorweg- of dijkcode",
        "category": "infrastructure",
        "example": "Railway line A16, km 23.4",
    },
    {
        "id": 42,
        "description": "Method for determination of ZID (height)",
        "description_nl": "Methode voor bepaling van ZID (hoogte)",
        "category": "coordinates",
        "example": "MMET (Measured, surveying)",
        "standardized_codes": HEIGHT_DETERMINATION_CODES,
    },
    {
        "id": 43,
        "description": "Method for determination of XYID (position)",
        "description_nl": "Methode voor bepaling van XYID (positie)",
        "category": "coordinates",
        "example": "LMET (Measured, surveying)",
        "standardized_codes": PLACE_DETERMINATION_CODES,
    },
    {
        "id": 44,
        "description": "Orientation of X axis of inclination measurement",
        "description_nl": "Oriëntatie van X-as van hellingsmeting",
        "category": "measurements",
        "example": "X-axis aligned with magnetic north",
    },
])
