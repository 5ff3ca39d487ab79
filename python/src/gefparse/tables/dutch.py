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

"""Dutch GEF extension (CUR/NEN) measurement tables."""

from .entry import build_table

MEASUREMENT_VARIABLES = build_table([
    {
        "id": 101,
        "unit": "m",
        "description": "Penetration length",
        "description_nl": "Sondeertrajectlengte",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 102,
        "unit": "m",
        "description": "Depth",
        "description_nl": "Diepte",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 103,
        "unit": "s",
        "description": "Elapsed time",
        "description_nl": "Verlopen tijd",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 104,
        "unit": "MPa",
        "description": "Cone resistance",
        "description_nl": "Conusweerstand",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 105,
        "unit": "MPa",
        "description": "Corrected cone resistance",
        "description_nl": "Gecorrigeerde conusweerstand",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 106,
        "unit": "MPa",
        "description": "Net cone resistance",
        "description_nl": "Netto conusweerstand",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 107,
        "unit": "nT",
        "description": "Magnetic field strength x",
        "description_nl": "Magnetische veldsterkte x",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 108,
        "unit": "nT",
        "description": "Magnetic field strength y",
        "description_nl": "Magnetische veldsterkte y",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 109,
        "unit": "nT",
        "description": "Magnetic field strength z",
        "description_nl": "Magnetische veldsterkte z",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 110,
        "unit": "nT",
        "description": "Total magnetic field strength",
        "description_nl": "Totale magnetische veldsterkte",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 111,
        "unit": "S/m",
        "description": "Electrical conductivity",
        "description_nl": "Electrische geleidbaarheid",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 112,
        "unit": "degrees",
        "description": "Inclination east-west",
        "description_nl": "Helling oost-west",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 113,
        "unit": "degrees",
        "description": "Inclination north-south",
        "description_nl": "Helling noord-zuid",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 114,
        "unit": "degrees",
        "description": "Inclination x",
        "description_nl": "Helling x",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 115,
        "unit": "degrees",
        "description": "Inclination y",
        "description_nl": "Helling y",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 116,
        "unit": "degrees",
        "description": "Resultant inclination",
        "description_nl": "Hellingresultante",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 117,
        "unit": "degrees",
        "description": "Magnetic inclination",
        "description_nl": "Magnetische inclinatie",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 118,
        "unit": "degrees",
        "description": "Magnetic declination",
        "description_nl": "Magnetische declinatie",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 119,
        "unit": "MPa",
        "description": "Local friction",
        "description_nl": "Plaatselijke wrijving",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 120,
        "unit": "-",
        "description": "Pore ratio",
        "description_nl": "Poriënratio",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 121,
        "unit": "°C",
        "description": "Temperature",
        "description_nl": "Temperatuur",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 122,
        "unit": "MPa",
        "description": "Pore pressure u1",
        "description_nl": "Waterspanning u1",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 123,
        "unit": "MPa",
        "description": "Pore pressure u2",
        "description_nl": "Waterspanning u2",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 124,
        "unit": "%",
        "description": "Friction ratio",
        "description_nl": "Wrijvingsgetal",
        "category": "bro_data",
        "data_type": "float",
    },
    {
        "id": 130,
        "unit": "mm",
        "description": "Cone diameter before test",
        "description_nl": "Conusdiameter voor test",
        "category": "bro_equipment",
        "data_type": "float",
    },
    {
        "id": 1100,
        "unit": "µm",
        "description": "Pore diameter of filter material",
        "description_nl": "Poriëndiameter filtermateriaal waterspanningsfilter",
        "category": "votb_equipment",
        "data_type": "float",
    },
    {
        "id": 1101,
        "unit": "mm",
        "description": "Filter diameter behind cone tip",
        "description_nl": "Diameter filter achter conuspunt",
        "category": "votb_equipment",
        "data_type": "float",
    },
    {
        "id": 1102,
        "unit": "mm",
        "description": "Distance friction reducer to cone tip",
        "description_nl": "Afstand kleefbreker tot conuspunt",
        "category": "votb_equipment",
        "data_type": "float",
    },
    {
        "id": 1103,
        "unit": "°C",
        "description": "Cone temperature before test",
        "description_nl": "Temperatuur conus voor test",
        "category": "votb_calibration",
        "data_type": "float",
    },
    {
        "id": 1104,
        "unit": "°C",
        "description": "Ambient temperature before test",
        "description_nl": "Temperatuur omgeving voor test",
        "category": "votb_calibration",
        "data_type": "float",
    },
])

MEASUREMENT_TEXTS = build_table(is_text=True, raws=[
    {
        "id": 101,
        "description": "Data holder",
        "description_nl": "Bronhouder",
        "category": "bro_submission",
        "example": "Bronhouder, 52605825, 31",
    },
    {
        "id": 102,
        "description": "Delivery framework",
        "description_nl": "Kader aanlevering",
        "category": "bro_submission",
        "example": "opdracht publieke taakuitvoering",
    },
    {
        "id": 103,
        "description": "Investigation purpose",
        "description_nl": "Kader inwinning",
        "category": "bro_submission",
        "example": "overig onderzoek",
    },
    {
        "id": 104,
        "description": "Location surveyor",
        "description_nl": "Uitvoerder locatiebepaling",
        "category": "bro_submission",
        "example": "24257098, 31",
    },
    {
        "id": 105,
        "description": "Location determination date",
        "description_nl": "Datum locatiebepaling",
        "category": "bro_submission",
        "example": "2019, 01, 29",
    },
    {
        "id": 106,
        "description": "Elevation surveyor",
        "description_nl": "Uitvoerder verticale positiebepaling",
        "category": "bro_submission",
        "example": "24257098, 31",
    },
    {
        "id": 107,
        "description": "Elevation determination date",
        "description_nl": "Datum verticale positiebepaling",
        "category": "bro_submission",
        "example": "2019, 01, 29",
    },
    {
        "id": 108,
        "description": "Surface conditions",
        "description_nl": "Hoedanigheid oppervlakte",
        "category": "bro_submission",
        "example": "verhard",
    },
    {
        "id": 109,
        "description": "Dissipation test performed",
        "description_nl": "Dissipatietest uitgevoerd",
        "category": "bro_submission",
        "example": "nee",
    },
    {
        "id": 110,
        "description": "Expert correction performed",
        "description_nl": "Expertcorrectie uitgevoerd",
        "category": "bro_submission",
        "example": "ja",
    },
    {
        "id": 111,
        "description": "Additional investigation performed",
        "description_nl": "Aanvullend onderzoek uitgevoerd",
        "category": "bro_submission",
        "example": "nee",
    },
    {
        "id": 112,
        "description": "Reporting date",
        "description_nl": "Rapportagedatum onderzoek",
        "category": "bro_submission",
        "example": "2019, 01, 31",
    },
    {
        "id": 113,
        "description": "Last processing date",
        "description_nl": "Datum laatste bewerking",
        "category": "bro_submission",
        "example": "2019, 01, 30",
    },
    {
        "id": 114,
        "description": "Investigation date",
        "description_nl": "Datum onderzoek",
        "category": "bro_submission",
        "example": "2019, 01, 29",
    },
    {
        "id": 115,
        "description": "Quality regime",
        "description_nl": "Kwaliteitsregime",
        "category": "bro_registration",
        "example": "IMBRO/A",
    },
    {
        "id": 116,
        "description": "Registration timestamp",
        "description_nl": "Tijdstip registratie object",
        "category": "bro_registration",
        "example": "2019-02-15T10:30:00",
    },
    {
        "id": 117,
        "description": "Registration status",
        "description_nl": "Registratiestatus",
        "category": "bro_registration",
        "example": "voltooid",
    },
    {
        "id": 118,
        "description": "Registration completion timestamp",
        "description_nl": "Tijdstip voltooiing registratie",
        "category": "bro_registration",
        "example": "2019-02-15T10:30:00",
    },
    {
        "id": 119,
        "description": "Corrected indicator",
        "description_nl": "Gecorrigeerd",
        "category": "bro_registration",
        "example": "nee",
    },
    {
        "id": 120,
        "description": "Last correction timestamp",
        "description_nl": "Tijdstip laatste correctie",
        "category": "bro_registration",
        "example": None,
    },
    {
        "id": 121,
        "description": "Under investigation",
        "description_nl": "In onderzoek",
        "category": "bro_registration",
        "example": "nee",
    },
    {
        "id": 122,
        "description": "Under investigation since",
        "description_nl": "In onderzoek sinds",
        "category": "bro_registration",
        "example": None,
    },
    {
        "id": 123,
        "description": "Removed from registration",
        "description_nl": "Uit registratie genomen",
        "category": "bro_registration",
        "example": "nee",
    },
    {
        "id": 124,
        "description": "Removal timestamp",
        "description_nl": "Tijdstip uit registratie genomen",
        "category": "bro_registration",
        "example": None,
    },
    {
        "id": 125,
        "description": "Re-registered",
        "description_nl": "Weer in registratie genomen",
        "category": "bro_registration",
        "example": "nee",
    },
    {
        "id": 126,
        "description": "Re-registration timestamp",
        "description_nl": "Tijdstip weer in registratie genomen",
        "category": "bro_registration",
        "example": None,
    },
    {
        "id": 127,
        "description": "Standardized location reference system",
        "description_nl": "Gestandaardiseerde locatie referentiestelsel",
        "category": "bro_registration",
        "example": "EPSG:28992",
    },
    {
        "id": 128,
        "description": "Coordinate transformation",
        "description_nl": "Coördinaattransformatie",
        "category": "bro_registration",
        "example": "nee",
    },
    {
        "id": 1100,
        "description": "Filter material type for pore pressure filter",
        "description_nl": "Type filtermateriaal voor waterspanningsfilter",
        "category": "votb_equipment",
        "example": "sintered steel",
    },
    {
        "id": 1101,
        "description": "Use of friction reducer",
        "description_nl": "Gebruik kleefbreker",
        "category": "votb_equipment",
        "example": "ja",
    },
    {
        "id": 1102,
        "description": "Type of friction reducer",
        "description_nl": "Type kleefbreker",
        "category": "votb_equipment",
        "example": "mechanical",
    },
    {
        "id": 1103,
        "description": "Fluid type for wash boring",
        "description_nl": "Type vloeistof bij spoelsondering",
        "category": "votb_equipment",
        "example": "water",
    },
    {
        "id": 1104,
        "description": "Inclinometer position",
        "description_nl": "Positie hellingmeter",
        "category": "votb_equipment",
        "example": "in cone",
    },
    {
        "id": 1105,
        "description": "Dissipation test with closed pressure clamp",
        "description_nl": "Dissipatietest met gesloten drukklem",
        "category": "votb_test",
        "example": "nee",
    },
    {
        "id": 1106,
        "description": "Postal code for project location",
        "description_nl": "Postcode voor de projectlocatie",
        "category": "votb_location",
        "example": "3011 AA",
    },
    {
        "id": 1107,
        "description": "Street name of project location",
        "description_nl": "Straatnaam van de projectlocatie",
        "category": "votb_location",
        "example": "Coolsingel",
    },
    {
        "id": 1108,
        "description": "City of project location",
        "description_nl": "Plaats van de projectlocatie",
        "category": "votb_location",
        "example": "Rotterdam",
    },
    {
        "id": 1109,
        "description": "Province of project location",
        "description_nl": "Provincie waarin de projectlocatie is gelegen",
        "category": "votb_location",
        "example": "Zuid-Holland",
    },
    {
        "id": 1110,
        "description": "Country of project",
        "description_nl": "Land waar het project in is gelegen",
        "category": "votb_location",
        "example": "Nederland",
    },
])
