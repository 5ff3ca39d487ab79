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

"""Coordinate and height reference systems referenced by XYID and ZID."""


COORDINATE_SYSTEMS = {
    "31000": {
        "epsg": "EPSG:28992",
        "proj4def": "+proj=sterea +lat_0=52.15616055555555 +lon_0=5.38763888888889 +k=0.9999079 +x_0=155000 +y_0=463000 +ellps=bessel +towgs84=565.417,50.3319,465.552,-0.398957,0.343988,-1.8774,4.0725 +units=m +no_defs",
        "name": "Rijksdriehoekscoördinaten",
        "name_en": "Dutch National Grid",
        "country": "Netherlands",
    },
    "31001": {
        "epsg": "EPSG:32631",
        "name": "UTM zone 31N",
        "name_en": "WGS 84 / UTM zone 31N",
        "country": "International",
    },
    "31002": {
        "epsg": "EPSG:32609",
        "name": "UTM zone 9N",
        "name_en": "WGS 84 / UTM zone 9N",
        "country": "International",
    },
    "32000": {
        "epsg": "EPSG:31370",
        "proj4def": "+proj=lcc +lat_0=90 +lon_0=4.36748666666667 +lat_1=51.1666672333333 +lat_2=49.8333339 +x_0=150000.013 +y_0=5400088.438 +ellps=intl +towgs84=-106.8686,52.2978,-103.7239,0.3366,-0.457,1.8422,-1.2747 +units=m +no_defs",
        "name": "Belge 1972 / Belgian Lambert 72",
        "name_en": "Belgian Lambert 72",
        "country": "Belgium",
    },
    "49000": {
        "epsg": "EPSG:31467",
        "name": "DHDN / Gauss-Krüger zone 3",
        "name_en": "German Gauss-Krüger zone 3",
        "country": "Germany",
    },
    "00000": {
        "epsg": None,
        "name": "Lokaal coördinatensysteem",
        "name_en": "Local coordinate system (self-defined)",
        "country": "N/A",
    },
    "00001": {
        "epsg": "EPSG:4326",
        "name": "Geografisch coördinatensysteem",
        "name_en": "Geographic coordinate system (WGS 84)",
        "country": "International",
    },
    "01000": {
        "epsg": None,
        "name": "State Plane Coordinate System",
        "name_en": "State Plane Coordinate System",
        "country": "USA",
    },
}

HEIGHT_SYSTEMS = {
    "31000": {
        "name": "Normaal Amsterdams Peil",
        "name_en": "Amsterdam Ordnance Datum",
        "epsg": "EPSG:7415",
        "country": "Netherlands",
    },
    "32000": {
        "name": "Ostend Level",
        "name_en": "Ostend Height",
        "epsg": "EPSG:5710",
        "country": "Belgium",
    },
    "32001": {
        "name": "Tweede Algemene Waterpassing",
        "name_en": "Second General Levelling",
        "epsg": "EPSG:5710",
        "country": "Belgium",
    },
    "49000": {
        "name": "Normalnull",
        "name_en": "Normal Null (German standard height)",
        "epsg": "EPSG:5783",
        "country": "Germany",
    },
    "00000": {
        "name": "Lokaal referentiesysteem",
        "name_en": "Local reference system (self-defined)",
        "epsg": None,
        "country": "N/A",
    },
    "00001": {
        "name": "Low Low Water Spring",
        "name_en": "Low Low Water Spring",
        "epsg": None,
        "country": "International",
    },
}

COUNTRY_CODES = {
    "31": "Netherlands",
    "32": "Belgium",
    "49": "Germany",
}
