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

"""Code lists shared between CPT and BORE reports."""


PLACE_DETERMINATION_CODES = [
    {
        "code": "LMET",
        "description": "Measured, surveying",
        "description_nl": "Gemeten, landmeting",
    },
    {"code": "LGPS", "description": "Measured, GPS", "description_nl": "Gemeten, GPS"},
    {
        "code": "LDGM",
        "description": "Measured, diff. GPS, > 5 m",
        "description_nl": "Gemeten, diff. GPS, > 5 m",
    },
    {
        "code": "LDGN",
        "description": "Measured, diff. GPS, between 1 and 5 m",
        "description_nl": "Gemeten, diff. GPS, 1 - < 5 m",
    },
    {
        "code": "LDGZ",
        "description": "Measured, diff. GPS, < 1m",
        "description_nl": "Gemeten, diff. GPS, < 1m",
    },
    {
        "code": "LGOV",
        "description": "Measured, other methods",
        "description_nl": "Gemeten, overige methoden",
    },
    {
        "code": "LT10",
        "description": "Estimated, Topographic map 1:10.000",
        "description_nl": "Geschat, Topografische Kaart 1:10.000",
    },
    {
        "code": "LT25",
        "description": "Estimated, Topographic map 1:25.000",
        "description_nl": "Geschat, Topografische Kaart 1:25.000",
    },
    {
        "code": "LT50",
        "description": "Estimated, Topographic map 1:50.000",
        "description_nl": "Geschat, Topografische Kaart 1:50.000",
    },
    {
        "code": "LD01",
        "description": "Estimated, detailed map 1:100",
        "description_nl": "Geschat, detailkaart 1:100",
    },
    {
        "code": "LD02",
        "description": "Estimated, detailed map 1:200",
        "description_nl": "Geschat, detailkaart 1:200",
    },
    {
        "code": "LD05",
        "description": "Estimated, detailed map 1:500",
        "description_nl": "Geschat, detailkaart 1:500",
    },
    {
        "code": "LD10",
        "description": "Estimated, detailed map 1:1000",
        "description_nl": "Geschat, detailkaart 1:1000",
    },
    {
        "code": "LD25",
        "description": "Estimated, detailed map 1:2500",
        "description_nl": "Geschat, detailkaart 1:2500",
    },
    {
        "code": "LSOV",
        "description": "Estimated, other methods",
        "description_nl": "Geschat, overige methoden",
    },
    {
        "code": "LONB",
        "description": "Estimated, method unknown",
        "description_nl": "Geschat, methode onbekend",
    },
]

HEIGHT_DETERMINATION_CODES = [
    {
        "code": "MMET",
        "description": "Measured, surveying",
        "description_nl": "Gemeten, landmeting",
    },
    {
        "code": "MDGP",
        "description": "Measured, differential GPS",
        "description_nl": "Gemeten, differentieel GPS",
    },
    {
        "code": "MGOV",
        "description": "Measured, other methods",
        "description_nl": "Gemeten, overige methoden",
    },
    {
        "code": "MH10",
        "description": "Estimated, contour map 1:10.000",
        "description_nl": "Geschat, Hoogtekaart 1:10.000",
    },
    {
        "code": "MT25",
        "description": "Estimated, Topographic map 1:25.000",
        "description_nl": "Geschat, Topografische Kaart 1:25.000",
    },
    {
        "code": "MT50",
        "description": "Estimated, Topographic map 1:50.000",
        "description_nl": "Geschat, Topografische Kaart 1:50.000",
    },
    {
        "code": "MAHN",
        "description": "Estimated, Actueel Hoogtebestand Nederland",
        "description_nl": "Geschat, Actueel Hoogtebestand Nederland",
    },
    {
        "code": "MSOV",
        "description": "Estimated, other methods",
        "description_nl": "Geschat, overige bepalingsmethoden",
    },
    {
        "code": "MONB",
        "description": "Estimated, unknown method",
        "description_nl": "Geschat, methode onbekend",
    },
    {
        "code": "MFIC",
        "description": "Fictive value",
        "description_nl": "Fictieve waarde",
    },
]

# Grouping of measurement categories into the sections a viewer shows them in
CATEGORY_GROUPS = {
    "project": [
        "project_info",
        "standards",
        "location",
        "personnel",
        "data_management",
        "related_investigations",
    ],
    "coordinates": [
        "coordinates",
        "reference_system",
        "elevation_determination",
        "position_determination",
    ],
    "test": ["test_type", "test_execution", "site_conditions"],
    "conditions": [
        "conditions",
        "general",
        "infrastructure",
        "measurements",
        "sample_condition",
        "monitoring_wells",
    ],
    "processing": ["processing"],
    "calculations": ["calculations"],
    "calibration": ["calibration"],
}

RESERVED_CATEGORY = "reserved"


def category_group(category):
    """Return the viewer group for a measurement category, defaulting to "other"."""
    for group, categories in CATEGORY_GROUPS.items():
        if category in categories:
            return group
    return "other"
