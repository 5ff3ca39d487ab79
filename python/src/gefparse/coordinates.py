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


"""Coordinate and height system lookup and reprojection to WGS84.

The projector is any callable ``project(epsg_from, epsg_to, x, y) -> (x, y)``.
The default uses pyproj. Systems whose EPSG definition lacks the datum shift
used by GEF producers (RD New, Belgian Lambert 72) are transformed with the
proj4 definition stored in the coordinate system table.
"""

import logging
import math
from functools import lru_cache

import pyproj
from pyproj.exceptions import ProjError

from gefparse.errors import ReprojectionError
from gefparse.tables.systems import COORDINATE_SYSTEMS, COUNTRY_CODES, HEIGHT_SYSTEMS

logger = logging.getLogger(__name__)

WGS84 = "EPSG:4326"


def coordinate_system(code):
    """Return the coordinate system record for a GEF code, or None if unknown."""
    system = COORDINATE_SYSTEMS.get(str(code).strip()) if code is not None else None
    if system is None:
        return None
    return dict(system, code=str(code).strip())


def height_system(code):
    """Return the height system record for a GEF code, or None if unknown."""
    system = HEIGHT_SYSTEMS.get(str(code).strip()) if code is not None else None
    if system is None:
        return None
    return dict(system, code=str(code).strip())


def country_name(country_code):
    if country_code is None:
        return None
    return COUNTRY_CODES.get(str(country_code).strip())


def _crs_input(epsg):
    for system in COORDINATE_SYSTEMS.values():
        if system.get("epsg") == epsg and system.get("proj4def"):
            return system["proj4def"]
    return epsg


@lru_cache(maxsize=32)
def _transformer(epsg_from, epsg_to):
    source_crs = pyproj.CRS.from_user_input(_crs_input(epsg_from))
    target_crs = pyproj.CRS.from_user_input(_crs_input(epsg_to))
    return pyproj.Transformer.from_crs(source_crs, target_crs, always_xy=True)


def project(epsg_from, epsg_to, x, y):
    """Transform a single point between two coordinate reference systems."""
    try:
        transformer = _transformer(epsg_from, epsg_to)
        out_x, out_y = transformer.transform(x, y)
    except ProjError as exc:
        raise ReprojectionError(f"Cannot transform {epsg_from} -> {epsg_to}: {exc}") from exc
    if not (math.isfinite(out_x) and math.isfinite(out_y)):
        raise ReprojectionError(f"Transform {epsg_from} -> {epsg_to} returned a non-finite point")
    return out_x, out_y


def to_wgs84(xy_id, projector=None):
    """Reproject an XYID position to ``{"lat", "lon"}``.

    Returns None when the position is absent, the coordinate system has no
    EPSG code, the projector fails, or the result falls outside valid
    latitude/longitude ranges.
    """
    if xy_id is None:
        return None
    system = coordinate_system(xy_id.coordinate_system_code)
    if system is None or not system.get("epsg"):
        return None
    epsg = system["epsg"]
    if epsg == WGS84:
        lon, lat = xy_id.x, xy_id.y
    else:
        projector = projector or project
        try:
            lon, lat = projector(epsg, WGS84, xy_id.x, xy_id.y)
        except Exception as exc:
            logger.warning("Reprojection of (%s, %s) from %s failed: %s", xy_id.x, xy_id.y, epsg, exc)
            return None
    if lat is None or lon is None or not (-90 <= lat <= 90) or not (-180 <= lon <= 180):
        logger.warning("Reprojected position (%s, %s) is out of range", lat, lon)
        return None
    return {"lat": lat, "lon": lon}
