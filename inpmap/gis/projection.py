"""
The inpmap.gis.projection module contains functions to convert between
planar UTM coordinates and latitude/longitude.

Transformations are delegated to pyproj, using the WGS 84 / UTM coordinate
reference systems (EPSG:326zz in the northern hemisphere and EPSG:327zz in
the southern hemisphere, where zz is the zone number).
"""
import functools
import logging

import numpy as np
from pyproj import CRS, Transformer

from inpmap.utils.check_values import _check_int_in_range, _check_str_choice

logger = logging.getLogger(__name__)

WGS84 = "EPSG:4326"
"""Geographic coordinate reference system used for latitude/longitude"""


def utm_epsg(zone, hemisphere='N') -> int:
    """
    EPSG code of a WGS 84 / UTM zone

    Parameters
    ----------
    zone : int
        UTM zone number, 1 to 60
    hemisphere : str, optional
        'N' for north or 'S' for south (case-insensitive), by default 'N'

    Returns
    -------
    int
        32600 + zone in the north, 32700 + zone in the south
    """
    zone = _check_int_in_range(zone, 'utm_zone', 1, 60)
    hemisphere = _check_str_choice(hemisphere, 'hemisphere', ('N', 'S'))
    if hemisphere == 'N':
        return 32600 + zone
    return 32700 + zone


def utm_crs(zone, hemisphere='N') -> str:
    """
    Coordinate reference system string of a WGS 84 / UTM zone, e.g. "EPSG:32614"

    Parameters
    ----------
    zone : int
        UTM zone number, 1 to 60
    hemisphere : str, optional
        'N' for north or 'S' for south (case-insensitive), by default 'N'

    Returns
    -------
    str
    """
    return "EPSG:{}".format(utm_epsg(zone, hemisphere))


@functools.lru_cache(maxsize=None)
def _transformer(source, target):
    return Transformer.from_crs(CRS.from_user_input(source),
                                CRS.from_user_input(target), always_xy=True)


def _as_values(values):
    if np.ndim(values) > 0:
        return np.asarray(values, dtype=float)
    return float(values)


def utm_to_latlon(easting, northing, zone, hemisphere='N'):
    """
    Convert UTM coordinates to latitude/longitude (inverse projection)

    Parameters
    ----------
    easting : float or array-like
        UTM easting (meters)
    northing : float or array-like
        UTM northing (meters)
    zone : int
        UTM zone number, 1 to 60
    hemisphere : str, optional
        'N' for north or 'S' for south, by default 'N'

    Returns
    -------
    tuple
        (latitude, longitude) in degrees, floats for scalar input and
        numpy arrays for array input
    """
    transformer = _transformer(utm_crs(zone, hemisphere), WGS84)
    lon, lat = transformer.transform(_as_values(easting), _as_values(northing))
    return lat, lon


def latlon_to_utm(latitude, longitude, zone, hemisphere='N'):
    """
    Convert latitude/longitude to UTM coordinates (forward projection)

    Parameters
    ----------
    latitude : float or array-like
        Latitude in degrees
    longitude : float or array-like
        Longitude in degrees
    zone : int
        UTM zone number, 1 to 60
    hemisphere : str, optional
        'N' for north or 'S' for south, by default 'N'

    Returns
    -------
    tuple
        (easting, northing) in meters, floats for scalar input and numpy
        arrays for array input
    """
    transformer = _transformer(WGS84, utm_crs(zone, hemisphere))
    easting, northing = transformer.transform(_as_values(longitude), _as_values(latitude))
    return easting, northing
