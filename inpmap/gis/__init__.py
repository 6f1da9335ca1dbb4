"""
The inpmap.gis package contains methods to convert network layouts to GIS
formatted data and to project UTM coordinates to latitude/longitude.
"""
from inpmap.gis.network import NetworkLayoutGIS
from inpmap.gis.projection import WGS84, utm_epsg, utm_crs, utm_to_latlon, latlon_to_utm
