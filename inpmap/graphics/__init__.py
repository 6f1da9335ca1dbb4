"""
The inpmap.graphics package contains graphic functions and map options
"""
from inpmap.graphics.network import plot_network, plot_leaflet_network, epanet_on_map, BASEMAPS
from inpmap.graphics.options import MapOptions, ProjectionOptions, StyleOptions
