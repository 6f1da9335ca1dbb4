"""
The inpmap.graphics.network module includes methods to plot a network
layout on a geographic map.
"""
import logging
import os
import tempfile
import warnings
import webbrowser

import folium
import xyzservices
import matplotlib.pyplot as plt
from matplotlib.colors import to_hex

import inpmap.network.io
from inpmap.gis.projection import WGS84, utm_crs
from inpmap.graphics.options import MapOptions, ProjectionOptions, StyleOptions
from inpmap.utils.exceptions import BasemapWarning

logger = logging.getLogger(__name__)

BASEMAPS = {
    'streets': 'OpenStreetMap.Mapnik',
    'streets-light': 'Stadia.AlidadeSmooth',
    'streets-dark': 'Stadia.AlidadeSmoothDark',
    'satellite': 'Esri.WorldImagery',
    'topographic': 'OpenTopoMap',
    'grayland': 'Esri.WorldGrayCanvas',
    'none': None,
}
"""Basemap style names and the tile providers used to draw them. Any
other name is looked up as an xyzservices tile provider name (for example
"Esri.WorldStreetMap"). Providers that require an API key are not used.

:meta hide-value:
"""


def _format_options(options):
    if options is None:
        return MapOptions()
    if isinstance(options, (ProjectionOptions, StyleOptions)):
        raise ValueError('options must be a MapOptions, dict, or None')
    return MapOptions.factory(options)


def _to_latlon_gis(layout, projection):
    """GeoDataFrames of the layout with coordinates in longitude/latitude"""
    crs = utm_crs(projection.utm_zone, projection.hemisphere)
    wn_gis = layout.to_gis(crs=crs)
    wn_gis.to_crs(WGS84)
    return wn_gis


def _tile_provider(basemap):
    """
    The xyzservices TileProvider of a basemap style or provider name, or
    None for the 'none' style.

    Raises ValueError if the name is not a known provider or the provider
    requires an API key.
    """
    name = BASEMAPS.get(basemap.lower(), basemap)
    if name is None:
        return None
    provider = xyzservices.providers.query_name(name)
    if provider.requires_token():
        raise ValueError('tile provider {} requires an API key'.format(provider.name))
    return provider


def _add_basemap(m, basemap):
    """
    Add the basemap tile layer to a folium map.

    Returns True if the layer was added. A basemap that cannot be loaded
    is reported with a BasemapWarning and the map is left without it.
    """
    try:
        provider = _tile_provider(basemap)
        if provider is None:
            return False
        folium.TileLayer(tiles=provider, name=basemap).add_to(m)
    except (ValueError, KeyError) as e:
        msg = "Could not load basemap '{}': {}".format(basemap, e)
        logger.warning(msg)
        warnings.warn(msg, BasemapWarning)
        return False
    return True


def plot_leaflet_network(layout, options=None, node_labels=True, link_labels=True,
                         zoom_start=13, filename=None, auto_open=False):
    """
    Create an interactive scalable network graphic on a Leaflet map using folium.

    Node and vertex coordinates are converted from the UTM zone given in
    the projection options to latitude/longitude. Pipes are drawn as
    polylines through their vertices, junctions as circle markers, and
    reservoirs as square markers. Pipes whose start or end node has no
    coordinates are not drawn.

    Parameters
    ----------
    layout : NetworkLayout
        A NetworkLayout object
    options : MapOptions or dict, optional
        Projection and style options, by default MapOptions()
    node_labels : bool, optional
        If True, each node marker has a popup with its type and name
    link_labels : bool, optional
        If True, each pipe has a popup with its name
    zoom_start : int, optional
        Initial zoom level, used until the map is fit to the network bounds
    filename : str, optional
        Filename used to save the map as HTML, by default the map is not saved
    auto_open : bool, optional
        Open the map in a web browser. If no filename is given, the map is
        saved to a temporary file.

    Returns
    -------
    folium.Map
    """
    options = _format_options(options)
    style = options.style

    wn_gis = _to_latlon_gis(layout, options.projection)
    minx, miny, maxx, maxy = wn_gis.total_bounds
    center = [(miny + maxy) / 2.0, (minx + maxx) / 2.0]

    m = folium.Map(location=center, zoom_start=zoom_start, tiles=None,
                   control_scale=True)
    _add_basemap(m, style.basemap)

    line_color = to_hex(style.line_color)
    marker_face_color = to_hex(style.marker_face_color)
    reservoir_color = to_hex(style.reservoir_color)

    # Pipes
    pipe_layer = folium.FeatureGroup(name='Pipes')
    for name, geom in zip(wn_gis.pipes.index, wn_gis.pipes.geometry):
        locations = [(lat, lon) for lon, lat in geom.coords]
        popup = 'Pipe: ' + name if link_labels else None
        folium.PolyLine(locations, popup=popup, color=line_color,
                        weight=style.line_width, opacity=1.0).add_to(pipe_layer)
    pipe_layer.add_to(m)

    # Junctions (circles)
    junction_layer = folium.FeatureGroup(name='Junctions')
    for name, geom in zip(wn_gis.junctions.index, wn_gis.junctions.geometry):
        popup = 'Junction: ' + name if node_labels else None
        folium.CircleMarker((geom.y, geom.x), popup=popup, radius=style.marker_size,
                            color=marker_face_color, weight=1, fill=True,
                            fill_color=marker_face_color, fill_opacity=1.0).add_to(junction_layer)
    junction_layer.add_to(m)

    # Reservoirs (squares)
    reservoir_layer = folium.FeatureGroup(name='Reservoirs')
    for name, geom in zip(wn_gis.reservoirs.index, wn_gis.reservoirs.geometry):
        popup = 'Reservoir: ' + name if node_labels else None
        folium.RegularPolygonMarker((geom.y, geom.x), number_of_sides=4, rotation=45,
                                    popup=popup, radius=style.reservoir_size,
                                    color=reservoir_color, weight=1,
                                    fill_color=reservoir_color, fill_opacity=1.0).add_to(reservoir_layer)
    reservoir_layer.add_to(m)

    m.fit_bounds([[miny, minx], [maxy, maxx]])
    folium.LayerControl().add_to(m)

    logger.info('Drew %d pipes, %d junctions, %d reservoirs',
                len(wn_gis.pipes), len(wn_gis.junctions), len(wn_gis.reservoirs))

    if auto_open and not filename:
        with tempfile.NamedTemporaryFile(suffix='.html', delete=False) as f:
            filename = f.name
    if filename:
        m.save(filename)
    if auto_open:
        webbrowser.open('file://' + os.path.abspath(filename))

    return m


def plot_network(layout, options=None, title=None, node_labels=False,
                 legend=False, ax=None, show_plot=True, filename=None):
    """
    Plot network graphic in longitude/latitude with matplotlib

    The static graphic uses the same projection and style options as
    :func:`plot_leaflet_network`; the basemap option is not used.

    Parameters
    ----------
    layout : NetworkLayout
        A NetworkLayout object

    options : MapOptions or dict, optional
        Projection and style options, by default MapOptions()

    title: str, optional
        Plot title

    node_labels: bool, optional
        If True, the graph will include each node labelled with its name.

    legend: bool, optional
        If True, add a legend for pipes, junctions and reservoirs

    ax: matplotlib axes object, optional
        Axes for plotting (None indicates that a new figure with a single
        axes will be used)

    show_plot: bool, optional
        If True, show plot with plt.show()

    filename : str, optional
        Filename used to save the figure

    Returns
    -------
    ax : matplotlib axes object
    """
    options = _format_options(options)
    style = options.style

    if ax is None: # create a new figure
        plt.figure(facecolor='w', edgecolor='k')
        ax = plt.gca()

    if title is not None:
        ax.set_title(title)

    wn_gis = _to_latlon_gis(layout, options.projection)

    # scatter marker sizes are in points squared
    if len(wn_gis.pipes) > 0:
        wn_gis.pipes.plot(ax=ax, zorder=1, color=to_hex(style.line_color),
                          linewidth=style.line_width, label='Pipe')
    if len(wn_gis.junctions) > 0:
        wn_gis.junctions.plot(ax=ax, zorder=2, marker='o', color=to_hex(style.marker_face_color),
                              markersize=style.marker_size ** 2, label='Junction')
    if len(wn_gis.reservoirs) > 0:
        wn_gis.reservoirs.plot(ax=ax, zorder=3, marker='s', color=to_hex(style.reservoir_color),
                               markersize=style.reservoir_size ** 2, label='Reservoir')

    if node_labels:
        for data in [wn_gis.junctions, wn_gis.reservoirs]:
            for x, y, label in zip(data.geometry.x, data.geometry.y, data.index):
                ax.annotate(label, xy=(x, y))

    if legend:
        handles, labels = ax.get_legend_handles_labels()
        ax.legend(handles, labels, loc='upper right', title="Legend")

    ax.set_xlabel('Longitude')
    ax.set_ylabel('Latitude')

    if filename:
        plt.savefig(filename)

    if show_plot is True:
        plt.show(block=False)

    return ax


def epanet_on_map(inp_file, utm_zone=14, hemisphere='N', line_width=1,
                  line_color='red', marker_size=4, marker_face_color='blue',
                  reservoir_size=5, reservoir_color=(0, 0.8, 0), basemap='streets',
                  filename=None, auto_open=False):
    """
    Plot the pipes, junctions, and reservoirs of an EPANET INP file with UTM
    coordinates on a geographic map.

    All options are validated before the file is read.

    Parameters
    ----------
    inp_file : str or path-like
        EPANET INP file
    utm_zone : int, optional
        UTM zone of the node coordinates, 1 to 60, by default 14
    hemisphere : str, optional
        'N' for north or 'S' for south, by default 'N'
    line_width : float, optional
        Pipe line width, by default 1
    line_color : color, optional
        Pipe line color, by default 'red'
    marker_size : float, optional
        Junction marker size, by default 4
    marker_face_color : color, optional
        Junction marker color, by default 'blue'
    reservoir_size : float, optional
        Reservoir marker size, by default 5
    reservoir_color : color, optional
        Reservoir marker color, by default (0, 0.8, 0)
    basemap : str, optional
        Basemap style name, by default 'streets'
    filename : str, optional
        Filename used to save the map as HTML, by default the map is not saved
    auto_open : bool, optional
        Open the map in a web browser

    Returns
    -------
    folium.Map

    Raises
    ------
    ValueError
        if an option is not valid
    ENFileError
        if the INP file cannot be opened or read
    NoSectionError
        if the INP file has no [COORDINATES] or no [PIPES] records

    Examples
    --------
    >>> m = inpmap.epanet_on_map('Madrid1.inp', 30, 'N', line_width=1.5,
    ...                          line_color=(1, 1, 0), marker_face_color='c',
    ...                          basemap='satellite')  # doctest: +SKIP
    """
    if not isinstance(inp_file, (str, os.PathLike)):
        raise ValueError('inp_file must be a string or path-like. Received {!r} of type {}'.format(
            inp_file, type(inp_file).__name__))
    options = MapOptions(
        projection=ProjectionOptions(utm_zone=utm_zone, hemisphere=hemisphere),
        style=StyleOptions(line_width=line_width, line_color=line_color,
                           marker_size=marker_size, marker_face_color=marker_face_color,
                           reservoir_size=reservoir_size, reservoir_color=reservoir_color,
                           basemap=basemap))

    layout = inpmap.network.io.read_inpfile(inp_file)

    return plot_leaflet_network(layout, options, filename=filename, auto_open=auto_open)
