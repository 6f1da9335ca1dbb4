# coding: utf-8

"""
The inpmap.network.io module includes functions that convert the network
layout to other data formats and create a network layout from file.

.. rubric:: Contents

.. autosummary::

    to_dict
    to_gis
    to_graph
    read_inpfile

"""
import logging
import networkx as nx

import inpmap.epanet
from inpmap.gis.network import NetworkLayoutGIS

logger = logging.getLogger(__name__)


def to_dict(layout) -> dict:
    """
    Convert a NetworkLayout into a dictionary

    Parameters
    ----------
    layout : NetworkLayout
        Network layout

    Returns
    -------
    dict
        Dictionary representation of the NetworkLayout

    """
    from inpmap import __version__
    d = dict(
        version="inpmap-{}".format(__version__),
        name=layout.name,
        nodes=[node.to_dict() for name, node in layout.nodes()],
        pipes=[pipe.to_dict() for name, pipe in layout.pipes()],
        reservoirs=layout.reservoir_name_list,
    )
    return d


def to_gis(layout, crs=None):
    """
    Convert a NetworkLayout into GeoDataFrames

    Parameters
    ----------
    layout : NetworkLayout
        Network layout
    crs : str, optional
        Coordinate reference system of the planar coordinates, by default None

    Returns
    -------
    NetworkLayoutGIS object that contains GeoDataFrames

    """
    gis_data = NetworkLayoutGIS()
    gis_data._create_gis(layout, crs)

    return gis_data


def to_graph(layout):
    """
    Convert a NetworkLayout into a networkx MultiDiGraph

    Every node is added with its planar coordinates as the "pos" attribute
    and its node type as the "type" attribute. Only pipes whose start and
    end nodes are known are added as edges, keyed by pipe name.

    Parameters
    ----------
    layout : NetworkLayout
        Network layout

    Returns
    --------
    networkx MultiDiGraph
    """
    G = nx.MultiDiGraph()

    for name, node in layout.nodes():
        G.add_node(name)
        nx.set_node_attributes(G, name="pos", values={name: node.coordinates})
        nx.set_node_attributes(G, name="type", values={name: node.node_type})

    for name, pipe in layout.drawable_pipes():
        start_node = pipe.start_node_name
        end_node = pipe.end_node_name
        G.add_edge(start_node, end_node, key=name)
        nx.set_edge_attributes(G, name="type", values={(start_node, end_node, name): pipe.link_type})

    return G


def number_of_components(G):
    """
    Number of weakly connected components of a layout graph

    Parameters
    ----------
    G : networkx MultiDiGraph
        Graph returned by :func:`to_graph`

    Returns
    -------
    int
    """
    if G.number_of_nodes() == 0:
        return 0
    return nx.number_weakly_connected_components(G)


def read_inpfile(filename, append=None, encoding='utf-8'):
    """
    Create or append a NetworkLayout from an EPANET INP file

    Parameters
    ----------
    filename : string
        Name of the INP file.
    append : NetworkLayout or None, optional
        Existing NetworkLayout to append.  If None, a new NetworkLayout
        is created.
    encoding : str, optional
        Text encoding of the INP file, by default 'utf-8'

    Returns
    -------
    NetworkLayout

    Raises
    ------
    ENFileError
        if the file cannot be opened or read
    NoSectionError
        if no [COORDINATES] or no [PIPES] records were found

    """
    inpfile = inpmap.epanet.InpFile()
    layout = inpfile.read(filename, layout=append, encoding=encoding)

    return layout
