"""
The inpmap.network.model module includes methods to build a network
layout, the tables of node coordinates, pipes, reservoirs, and pipe
vertices read from an EPANET INP file.
"""
import logging
from collections import OrderedDict

import inpmap.network.io
from inpmap.utils.exceptions import NetworkLayoutError

from .elements import Node, Pipe

logger = logging.getLogger(__name__)

_NODE_DEFAULT = object()


class NetworkLayout(object):
    """
    Network layout class.

    Holds the geometry of a water network: node coordinates, pipe
    connectivity, the names of reservoir nodes, and the intermediate
    vertices of each pipe. Coordinates are planar (projected) values, as
    stored in the INP file.

    Parameters
    -------------------
    inp_file_name: str (optional)
        Directory and filename of EPANET inp file to load into the
        :class:`~inpmap.network.model.NetworkLayout` object.
    """

    def __init__(self, inp_file_name=None):

        self.name = None
        self._nodes = OrderedDict()
        self._pipes = []
        self._reservoirs = OrderedDict()
        self._vertices = OrderedDict()

        if inp_file_name:
            inpmap.network.io.read_inpfile(inp_file_name, append=self)

    def __repr__(self):
        return "<NetworkLayout '{}': {} nodes, {} pipes>".format(
            self.name, self.num_nodes, self.num_pipes)

    ### #
    ### Create network components
    def add_node(self, name, coordinates):
        """
        Adds a node to the layout.

        A second node with the same name replaces the first; the node keeps
        its original position in :attr:`node_name_list`.

        Parameters
        ----------
        name : string
            Name of the node.
        coordinates : tuple of floats
            X-Y coordinates of the node location.

        """
        if not isinstance(name, str):
            raise NetworkLayoutError('node name must be a string')
        if name in self._nodes:
            logger.debug('Coordinates of node %s replaced', name)
        self._nodes[name] = Node(self, name, coordinates)

    def add_pipe(self, name, start_node_name, end_node_name):
        """
        Adds a pipe to the layout.

        The start and end nodes do not need to exist; see
        :meth:`drawable_pipes`.

        Parameters
        ----------
        name : string
            Name of the pipe.
        start_node_name : string
            Name of the start node.
        end_node_name : string
            Name of the end node.

        """
        if not isinstance(name, str):
            raise NetworkLayoutError('pipe name must be a string')
        self._pipes.append(Pipe(self, name, start_node_name, end_node_name))

    def add_reservoir(self, name):
        """
        Flags a node name as a reservoir.

        The node does not need to exist yet.

        Parameters
        ----------
        name : string
            Name of the reservoir node.

        """
        self._reservoirs[name] = None

    def add_vertex(self, pipe_name, coordinates):
        """
        Appends an intermediate vertex to a pipe.

        Parameters
        ----------
        pipe_name : string
            Name of the pipe.
        coordinates : tuple of floats
            X-Y coordinates of the vertex.

        """
        if not isinstance(coordinates, (list, tuple)) or len(coordinates) != 2:
            raise NetworkLayoutError('vertex coordinates must be a 2-tuple or len-2 list')
        self._vertices.setdefault(pipe_name, []).append(
            (float(coordinates[0]), float(coordinates[1])))

    ### #
    ### Get elements from the model
    def get_node(self, name, default=_NODE_DEFAULT):
        """Get a specific node

        Parameters
        ----------
        name : str
            The node name
        default : optional
            Value returned if the node does not exist. If not given, a
            KeyError is raised.

        Returns
        -------
        Node

        """
        try:
            return self._nodes[name]
        except KeyError:
            if default is _NODE_DEFAULT:
                raise KeyError('Node {} is not in the network layout'.format(name))
            return default

    def get_vertices(self, pipe_name):
        """Get the intermediate vertices of a pipe

        Returns
        -------
        list of (x, y) tuples, empty if the pipe has no vertices

        """
        return self._vertices.get(pipe_name, [])

    def is_reservoir(self, name):
        """True if the name is listed in the [RESERVOIRS] section"""
        return name in self._reservoirs

    def nodes(self):
        """A generator to iterate over all nodes, yielding (name, node)"""
        for name, node in self._nodes.items():
            yield name, node

    def junctions(self):
        """A generator to iterate over all junctions, yielding (name, node)"""
        for name, node in self._nodes.items():
            if not self.is_reservoir(name):
                yield name, node

    def reservoirs(self):
        """A generator to iterate over reservoirs that have coordinates, yielding (name, node)"""
        for name, node in self._nodes.items():
            if self.is_reservoir(name):
                yield name, node

    def pipes(self):
        """A generator to iterate over all pipes, in file order, yielding (name, pipe)"""
        for pipe in self._pipes:
            yield pipe.name, pipe

    def drawable_pipes(self):
        """A generator to iterate over pipes whose start and end nodes
        are both known nodes, yielding (name, pipe)"""
        for pipe in self._pipes:
            if pipe.drawable:
                yield pipe.name, pipe

    def pipe_coordinates(self, pipe):
        """
        Ordered planar coordinates of a pipe: the start node, the pipe
        vertices in the order they were read, and the end node.

        Parameters
        ----------
        pipe : str or Pipe
            The pipe or pipe name

        Returns
        -------
        list of (x, y) tuples, or None if either endpoint is not a known node

        """
        if isinstance(pipe, str):
            matches = [p for p in self._pipes if p.name == pipe]
            if len(matches) == 0:
                raise KeyError('Pipe {} is not in the network layout'.format(pipe))
            pipe = matches[0]
        start_node = pipe.start_node
        end_node = pipe.end_node
        if start_node is None or end_node is None:
            return None
        sequence = [start_node.coordinates]
        sequence.extend(self.get_vertices(pipe.name))
        sequence.append(end_node.coordinates)
        return sequence

    ### #
    ### Name lists
    @property
    def node_name_list(self):
        """Get a list of node names

        Returns
        -------
        list of strings

        """
        return list(self._nodes.keys())

    @property
    def junction_name_list(self):
        """Get a list of junction names

        Returns
        -------
        list of strings

        """
        return [name for name, node in self.junctions()]

    @property
    def reservoir_name_list(self):
        """Get a list of reservoir names, including reservoirs without coordinates

        Returns
        -------
        list of strings

        """
        return list(self._reservoirs.keys())

    @property
    def pipe_name_list(self):
        """Get a list of pipe names, in file order

        Returns
        -------
        list of strings

        """
        return [pipe.name for pipe in self._pipes]

    ### #
    ### Counts
    @property
    def num_nodes(self):
        """The number of nodes"""
        return len(self._nodes)

    @property
    def num_junctions(self):
        """The number of junctions"""
        return len(self.junction_name_list)

    @property
    def num_reservoirs(self):
        """The number of reservoirs with coordinates"""
        return len([name for name, node in self.reservoirs()])

    @property
    def num_pipes(self):
        """The number of pipes"""
        return len(self._pipes)

    @property
    def num_vertices(self):
        """The number of intermediate pipe vertices"""
        return sum(len(v) for v in self._vertices.values())

    def describe(self):
        """
        Describe number of components in the network layout

        Returns
        -------
        A dictionary with component counts
        """
        G = self.to_graph()
        return {
            "Nodes": self.num_nodes,
            "Junctions": self.num_junctions,
            "Reservoirs": self.num_reservoirs,
            "Pipes": self.num_pipes,
            "Drawable pipes": len(list(self.drawable_pipes())),
            "Vertices": self.num_vertices,
            "Connected components": inpmap.network.io.number_of_components(G),
        }

    ### #
    ### Conversion
    def to_dict(self):
        """
        Dictionary representation of the network layout

        Returns
        -------
        dict
        """
        return inpmap.network.io.to_dict(self)

    def to_gis(self, crs=None):
        """
        Convert a NetworkLayout into GeoDataFrames

        Parameters
        ----------
        crs : str, optional
            Coordinate reference system of the planar coordinates, by default None

        Returns
        -------
        NetworkLayoutGIS object that contains junctions, reservoirs, and
        pipes GeoDataFrames
        """
        return inpmap.network.io.to_gis(self, crs)

    def to_graph(self):
        """
        Convert a NetworkLayout into a networkx MultiDiGraph

        Only drawable pipes are added as edges.

        Returns
        --------
        networkx MultiDiGraph
        """
        return inpmap.network.io.to_graph(self)
