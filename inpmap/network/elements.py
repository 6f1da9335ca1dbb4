"""
The inpmap.network.elements module includes the elements of a network
layout: nodes and pipes.

.. rubric:: Contents

.. autosummary::

    NodeType
    Node
    Pipe

"""
import enum
import logging

logger = logging.getLogger(__name__)


class NodeType(enum.IntEnum):
    """
    Enum class for node types.

    .. rubric:: Enum Members

    .. autosummary::

        Junction
        Reservoir

    """
    Junction = 0  #: node is a junction
    Reservoir = 1  #: node is a reservoir

    def __str__(self):
        return self.name


class Node(object):
    """
    Node class.

    A node is a named point of the network with planar (projected)
    coordinates. Whether the node is a junction or a reservoir is not
    stored on the node; it is looked up in the reservoir set of the layout
    that owns it, so the answer does not depend on the order in which the
    [COORDINATES] and [RESERVOIRS] sections were read.

    .. rubric:: Constructor

    This class is intended to be instantiated through the
    :class:`~inpmap.network.model.NetworkLayout.add_node()` method.

    Parameters
    ----------
    layout : :class:`~inpmap.network.model.NetworkLayout`
        NetworkLayout object the node belongs to
    name : string
        Name of the node (must be unique)
    coordinates : tuple
        Planar coordinates of the node, (x, y)

    """
    def __init__(self, layout, name, coordinates):
        self._layout = layout
        self._name = name
        self.coordinates = coordinates

    def __str__(self):
        return self._name

    def __repr__(self):
        return "<Node '{}'>".format(self._name)

    @property
    def name(self):
        """str: The name of the node (read only)"""
        return self._name

    @property
    def node_type(self):
        """str: The node type, 'Junction' or 'Reservoir' (read only)"""
        if self._layout.is_reservoir(self._name):
            return str(NodeType.Reservoir)
        return str(NodeType.Junction)

    @property
    def coordinates(self):
        """tuple: The node coordinates, (x,y)"""
        return self._coordinates
    @coordinates.setter
    def coordinates(self, coordinates):
        if isinstance(coordinates, (list, tuple)) and len(coordinates) == 2:
            self._coordinates = (float(coordinates[0]), float(coordinates[1]))
        else:
            raise ValueError('coordinates must be a 2-tuple or len-2 list')

    def to_dict(self):
        """Dictionary representation of the node"""
        return {'name': self.name,
                'node_type': self.node_type,
                'coordinates': list(self.coordinates)}


class Pipe(object):
    """
    Pipe class.

    A pipe references its start and end nodes by name only. The names are
    not checked when the pipe is created; a pipe whose endpoints are not
    both known nodes is kept in the layout but is not drawable.

    .. rubric:: Constructor

    This class is intended to be instantiated through the
    :class:`~inpmap.network.model.NetworkLayout.add_pipe()` method.

    Parameters
    ----------
    layout : :class:`~inpmap.network.model.NetworkLayout`
        NetworkLayout object the pipe belongs to
    name : string
        Name of the pipe
    start_node_name : string
        Name of the start node
    end_node_name : string
        Name of the end node

    """
    def __init__(self, layout, name, start_node_name, end_node_name):
        self._layout = layout
        self._name = name
        self._start_node_name = start_node_name
        self._end_node_name = end_node_name

    def __str__(self):
        return self._name

    def __repr__(self):
        return "<Pipe '{}' from '{}' to '{}'>".format(
            self._name, self._start_node_name, self._end_node_name)

    @property
    def name(self):
        """str: The pipe name (read-only)"""
        return self._name

    @property
    def link_type(self):
        """str: The link type (read only)"""
        return 'Pipe'

    @property
    def start_node_name(self):
        """str: The name of the start node (read only)"""
        return self._start_node_name

    @property
    def end_node_name(self):
        """str: The name of the end node (read only)"""
        return self._end_node_name

    @property
    def start_node(self):
        """:class:`~inpmap.network.elements.Node`: The start node object, or None if it is not a known node"""
        return self._layout.get_node(self._start_node_name, default=None)

    @property
    def end_node(self):
        """:class:`~inpmap.network.elements.Node`: The end node object, or None if it is not a known node"""
        return self._layout.get_node(self._end_node_name, default=None)

    @property
    def vertices(self):
        """A list of intermediate points, in the direction of start node
        to end node, in the order the [VERTICES] records were read (read only)."""
        return list(self._layout.get_vertices(self._name))

    @property
    def drawable(self):
        """bool: True if both endpoints resolve to known nodes (read only)"""
        return self.start_node is not None and self.end_node is not None

    def to_dict(self):
        """Dictionary representation of the pipe"""
        return {'name': self.name,
                'link_type': self.link_type,
                'start_node_name': self.start_node_name,
                'end_node_name': self.end_node_name,
                'vertices': [list(v) for v in self.vertices]}
