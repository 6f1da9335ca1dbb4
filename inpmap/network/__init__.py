"""
The inpmap.network package contains methods to define a network layout
and network layout I/O.
"""
from .elements import Node, Pipe, NodeType
from .model import NetworkLayout
from .io import to_dict, to_gis, to_graph, read_inpfile
