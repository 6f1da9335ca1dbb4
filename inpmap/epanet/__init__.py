"""
The inpmap.epanet package provides EPANET INP file reading for inpmap.
"""
from .io import InpFile
from . import io, exceptions
