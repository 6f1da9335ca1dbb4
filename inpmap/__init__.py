from inpmap import utils
from inpmap import epanet
from inpmap import network
from inpmap import gis
from inpmap import graphics

from inpmap.graphics.network import epanet_on_map

__version__ = '0.1.0'

__license__ = "Revised BSD License"

from inpmap.utils.logger import start_logging, stop_logging
