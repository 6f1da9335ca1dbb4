"""
The inpmap.utils package contains helper functions and classes.
"""
from inpmap.utils import exceptions, logger
