# coding: utf-8
"""
Exception classes for inpmap warnings and errors.
"""


class InpMapException(Exception):  # pragma: no cover
    """
    Base class for filtering inpmap specific exceptions.
    """

    pass


class NetworkLayoutError(InpMapException):  # pragma: no cover
    """
    The requested network layout action is impossible.
    """

    pass


class InpMapWarning(Warning):  # pragma: no cover
    """
    Base class for filtering inpmap specific warnings.
    """

    pass


class BasemapWarning(InpMapWarning):  # pragma: no cover
    """
    The basemap tile layer could not be loaded; the map is rendered without it.
    """

    pass
