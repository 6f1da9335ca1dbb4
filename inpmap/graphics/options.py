"""
The inpmap.graphics.options module includes map rendering options.

.. rubric:: Classes

.. autosummary::
    :nosignatures:

    MapOptions
    ProjectionOptions
    StyleOptions

"""
import logging

from inpmap.utils.check_values import (
    _check_color,
    _check_int_in_range,
    _check_positive_non_zero_float,
    _check_str,
    _check_str_choice,
)

logger = logging.getLogger(__name__)


class _OptionsBase(object):
    @classmethod
    def factory(cls, val):
        """Create an options object based on passing in an instance of the object, a dict, or a tuple"""
        if isinstance(val, cls):
            return val
        elif isinstance(val, dict):
            return cls(**val)
        elif isinstance(val, (list, tuple)):
            return cls(*val)
        elif val is None:
            return cls()
        raise ValueError('Unknown type for {}.factory: {}'.format(
            cls.__name__, type(val).__name__))

    def __str__(self):
        return "{}({})".format(self.__class__.__name__, ", ".join(["{}={}".format(k, repr(v)) for k, v in self.__dict__.items()]))
    __repr__ = __str__

    def __iter__(self):
        for k, v in self.__dict__.items():
            if isinstance(v, _OptionsBase):
                v = dict(v)
            yield k, v

    def __getitem__(self, index):
        return self.__dict__[index]

    def __eq__(self, other):
        if other is None: return False
        if not hasattr(other, '__dict__'): return False
        for k in self.__dict__.keys():
            if k not in other.__dict__: return False
            if not self.__dict__[k] == other.__dict__[k]: return False
        return True


class ProjectionOptions(_OptionsBase):
    """
    Options related to the planar coordinates of the INP file.

    Parameters
    ----------
    utm_zone : int
        UTM zone number of the node coordinates, 1 to 60, by default 14.

    hemisphere : str
        Hemisphere of the UTM zone, "N" (north) or "S" (south),
        case-insensitive, by default "N".

    """
    def __init__(self,
                 utm_zone: int = 14,
                 hemisphere: str = 'N'):
        self.utm_zone = utm_zone
        self.hemisphere = hemisphere

    def __setattr__(self, name, value):
        if name == 'utm_zone':
            value = _check_int_in_range(value, 'utm_zone', 1, 60)
        elif name == 'hemisphere':
            value = _check_str_choice(value, 'hemisphere', ('N', 'S'))
        else:
            raise AttributeError('%s is not a valid attribute of ProjectionOptions' % name)
        self.__dict__[name] = value


class StyleOptions(_OptionsBase):
    """
    Options related to how pipes and nodes are drawn.

    Colors can be any matplotlib color specification: a color name
    ("red"), a single letter code ("r"), a hex string ("#ff0000"), or an
    RGB tuple with values between 0 and 1.

    Parameters
    ----------
    line_width : float > 0
        Pipe line width, by default 1.

    line_color : color
        Pipe line color, by default "red".

    marker_size : float > 0
        Junction marker size, by default 4.

    marker_face_color : color
        Junction marker color, by default "blue".

    reservoir_size : float > 0
        Reservoir marker size, by default 5.

    reservoir_color : color
        Reservoir marker color, by default (0, 0.8, 0).

    basemap : str
        Basemap style name, by default "streets". See
        :data:`inpmap.graphics.network.BASEMAPS`.

    """
    def __init__(self,
                 line_width: float = 1,
                 line_color = 'red',
                 marker_size: float = 4,
                 marker_face_color = 'blue',
                 reservoir_size: float = 5,
                 reservoir_color = (0, 0.8, 0),
                 basemap: str = 'streets'):
        self.line_width = line_width
        self.line_color = line_color
        self.marker_size = marker_size
        self.marker_face_color = marker_face_color
        self.reservoir_size = reservoir_size
        self.reservoir_color = reservoir_color
        self.basemap = basemap

    def __setattr__(self, name, value):
        if name in {'line_width', 'marker_size', 'reservoir_size'}:
            value = _check_positive_non_zero_float(value, name)
        elif name in {'line_color', 'marker_face_color', 'reservoir_color'}:
            value = _check_color(value, name)
        elif name == 'basemap':
            value = _check_str(value, name)
        else:
            raise AttributeError('%s is not a valid attribute of StyleOptions' % name)
        self.__dict__[name] = value


class MapOptions(_OptionsBase):
    """
    Map rendering options class.

    Parameters
    ----------
    projection : ProjectionOptions
        UTM zone and hemisphere of the node coordinates

    style : StyleOptions
        Line, marker, and basemap styles

    """
    def __init__(self,
                 projection: ProjectionOptions = None,
                 style: StyleOptions = None):
        self.projection = ProjectionOptions.factory(projection)
        self.style = StyleOptions.factory(style)

    def __setattr__(self, name, value):
        if name == 'projection':
            if not isinstance(value, (ProjectionOptions, dict, tuple, list)):
                raise ValueError('projection must be a ProjectionOptions or convertable object')
            value = ProjectionOptions.factory(value)
        elif name == 'style':
            if not isinstance(value, (StyleOptions, dict, tuple, list)):
                raise ValueError('style must be a StyleOptions or convertable object')
            value = StyleOptions.factory(value)
        else:
            raise AttributeError('%s is not a valid attribute of MapOptions' % name)
        self.__dict__[name] = value
