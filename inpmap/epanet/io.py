"""
The inpmap.epanet.io module contains methods for reading the network layout
sections of EPANET input files.

.. rubric:: Contents

.. autosummary::

    InpFile

----


"""
import io
import logging
import math
from collections import OrderedDict

from inpmap.network.model import NetworkLayout

from .exceptions import ENFileError, NoSectionError

logger = logging.getLogger(__name__)

_LAYOUT_SECTIONS = ['[COORDINATES]', '[PIPES]', '[RESERVOIRS]', '[VERTICES]']


def _split_line(line):
    """Whitespace separated values of a record, without the inline comment"""
    return line.split(';', 1)[0].split()


def _is_number(s):
    """
    Checks if input is a finite number


    Parameters
    ----------
    s : anything

    """

    try:
        return math.isfinite(float(s))
    except (ValueError, TypeError):
        return False


def _is_section_header(line):
    line = line.split(';', 1)[0].strip()
    return line.startswith('[') and line.endswith(']')


class InpFile(object):
    """
    EPANET INP file reader class.

    This class provides read functionality for the network layout sections
    of EPANET INP files: [COORDINATES], [PIPES], [RESERVOIRS] and
    [VERTICES]. Section names are case-insensitive. Every other section is
    recognized as a section but its contents are ignored. The EPANET Users
    Manual provides full documentation for the INP file format.

    Records are read leniently: a record with too few values, or with
    coordinates that are not finite numbers, is skipped. A file is read
    strictly: it must contain at least one coordinate record and one pipe
    record.
    """
    def __init__(self):
        self.sections = OrderedDict()
        for sec in _LAYOUT_SECTIONS:
            self.sections[sec] = []
        self.top_comments = []
        self.skipped = []

    def read(self, filename, layout=None, encoding='utf-8'):
        """
        Method to read an EPANET INP file and load the network layout.

        Parameters
        ----------
        filename : str
            An EPANET INP input file
        layout : NetworkLayout, optional
            Existing layout to append, by default a new layout is created
        encoding : str, optional
            Text encoding of the INP file, by default 'utf-8'

        Returns
        -------
        :class:`~inpmap.network.model.NetworkLayout`
            A network layout object

        """
        filename = str(filename)
        try:
            with io.open(filename, 'r', encoding=encoding) as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ENFileError(302, filename) from e

        return self.read_lines(lines, layout=layout, name=filename)

    def read_lines(self, lines, layout=None, name=None):
        """
        Method to load the network layout from the lines of an INP file.

        Parameters
        ----------
        lines : iterable of str
            The lines of an EPANET INP file, in order
        layout : NetworkLayout, optional
            Existing layout to append, by default a new layout is created
        name : str, optional
            Name of the source, used in log and error messages

        Returns
        -------
        :class:`~inpmap.network.model.NetworkLayout`
            A network layout object

        """
        if layout is None:
            layout = NetworkLayout()
        self.layout = layout
        if name is None:
            name = '<lines>'
        if layout.name is None:
            layout.name = name

        self.sections = OrderedDict()
        for sec in _LAYOUT_SECTIONS:
            self.sections[sec] = []
        self.top_comments = []
        self.skipped = []

        section = None
        lnum = 0
        edata = {'fname': name}
        for line in lines:
            lnum += 1
            edata['lnum'] = lnum
            line = line.strip()
            if len(line) == 0:
                # Blank line
                continue
            elif line.startswith(';'):
                if section is None:
                    self.top_comments.append(line[1:])
                continue
            elif _is_section_header(line):
                section = line.split(';', 1)[0].strip().upper()
                edata['sec'] = section
                if section not in self.sections:
                    self.sections[section] = []
                logger.debug('%(fname)s:%(lnum)-6d %(sec)13s section found' % edata)
                continue
            elif section is None:
                logger.debug('%(fname)s:%(lnum)d: Ignoring line outside of a section' % edata)
                continue
            # We have text, and we are in a section
            self.sections[section].append((lnum, line))

        self._read_coordinates()
        self._read_pipes()
        self._read_reservoirs()
        self._read_vertices()

        if layout.num_nodes == 0:
            raise NoSectionError('[COORDINATES]', name)
        if layout.num_pipes == 0:
            raise NoSectionError('[PIPES]', name)

        logger.info('%s: read %d nodes, %d pipes, %d reservoirs, %d vertices',
                    name, layout.num_nodes, layout.num_pipes,
                    len(layout.reservoir_name_list), layout.num_vertices)
        if len(self.skipped) > 0:
            logger.info('%s: skipped %d malformed records', name, len(self.skipped))

        return self.layout

    def _skip(self, section, lnum, line):
        logger.debug('Skipping invalid %s line %d: %s', section, lnum, line)
        self.skipped.append((section, lnum, line))

    def _read_coordinates(self):
        for lnum, line in self.sections['[COORDINATES]']:
            current = _split_line(line)
            if not current:
                continue
            if len(current) < 3 or not (_is_number(current[1]) and _is_number(current[2])):
                self._skip('[COORDINATES]', lnum, line)
                continue
            self.layout.add_node(current[0], (float(current[1]), float(current[2])))

    def _read_pipes(self):
        for lnum, line in self.sections['[PIPES]']:
            current = _split_line(line)
            if not current:
                continue
            if len(current) < 3:
                self._skip('[PIPES]', lnum, line)
                continue
            self.layout.add_pipe(current[0], current[1], current[2])

    def _read_reservoirs(self):
        for lnum, line in self.sections['[RESERVOIRS]']:
            current = _split_line(line)
            if not current:
                continue
            self.layout.add_reservoir(current[0])

    def _read_vertices(self):
        for lnum, line in self.sections['[VERTICES]']:
            current = _split_line(line)
            if not current:
                continue
            if len(current) < 3 or not (_is_number(current[1]) and _is_number(current[2])):
                self._skip('[VERTICES]', lnum, line)
                continue
            self.layout.add_vertex(current[0], (float(current[1]), float(current[2])))
