# coding: utf-8
"""Exceptions for EPANET INP file reading."""

from typing import List

from inpmap.utils.exceptions import InpMapException

EN_ERROR_CODES = {
    302: "cannot open input file %s",
}
"""A dictionary of the EPANET error codes raised when reading INP files.

:meta hide-value:
"""


class EpanetException(InpMapException):

    def __init__(self, code: int, *args: List[object]) -> None:
        """An Exception class for EPANET IO exceptions.

        Parameters
        ----------
        code : int
            The EPANET error code
        args : additional non-keyword arguments, optional
            If there is a string-format within the error code's text, these will be used to
            replace the format, otherwise they will be output at the end of the Exception message.
        """
        msg = EN_ERROR_CODES.get(code, "unknown error")
        args = list(args)
        if r"%" in msg and len(args) > 0:
            msg = msg % repr(args.pop(0))
        if len(args) > 0:
            msg = msg + " " + repr(args)
        msg = "(Error {}) ".format(code) + msg
        self.code = code
        super().__init__(msg)


class ENFileError(EpanetException, OSError):
    def __init__(self, code, filename, *args) -> None:
        """An EPANET exception class that also subclasses OSError

        Parameters
        ----------
        code : int
            The EPANET error code
        filename : str
            The file that could not be opened or read
        args : additional non-keyword arguments, optional
            Output at the end of the Exception message.
        """
        super().__init__(code, filename, *args)
        self.filename = filename


class NoSectionError(InpMapException, ValueError):
    def __init__(self, section, filename=None) -> None:
        """A required INP section is missing or holds no usable records.

        Parameters
        ----------
        section : str
            The section name, including brackets, e.g. ``'[PIPES]'``
        filename : str, optional
            The INP file that was read, by default None
        """
        msg = "Section {} not found".format(section)
        if filename:
            msg = msg + " in {}".format(filename)
        self.section = section
        self.filename = filename
        super().__init__(msg)
