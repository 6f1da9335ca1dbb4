"""Functions to set up default handlers for inpmap that output to the console and to a log file."""

import logging
logging.getLogger('inpmap').addHandler(logging.NullHandler())


class _LogWrapper(object):
    initialized = None

    def __init__(self, filename, console_level, file_level):
        self.logger = logger = logging.getLogger('inpmap')
        logger.setLevel(logging.DEBUG)
        formatter = logging.Formatter(
            '%(name)-20s %(levelname)-8s %(message)s')
        # skipped records and basemap failures are kept in the logfile
        self.fh = fh = logging.FileHandler(filename, mode='w')
        fh.setLevel(file_level)
        fh.setFormatter(formatter)
        # parse and render progress is sent to the screen
        self.ch = ch = logging.StreamHandler()
        ch.setLevel(console_level)
        ch.setFormatter(formatter)
        logger.addHandler(fh)
        logger.addHandler(ch)

    def close(self):
        for handler in [self.fh, self.ch]:
            self.logger.removeHandler(handler)
            handler.close()


def start_logging(filename='inpmap.log', console_level=logging.INFO,
                  file_level=logging.WARNING):
    """
    Start the inpmap logger.

    Calling this function again has no effect until :func:`stop_logging`
    is called.

    Parameters
    ----------
    filename : str, optional
        Log file, overwritten on each start, by default 'inpmap.log'
    console_level : int, optional
        Level of messages sent to the console, by default logging.INFO
    file_level : int, optional
        Level of messages written to the log file, by default logging.WARNING

    Returns
    -------
    logging.Logger
        The 'inpmap' logger
    """
    if _LogWrapper.initialized is None:
        _LogWrapper.initialized = _LogWrapper(filename, console_level, file_level)
    return _LogWrapper.initialized.logger


def stop_logging():
    """
    Remove and close the handlers added by :func:`start_logging`.
    """
    if _LogWrapper.initialized is not None:
        _LogWrapper.initialized.close()
        _LogWrapper.initialized = None
