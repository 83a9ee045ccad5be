"""module for logging densemat progress
"""
from datetime import datetime
import warnings
from .densemat_warnings import DensematWarning
import copy


class Logger(object):
    """a basic class for logging events during matrix reads and writes.
        if filename is passed, then a file handle is opened.

    Args:
        filename (`str`): Filename to write logged events to. If False, no file will be created
            and events are only shown on the screen if `echo` is True.  If True, events are
            echoed to the screen only.
        echo (`bool`):  Flag to cause logged events to be echoed to the screen.

    Example::

        logger = densemat.Logger("densemat.log")
        logger.log("reading matrix")
        m = densemat.Matrix.from_ascii("my.mat")
        logger.log("reading matrix")
        logger.close()

    """

    def __init__(self, filename, echo=False):
        self.items = {}
        self.echo = bool(echo)
        self.f = None
        if filename is True:
            self.echo = True
            self.filename = None
        elif filename:
            self.filename = filename
            self.f = open(filename, "w")
            self.t = datetime.now()
            self.log("opening " + str(filename) + " for logging")
        else:
            self.filename = None

    def _write(self, s):
        if self.echo:
            print(s, end="")
        if self.f is not None and not self.f.closed:
            self.f.write(s)
            self.f.flush()

    def statement(self, phrase):
        """log a one-time statement

        Arg:
            phrase (`str`): statement to log

        """
        t = datetime.now()
        s = str(t) + " " + str(phrase) + "\n"
        self._write(s)

    def log(self, phrase):
        """log something that happened.

        Arg:
            phrase (`str`): statement to log

        Notes:
            The first time phrase is passed the start time is saved.
                The second time the phrase is logged, the elapsed time is written
        """
        t = datetime.now()
        if phrase in self.items.keys():
            s = (
                str(t)
                + " finished: "
                + str(phrase)
                + " took: "
                + str(t - self.items[phrase])
                + "\n"
            )
            self._write(s)
            self.items.pop(phrase)
        else:
            s = str(t) + " starting: " + str(phrase) + "\n"
            self._write(s)
            self.items[phrase] = copy.deepcopy(t)

    def warn(self, message):
        """write a warning to the log file.

        Arg:
            message (`str`): warning statement to log


        """
        s = str(datetime.now()) + " WARNING: " + message + "\n"
        self._write(s)
        warnings.warn(s, DensematWarning)

    def error(self, message):
        """write an error to the log file and to the screen, without raising

        Arg:
            message (`str`): error statement to log

        """
        s = str(datetime.now()) + " ERROR: " + message + "\n"
        print(s, end="")
        if self.f is not None and not self.f.closed:
            self.f.write(s)
            self.f.flush()

    def lraise(self, message, exc_type=Exception):
        """log an exception, close the log file, then raise the exception

        Arg:
            message (`str`): exception statement to log and raise
            exc_type (`type`): the exception class to raise. Default is `Exception`

        """
        self.error(message)
        self.close()
        raise exc_type(message)

    def close(self):
        """close the log file, if one is open"""
        if self.f is not None and not self.f.closed:
            self.f.close()
