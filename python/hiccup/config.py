"""
Utilities for loading the configuration of an application using this package and for setting
up its logging.

Configuration data is a dictionary, typically read from a YAML or JSON file via
:py:func:`load_from_file`.  The following properties are recognized by this module:

``logdir``
     the directory where log files should be written; relative ``logfile`` paths are
     interpreted relative to this directory.
``logfile``
     the name of the file to write log messages to
``loglevel``
     the minimum level of messages to record (either a name like "DEBUG" or a number);
     the default is INFO.

:py:class:`~hiccup.wsgi.ResponseHandler` recognizes additional properties (see its
documentation).
"""
import os, sys, json, logging, mimetypes
from collections.abc import Mapping

import yaml

from .exceptions import ConfigurationException

__all__ = [ "ConfigurationException", "TEXT_CONTENT_TYPE", "load_from_file", "configure_log" ]

def _text_content_type():
    ctype = mimetypes.guess_type("file.txt")[0] or "text/plain"
    return ctype + "; charset=utf-8"

TEXT_CONTENT_TYPE = _text_content_type()
"""
the content type used for responses sent as plain text.
"""

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"
DEF_LOG_LEVEL = logging.INFO

global_logdir = None
global_logfile = None

def load_from_file(configfile: str) -> Mapping:
    """
    read the configuration from the given file and return it as a dictionary.  The file
    format is determined by its extension:  ".yml" or ".yaml" for YAML; ".json" for JSON.
    :raises ConfigurationException:  if the format is not recognized or the file does not
                                     contain a dictionary
    :raises IOError:  if the file could not be opened or read
    :raises ValueError:  if the content could not be parsed (for YAML, a ``yaml.YAMLError``)
    """
    ext = os.path.splitext(configfile)[1].lower()
    with open(configfile) as fd:
        if ext in (".yml", ".yaml"):
            data = yaml.safe_load(fd)
        elif ext == ".json":
            data = json.load(fd)
        else:
            raise ConfigurationException("%s: unrecognized config file format (need .yml or .json)"
                                         % configfile)

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigurationException("%s: config file does not contain a dictionary" % configfile)
    return data

def _parse_level(level):
    if isinstance(level, str):
        if level.strip().isdigit():
            return int(level)
        lev = logging.getLevelName(level.upper())
        if not isinstance(lev, int):
            raise ConfigurationException("loglevel: not a recognized level name: " + level)
        return lev
    return int(level)

def configure_log(logfile: str=None, level=None, format: str=None, config: Mapping=None,
                  addstderr: bool=False) -> logging.Logger:
    """
    set up the root logger to record messages to a file and/or to standard error.

    :param str logfile:  the log file to write to; if relative, it is taken to be relative to
                         the ``logdir`` config property (or the current directory).  If not
                         provided, the ``logfile`` config property is used.
    :param level:        the minimum message level to record; if not provided, the ``loglevel``
                         config property is used (default: INFO).
    :param str format:   the message format to use
    :param Mapping config:  the configuration data to consult for default values
    :param bool addstderr:  if True, also send messages to standard error.
    :return:  the root logger
    """
    global global_logdir, global_logfile
    if config is None:
        config = {}
    if not format:
        format = LOG_FORMAT
    if level is None:
        level = config.get('loglevel', DEF_LOG_LEVEL)
    level = _parse_level(level)

    if not logfile:
        logfile = config.get('logfile')

    rootlog = logging.getLogger()
    if logfile:
        if not os.path.isabs(logfile):
            logdir = config.get('logdir', global_logdir or os.getcwd())
            logfile = os.path.join(logdir, logfile)
        global_logdir = os.path.dirname(logfile)
        global_logfile = logfile

        hdlr = logging.FileHandler(logfile)
        hdlr.setFormatter(logging.Formatter(format))
        hdlr.setLevel(logging.DEBUG)
        rootlog.addHandler(hdlr)

    if addstderr:
        hdlr = logging.StreamHandler(sys.stderr)
        hdlr.setFormatter(logging.Formatter(format))
        hdlr.setLevel(logging.DEBUG)
        rootlog.addHandler(hdlr)

    rootlog.setLevel(level)
    return rootlog
