# coding: utf-8
"""
my_copy - copy one file onto another, asking before an overwrite.
"""

__version__ = '1.0.0'

import logging
import logging.handlers
import os
import sys

from six import StringIO
from six.moves.configparser import ConfigParser

from .system.mccommon import _MYCOPY_CONFIG_FILES, _MYCOPY_ROOT, _SYS_STDERR, BUFFER_SIZE, FILE_MODE
from .system.mcerrors import CopyError
from .system.mcprocedure import copy_file


# Default configuration (can be overridden by external configuration file)
_DEFAULT_CONFIG = """[system]
buffer_size={buffer_size}
file_mode={file_mode:04o}

[logging]
enabled=0
level=WARNING
file=
""".format(
    buffer_size=BUFFER_SIZE,
    file_mode=FILE_MODE,
)


class MyCopy(object):
    """
    Application class. It loads the configuration, sets up logging and runs
    a single copy, turning its outcome into an exit status.
    """

    def __init__(self, log_setting=None, no_cfgfile=False):
        self.__version__ = __version__

        self.config = self._load_config(no_cfgfile=no_cfgfile)
        self.logger = self._config_logging(self.config, log_setting)

        self.buffer_size = self.config.getint('system', 'buffer_size')
        if self.buffer_size <= 0:
            raise ValueError("buffer_size must be positive, got {}".format(self.buffer_size))
        self.file_mode = int(self.config.get('system', 'file_mode'), 8)

    def __call__(self, source, dest, ins=None, outs=None, errs=None):
        """
        Copy source to dest and return the exit status.
        Diagnostics go to errs, the prompt and the cancel notice to outs.
        """
        ins = sys.stdin if ins is None else ins
        outs = sys.stdout if outs is None else outs
        errs = sys.stderr if errs is None else errs

        try:
            copy_file(
                source,
                dest,
                ins=ins,
                outs=outs,
                buffer_size=self.buffer_size,
                file_mode=self.file_mode,
            )
        except CopyError as e:
            if e.exitcode == 0:
                self.logger.info("copy of {} declined by user".format(source))
                outs.write(e.message)
                outs.flush()
            else:
                self.logger.error("{}: {}".format(type(e).__name__, e.path))
                if e.message:
                    errs.write(e.message)
                    errs.flush()
            return e.exitcode
        return 0

    @staticmethod
    def _load_config(no_cfgfile=False):
        config = ConfigParser()
        config.optionxform = str  # make it preserve case

        # defaults
        config.read_file(StringIO(_DEFAULT_CONFIG))

        # update from config file
        if not no_cfgfile:
            config.read(os.path.join(_MYCOPY_ROOT, f) for f in _MYCOPY_CONFIG_FILES)

        return config

    @staticmethod
    def _config_logging(config, log_setting):

        logger = logging.getLogger('MyCopy')

        _log_setting = {
            'enabled': config.getboolean('logging', 'enabled'),
            'level': config.get('logging', 'level'),
            'file': config.get('logging', 'file'),
        }

        _log_setting.update(log_setting or {})

        level = {
            'CRITICAL': logging.CRITICAL,
            'ERROR': logging.ERROR,
            'WARNING': logging.WARNING,
            'WARN': logging.WARNING,
            'INFO': logging.INFO,
            'DEBUG': logging.DEBUG,
            'NOTSET': logging.NOTSET,
        }.get(str(_log_setting['level']).upper(),
              logging.WARNING)

        logger.setLevel(level)

        # replace what an earlier MyCopy installed, leave foreign handlers alone
        for h in [h for h in logger.handlers if getattr(h, '_mycopy_handler', False)]:
            logger.removeHandler(h)
            h.close()

        if not _log_setting['enabled']:
            # keep stdout and stderr to the prompt and the diagnostics
            _log_handler = logging.NullHandler()
            logger.propagate = False
        else:
            if _log_setting['file']:
                _log_handler = logging.handlers.RotatingFileHandler(_log_setting['file'], mode='a')
            else:
                _log_handler = logging.StreamHandler(_SYS_STDERR)
            _log_handler.setLevel(level)
            _log_handler.setFormatter(
                logging.Formatter(
                    '[%(asctime)s] [%(levelname)s] [%(name)s] [%(funcName)s] [%(lineno)d] - %(message)s'
                )
            )
            logger.propagate = True
        _log_handler._mycopy_handler = True
        logger.addHandler(_log_handler)

        return logger
