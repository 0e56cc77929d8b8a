"""
<Program Name>
  log.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Configures "pgp_armor" base logger, which can be used for debugging
  armor parsing and encoding in applications using the library.

  Logging methods and levels are available through Python's logging module.

  If the log level is set to 'logging.DEBUG' log messages include
  additional information about the log statement. Moreover, calls to the
  `error` method will also output a stacktrace (if available).
  In all other log levels only the log message is shown without additional
  info.

  The default log level of the base logger is 'logging.WARNING', unless
  'pgp_armor.settings.DEBUG' is 'True', in that case the default log level is
  'logging.DEBUG'.

  The default handler of the base logger is a 'StreamHandler', which writes all
  log messages permitted by the used log level to 'sys.stderr'.


<Usage>
  This module is imported in '__init__.py' to configure the base logger.
  Applications may fetch the base logger by name and customize the log level,
  e.g.:

  ```
  import logging
  logging.getLogger("pgp_armor").setLevel(logging.DEBUG)
  ```

  Library modules create loggers, passing the module name, which will
  inherit the base logger's log level and format, e.g.:

  ```
  import logging
  log = logging.getLogger(__name__)

  log.debug("Skipping armor candidate at line 12")
  # pgp_armor.common:147:DEBUG:Skipping armor candidate at line 12

  ```

"""
import sys
import logging
import pgp_armor.settings

# Different log message formats for different log levels
FORMAT_MESSAGE = "%(message)s"
FORMAT_DEBUG = "%(name)s:%(lineno)d:%(levelname)s:%(message)s"

# Cache default logger class, should be logging.Logger if not changed elsewhere
_LOGGER_CLASS = logging.getLoggerClass()

# Create logger subclass
class ArmorLogger(_LOGGER_CLASS):
  """logger.Logging subclass, providing a custom error method. """

  QUIET = logging.CRITICAL + 1

  def error(self, msg, *args, **kwargs):
    """Show stacktrace depending on its availability and the logger's log
    level, i.e. only show stacktrace in DEBUG level. """
    show_stacktrace = (self.level == logging.DEBUG and
        sys.exc_info() != (None, None, None))
    kwargs.setdefault("exc_info", show_stacktrace)
    return super(ArmorLogger, self).error(msg, *args, **kwargs)

  # Allow non snake_case function name for consistency with logging library
  def setLevelQuiet(self, quiet): # pylint: disable=invalid-name
    """Convenience method to silence the library, e.g. in applications that
    probe lots of free text for armor and don't want any output. """
    if quiet:
      self.setLevel(self.QUIET)

    else:
      self.setLevel(logging.NOTSET)


# Temporarily change logger default class to instantiate a pgp_armor base
# logger
logging.setLoggerClass(ArmorLogger)
LOGGER = logging.getLogger("pgp_armor")
logging.setLoggerClass(_LOGGER_CLASS)

# In DEBUG mode we log all log types and add additional information,
# otherwise we only log warning, error and critical and only the message.
if pgp_armor.settings.DEBUG: # pragma: no cover
  LEVEL = logging.DEBUG
  FORMAT_STRING = FORMAT_DEBUG

else:
  LEVEL = logging.WARNING
  FORMAT_STRING = FORMAT_MESSAGE

# Add a StreamHandler with the chosen format to pgp_armor's base logger,
# which will write log messages to `sys.stderr`.
FORMATTER = logging.Formatter(FORMAT_STRING)
HANDLER = logging.StreamHandler()
HANDLER.setFormatter(FORMATTER)
LOGGER.addHandler(HANDLER)
LOGGER.setLevel(LEVEL)
