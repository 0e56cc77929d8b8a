"""
<Program Name>
  formats.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Format checks for armor headers, and an ordered header mapping that only
  admits well-formed headers.

  An armor header is a "<name>: <value>" line between the armor's BEGIN line
  and the blank line that precedes the radix-64 body (see RFC4880 6.2.). To
  never emit malformed armor, a header name must consist of word characters
  only and a header value must be a non-empty single line.

  Example Usage:

  >>> headers = ArmorHeaders([("Comment", "hello"), ("Bad Name", "x")])
  >>> list(headers.items())
  [('Comment', 'hello')]
  >>> is_valid_header("Comment", "two\\nlines")
  False

"""
import re
import logging
import collections

import securesystemslib.exceptions

from pgp_armor.constants import ARMOR_HEADER_FORMAT

# Inherits from pgp_armor base logger (c.f. pgp_armor.log)
log = logging.getLogger(__name__)

HEADER_NAME_RE = re.compile(r"\w+", re.ASCII)
HEADER_VALUE_RE = re.compile(r"[^\r\n]+")


def check_header(name, value):
  """
  <Purpose>
    Check that the passed name and value form a well-formed armor header.

  <Arguments>
    name:
            The header name, e.g. "Comment".

    value:
            The header value.

  <Exceptions>
    securesystemslib.exceptions.FormatError
            If name is not a string of word characters, or if value is not a
            non-empty string without line breaks.

  <Side Effects>
    None.

  <Returns>
    None.

  """
  if not isinstance(name, str) or not HEADER_NAME_RE.fullmatch(name):
    raise securesystemslib.exceptions.FormatError("Invalid armor header "
        "name {!r}, must consist of word characters only.".format(name))

  if not isinstance(value, str) or not HEADER_VALUE_RE.fullmatch(value):
    raise securesystemslib.exceptions.FormatError("Invalid value {!r} for "
        "armor header '{}', must be a non-empty single line.".format(
        value, name))


def is_valid_header(name, value):
  """Return True if name and value form a well-formed armor header and False
  otherwise (see `check_header`). """
  try:
    check_header(name, value)

  except securesystemslib.exceptions.FormatError:
    return False

  return True


class ArmorHeaders(collections.OrderedDict):
  """Ordered mapping of armor header names to values.

  Headers that fail `is_valid_header` are silently dropped on insertion,
  instead of raising an error, so that a single bad header provided by a
  caller does not prevent encoding.

  """
  def __init__(self, headers=None):
    super(ArmorHeaders, self).__init__()
    if headers is None:
      return

    if hasattr(headers, "items"):
      headers = headers.items()

    for name, value in headers:
      self[name] = value

  def __setitem__(self, name, value): # pylint: disable=arguments-differ
    if not is_valid_header(name, value):
      log.debug("Dropping malformed armor header {!r}.".format(name))
      return

    super(ArmorHeaders, self).__setitem__(name, value)

  def update(self, *args, **kwargs): # pylint: disable=arguments-differ
    for name, value in collections.OrderedDict(*args, **kwargs).items():
      self[name] = value

  def to_lines(self):
    """Return a list of "<name>: <value>" header lines. """
    return [ARMOR_HEADER_FORMAT.format(name=name, value=value)
        for name, value in self.items()]
