"""
<Program Name>
  exceptions.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Define Exceptions used in the pgp_armor package. Following the practice from
  securesystemslib the names chosen for exception classes should end in
  'Error' (except where there is a good reason not to).

"""
from securesystemslib.exceptions import Error


class ParseError(Error):
  """Indicates that text could not be parsed as ASCII Armor. """

class ChecksumError(ParseError):
  """Indicates that the CRC24 checksum of an armor is missing or does not
  match its decoded body. """

class SerializationError(Error):
  """Indicates that an object could not be encoded as ASCII Armor. """
