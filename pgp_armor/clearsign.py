"""
<Module Name>
  clearsign.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Parsing of clearsigned messages, and the text canonicalization and
  dash-escaping they rely on (see RFC4880 7. Cleartext Signature Framework).

  A clearsigned message looks like this:

    -----BEGIN PGP SIGNED MESSAGE-----
    Hash: SHA256

    - -- the signed text, dash-escaped
    -----BEGIN PGP SIGNATURE-----

    <radix-64 signature>
    =<checksum>
    -----END PGP SIGNATURE-----

"""
import re
import logging

import pgp_armor.common
from pgp_armor.constants import (CLEARSIGN_BEGIN_MARKER,
    SIGNATURE_BEGIN_MARKER, DASH_ESCAPE_PREFIX)
from pgp_armor.exceptions import ParseError
from pgp_armor.models import ClearSignMessage

# Inherits from pgp_armor base logger (c.f. pgp_armor.log)
log = logging.getLogger(__name__)

CLEARSIGN_HEADER_RE = re.compile(
    re.escape(CLEARSIGN_BEGIN_MARKER) + r"\r?\n"
    r"Hash: ([^\n\r]+)\r?\n"  # Mandatory hash header
    r"(?:[A-Za-z]+: [^\n\r]+\r?\n)*"  # Other headers
    r"\r?\n")

# Any kind of line break, kept in the result of `split`
LINE_BREAK_RE = re.compile(r"(\r\n|\r|\n)")
LINE_END_BLANKS = " \t"
DASH_ESCAPE_RE = re.compile(r"^(?=-|From )", re.MULTILINE)
DASH_UNESCAPE_RE = re.compile(r"^" + re.escape(DASH_ESCAPE_PREFIX),
    re.MULTILINE)
# Dash-escaping ensures that the signed text has no such line
SIGNATURE_LINE_RE = re.compile(r"^" + re.escape(SIGNATURE_BEGIN_MARKER),
    re.MULTILINE)


def convert_newlines(text):
  """Canonicalize text by removing trailing spaces and tabs from all lines and
  converting all line endings to CRLF. """
  # Every other item is a line break, the last line has none
  lines = LINE_BREAK_RE.split(text)[::2]
  return "\r\n".join([line.rstrip(LINE_END_BLANKS) for line in lines[:-1]] +
      lines[-1:])


def dash_escape(text):
  """
  <Purpose>
    Dash-escape text as described in RFC4880 7.1., i.e. prefix lines starting
    with a dash, and lines starting with "From ", with "- ", and remove
    trailing spaces and tabs from all lines.

  <Arguments>
    text:
            The text to escape, which should already be canonicalized with
            `convert_newlines`.

  <Exceptions>
    None.

  <Returns>
    The dash-escaped text.

  """
  parts = LINE_BREAK_RE.split(DASH_ESCAPE_RE.sub(DASH_ESCAPE_PREFIX, text))
  parts[::2] = [line.rstrip(LINE_END_BLANKS) for line in parts[::2]]
  return "".join(parts)


def dash_unescape(text):
  """Remove the dash-escaping of text, i.e. the leading "- " of all lines. """
  return DASH_UNESCAPE_RE.sub("", text)


def is_clear_sign(text):
  """Return True if text contains a SIGNED MESSAGE armor line that is followed
  by a SIGNATURE armor line, and False otherwise. """
  start_message = text.find(CLEARSIGN_BEGIN_MARKER)
  start_signature = text.find(SIGNATURE_BEGIN_MARKER)
  return start_message != -1 and start_signature > start_message


def parse_clear_sign(text):
  """
  <Purpose>
    Parse a clearsigned message.

  <Arguments>
    text:
            The text containing the clearsigned message.

  <Exceptions>
    pgp_armor.exceptions.ParseError
            If the text is not a clearsigned message, if the header lines of
            the signed message are malformed, or if the signature armor is
            invalid (see `pgp_armor.common.parse`).

    pgp_armor.exceptions.ChecksumError
            If the checksum of the signature armor is missing or incorrect.

  <Side Effects>
    None.

  <Returns>
    A pgp_armor.models.ClearSignMessage with the canonicalized signed text,
    the signature payload and the name of the hash algorithm.

  """
  if not is_clear_sign(text):
    raise ParseError("Text is not a clearsigned message.")

  start_message = text.find(CLEARSIGN_BEGIN_MARKER)
  signature_line = SIGNATURE_LINE_RE.search(text, start_message)
  if not signature_line:
    raise ParseError("Clearsigned message has no signature.")

  start_signature = signature_line.start()
  header = CLEARSIGN_HEADER_RE.match(text, start_message, start_signature)
  if not header:
    raise ParseError("Invalid clearsign format.")

  hash_algorithm = header.group(1)

  # The line break before the signature armor is not part of the signed text
  body = text[header.end():start_signature - 1]
  if body.endswith("\r"):
    body = body[:-1]

  body = convert_newlines(dash_unescape(body))
  log.debug("Parsed clearsigned text of {} characters, hashed with "
      "'{}'.".format(len(body), hash_algorithm))

  signature = pgp_armor.common.parse(text[start_signature:])
  return ClearSignMessage(body=body, signature=signature.payload,
      hash_algorithm=hash_algorithm)
