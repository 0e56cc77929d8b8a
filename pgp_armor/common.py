"""
<Module Name>
  common.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Provides the ASCII Armor scanner, which finds, parses and checksum-verifies
  the armor blocks in a text (see RFC4880 6.2. Forming ASCII Armor).

  The text is scanned line by line, with a state machine per armor candidate:

    SEEK_BEGIN -> HEADERS -> BODY -> CHECKSUM -> SEEK_END

  A candidate that does not follow the armor grammar is abandoned, and the
  scan resumes on the line after its BEGIN line. Each line is only looked at
  a bounded number of times, so there is no catastrophic backtracking on
  adversarial input.

  Any line may end with a single tab, space or no-break space before the
  optional carriage return and the line feed, as some clients produce such
  lines.

"""
import re
import logging
import binascii
import collections

from pgp_armor.constants import (BEGIN_MARKER_PREFIX, ARMOR_END_FORMAT,
    ARMOR_TYPE_BINARY, CHARSET_HEADER, TOLERATED_LINE_END_BLANKS)
from pgp_armor.exceptions import ParseError, ChecksumError
from pgp_armor.models import ArmoredBlock
from pgp_armor.util import decode_radix64, crc24_bytes

# Inherits from pgp_armor base logger (c.f. pgp_armor.log)
log = logging.getLogger(__name__)

# The part of a line that is not content, i.e. what precedes "\n"
LINE_END = "[{}]?\\r?".format(TOLERATED_LINE_END_BLANKS)

BEGIN_LINE_RE = re.compile(r"-----BEGIN PGP ([^-\r\n]+)-----" + LINE_END)
HEADER_LINE_RE = re.compile(r"([A-Za-z]+): ([^\n]+)")
BLANK_LINE_RE = re.compile(LINE_END)
BODY_LINE_RE = re.compile(r"[A-Za-z0-9/+]+=*" + LINE_END)
CHECKSUM_LINE_RE = re.compile(r"=([A-Za-z0-9/+]{4})" + LINE_END)

CHARSET_TOKEN_RE = re.compile(r"[\w-]+")

# States of the per-candidate scan, SEEK_BEGIN is the scan in `parse_all`
STATE_HEADERS = "headers"
STATE_BODY = "body"
STATE_CHECKSUM = "checksum"
STATE_SEEK_END = "seek_end"

# Raw lines of an armor that matched the grammar, not yet decoded or verified
ArmorMatch = collections.namedtuple("ArmorMatch", ["type", "headers",
    "body", "checksum", "start_offset", "end_offset", "next_index"])


def _split_lines(text):
  """Return a list of (offset, line, terminated) tuples, where line does not
  include the terminating "\\n" and terminated is False only for a last line
  that does not end with "\\n". """
  lines = []
  position = 0
  while position < len(text):
    end = text.find("\n", position)
    if end == -1:
      lines.append((position, text[position:], False))
      break

    lines.append((position, text[position:end], True))
    position = end + 1

  return lines


def _strip_line_end(line):
  """Remove the tolerated line end, i.e. a carriage return and a single blank
  before it, from the passed line. """
  if line.endswith("\r"):
    line = line[:-1]

  if line and line[-1] in TOLERATED_LINE_END_BLANKS:
    line = line[:-1]

  return line


def _is_end_line(line, terminated, end_marker):
  """Return True if the line is the passed END marker, followed by a tolerated
  line end, or by the end of the text with an optional carriage return. """
  if not terminated:
    return line in (end_marker, end_marker + "\r")

  return line.startswith(end_marker) and \
      bool(BLANK_LINE_RE.fullmatch(line[len(end_marker):]))


def match_armor(lines, index):
  """
  <Purpose>
    Match the armor grammar against the lines starting at the passed index.

  <Arguments>
    lines:
            A list of lines as returned by `_split_lines`.

    index:
            The index of the candidate BEGIN line in lines.

  <Exceptions>
    None.

  <Side Effects>
    None.

  <Returns>
    An ArmorMatch, or None if the lines at index are not an armor.

  """
  start_offset, line, terminated = lines[index]
  begin = BEGIN_LINE_RE.fullmatch(line) if terminated else None
  if not begin:
    return None

  armor_type = begin.group(1)
  end_marker = ARMOR_END_FORMAT.format(type=armor_type)
  headers = []
  body = []
  checksum = None
  state = STATE_HEADERS

  for position in range(index + 1, len(lines)):
    line_offset, line, terminated = lines[position]
    is_blank = terminated and bool(BLANK_LINE_RE.fullmatch(line))

    if state == STATE_HEADERS:
      header = HEADER_LINE_RE.fullmatch(line) if terminated else None
      if header:
        headers.append((header.group(1), _strip_line_end(header.group(2))))

      elif is_blank:
        state = STATE_BODY

      else:
        break

      continue

    if state == STATE_BODY:
      if terminated and BODY_LINE_RE.fullmatch(line):
        body.append(line)
        continue

      state = STATE_CHECKSUM

    if state == STATE_CHECKSUM:
      if is_blank:
        continue

      checksum_line = CHECKSUM_LINE_RE.fullmatch(line) if terminated else None
      state = STATE_SEEK_END
      if checksum_line:
        checksum = checksum_line.group(1)
        continue

    # STATE_SEEK_END
    if is_blank:
      continue

    if _is_end_line(line, terminated, end_marker):
      return ArmorMatch(type=armor_type, headers=headers, body=body,
          checksum=checksum, start_offset=start_offset,
          end_offset=line_offset + len(end_marker), next_index=position + 1)

    break

  log.debug("Skipping malformed or unterminated '{}' armor at offset"
      " {}.".format(armor_type, start_offset))
  return None


def _get_charset(headers):
  """Return the lowercase charset token of the first "Charset" header, or None
  if there is no such header. """
  for name, value in headers:
    if name.lower() == CHARSET_HEADER.lower():
      token = CHARSET_TOKEN_RE.search(value.lower())
      return token.group(0) if token else None

  return None


def decode_armor(armor):
  """
  <Purpose>
    Decode the body of a matched armor and verify it against the armor's
    checksum.

  <Arguments>
    armor:
            An ArmorMatch as returned by `match_armor`.

  <Exceptions>
    pgp_armor.exceptions.ParseError
            If the armor body is not valid radix-64.

    pgp_armor.exceptions.ChecksumError
            If the armor has no checksum, or if the checksum does not match
            the decoded body.

  <Side Effects>
    None.

  <Returns>
    A pgp_armor.models.ArmoredBlock.

  """
  try:
    payload = decode_radix64("".join(armor.body))

  except binascii.Error as e:
    raise ParseError("Invalid radix-64 body in '{}' armor at offset {}: "
        "{}".format(armor.type, armor.start_offset, e)) from e

  if armor.checksum is None:
    raise ChecksumError("ASCII Armor checksum missing in '{}' armor at offset "
        "{}.".format(armor.type, armor.start_offset))

  if crc24_bytes(payload) != decode_radix64(armor.checksum):
    raise ChecksumError("ASCII Armor checksum incorrect in '{}' armor at "
        "offset {}.".format(armor.type, armor.start_offset))

  return ArmoredBlock(payload=payload, type=armor.type,
      start_offset=armor.start_offset, end_offset=armor.end_offset,
      charset=_get_charset(armor.headers), headers=armor.headers)


def parse_all(text, limit=None):
  """
  <Purpose>
    Parse all ASCII Armors present in the passed text (see RFC4880 6.2.).

    If the first character of the text has its high bit set, which is always
    the case for the first octet (packet tag) of binary OpenPGP data, the text
    is not scanned for armor, but returned as single block of type "BINARY".

  <Arguments>
    text:
            The text to parse. (str, or bytes which are read as latin-1)

    limit: (optional)
            Stop parsing once limit armors have been parsed. If not passed,
            all armors are parsed.

  <Exceptions>
    pgp_armor.exceptions.ParseError
            If an armor body is not valid radix-64, or if binary input has
            characters above U+00FF, which are not octets.

    pgp_armor.exceptions.ChecksumError
            If any armor's checksum is missing or incorrect. The whole scan is
            aborted, i.e. no armor is returned.

  <Side Effects>
    None.

  <Returns>
    A list of pgp_armor.models.ArmoredBlock objects, in the order they appear
    in the text. The list is empty if the text contains no armor.

  """
  if isinstance(text, (bytes, bytearray)):
    text = bytes(text).decode("latin-1")

  # The 0x80 bit is always set for the Packet Tag of OpenPGP packets
  if text and ord(text[0]) >= 0x80:
    log.debug("Treating non-armored input as binary OpenPGP data.")
    try:
      payload = text.encode("latin-1")

    except UnicodeEncodeError as e:
      raise ParseError("Binary OpenPGP data must consist of octets, got "
          "character {!r} at offset {}.".format(e.object[e.start], e.start)) \
          from e

    return [ArmoredBlock(payload=payload, type=ARMOR_TYPE_BINARY,
        start_offset=0, end_offset=len(text))]


  if BEGIN_MARKER_PREFIX not in text:
    return []

  lines = _split_lines(text)
  armors = []
  index = 0
  while (limit is None or len(armors) < limit) and index < len(lines):
    armor = match_armor(lines, index)
    if armor is None:
      index += 1
      continue

    armors.append(decode_armor(armor))
    index = armor.next_index

  return armors


def parse(text):
  """
  <Purpose>
    Parse the single ASCII Armor in the passed text.

  <Arguments>
    text:
            The text to parse. (str, or bytes which are read as latin-1)

  <Exceptions>
    pgp_armor.exceptions.ParseError
            If the text does not contain exactly one armor, or if the armor
            body is not valid radix-64.

    pgp_armor.exceptions.ChecksumError
            If the armor's checksum is missing or incorrect.

  <Side Effects>
    None.

  <Returns>
    A pgp_armor.models.ArmoredBlock.

  """
  armors = parse_all(text, limit=2)
  if not armors:
    raise ParseError("ASCII Armor not found.")

  if len(armors) > 1:
    raise ParseError("Expected a single ASCII Armor, found more.")

  return armors[0]
