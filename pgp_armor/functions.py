"""
<Module Name>
  functions.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  publicly-usable functions for encoding binary OpenPGP data and clearsigned
  messages as ASCII Armor, for extracting armor from free text and for
  marking armor as draft.
"""
import re
import logging

import pgp_armor.settings
from pgp_armor.clearsign import convert_newlines, dash_escape
from pgp_armor.constants import (ARMOR_BEGIN_FORMAT, ARMOR_END_FORMAT,
    ARMOR_HEADER_FORMAT, ARMOR_TYPE_SIGNATURE, ARMOR_TYPE_SIGNED_MESSAGE,
    CHARSET_HEADER, HASH_HEADER, CRLF, DRAFT_HEADER_LINE)
from pgp_armor.exceptions import SerializationError
from pgp_armor.formats import ArmorHeaders
from pgp_armor.util import encode_radix64, crc24_bytes

# Inherits from pgp_armor base logger (c.f. pgp_armor.log)
log = logging.getLogger(__name__)

# Start of the first armor, the line prefix is what precedes it on its line
BEGIN_RE = re.compile(r"-----BEGIN\sPGP\s")
TYPE_RE = re.compile(r"([\w\s]+)-----")
# Greedy up to the last armor tail
TAIL_RE = re.compile(r"[\s\S]*(?:MESSAGE|BLOCK|SIGNATURE)-----")

NESTED_BEGIN_RE = re.compile(r"-----BEGIN\sPGP")
END_FORMAT_RE = r"-----END\sPGP\s{}-----"


def encode(armor_type, payload, headers=None):
  """
  <Purpose>
    Encode binary data as ASCII Armor (see RFC4880 6.2.), with CRLF line
    endings, including a trailing line break.

    A "Charset: UTF-8" header is added to all armors that are not of type
    "SIGNATURE".

  <Arguments>
    armor_type:
            Descriptive armor type, such as "MESSAGE" or "PUBLIC KEY BLOCK".

    payload:
            The binary data to encode. (bytes)

    headers: (optional)
            A mapping (or iterable of pairs) of additional armor headers.
            Headers that are not well-formed (see
            `pgp_armor.formats.is_valid_header`) are omitted.

  <Exceptions>
    None.

  <Side Effects>
    None.

  <Returns>
    The ASCII Armor text.

  """
  payload = bytes(payload)
  header_lines = []
  if armor_type != ARMOR_TYPE_SIGNATURE:
    header_lines.append(ARMOR_HEADER_FORMAT.format(name=CHARSET_HEADER,
        value=pgp_armor.settings.DEFAULT_CHARSET))

  header_lines += ArmorHeaders(headers).to_lines()

  return CRLF.join([ARMOR_BEGIN_FORMAT.format(type=armor_type)] +
      header_lines + [
        "",
        encode_radix64(payload),
        "=" + encode_radix64(crc24_bytes(payload)),
        ARMOR_END_FORMAT.format(type=armor_type),
        ""
      ])


def armor_block(block, headers=None):
  """
  <Purpose>
    ASCII armor an OpenPGP block. Blocks with the header "SIGNED MESSAGE" are
    armored as clearsigned message (see RFC4880 7.), all others with
    `encode`.

  <Arguments>
    block:
            Any object providing:
              header:
                    the armor type, e.g. "MESSAGE" or "SIGNED MESSAGE"
              get_armor_body():
                    returns the binary data to encode, or, for clearsigned
                    messages, the UTF-8 encoded signed text (bytes)
              get_armor_signatures():
                    returns a list of signatures, each providing a
                    `hash_algorithm` name (e.g. "SHA256") and a `serialize()`
                    method returning the binary signature packet. Only used
                    for clearsigned messages.

    headers: (optional)
            Additional armor headers, see `encode`. For clearsigned messages
            the headers are added to the signature armor.

  <Exceptions>
    pgp_armor.exceptions.SerializationError
            If a clearsigned message does not have exactly one signature, or
            if its text is not valid UTF-8.

  <Side Effects>
    None.

  <Returns>
    The ASCII Armor text.

  """
  if block.header != ARMOR_TYPE_SIGNED_MESSAGE:
    return encode(block.header, block.get_armor_body(), headers)

  signatures = block.get_armor_signatures()
  if len(signatures) != 1:
    raise SerializationError("Clearsign messages need to have one and only "
        "one signature, got {}.".format(len(signatures)))

  signature = signatures[0]
  try:
    body = bytes(block.get_armor_body()).decode("utf-8")

  except UnicodeDecodeError as e:
    raise SerializationError("Clearsigned text must be UTF-8: {}".format(e)) \
        from e

  return CRLF.join([
      ARMOR_BEGIN_FORMAT.format(type=block.header),
      ARMOR_HEADER_FORMAT.format(name=HASH_HEADER,
          value=signature.hash_algorithm),
      "",
      dash_escape(convert_newlines(body)),
      encode(ARMOR_TYPE_SIGNATURE, signature.serialize(), headers)
    ])


def extract_pgp_block(content):
  """
  <Purpose>
    Extract the first armor from free text, e.g. from a quoted mail reply.
    A line prefix, such as "> ", that precedes the armor's BEGIN line is
    removed from all lines of the armor.

    NOTE: The extraction is lenient and does not validate the armor. If
    more than one BEGIN line is found, the armor is cut after the first END
    line that matches the first BEGIN line (for "SIGNED MESSAGE" the
    "SIGNATURE" END line).

  <Arguments>
    content:
            The free text containing the armor.

  <Exceptions>
    None.

  <Side Effects>
    None.

  <Returns>
    The text of the first armor, or the passed content if there is none.

  """
  armor_type = None
  for begin in BEGIN_RE.finditer(content):
    armor_type = TYPE_RE.match(content, begin.end())
    if armor_type:
      break

  if not armor_type:
    return content

  tail = TAIL_RE.match(content, armor_type.end())
  if not tail:
    return content

  line_start = max(content.rfind("\n", 0, begin.start()),
      content.rfind("\r", 0, begin.start())) + 1
  pgp_block = content[line_start:tail.end()]
  line_prefix = content[line_start:begin.start()]
  expected_type = armor_type.group(1)
  if expected_type == ARMOR_TYPE_SIGNED_MESSAGE:
    expected_type = ARMOR_TYPE_SIGNATURE

  if NESTED_BEGIN_RE.search(pgp_block, 1):
    end = re.search(END_FORMAT_RE.format(re.escape(expected_type)),
        pgp_block)
    if end:
      pgp_block = pgp_block[:end.end()]

  if line_prefix:
    # Trailing blanks of the prefix are optional, as they are usually removed
    # from otherwise empty lines
    pgp_block = re.sub("^" + re.escape(line_prefix.rstrip()) + "[\t ]*", "",
        pgp_block, flags=re.MULTILINE)

  return pgp_block


def mark_as_draft(armored_content):
  """Mark armored text as draft, by inserting "isDraft: true" as its second
  line, i.e. as the first armor header. """
  lines = armored_content.split("\n")
  lines.insert(1, DRAFT_HEADER_LINE)
  log.debug("Marked armor as draft.")
  return "\n".join(lines)


def is_draft(armored_content):
  """Return True if the armored text is marked as draft (see `mark_as_draft`),
  and False otherwise. """
  return "\n{}\n".format(DRAFT_HEADER_LINE) in armored_content
