"""
<Program Name>
  models.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Provides the immutable result classes of armor parsing, i.e. a single
  armored block and a clearsigned message.

"""
import types

import attr

import pgp_armor.util
from pgp_armor.formats import ArmorHeaders


def _read_only_headers(headers):
  """Return a read-only view on the passed headers as ArmorHeaders. """
  return types.MappingProxyType(ArmorHeaders(headers))


@attr.s(frozen=True)
class ArmoredBlock:
  """A successfully parsed and checksum-verified ASCII Armor block.

  Attributes:
    payload: The decoded binary content of the armor body. (bytes)

    type: The armor type taken verbatim from the BEGIN line, e.g. "MESSAGE",
        "SIGNATURE" or "PUBLIC KEY BLOCK". Non-armored input has the type
        "BINARY".

    start_offset: Offset of the first character of the BEGIN line in the
        parsed text.

    end_offset: Offset just past the last character of the END line in the
        parsed text, i.e. `text[start_offset:end_offset]` is the armor.

    charset: The lowercase value of the "Charset" header, or None if the
        armor has no such header.

    headers: A read-only mapping with all well-formed headers of the armor,
        in the order they appear in the text (see ArmorHeaders).

  """
  payload = attr.ib(converter=bytes)
  type = attr.ib()
  start_offset = attr.ib()
  end_offset = attr.ib()
  charset = attr.ib(default=None)
  headers = attr.ib(default=attr.Factory(ArmorHeaders),
      converter=_read_only_headers, eq=False)

  @end_offset.validator
  def _validate_offsets(self, _attribute, value):
    if not 0 <= self.start_offset <= value:
      raise ValueError("Invalid armor offsets {} to {}".format(
          self.start_offset, value))


@attr.s(frozen=True)
class ClearSignMessage:
  """A parsed clearsigned message (see RFC4880 7. Cleartext Signature
  Framework).

  Attributes:
    body: The dash-unescaped signed text, with trailing whitespace removed and
        all line endings converted to CRLF, i.e. the exact text that was
        signed.

    signature: The decoded payload of the message's SIGNATURE armor. (bytes)

    hash_algorithm: The value of the message's "Hash" header, e.g. "SHA256".

  """
  body = attr.ib()
  signature = attr.ib(converter=bytes)
  hash_algorithm = attr.ib()

  @property
  def hashing_class(self):
    """The pyca/cryptography hashing class for `hash_algorithm`.

    Raises:
      ValueError: The hash algorithm is not supported.

    """
    return pgp_armor.util.get_hashing_class(self.hash_algorithm)
