"""
<Module Name>
  util.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  general-purpose utilities for radix-64 and checksum handling of armored
  data
"""
import re
import struct
import base64
import binascii
import logging

import cryptography.hazmat.primitives.hashes as hashing

import pgp_armor.settings
from pgp_armor.constants import (CRC24_INIT, CRC24_POLY, CRC24_MASK, CRLF,
    MD5, SHA1, SHA224, SHA256, SHA384, SHA512)

# Inherits from pgp_armor base logger (c.f. pgp_armor.log)
log = logging.getLogger(__name__)

# Anything that is neither in the radix-64 alphabet nor padding
NON_RADIX64_RE = re.compile(r"[^A-Za-z0-9+/=]+")


def encode_radix64(data):
  """
  <Purpose>
    Encode the passed data as radix-64 (see RFC4880 6.3. Encoding Binary in
    Radix-64), inserting a CRLF after every
    pgp_armor.settings.RADIX64_LINE_LENGTH characters.

    NOTE: The returned text does not end with a line break.

  <Arguments>
    data:
            The binary data to encode. (bytes)

  <Exceptions>
    None.

  <Side Effects>
    None.

  <Returns>
    The line-wrapped radix-64 text.

  """
  ascii_data = base64.b64encode(bytes(data)).decode("ascii")
  width = pgp_armor.settings.RADIX64_LINE_LENGTH
  return CRLF.join(ascii_data[i:i + width]
      for i in range(0, len(ascii_data), width))


def decode_radix64(text):
  """
  <Purpose>
    Decode radix-64 text, ignoring any character that is not part of the
    radix-64 alphabet or padding, such as line breaks and other whitespace.

  <Arguments>
    text:
            The radix-64 text to decode.

  <Exceptions>
    binascii.Error
            If the remaining text is not padded correctly or is not the
            canonical encoding of the decoded bytes, e.g. because of non-zero
            trailing bits or padding in the middle of the text.

  <Side Effects>
    None.

  <Returns>
    The decoded bytes.

  """
  real = NON_RADIX64_RE.sub("", text)
  data = base64.b64decode(real, validate=True)

  # b64decode silently drops trailing bits and data after padding
  if base64.b64encode(data).decode("ascii") != real:
    raise binascii.Error("Non-canonical radix-64 encoding")

  return data


def crc24(data):
  """
  <Purpose>
    Compute the 24-bit cyclic redundancy check used for the armor checksum,
    bit-for-bit as specified in RFC4880 6.1. An Implementation of the CRC-24
    in "C".

  <Arguments>
    data:
            The data to checksum. (bytes)

  <Exceptions>
    None.

  <Side Effects>
    None.

  <Returns>
    The checksum as integer in the range 0 to 0xFFFFFF.

  """
  crc = CRC24_INIT
  for octet in bytearray(data):
    crc ^= octet << 16
    for _ in range(8):
      crc <<= 1
      if crc & 0x1000000:
        crc ^= CRC24_POLY

  return crc & CRC24_MASK


def crc24_bytes(data):
  """ Return the CRC24 checksum of data as three big-endian octets, i.e. the
  way it is radix-64 encoded in the armor checksum line. """
  return struct.pack(">I", crc24(data))[1:]


def get_hashing_class(hash_algorithm_name):
  """
  <Purpose>
    Return a pyca/cryptography hashing class reference for the passed RFC4880
    hash algorithm name, as found in the "Hash" header of clearsigned
    messages. The name is matched case-insensitively.

  <Arguments>
    hash_algorithm_name:
            one of MD5, SHA1, SHA224, SHA256, SHA384, SHA512 (see
            pgp_armor.constants)

  <Exceptions>
    ValueError
            if the passed hash_algorithm_name is not supported.

  <Returns>
    A pyca/cryptography hashing class

  """
  supported_hashing_algorithms = [MD5, SHA1, SHA224, SHA256, SHA384, SHA512]
  corresponding_hashing_classes = [hashing.MD5, hashing.SHA1, hashing.SHA224,
      hashing.SHA256, hashing.SHA384, hashing.SHA512]

  # Map supported hash algorithm names to corresponding hashing classes
  hashing_class = dict(zip(supported_hashing_algorithms,
      corresponding_hashing_classes))

  try:
    return hashing_class[hash_algorithm_name.strip().upper()]

  except (KeyError, AttributeError):
    raise ValueError("Hash algorithm '{}' not supported, must be one of '{}' "
        "(see RFC4880 9.4. Hash Algorithms).".format(hash_algorithm_name,
        supported_hashing_algorithms))
