"""
<Module Name>
  constants.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  aggregates all the constant definitions and lookup structures for armor
  parsing and encoding
"""
# See RFC4880 section 6.2. Forming ASCII Armor for the armor header lines.
BEGIN_MARKER_PREFIX = "-----BEGIN PGP "
ARMOR_BEGIN_FORMAT = BEGIN_MARKER_PREFIX + "{type}-----"
ARMOR_END_FORMAT = "-----END PGP {type}-----"
ARMOR_HEADER_FORMAT = "{name}: {value}"

# Armor types with a special meaning for parsing or encoding. "BINARY" is not
# an RFC4880 type, it is assigned to non-armored input.
ARMOR_TYPE_BINARY = "BINARY"
ARMOR_TYPE_MESSAGE = "MESSAGE"
ARMOR_TYPE_SIGNATURE = "SIGNATURE"
ARMOR_TYPE_SIGNED_MESSAGE = "SIGNED MESSAGE"
ARMOR_TYPE_PUBLIC_KEY = "PUBLIC KEY BLOCK"
ARMOR_TYPE_PRIVATE_KEY = "PRIVATE KEY BLOCK"

CLEARSIGN_BEGIN_MARKER = ARMOR_BEGIN_FORMAT.format(
    type=ARMOR_TYPE_SIGNED_MESSAGE)
SIGNATURE_BEGIN_MARKER = ARMOR_BEGIN_FORMAT.format(type=ARMOR_TYPE_SIGNATURE)

CHARSET_HEADER = "Charset"
HASH_HEADER = "Hash"

# Some clients put a single blank (tab, space or no-break space) before the
# line break, which we tolerate when parsing.
TOLERATED_LINE_END_BLANKS = "\t \u00a0"

# Line ending used for all encoded output
CRLF = "\r\n"

# See section 6.1. An Implementation of the CRC-24 in "C" of RFC4880
CRC24_INIT = 0xB704CE
CRC24_POLY = 0x1864CFB
CRC24_MASK = 0xFFFFFF

# See section 7.1. Dash-Escaped Text of RFC4880.
DASH_ESCAPE_PREFIX = "- "

# Injected as first header line to flag armored text as an unsent draft
DRAFT_HEADER_LINE = "isDraft: true"

# The hash algorithm names used in the "Hash" armor header, taken from
# section 9.4 of RFC4880 (RIPEMD160 is omitted, because pyca/cryptography
# does not provide it).
MD5 = "MD5"
SHA1 = "SHA1"
SHA224 = "SHA224"
SHA256 = "SHA256"
SHA384 = "SHA384"
SHA512 = "SHA512"
