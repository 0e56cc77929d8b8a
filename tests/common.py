#!/usr/bin/env python
"""
<Program Name>
  common.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Common code for pgp_armor unittests, import like so:
  `import tests.common`

  Tests importing this module, should be run from the project root, e.g.:
  `python -m unittest tests.test_common`
  or using the aggregator script (preferred way):
  `python -m tests.runtests`.

"""
RADIX64_ALPHABET = ("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    "0123456789+/")


class MockSignature():
  """Signature providing the interface used by
  `pgp_armor.functions.armor_block`. """
  def __init__(self, hash_algorithm, data):
    self.hash_algorithm = hash_algorithm
    self.data = data

  def serialize(self):
    return self.data


class MockBlock():
  """Armorable block providing the interface used by
  `pgp_armor.functions.armor_block`. """
  def __init__(self, header, body, signatures=None):
    self.header = header
    self.body = body
    self.signatures = signatures or []

  def get_armor_body(self):
    return self.body

  def get_armor_signatures(self):
    return list(self.signatures)


def replace_line(text, index, line, separator="\r\n"):
  """Return text with the line at index replaced by the passed line. """
  lines = text.split(separator)
  lines[index] = line
  return separator.join(lines)
