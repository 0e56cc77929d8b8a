#!/usr/bin/env python

"""
<Program Name>
  test_clearsign.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Test clearsigned message parsing, canonicalization and dash-escaping.

"""
import time
import unittest

from pgp_armor.clearsign import (convert_newlines, dash_escape, dash_unescape,
    is_clear_sign, parse_clear_sign)
from pgp_armor.exceptions import ParseError, ChecksumError
from pgp_armor.functions import armor_block, encode

from tests.common import MockBlock, MockSignature


class TestCanonicalization(unittest.TestCase):
  """Test convert_newlines, dash_escape and dash_unescape. """

  def test_convert_newlines(self):
    self.assertEqual(convert_newlines(""), "")
    self.assertEqual(convert_newlines("a\nb\r\nc\rd"), "a\r\nb\r\nc\r\nd")
    self.assertEqual(convert_newlines("a \t\nb  \r\n\n"), "a\r\nb\r\n\r\n")
    # Blanks at the end of the last line are kept
    self.assertEqual(convert_newlines("a \nb "), "a\r\nb ")

  def test_dash_escape(self):
    self.assertEqual(dash_escape("-a\r\nb\r\n--\r\nFrom me\r\nFrom\r\n"),
        "- -a\r\nb\r\n- --\r\n- From me\r\nFrom\r\n")
    self.assertEqual(dash_escape("a-b\r\n From x"), "a-b\r\n From x")
    # Trailing blanks are removed from all lines
    self.assertEqual(dash_escape("a \t\r\nb  "), "a\r\nb")

  def test_dash_unescape(self):
    self.assertEqual(dash_unescape("- -a\r\n- From me\r\nb- c"),
        "-a\r\nFrom me\r\nb- c")
    # Only a single escape is removed
    self.assertEqual(dash_unescape("- - -a"), "- -a")

  def test_escape_unescape(self):
    """Test that dash-unescaping reverts dash-escaping. """
    for body in ["", "plain", "-dash\r\n--\r\n---", "From me\r\nFromage",
        "-----BEGIN PGP SIGNATURE-----\r\nabc\r\n", "a\r\n\r\n-\r\n"]:
      self.assertEqual(dash_unescape(dash_escape(body)), body)

  def test_long_input(self):
    """Test that long runs of blanks and many lines are handled in linear
    time. """
    for text in [" " * 200000 + "x", " " * 200000 + "\nx", "a \t\r" * 100000,
        "-\n" * 100000]:
      start = time.time()
      canonical = convert_newlines(text)
      escaped = dash_escape(canonical)
      self.assertLess(time.time() - start, 2, msg=repr(text[:8]))
      self.assertEqual(dash_unescape(escaped), canonical)

    self.assertEqual(convert_newlines(" " * 200000 + "\nx"), "\r\nx")
    self.assertEqual(dash_escape(" " * 200000 + "x"), " " * 200000 + "x")


class TestIsClearSign(unittest.TestCase):
  def test_is_clear_sign(self):
    self.assertTrue(is_clear_sign("-----BEGIN PGP SIGNED MESSAGE-----\n"
        "-----BEGIN PGP SIGNATURE-----"))
    self.assertFalse(is_clear_sign(""))
    self.assertFalse(is_clear_sign("-----BEGIN PGP SIGNED MESSAGE-----\n"))
    self.assertFalse(is_clear_sign("-----BEGIN PGP SIGNATURE-----\n"))
    self.assertFalse(is_clear_sign("-----BEGIN PGP SIGNATURE-----\n"
        "-----BEGIN PGP SIGNED MESSAGE-----\n"))


class TestParseClearSign(unittest.TestCase):
  """Test parse_clear_sign with messages created by armor_block and with
  crafted text. """

  @classmethod
  def setUpClass(self):
    self.signature = encode("SIGNATURE", b"signature packet")

  def test_round_trip(self):
    body = b"Hello,\n-dashed line\nFrom me   \n\ttabbed\n\n- escaped\nend"
    block = MockBlock("SIGNED MESSAGE", body,
        [MockSignature("SHA256", b"signature packet")])
    message = parse_clear_sign(armor_block(block))
    self.assertEqual(message.body, "Hello,\r\n-dashed line\r\nFrom me\r\n"
        "\ttabbed\r\n\r\n- escaped\r\nend")
    self.assertEqual(message.signature, b"signature packet")
    self.assertEqual(message.hash_algorithm, "SHA256")

  def test_trailing_line_break(self):
    """Test that a line break at the end of the text is kept. """
    block = MockBlock("SIGNED MESSAGE", b"text\n",
        [MockSignature("SHA1", b"sig")])
    self.assertEqual(parse_clear_sign(armor_block(block)).body, "text\r\n")

    block = MockBlock("SIGNED MESSAGE", b"",
        [MockSignature("SHA1", b"sig")])
    self.assertEqual(parse_clear_sign(armor_block(block)).body, "")

  def test_lf_message(self):
    """Test a message with LF line endings and additional headers. """
    text = ("Some text before the message\n"
        "-----BEGIN PGP SIGNED MESSAGE-----\n"
        "Hash: SHA512\n"
        "Comment: extra header\n"
        "\n"
        "line one  \n"
        "- -dashed\n"
        "- From here\n" +
        self.signature.replace("\r\n", "\n"))
    message = parse_clear_sign(text)
    self.assertEqual(message.body, "line one\r\n-dashed\r\nFrom here")
    self.assertEqual(message.hash_algorithm, "SHA512")
    self.assertEqual(message.signature, b"signature packet")

  def test_escaped_signature_line_in_text(self):
    """Test that a dash-escaped SIGNATURE line in the text is not taken for
    the signature armor. """
    body = b"-----BEGIN PGP SIGNATURE-----\nnot a signature"
    block = MockBlock("SIGNED MESSAGE", body,
        [MockSignature("SHA256", b"signature packet")])
    message = parse_clear_sign(armor_block(block))
    self.assertEqual(message.body,
        "-----BEGIN PGP SIGNATURE-----\r\nnot a signature")

  def test_not_clearsigned(self):
    for text in ["", "plain text", self.signature,
        "-----BEGIN PGP SIGNED MESSAGE-----\r\nHash: SHA1\r\n\r\ntext\r\n"]:
      with self.assertRaises(ParseError):
        parse_clear_sign(text)

  def test_invalid_header(self):
    for headers in [
        "",  # Missing blank line and hash
        "\r\n",  # Missing hash
        "Comment: x\r\nHash: SHA1\r\n\r\n",  # Hash must be first
        "Hash: SHA1\r\n",  # Missing blank line
        "Hash:SHA1\r\n\r\n",
        "Hash: SHA1\r\nBad header\r\n\r\n",
      ]:
      text = ("-----BEGIN PGP SIGNED MESSAGE-----\r\n" + headers + "text\r\n" +
          self.signature)
      with self.assertRaises(ParseError, msg=repr(headers)):
        parse_clear_sign(text)

  def test_invalid_signature(self):
    text = ("-----BEGIN PGP SIGNED MESSAGE-----\r\nHash: SHA1\r\n\r\ntext\r\n"
        "-----BEGIN PGP SIGNATURE-----\r\n\r\nnot radix-64\r\n")
    with self.assertRaises(ParseError):
      parse_clear_sign(text)

    text = ("-----BEGIN PGP SIGNED MESSAGE-----\r\nHash: SHA1\r\n\r\ntext\r\n" +
        self.signature.replace("\r\n=", "\r\n=A"))
    with self.assertRaises(ParseError):
      parse_clear_sign(text)

  def test_signature_checksum_mismatch(self):
    lines = self.signature.split("\r\n")
    lines[3] = "=AAAA"
    text = ("-----BEGIN PGP SIGNED MESSAGE-----\r\nHash: SHA1\r\n\r\ntext\r\n" +
        "\r\n".join(lines))
    with self.assertRaises(ChecksumError):
      parse_clear_sign(text)


if __name__ == "__main__":
  unittest.main()
