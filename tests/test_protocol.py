from __future__ import annotations

import unittest

import tests._path  # noqa: F401

from urlkit.protocol import (
    has_protocol,
    is_script_protocol,
    with_http,
    with_https,
    with_protocol,
    without_protocol,
)


class HasProtocolTests(unittest.TestCase):
    def test_detects_protocols(self) -> None:
        self.assertTrue(has_protocol("https://example.com"))
        self.assertTrue(has_protocol("mailto:someone@example.com"))
        self.assertFalse(has_protocol("/path"))
        self.assertFalse(has_protocol("example.com"))
        self.assertFalse(has_protocol("C:"))

    def test_protocol_relative(self) -> None:
        self.assertFalse(has_protocol("//example.com"))
        self.assertTrue(has_protocol("//example.com", accept_relative=True))
        self.assertFalse(has_protocol("///", accept_relative=True))

    def test_strict_requires_slash(self) -> None:
        self.assertFalse(has_protocol("mailto:someone@example.com", strict=True))
        self.assertTrue(has_protocol("ftp:/x", strict=True))
        self.assertTrue(has_protocol("https://example.com", strict=True))

    def test_script_protocols(self) -> None:
        for protocol in ["javascript:", "JavaScript:", "data:", "blob:", "vbscript:", "  data:"]:
            with self.subTest(protocol=protocol):
                self.assertTrue(is_script_protocol(protocol))
        self.assertFalse(is_script_protocol("http:"))
        self.assertFalse(is_script_protocol(None))
        self.assertFalse(is_script_protocol(""))


class RewriteProtocolTests(unittest.TestCase):
    def test_with_http(self) -> None:
        self.assertEqual(with_http("example.com"), "http://example.com")
        self.assertEqual(with_http("https://example.com/a"), "http://example.com/a")

    def test_with_https(self) -> None:
        self.assertEqual(with_https("http://example.com"), "https://example.com")
        self.assertEqual(with_https("//example.com"), "https://example.com")

    def test_with_protocol(self) -> None:
        self.assertEqual(with_protocol("ftp://example.com", "sftp://"), "sftp://example.com")

    def test_without_protocol(self) -> None:
        self.assertEqual(without_protocol("http://example.com/a"), "example.com/a")
        self.assertEqual(without_protocol("mailto:a@b.c"), "a@b.c")
        self.assertEqual(without_protocol("example.com"), "example.com")


if __name__ == "__main__":
    unittest.main()
