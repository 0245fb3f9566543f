import io
import os
import socket
import unittest

from fluent_contracts import utils
from fluent_contracts.utils import ParseOption
from tests._util import tmp_bytes_file, tmp_dir


class TextHelperTests(unittest.TestCase):
    def test_palindrome_is_case_insensitive(self):
        self.assertTrue(utils._is_palindrome("Racecar"))
        self.assertTrue(utils._is_palindrome(""))
        self.assertTrue(utils._is_palindrome("a"))
        self.assertFalse(utils._is_palindrome("ab"))

    def test_palindrome_is_whitespace_sensitive(self):
        self.assertFalse(utils._is_palindrome("A man a plan a canal Panama"))
        self.assertTrue(utils._is_palindrome("ab ba"))

    def test_alphanumeric(self):
        self.assertTrue(utils._is_alphanumeric("abc123"))
        self.assertTrue(utils._is_alphanumeric(""))
        self.assertFalse(utils._is_alphanumeric("abc 123"))

    def test_luhn(self):
        self.assertTrue(utils._is_luhn_valid("4539148803436467"))
        self.assertTrue(utils._is_luhn_valid("4539-1488-0343-6467"))
        self.assertFalse(utils._is_luhn_valid("4539148803436468"))
        self.assertFalse(utils._is_luhn_valid("4539x48803436467"))
        self.assertFalse(utils._is_luhn_valid(""))
        self.assertFalse(utils._is_luhn_valid(" - "))


class ParseTests(unittest.TestCase):
    def test_email(self):
        self.assertTrue(utils._try_parse(ParseOption.EMAIL_ADDRESS, "jane@example.com"))
        self.assertFalse(utils._try_parse(ParseOption.EMAIL_ADDRESS, "jane.example.com"))

    def test_url(self):
        self.assertTrue(utils._try_parse(ParseOption.URL, "https://example.com/a?b=c"))
        self.assertFalse(utils._try_parse(ParseOption.URL, "example.com"))
        self.assertFalse(utils._try_parse(ParseOption.URL, "http://exa mple.com"))

    def test_ip_address(self):
        self.assertTrue(utils._try_parse(ParseOption.IP_ADDRESS, "192.168.1.1"))
        self.assertTrue(utils._try_parse(ParseOption.IP_ADDRESS, "::1"))
        self.assertFalse(utils._try_parse(ParseOption.IP_ADDRESS, "192.168.1"))

    def test_guid(self):
        self.assertTrue(utils._try_parse(ParseOption.GUID, "12345678-1234-5678-1234-567812345678"))
        self.assertFalse(utils._try_parse(ParseOption.GUID, "1234"))

    def test_base64(self):
        self.assertTrue(utils._try_parse(ParseOption.BASE64, "aGVsbG8="))
        self.assertFalse(utils._try_parse(ParseOption.BASE64, "aGVsbG8"))
        self.assertFalse(utils._try_parse(ParseOption.BASE64, "a$b="))

    def test_hexadecimal(self):
        self.assertTrue(utils._try_parse(ParseOption.HEXADECIMAL, "0xFF"))
        self.assertTrue(utils._try_parse(ParseOption.HEXADECIMAL, "deadBEEF"))
        self.assertFalse(utils._try_parse(ParseOption.HEXADECIMAL, "0x"))
        self.assertFalse(utils._try_parse(ParseOption.HEXADECIMAL, "xyz"))

    def test_option_value_is_accepted(self):
        self.assertTrue(utils._try_parse("hex", "ff"))

    def test_unknown_option_raises(self):
        with self.assertRaisesRegex(ValueError, "Unsupported parse option"):
            utils._try_parse("yaml", "a: 1")


class PathHelperTests(unittest.TestCase):
    def test_extension(self):
        self.assertEqual(utils._normalise_extension("txt"), ".txt")
        self.assertEqual(utils._normalise_extension(".txt"), ".txt")
        self.assertTrue(utils._has_extension("report.CSV", "csv"))
        self.assertFalse(utils._has_extension("report", "csv"))

    def test_hidden(self):
        with tmp_dir() as td:
            hidden = td / ".secret"
            hidden.write_text("x")
            shown = td / "plain"
            shown.write_text("x")
            self.assertTrue(utils._is_hidden(hidden))
            self.assertFalse(utils._is_hidden(shown))

    @unittest.skipIf(os.name == "nt", "POSIX permission bits")
    def test_read_only(self):
        path = tmp_bytes_file()
        try:
            self.assertFalse(utils._is_read_only(path))
            os.chmod(path, 0o444)
            self.assertTrue(utils._is_read_only(path))
            os.chmod(path, 0o464)
            self.assertTrue(utils._is_read_only(path))
            os.chmod(path, 0o244)
            self.assertFalse(utils._is_read_only(path))
        finally:
            os.chmod(path, 0o644)
            path.unlink()

    def test_directory_is_empty(self):
        with tmp_dir() as td:
            self.assertTrue(utils._directory_is_empty(td))
            (td / "sub").mkdir()
            self.assertFalse(utils._directory_is_empty(td))


class StreamHelperTests(unittest.TestCase):
    def test_stream_length_restores_position(self):
        buf = io.BytesIO(b"abcdef")
        buf.seek(2)
        self.assertEqual(utils._stream_length(buf), 6)
        self.assertEqual(buf.tell(), 2)

    def test_can_timeout(self):
        self.assertFalse(utils._can_timeout(io.BytesIO()))
        a, b = socket.socketpair()
        try:
            reader = a.makefile("rb")
            try:
                self.assertTrue(utils._can_timeout(reader))
            finally:
                reader.close()
        finally:
            a.close()
            b.close()


if __name__ == "__main__":
    unittest.main()
