import unittest

from viewattrs.errors import SerializationError
from viewattrs.io_utils import html_safe_json_dumps


class HtmlSafeJsonTest(unittest.TestCase):
    def test_hex_escapes_html_characters(self) -> None:
        encoded = html_safe_json_dumps(["<b>", "it's", 'say "hi"', "a&b"])
        self.assertEqual(
            encoded,
            '["\\u003Cb\\u003E","it\\u0027s","say \\u0022hi\\u0022","a\\u0026b"]',
        )

    def test_keys_are_escaped_too(self) -> None:
        self.assertEqual(html_safe_json_dumps({"<k>": 1}), '{"\\u003Ck\\u003E":1}')

    def test_trailing_backslash_is_not_mistaken_for_quote(self) -> None:
        self.assertEqual(html_safe_json_dumps(["a\\"]), '["a\\\\"]')
        self.assertEqual(html_safe_json_dumps(['\\"']), '["\\\\\\u0022"]')

    def test_slashes_are_not_escaped(self) -> None:
        self.assertEqual(html_safe_json_dumps(["/a/b"]), '["/a/b"]')

    def test_empty_containers(self) -> None:
        self.assertEqual(html_safe_json_dumps([]), "[]")
        self.assertEqual(html_safe_json_dumps({}), "{}")

    def test_scalars_and_null(self) -> None:
        self.assertEqual(html_safe_json_dumps(None), "null")
        self.assertEqual(html_safe_json_dumps([1, 2.5, True]), "[1,2.5,true]")

    def test_unencodable_values_raise(self) -> None:
        with self.assertRaises(SerializationError):
            html_safe_json_dumps([object()])

        cyclic: dict = {}
        cyclic["self"] = cyclic
        with self.assertRaises(SerializationError):
            html_safe_json_dumps(cyclic)


if __name__ == "__main__":
    unittest.main()
