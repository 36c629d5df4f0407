from __future__ import annotations

import unittest

import tests._path  # noqa: F401

from urlkit.query import encode_query_item, parse_query, stringify_query


class ParseQueryTests(unittest.TestCase):
    def test_basic(self) -> None:
        self.assertEqual(parse_query("name=John&age=25"), {"name": "John", "age": "25"})

    def test_leading_question_mark(self) -> None:
        self.assertEqual(parse_query("?type=user&id=123"), {"type": "user", "id": "123"})

    def test_repeated_keys_become_lists(self) -> None:
        self.assertEqual(parse_query("tag=js&tag=ts"), {"tag": ["js", "ts"]})
        self.assertEqual(parse_query("a=1&a=2&a=3"), {"a": ["1", "2", "3"]})

    def test_empty_values(self) -> None:
        self.assertEqual(parse_query("empty=&flag"), {"empty": "", "flag": ""})

    def test_decoding(self) -> None:
        self.assertEqual(parse_query("q=hello+world%21&u=%E5%A5%BD"), {"q": "hello world!", "u": "好"})

    def test_empty_input(self) -> None:
        self.assertEqual(parse_query(""), {})
        self.assertEqual(parse_query("&&"), {})


class StringifyQueryTests(unittest.TestCase):
    def test_encode_query_item(self) -> None:
        self.assertEqual(encode_query_item("age", 25), "age=25")
        self.assertEqual(encode_query_item("active", True), "active=true")
        self.assertEqual(encode_query_item("tags", ["js", "ts"]), "tags=js&tags=ts")
        self.assertEqual(encode_query_item("empty", None), "empty")
        self.assertEqual(encode_query_item("k", ""), "k")
        self.assertEqual(encode_query_item("ratio", 1.0), "ratio=1")
        self.assertEqual(encode_query_item("ratio", 1.5), "ratio=1.5")

    def test_stringify(self) -> None:
        self.assertEqual(stringify_query({"a": 1, "b": None, "c": "3"}), "a=1&b&c=3")
        self.assertEqual(stringify_query({"x": [], "y": "1"}), "y=1")
        self.assertEqual(stringify_query({}), "")

    def test_objects_are_json_encoded(self) -> None:
        self.assertEqual(stringify_query({"user": {"name": "x"}}), "user=%7B%22name%22:%22x%22%7D")

    def test_special_characters_survive_parse(self) -> None:
        query = {"q": "a b&c=d", "list": ["1", "2"], "名": "值"}
        self.assertEqual(parse_query(stringify_query(query)), query)


if __name__ == "__main__":
    unittest.main()
