import unittest

from application.services.highlighter import DEFAULT_CLOSE_TAG, DEFAULT_OPEN_TAG, Highlighter, highlight


def _mark(text: str) -> str:
    return f"{DEFAULT_OPEN_TAG}{text}{DEFAULT_CLOSE_TAG}"


class TestHighlight(unittest.TestCase):
    def test_identity_when_needle_absent(self):
        self.assertEqual(highlight("completely unrelated content", "unique text alpha"), "completely unrelated content")

    def test_case_insensitive_keeps_original_casing(self):
        self.assertEqual(highlight("Hello World again", "hello world"), f"{_mark('Hello World')} again")

    def test_marks_every_non_overlapping_match(self):
        self.assertEqual(highlight("aaaa", "aa"), _mark("aa") + _mark("aa"))
        self.assertEqual(highlight("x ab y AB", "ab"), f"x {_mark('ab')} y {_mark('AB')}")

    def test_metacharacters_are_literal(self):
        haystack = "contains a+b (test) exactly, not aab test"
        self.assertEqual(
            highlight(haystack, "a+b (test)"),
            f"contains {_mark('a+b (test)')} exactly, not aab test",
        )
        self.assertEqual(highlight("price is $5.00 [net]", ".*"), "price is $5.00 [net]")
        self.assertEqual(highlight("a\\b", "\\"), f"a{_mark(chr(92))}b")

    def test_empty_needle_matches_nothing(self):
        self.assertEqual(highlight("some text", ""), "some text")

    def test_empty_haystack(self):
        self.assertEqual(highlight("", "needle"), "")

    def test_length_changing_case_fold(self):
        # "İ".lower() is two code points long.
        self.assertEqual(highlight("İstanbul abc", "abc"), f"İstanbul {_mark('abc')}")

    def test_custom_markers(self):
        highlighter = Highlighter(open_tag="<mark>", close_tag="</mark>")
        self.assertEqual(highlighter.highlight("Say hello", "HELLO"), "Say <mark>hello</mark>")


if __name__ == "__main__":
    unittest.main()
