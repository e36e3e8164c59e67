from __future__ import annotations

import unittest

from shingles.tokenizer import STOPWORDS, LatinRegexTokenizer, is_stopword, sentences, words


class SentencesTestCase(unittest.TestCase):
    def test_split_on_punctuation(self) -> None:
        self.assertEqual(list(sentences("Hello world. How are you?")), ["Hello world", "How are you"])

    def test_all_delimiters(self) -> None:
        text = "a b, c d; e f - g h! i j? k l."
        self.assertEqual(list(sentences(text)), ["a b", "c d", "e f", "g h", "i j", "k l"])

    def test_hyphen_is_sentence_delimiter(self) -> None:
        self.assertEqual(list(sentences("well-known fact")), ["well", "known fact"])

    def test_newline_is_not_delimiter(self) -> None:
        self.assertEqual(list(sentences("a b\nc d")), ["a b\nc d"])

    def test_empty_text_yields_nothing(self) -> None:
        self.assertEqual(list(sentences("")), [])
        self.assertEqual(list(sentences("..., ;!?")), [])

    def test_restartable(self) -> None:
        text = "one two. three four"
        self.assertEqual(list(sentences(text)), list(sentences(text)))


class WordsTestCase(unittest.TestCase):
    def test_keeps_case_without_normalize(self) -> None:
        self.assertEqual(words("The Cat sat on THE mat", False), ["The", "Cat", "sat", "on", "THE", "mat"])

    def test_normalize_lowercases_and_drops_stopwords(self) -> None:
        self.assertEqual(words("The Cat sat on THE mat", True), ["cat", "sat", "mat"])

    def test_word_characters(self) -> None:
        self.assertEqual(words("Don't stop_me now-ish 42", False), ["Don't", "stop_me", "now-ish", "42"])

    def test_empty_sentence(self) -> None:
        self.assertEqual(words("", True), [])
        self.assertEqual(words("   ", False), [])


class StopwordsTestCase(unittest.TestCase):
    def test_table(self) -> None:
        self.assertIn("the", STOPWORDS)
        self.assertNotIn("cat", STOPWORDS)
        self.assertTrue(is_stopword("THE"))
        self.assertFalse(is_stopword("Lemon"))


class LatinRegexTokenizerTestCase(unittest.TestCase):
    def test_tokenize_groups_words_by_sentence(self) -> None:
        tokenizer = LatinRegexTokenizer()
        self.assertEqual(
            tokenizer.tokenize("The cat sat. A dog, the end", normalize=True),
            [["cat", "sat"], ["dog"], ["end"]],
        )

    def test_tokenize_skips_sentences_without_words(self) -> None:
        tokenizer = LatinRegexTokenizer()
        self.assertEqual(tokenizer.tokenize("the. a, an", normalize=True), [])


if __name__ == "__main__":
    unittest.main()
