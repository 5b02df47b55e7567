import logging

import pytest

from lingo.config.game_settings import EMBEDDED_WORD_LIST, SUGGESTION_LIMIT
from lingo.models.dictionary import Dictionary
from lingo.services.dictionary_service import (
    DictionaryError, DictionarySourceError, DuplicateWordError, EmptyDictionaryError,
    find_duplicates, load_dictionary, parse_words, read_word_source
)


def test_filters_to_word_length():
    dictionary = parse_words("apple\nbee\nbananas\nchair\n")
    assert list(dictionary) == ["apple", "chair"]


def test_words_are_sorted():
    dictionary = parse_words("chair\napple\nbeach\n")
    assert dictionary.words == ("apple", "beach", "chair")


def test_restricts_to_typeable_letters():
    text = "Paris\napple\ncafé!\nab-cd\nchair\n"
    assert list(parse_words(text)) == ["apple", "chair"]


def test_alphabet_restriction_can_be_disabled():
    dictionary = parse_words("Paris\napple\n", restrict_alphabet=False)
    assert list(dictionary) == ["apple", "paris"]


def test_unrestricted_duplicates_are_case_folded():
    with pytest.raises(DuplicateWordError) as excinfo:
        parse_words("Paris\nparis\napple\n", restrict_alphabet=False)
    assert excinfo.value.duplicates == ["paris"]


def test_surrounding_whitespace_and_crlf_are_stripped():
    assert list(parse_words("apple\r\n  beach \r\n")) == ["apple", "beach"]


def test_custom_word_length():
    dictionary = parse_words("cat\ndog\nhorse\n", word_length=3)
    assert list(dictionary) == ["cat", "dog"]
    assert dictionary.word_length == 3


def test_duplicates_are_fatal():
    with pytest.raises(DuplicateWordError) as excinfo:
        parse_words("apple\nchair\napple\nbeach\n")
    assert excinfo.value.duplicates == ["apple"]
    assert isinstance(excinfo.value, DictionaryError)


def test_duplicates_of_other_lengths_are_ignored():
    assert list(parse_words("bee\nbee\napple\n")) == ["apple"]


def test_find_duplicates_reports_each_word_once():
    assert find_duplicates(["a", "a", "a", "b", "c", "c"]) == ["a", "c"]


def test_empty_after_filtering_is_fatal():
    with pytest.raises(EmptyDictionaryError):
        parse_words("cat\nhorses\nParis\n")


def test_unreadable_source_is_fatal(tmp_path):
    with pytest.raises(DictionarySourceError):
        read_word_source(str(tmp_path / "missing.txt"))


def test_loading_is_idempotent(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("chair\napple\nbeach\n", encoding="utf-8")
    assert load_dictionary(str(path)) == load_dictionary(str(path))


def test_embedded_word_list_loads():
    dictionary = load_dictionary()
    assert len(dictionary) > 100
    assert all(len(word) == 5 for word in dictionary)
    assert read_word_source() == read_word_source(EMBEDDED_WORD_LIST)


def test_load_logs_alphabet(caplog):
    caplog.set_level(logging.INFO, logger="lingo_game")
    dictionary = load_dictionary()
    assert "dictionary_loaded" in caplog.text
    assert "".join(dictionary.alphabet) in caplog.text


def test_alphabet_is_sorted_and_unique():
    assert Dictionary(["cab", "bad"], 3).alphabet == ["a", "b", "c", "d"]


def test_membership():
    dictionary = Dictionary(["apple", "beach"], 5)
    assert "apple" in dictionary
    assert "zzzzz" not in dictionary
    assert len(dictionary) == 2


def test_suggestions_match_prefix_in_order():
    dictionary = Dictionary(["beach", "bench", "berry", "apple", "bison"], 5)
    assert dictionary.suggestions("be") == ["beach", "bench", "berry"]
    assert dictionary.suggestions("be", limit=2) == ["beach", "bench"]
    assert dictionary.suggestions("x") == []


def test_suggestions_for_empty_prefix_are_limited():
    dictionary = load_dictionary()
    assert dictionary.suggestions("", SUGGESTION_LIMIT) == list(dictionary.words[:SUGGESTION_LIMIT])
