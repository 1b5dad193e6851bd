from pathlib import Path

import pytest

from semparser.dictionaries import Dictionary, WordDictionary, load_word_list
from semparser.parser.model import FoundWord, Word


def test_word_requires_value_and_non_negative_frequency() -> None:
    with pytest.raises(ValueError):
        Word("")
    with pytest.raises(ValueError):
        Word("hello", frequency=-1)


def test_word_defaults_identifier_to_value() -> None:
    word = Word("hello", expressions=["greeting(hello)"])

    assert word.identifier == "hello"
    assert word.expressions == frozenset({"greeting(hello)"})


def test_found_word_reads_through_to_word() -> None:
    found = FoundWord(Word("Hi", identifier="hi", frequency=3, is_part_of_phrase=True), False, 0.5)

    assert found.value == "Hi"
    assert found.identifier == "hi"
    assert found.frequency == 3
    assert found.is_part_of_phrase is True


def test_word_dictionary_keeps_insertion_order() -> None:
    dictionary = WordDictionary()
    dictionary.add_word("zebra")
    dictionary.add_word("apple")
    dictionary.add_word("mango")

    assert [word.value for word in dictionary.get_words()] == ["zebra", "apple", "mango"]
    assert len(dictionary) == 3
    assert isinstance(dictionary, Dictionary)


def test_lookup_term_is_case_insensitive_and_returns_homographs() -> None:
    dictionary = WordDictionary()
    dictionary.add_word("Bank", expressions=["finance(bank)"], identifier="bank.0")
    dictionary.add_word("bank", expressions=["river(bank)"], identifier="bank.1")

    found = dictionary.lookup_term("BANK")

    assert [item.identifier for item in found] == ["bank.0", "bank.1"]
    assert all(item.is_exact and item.accuracy == 1.0 for item in found)
    assert "bAnK" in dictionary
    assert dictionary.lookup_term("banks") == []


def test_load_word_list_reads_plain_and_counted_lines(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("# header\nhello 1,200\nhelp\n\nbroken x\nhallo 7\n")

    dictionary = load_word_list(path, language_code="de")

    assert [(word.value, word.frequency) for word in dictionary] == [
        ("hello", 1200),
        ("help", 0),
        ("hallo", 7),
    ]
    assert dictionary.language_code == "de"


def test_load_word_list_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_word_list(tmp_path / "missing.txt")
