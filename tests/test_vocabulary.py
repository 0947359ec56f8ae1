"""Test for vocabulary."""

from pathlib import Path

import pytest

from tarjimani.vocabulary import Entry, Vocabulary


def test_parse_line() -> None:
    """Test parsing of a well-formed vocabulary line."""

    assert Entry.from_line("en:hello=ka:გამარჯობა") == Entry(
        "en", "hello", "ka", "გამარჯობა"
    )


def test_parse_malformed_lines() -> None:
    """Lines with wrong number of separators should not be parsed."""

    for line in (
        "",
        "en:hello",
        "en:hello=ka",
        "en:hello=ka:a=b",
        "en:a:b=ka:c",
        "hello=გამარჯობა",
    ):
        assert Entry.from_line(line) is None


def test_empty_words() -> None:
    """Empty words and language codes are allowed."""

    assert Entry.from_line(":=:") == Entry("", "", "", "")


def test_lookup_both_directions() -> None:
    """Translation should be available from both languages."""

    vocabulary: Vocabulary = Vocabulary()
    vocabulary.insert("en", "book", "ru", "книга")

    assert vocabulary.lookup("en", "book") == "книга"
    assert vocabulary.lookup("ru", "книга") == "book"
    assert vocabulary.lookup("ru", "book") is None
    assert vocabulary.lookup("ka", "book") is None


def test_round_trip(tmp_path: Path) -> None:
    """Saved vocabulary should be read back in both directions."""

    path: Path = tmp_path / "vocabulary.txt"

    vocabulary: Vocabulary = Vocabulary()
    vocabulary.insert("en", "hello", "ka", "გამარჯობა")
    vocabulary.save(path)

    loaded: Vocabulary = Vocabulary.from_file(path)

    assert loaded.lookup("en", "hello") == "გამარჯობა"
    assert loaded.lookup("ka", "გამარჯობა") == "hello"
    assert len(loaded) == 2


def test_save_writes_both_directions(tmp_path: Path) -> None:
    """Every directional entry should be a separate line."""

    path: Path = tmp_path / "vocabulary.txt"

    vocabulary: Vocabulary = Vocabulary()
    vocabulary.insert("en", "hello", "ka", "გამარჯობა")
    vocabulary.save(path)

    with path.open(encoding="utf-8") as input_file:
        lines: list[str] = input_file.read().splitlines()

    assert sorted(lines) == [
        "en:hello=ka:გამარჯობა",
        "ka:გამარჯობა=en:hello",
    ]


def test_idempotence() -> None:
    """Inserting the same entry twice should not change the vocabulary."""

    vocabulary: Vocabulary = Vocabulary()
    vocabulary.insert("en", "cat", "ru", "кошка")
    vocabulary.insert("en", "cat", "ru", "кошка")

    assert len(vocabulary) == 2
    assert vocabulary.lookup("en", "cat") == "кошка"
    assert vocabulary.lookup("ru", "кошка") == "cat"


def test_malformed_lines_are_skipped(tmp_path: Path) -> None:
    """Malformed lines should neither crash loading nor add entries."""

    path: Path = tmp_path / "vocabulary.txt"
    with path.open("w", encoding="utf-8") as output_file:
        output_file.write(
            "en:hello ka:გამარჯობა\n"
            "en:hello=ka\n"
            "en=ka:გამარჯობა\n"
            "en:cat=ru:кошка\n"
        )

    vocabulary: Vocabulary = Vocabulary.from_file(path)

    assert len(vocabulary) == 2
    assert vocabulary.lookup("en", "hello") is None
    assert vocabulary.lookup("en", "cat") == "кошка"


def test_last_write_wins() -> None:
    """Later insertion should replace the previous translation."""

    vocabulary: Vocabulary = Vocabulary()
    vocabulary.insert("en", "hi", "ka", "ჰაი")
    vocabulary.insert("en", "hi", "ka", "სალამი")

    assert vocabulary.lookup("en", "hi") == "სალამი"
    assert vocabulary.lookup("ka", "სალამი") == "hi"


def test_last_write_wins_after_reload(tmp_path: Path) -> None:
    """Replaced translation should stay replaced after save and load."""

    path: Path = tmp_path / "vocabulary.txt"

    vocabulary: Vocabulary = Vocabulary()
    vocabulary.insert("en", "hi", "ka", "ჰაი")
    vocabulary.insert("en", "hi", "ka", "სალამი")
    vocabulary.save(path)

    loaded: Vocabulary = Vocabulary.from_file(path)

    assert loaded.lookup("en", "hi") == "სალამი"
    assert loaded.lookup("ka", "სალამი") == "hi"
    assert loaded.lookup("ka", "ჰაი") == "hi"
    assert len(loaded) == len(vocabulary)


def test_missing_file(tmp_path: Path) -> None:
    """Loading from a nonexistent file should give empty vocabulary."""

    vocabulary: Vocabulary = Vocabulary.from_file(tmp_path / "missing.txt")

    assert len(vocabulary) == 0
    assert vocabulary.get_languages() == []
    assert vocabulary.lookup("en", "hello") is None


def test_unknown_languages() -> None:
    """Any language code should create a new submapping."""

    vocabulary: Vocabulary = Vocabulary()
    vocabulary.insert("fr", "chat", "de", "Katze")

    assert sorted(vocabulary.get_languages()) == ["de", "fr"]
    assert vocabulary.get_words("fr") == ["chat"]
    assert vocabulary.get_words("en") == []


def test_round_trip_with_unicode_line_separators(tmp_path: Path) -> None:
    """Only `\\n` should separate lines of the vocabulary file.

    Characters like U+0085 or U+2028 are line boundaries for
    `str.splitlines`, but they are parts of words here.
    """
    path: Path = tmp_path / "vocabulary.txt"

    vocabulary: Vocabulary = Vocabulary()
    vocabulary.insert("en", "a\x85b", "ka", "x")
    vocabulary.insert("en", "c d", "ru", "y\x0cz")
    vocabulary.save(path)

    loaded: Vocabulary = Vocabulary.from_file(path)

    assert len(loaded) == 4
    assert loaded.lookup("en", "a\x85b") == "x"
    assert loaded.lookup("ka", "x") == "a\x85b"
    assert loaded.lookup("en", "c d") == "y\x0cz"
    assert loaded.lookup("ru", "y\x0cz") == "c d"
    assert loaded.lookup("en", "a") is None


def test_replaced_translations_after_reload(tmp_path: Path) -> None:
    """Entries should be restored in the order they were last updated."""

    path: Path = tmp_path / "vocabulary.txt"

    vocabulary: Vocabulary = Vocabulary()
    vocabulary.insert("ka", "x", "en", "a")
    vocabulary.insert("en", "b", "ka", "x")
    vocabulary.insert("en", "b", "ka", "z")
    vocabulary.save(path)

    loaded: Vocabulary = Vocabulary.from_file(path)

    for language, word in ("ka", "x"), ("ka", "z"), ("en", "a"), ("en", "b"):
        assert loaded.lookup(language, word) == vocabulary.lookup(
            language, word
        )
    assert loaded.lookup("ka", "x") == "b"
    assert sorted(x.to_line() for x in loaded.get_entries()) == sorted(
        x.to_line() for x in vocabulary.get_entries()
    )


def test_save_to_directory(tmp_path: Path) -> None:
    """File system errors should not be hidden."""

    vocabulary: Vocabulary = Vocabulary()
    vocabulary.insert("en", "hello", "ka", "გამარჯობა")

    with pytest.raises(OSError):
        vocabulary.save(tmp_path)


def test_load_from_directory(tmp_path: Path) -> None:
    """Reading a directory instead of a file should fail."""

    with pytest.raises(OSError):
        Vocabulary.from_file(tmp_path)
