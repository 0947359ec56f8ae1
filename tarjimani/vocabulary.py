"""Vocabulary: bidirectional mapping between words of different languages.

Vocabulary is stored in a plain text file, one entry per line:

    en:hello=ka:გამარჯობა

Every entry is added in both directions, so `hello` may be looked up in the
English submapping and `გამარჯობა` in the Georgian one.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Self

__author__ = "Tarjimani developers"

ENTRY_SEPARATOR: str = "="
LANGUAGE_SEPARATOR: str = ":"


@dataclass(frozen=True)
class Translation:
    """Word in some language, the value of a vocabulary submapping."""

    language: str
    """Language code of the word."""

    word: str
    """Word itself."""


@dataclass(frozen=True)
class Entry:
    """Association between words of two languages."""

    source_language: str
    source_word: str
    target_language: str
    target_word: str

    @classmethod
    def from_line(cls, line: str) -> Self | None:
        """Parse `<language>:<word>=<language>:<word>` line.

        :param line: line of the vocabulary file without the line break
        :return: entry or `None` if the line is malformed
        """
        parts: list[str] = line.split(ENTRY_SEPARATOR)
        if len(parts) != 2:
            return None

        source_parts: list[str] = parts[0].split(LANGUAGE_SEPARATOR)
        target_parts: list[str] = parts[1].split(LANGUAGE_SEPARATOR)
        if len(source_parts) != 2 or len(target_parts) != 2:
            return None

        return cls(
            source_parts[0], source_parts[1], target_parts[0], target_parts[1]
        )

    def to_line(self) -> str:
        """Serialize entry into the vocabulary file line."""
        return (
            f"{self.source_language}{LANGUAGE_SEPARATOR}{self.source_word}"
            f"{ENTRY_SEPARATOR}"
            f"{self.target_language}{LANGUAGE_SEPARATOR}{self.target_word}"
        )


class Vocabulary:
    """Words and their translations grouped by language."""

    def __init__(self) -> None:
        self.__data: dict[str, dict[str, Translation]] = {}
        self.__order: dict[tuple[str, str], None] = {}
        """Keys of directional entries, the last updated go last."""

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Create vocabulary and fill it from the file.

        :param path: path to the vocabulary file, it may not exist
        """
        vocabulary: Self = cls()
        vocabulary.load(path)
        return vocabulary

    def load(self, path: Path) -> None:
        """Read all well-formed entries from the file.

        Malformed lines are skipped.  If the file does not exist, nothing is
        read.

        :param path: path to the vocabulary file
        """
        if not path.exists():
            logging.info("Vocabulary file `%s` does not exist.", path)
            return

        logging.info("Loading vocabulary from `%s`...", path)
        with path.open(encoding="utf-8") as input_file:
            for line in input_file:
                line = line.rstrip("\n")
                entry: Entry | None = Entry.from_line(line)
                if entry is None:
                    logging.debug("Skipping malformed line `%s`.", line)
                    continue
                self.insert(
                    entry.source_language,
                    entry.source_word,
                    entry.target_language,
                    entry.target_word,
                )

    def insert(
        self,
        source_language: str,
        source_word: str,
        target_language: str,
        target_word: str,
    ) -> None:
        """Add translation in both directions.

        Previous translations of both words are replaced.
        """
        self.__data.setdefault(source_language, {})[source_word] = Translation(
            target_language, target_word
        )
        self.__data.setdefault(target_language, {})[target_word] = Translation(
            source_language, source_word
        )

        for key in (
            (source_language, source_word),
            (target_language, target_word),
        ):
            self.__order.pop(key, None)
            self.__order[key] = None

    def lookup(self, language: str, word: str) -> str | None:
        """Get translation of the word.

        :param language: language code of the word
        :param word: word to translate
        :return: translation or `None` if the word is not in the vocabulary
        """
        if (translation := self.get_translation(language, word)) is not None:
            return translation.word
        return None

    def get_translation(self, language: str, word: str) -> Translation | None:
        """Get translation of the word together with its language."""
        if language not in self.__data:
            return None
        return self.__data[language].get(word)

    def get_entries(self) -> list[Entry]:
        """Get all directional entries.

        Entries go in the order of their last update, so that reading them
        back in this order restores the same mapping, including translations
        replaced by later insertions.
        """
        entries: list[Entry] = []

        for language, word in self.__order:
            translation: Translation = self.__data[language][word]
            entries.append(
                Entry(language, word, translation.language, translation.word)
            )

        return entries

    def save(self, path: Path) -> None:
        """Rewrite the file with all entries of the vocabulary.

        Both directions of every translation are written as separate lines.

        :param path: path to the vocabulary file
        """
        with path.open("w", encoding="utf-8") as output_file:
            for entry in self.get_entries():
                output_file.write(entry.to_line() + "\n")

        logging.info("Vocabulary dumped to `%s`.", path)

    def get_languages(self) -> list[str]:
        """Get codes of all languages present in the vocabulary."""
        return list(self.__data.keys())

    def get_words(self, language: str) -> list[str]:
        """Get all words of the language."""
        return list(self.__data.get(language, {}).keys())

    def __len__(self) -> int:
        """Number of directional entries."""
        return sum(len(words) for words in self.__data.values())
