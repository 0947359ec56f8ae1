"""Supported languages."""

from __future__ import annotations

import re
from dataclasses import dataclass

from colour import Color
from iso639 import Lang as ISO639Language

__author__ = "Tarjimani developers"

DEFAULT_COLOR: Color = Color("#888888")


LanguageConfig = str
"""2-letter language code."""


@dataclass
class Language:
    """Natural language description."""

    code: str
    """2-letter language code."""

    color: Color
    """Language color."""

    def __post_init__(self) -> None:
        self.iso639_language: ISO639Language = ISO639Language(self.code)

    @classmethod
    def from_code(cls, code: str) -> Language:
        """Get language by its code.

        :param code: ISO 639-1:2002 two-letter code
        """
        for language in KnownLanguages.get_languages():
            if code == language.get_code():
                return language

        raise LanguageNotFound(code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Language):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def get_code(self) -> str:
        """Get ISO 639-1:2002 two-letter code."""
        return self.code

    def get_name(self) -> str:
        """Get language name in English without clarifications."""
        return re.sub(" \\(.*\\)", "", self.iso639_language.name)

    def get_color(self) -> str:
        """Get language color as a hexadecimal string."""
        return self.color.hex_l

    def __repr__(self) -> str:
        return self.get_code()


class KnownLanguages:
    """Languages supported by the application."""

    @classmethod
    def get_languages(cls) -> list[Language]:
        """Return all fields of the class."""
        return [
            value
            for value in cls.__dict__.values()
            if isinstance(value, Language)
        ]

    @classmethod
    def get_codes(cls) -> list[str]:
        """Return codes of all supported languages."""
        return [language.get_code() for language in cls.get_languages()]

    ENGLISH: Language = Language(
        "en",
        Color("#071B65"),  # Blue color of the United Kingdom flag.
    )
    RUSSIAN: Language = Language(
        "ru",
        Color("#1335A1"),  # Blue color of the Russia flag.
    )
    GEORGIAN: Language = Language(
        "ka",
        Color("#EA3323"),  # Red color of the Georgian flag.
    )


def describe(code: str) -> str:
    """Get human-readable language name by its code.

    Codes of unsupported languages are returned as is.
    """
    try:
        return Language.from_code(code).get_name()
    except LanguageNotFound:
        return code


def get_color(code: str) -> str:
    """Get color for the language code, gray for unsupported languages."""
    try:
        return Language.from_code(code).get_color()
    except LanguageNotFound:
        return DEFAULT_COLOR.hex_l


class LanguageNotFound(ValueError):
    """Language with the given code was not found."""

    code: str
    """ISO 639-1:2002 two-letter code."""
