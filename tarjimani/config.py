"""Configuration of the translator."""

from pathlib import Path

from pydantic.main import BaseModel

from tarjimani.language import KnownLanguages, LanguageConfig
from tarjimani.paths import TARJIMANI_DEFAULT_VOCABULARY

__author__ = "Tarjimani developers"


class TranslatorConfig(BaseModel):
    """Configuration of the interactive translator."""

    vocabulary_path: Path = TARJIMANI_DEFAULT_VOCABULARY
    """Path to the vocabulary file, created on the first save if absent."""

    languages: list[LanguageConfig] = KnownLanguages.get_codes()
    """Languages suggested to the user.

    Other language codes are accepted too, they are just not listed in the
    prompts.
    """

    exit_command: str = "exit"
    """User input that terminates the program at any prompt."""
