"""Interactive translator: asks for words and looks them up in vocabulary."""

from tarjimani.config import TranslatorConfig
from tarjimani.language import describe, get_color
from tarjimani.ui import Colorized, Formatted, Interface, Text, Title
from tarjimani.vocabulary import Vocabulary

__author__ = "Tarjimani developers"


class Translator:
    """Interactive loop over the vocabulary.

    The user is asked for the source language, the target language and the
    word.  Known words are translated, unknown ones are added to the vocabulary
    with the translation provided by the user.
    """

    def __init__(
        self,
        vocabulary: Vocabulary,
        interface: Interface,
        config: TranslatorConfig,
    ) -> None:
        self.vocabulary: Vocabulary = vocabulary
        self.interface: Interface = interface
        self.config: TranslatorConfig = config

    @staticmethod
    def format_language(code: str) -> Colorized:
        """Get colorized language code."""
        return Colorized(code, get_color(code))

    def ask(self, prompt: str) -> str | None:
        """Ask user for input.

        :return: user input or `None` if user wants to exit
        """
        try:
            answer: str = self.interface.input(prompt)
        except EOFError:
            return None

        if answer == self.config.exit_command:
            return None

        return answer

    def run(self) -> None:
        """Run the main loop until the user types the exit command."""

        codes: str = "/".join(self.config.languages)

        self.interface.print(Title("Welcome to the translator!"))
        self.interface.print(
            "Supported languages: "
            + ", ".join(
                f"{code} ({describe(code)})" for code in self.config.languages
            )
            + "."
        )
        self.interface.print(
            f'Type "{self.config.exit_command}" to quit the program.'
        )

        while True:
            self.interface.print("")

            source_language: str | None = self.ask(
                f"Enter source language ({codes}): "
            )
            if source_language is None:
                break

            target_language: str | None = self.ask(
                f"Enter target language ({codes}): "
            )
            if target_language is None:
                break

            word: str | None = self.ask("Enter word to translate: ")
            if word is None:
                break

            if not self.translate(source_language, target_language, word):
                break

        self.interface.print("Exiting...")

    def translate(
        self, source_language: str, target_language: str, word: str
    ) -> bool:
        """Show translation of the word or add it to the vocabulary.

        :return: false if the user wants to exit instead of adding the word
        """

        self.interface.print(
            Text()
            .add("Translating ")
            .add(Formatted(word, "bold"))
            .add(" from ")
            .add(self.format_language(source_language))
            .add(" to ")
            .add(self.format_language(target_language))
            .add("...")
        )

        translation: str | None = self.vocabulary.lookup(source_language, word)

        if translation is not None:
            self.interface.print(
                Text().add("Translation: ").add(Formatted(translation, "bold"))
            )
            return True

        self.interface.print(f"Word `{word}` was not found in the vocabulary.")
        return self.add_word(source_language, target_language, word)

    def add_word(
        self, source_language: str, target_language: str, word: str
    ) -> bool:
        """Ask user for the translation and save it to the vocabulary file.

        :return: false if the user wants to exit, nothing is added then
        """
        translation: str | None = self.ask(
            f"Enter translation of `{word}` to {describe(target_language)}: "
        )
        if translation is None:
            return False

        self.vocabulary.insert(
            source_language, word, target_language, translation
        )
        self.vocabulary.save(self.config.vocabulary_path)

        self.interface.print(
            f"Word `{word}` added to the vocabulary as `{translation}`."
        )
        return True
