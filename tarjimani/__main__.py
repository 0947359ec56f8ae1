"""Tarjimani entry point."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path

import coloredlogs

from tarjimani.config import TranslatorConfig
from tarjimani.paths import TARJIMANI_DEFAULT_VOCABULARY
from tarjimani.translator import Translator
from tarjimani.ui import Interface, get_interface
from tarjimani.vocabulary import Vocabulary

__author__ = "Tarjimani developers"

LOGGING_FORMAT: str = "%(levelname)s %(message)s"


def main() -> None:
    """Tarjimani entry point."""

    parser: ArgumentParser = ArgumentParser("Tarjimani")
    parser.add_argument(
        "--vocabulary",
        help="path to vocabulary file",
        default=TARJIMANI_DEFAULT_VOCABULARY.as_posix(),
    )
    parser.add_argument(
        "--interface",
        help="interface type",
        choices=["terminal", "rich"],
        default="rich",
    )
    parser.add_argument(
        "--verbose", help="show debug messages", action="store_true"
    )

    arguments: Namespace = parser.parse_args(sys.argv[1:])

    coloredlogs.install(
        level=logging.DEBUG if arguments.verbose else logging.WARNING,
        fmt=LOGGING_FORMAT,
    )

    config: TranslatorConfig = TranslatorConfig(
        vocabulary_path=Path(arguments.vocabulary)
    )
    interface: Interface = get_interface(arguments.interface)
    vocabulary: Vocabulary = Vocabulary.from_file(config.vocabulary_path)

    Translator(vocabulary, interface, config).run()


if __name__ == "__main__":
    main()
