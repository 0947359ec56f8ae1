"""Default Tarjimani paths."""

from pathlib import Path

__author__ = "Tarjimani developers"

TARJIMANI_DEFAULT_VOCABULARY: Path = Path("vocabulary.txt")
