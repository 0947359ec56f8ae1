"""Tarjimani console user interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Self, override

from rich.console import Console
from rich.panel import Panel as RichElementPanel
from rich.text import Text as RichElementText

__author__ = "Tarjimani developers"

RichCompatible = RichElementText | RichElementPanel


class Element:
    """Interface element."""


class InlineElement(Element):
    """Inline element.

    Inline elements may be concatenated into one string.
    """


class BlockElement(Element):
    """Block element."""


class Text(InlineElement):
    """Text element."""

    def __init__(self, text: str | InlineElement | None = None):
        self.elements: list[InlineElement | str] = (
            [] if text is None else [text]
        )

    def add(self, element: InlineElement | str) -> Self:
        """Chainable method to add element to the text."""
        self.elements.append(element)
        return self


@dataclass
class Formatted(InlineElement):
    """Formatted text element."""

    text: InlineElement | str
    format_: str

    def __post_init__(self) -> None:
        assert self.format_ in ["bold", "italic", "underline"]


@dataclass
class Colorized(InlineElement):
    """Colorized text element."""

    text: InlineElement | str
    color: str


@dataclass
class Title(BlockElement):
    """Title of the program."""

    text: InlineElement | str


class Interface(ABC):
    """User input/output interface."""

    @abstractmethod
    def print(self, text: Element | str) -> None:
        """Simply print text message."""
        raise NotImplementedError()

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Return user input.

        :raises EOFError: if there is no more input
        """
        raise NotImplementedError()


class TerminalInterface(Interface):
    """Simple terminal interface without colors and formatting."""

    @override
    def print(self, text: Element | str) -> None:
        print(self.construct(text))

    def construct(self, element: Element | str) -> str:
        """Construct string from element."""

        if isinstance(element, str):
            return element

        if isinstance(element, Text):
            result: str = ""
            for sub_element in element.elements:
                result += self.construct(sub_element)
            return result

        # Ignore colors and formatting in terminal interface.
        if isinstance(element, (Formatted, Colorized, Title)):
            return self.construct(element.text)

        raise ValueError(
            f"Unsupported text type in terminal interface `{type(element)}`."
        )

    @override
    def input(self, prompt: str) -> str:
        return input(prompt)


class RichInterface(TerminalInterface):
    """Terminal interface with colors and panels."""

    def __init__(self) -> None:
        self.console: Console = Console(highlight=False)

    @override
    def print(self, text: Element | str) -> None:
        self.console.print(self.construct_rich(text))

    @override
    def input(self, prompt: str) -> str:
        return self.console.input(RichElementText(prompt))

    def construct_rich(self, element: Element | str) -> RichCompatible | str:
        """Construct rich element from text."""

        if isinstance(element, str):
            return RichElementText(element)

        if isinstance(element, Text):
            result: RichElementText = RichElementText()
            for sub_element in element.elements:
                result.append(self.construct_rich(sub_element))
            return result

        if isinstance(element, Title):
            return RichElementPanel(self.construct_rich(element.text))

        if isinstance(element, Formatted):
            sub_element = self.construct_rich(element.text)
            wrapped: RichElementText

            if isinstance(sub_element, RichElementText):
                wrapped = sub_element
            else:
                wrapped = RichElementText(sub_element)

            match element.format_:
                case "bold":
                    wrapped.stylize("bold")
                case "italic":
                    wrapped.stylize("italic")
                case "underline":
                    wrapped.stylize("underline")

            return wrapped

        if isinstance(element, Colorized):
            sub_element = self.construct_rich(element.text)
            if isinstance(sub_element, RichElementText):
                sub_element.stylize(element.color)
                return sub_element
            rich_element: RichElementText = RichElementText(sub_element)
            rich_element.stylize(element.color)
            return rich_element

        assert False, element


def get_interface(interface: str) -> Interface:
    """Get interface by its identifier."""

    match interface:
        case "terminal":
            return TerminalInterface()
        case "rich":
            return RichInterface()
        case _:
            raise ValueError(f"Unsupported interface: `{interface}`.")
