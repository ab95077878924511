# src/skyreader/core/readable.py
from abc import ABC, abstractmethod
from pathlib import Path


def reverse_word_order(text: str) -> str:
    """
    Splits text on runs of whitespace, reverses the words and joins them
    back together with no separator ("ola mundo" -> "mundoola").
    """
    words = text.split()
    words.reverse()
    return "".join(words)


class Readable(ABC):
    """Something built from a named resource that exposes its text."""

    @classmethod
    @abstractmethod
    def load(cls, name: str) -> "Readable":
        ...

    @abstractmethod
    def content(self) -> str:
        ...

    def reversed_word_order(self) -> str:
        # Subclasses may override; the default drops word separators.
        return reverse_word_order(self.content())


class Duplicable(ABC):
    @abstractmethod
    def duplicate(self) -> Path:
        """Writes an exact copy of the content and returns where it went."""
