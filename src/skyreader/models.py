# src/skyreader/models.py
import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from skyreader.config import DUPLICATE_SUFFIX, TEXT_ENCODING
from skyreader.core.readable import Duplicable, Readable

R = TypeVar("R", bound=Readable)


@dataclass(frozen=True)
class FileContent(Readable, Duplicable):
    """Immutable data class holding a file's name and its full text."""
    name: str
    text: str

    @classmethod
    def load(cls, name: str) -> "FileContent":
        """
        Reads the whole file as strict UTF-8.
        newline="" keeps line endings untouched so the text matches the bytes on disk.
        Raises OSError or UnicodeDecodeError; callers decide what to do with them.
        """
        with open(name, "r", encoding=TEXT_ENCODING, newline="") as f:
            text = f.read()
        return cls(name=name, text=text)

    def content(self) -> str:
        return self.text

    def duplicate_name(self) -> str:
        return f"{self.name}{DUPLICATE_SUFFIX}"

    def duplicate(self) -> Path:
        """Writes the content to <name>.duplicado, overwriting any existing file."""
        target = Path(self.duplicate_name())
        with open(target, "w", encoding=TEXT_ENCODING, newline="") as f:
            f.write(self.text)
        return target

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class ByteSum(Generic[R]):
    """A copy of a readable source paired with the sum of its encoded bytes."""
    source: R
    total: int

    @classmethod
    def from_source(cls, source: R) -> "ByteSum[R]":
        # Iterating bytes yields ints in 0..255
        encoded = source.content().encode(TEXT_ENCODING)
        total = 0
        for b in encoded:
            total += b
        return cls(source=copy.copy(source), total=total)
