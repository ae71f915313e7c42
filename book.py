from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from utils.validators import NumberValidator, TextValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElectronicEdition:
    """Downloadable copy, sized in megabytes."""

    file_size_mb: float

    kind = "electronic"
    label = "E-Book"

    def __post_init__(self) -> None:
        if not NumberValidator.is_positive(self.file_size_mb):
            raise ValueError(f"File size must be a positive number, got {self.file_size_mb!r}.")

    def details(self) -> str:
        return f"Size: {self.file_size_mb}MB"

    def to_dict(self) -> dict:
        return {"file_size_mb": self.file_size_mb}


@dataclass(frozen=True)
class PrintedEdition:
    """Paper copy with a page count."""

    pages: int

    kind = "printed"
    label = "Printed Book"

    def __post_init__(self) -> None:
        if not NumberValidator.is_positive_int(self.pages):
            raise ValueError(f"Page count must be a positive integer, got {self.pages!r}.")

    def details(self) -> str:
        return f"Pages: {self.pages}"

    def to_dict(self) -> dict:
        return {"pages": self.pages}


Edition = Union[ElectronicEdition, PrintedEdition]


class Book:
    """Represents a single copy held in the library catalog.

    The kind-specific data lives in ``edition``; everything else is shared.
    A new book is always available. Availability is flipped only by
    :meth:`borrow` and :meth:`give_back`, and callers are expected to check
    :meth:`is_available` before borrowing.
    """

    def __init__(self, title: str, author: str, edition: Edition) -> None:
        if not TextValidator.validate_title(title):
            raise ValueError(f"Invalid title: {title!r}")
        if not TextValidator.validate_author(author):
            raise ValueError(f"Invalid author: {author!r}")
        self.title = title.strip()
        self.author = author.strip()
        self.edition = edition
        self.available = True

    @classmethod
    def electronic(cls, title: str, author: str, file_size_mb: float) -> "Book":
        return cls(title, author, ElectronicEdition(file_size_mb))

    @classmethod
    def printed(cls, title: str, author: str, pages: int) -> "Book":
        return cls(title, author, PrintedEdition(pages))

    @property
    def kind(self) -> str:
        return self.edition.kind

    def is_available(self) -> bool:
        return self.available

    def borrow(self) -> None:
        self.available = False
        logger.debug(f"Book marked as borrowed: {self.title}")

    def give_back(self) -> None:
        self.available = True
        logger.debug(f"Book marked as available: {self.title}")

    def describe(self) -> str:
        return f"{self.edition.label}: {self.title} | Author: {self.author} | {self.edition.details()}"

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return self.describe()

    def __repr__(self) -> str:
        return f"Book(title={self.title!r}, author={self.author!r}, edition={self.edition!r})"

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "author": self.author,
            "kind": self.kind,
            "available": self.available,
            **self.edition.to_dict(),
        }
