"""Request-scoped data structures passed between the adapter and the views."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class FailureKind(str, Enum):
    """Stage of the conversion that failed."""

    NETWORK = "network"
    PARSE = "parse"
    EXTRACTION = "extraction"


@dataclass(frozen=True, slots=True)
class ReaderArticle:
    url: str
    title: str
    content: str


@dataclass(frozen=True, slots=True)
class ReaderFailure:
    url: str
    kind: FailureKind
    detail: str = ""


ReaderResult = Union[ReaderArticle, ReaderFailure]
