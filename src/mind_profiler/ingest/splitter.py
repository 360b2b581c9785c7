"""Split text into sentences and words.

Every feature in the engine is computed over this one segmentation so
that sentence and word counts agree across components.
"""

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Iterator


SENTENCE_BOUNDARY = re.compile(r"[.!?]+")

# Sentence body plus its terminator run, used where the terminator matters
TERMINATED_SENTENCE = re.compile(r"[^.!?]+[.!?]*")


def iter_sentences(text: str) -> Iterator[str]:
    """Yield non-empty sentence fragments split on runs of ``.``, ``!`` and ``?``."""
    for fragment in SENTENCE_BOUNDARY.split(text):
        if fragment.strip():
            yield fragment


def iter_words(text: str) -> Iterator[str]:
    """Yield whitespace-delimited words."""
    for match in re.finditer(r"\S+", text):
        yield match.group(0)


def split_into_sentences(text: str) -> list[str]:
    """Split text into sentences, discarding empty fragments."""
    return list(iter_sentences(text))


def split_into_words(text: str) -> list[str]:
    """Split text into words on whitespace."""
    return list(iter_words(text))


def split_with_terminators(text: str) -> list[str]:
    """Split text into sentences that keep their closing punctuation."""
    return [m.group(0) for m in TERMINATED_SENTENCE.finditer(text) if m.group(0).strip(".!? \t\r\n")]


def sentence_length(sentence: str) -> int:
    """Number of words in a sentence."""
    return len(sentence.split())


@dataclass(frozen=True)
class TextSegmentation:
    """Lazily computed sentences and words of a text.

    Tokens are computed on first access and can be iterated any number
    of times.
    """
    text: str

    @cached_property
    def sentences(self) -> tuple[str, ...]:
        return tuple(iter_sentences(self.text))

    @cached_property
    def words(self) -> tuple[str, ...]:
        return tuple(iter_words(self.text))

    @cached_property
    def lower(self) -> str:
        return self.text.lower()

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)

    @property
    def word_count(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)


def segment(text: str) -> TextSegmentation:
    """Create a segmentation for ``text``."""
    return TextSegmentation(text)
