"""
Word extraction for corpora and poem inputs.

A word is a maximal run of non-whitespace characters. Runs of spaces,
tabs and newlines all separate words, and punctuation stays attached to
its word (``"system."`` is one word). Splitting is done with NLTK's
``WhitespaceTokenizer``. It is purely regex-based, so no NLTK data
download is needed.

The tokenizer's ``\\s`` is Unicode-aware: non-breaking spaces (U+00A0),
ideographic spaces and other Unicode whitespace separate words too, not
only ASCII spaces, tabs and newlines.
"""

import logging
from typing import Iterable, Iterator, List

from nltk.tokenize import WhitespaceTokenizer

logger = logging.getLogger(__name__)

_TOKENIZER = WhitespaceTokenizer()


def extract_words(text: str) -> List[str]:
    """Split *text* into words, preserving their case.

    Args:
        text: Arbitrary text; may be empty or whitespace-only.

    Returns:
        Words in order of appearance (empty list for blank text).
    """
    if not text:
        return []
    return _TOKENIZER.tokenize(text)


def normalise(word: str) -> str:
    """Canonical (case-folded) form of *word* used as a vertex label."""
    return word.lower()


def iter_lines_as_text(lines: Iterable[str]) -> Iterator[str]:
    """Yield each line's content followed by a single space separator.

    Line terminators are dropped so that line boundaries tokenise like
    inline whitespace.
    """
    for line in lines:
        yield line.rstrip("\r\n")
        yield " "
