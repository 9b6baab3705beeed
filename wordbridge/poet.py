"""
Affinity-graph poem generator.

A ``GraphPoet`` is built from a corpus of text. Every word of the corpus,
lowercased, becomes a vertex. The edge ``w1 -> w2`` counts how many times
``w1`` is immediately followed by ``w2``. For example, the corpus::

    Hello, HELLO, hello, goodbye!

gives two edges: ``hello, -> hello,`` with weight 2 and
``hello, -> goodbye!`` with weight 1.

To write a poem, the poet tries to put a bridge word between each pair of
adjacent input words. The bridge between ``w1`` and ``w2`` is the ``b``
with the heaviest two-edge path ``w1 -> b -> w2``, where a path's weight
is the sum of its two edge weights. Ties go to the lexicographically
smallest ``b``. Input words keep their case; bridges are lowercase::

    >>> poet = GraphPoet("This is a test of the Mugar Omni Theater sound system.")
    >>> poet.poem("Test the system.")
    'Test of the system.'
"""

import logging
import os
from typing import List, Optional, Set, Union

from wordbridge.extractors.whitespace_extractor import (
    extract_words,
    iter_lines_as_text,
    normalise,
)
from wordbridge.graph import DEFAULT_REPRESENTATION, Graph, base, empty
from wordbridge.metrics import compute_metrics
from wordbridge.models import CorpusMetrics
from wordbridge.utils import timed

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class GraphPoet:
    """Poem generator backed by a word-affinity ``Graph``.

    The graph is built once at construction, owned privately and never
    returned to callers.

    Args:
        corpus: Raw corpus text. May be empty, which gives an empty graph.
        representation: Graph representation name (``"edges"`` or
            ``"vertices"``).
    """

    def __init__(
        self,
        corpus: str,
        representation: str = DEFAULT_REPRESENTATION,
    ) -> None:
        self._graph: Graph[str] = empty(representation)
        self._representation = representation
        with timed("Affinity graph build"):
            self._build(extract_words(corpus))
        if base.CHECK_REP:
            self._check_rep()

    @classmethod
    def from_file(
        cls,
        path: PathLike,
        representation: str = DEFAULT_REPRESENTATION,
        encoding: str = "utf-8",
    ) -> "GraphPoet":
        """Build a poet from the text file at *path*.

        The file is read line by line; each line is followed by a space
        so line breaks separate words like any other whitespace.

        Raises:
            OSError: if the file is missing or unreadable
                (``FileNotFoundError``, ``IsADirectoryError``, ...).
            UnicodeDecodeError: if the file is not valid *encoding* text.
        """
        with open(path, "r", encoding=encoding) as fh:
            text = "".join(iter_lines_as_text(fh))
        logger.info("Read corpus %s (%d characters).", path, len(text))
        return cls(text, representation=representation)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _build(self, words: List[str]) -> None:
        words = [normalise(w) for w in words]
        for word in words:
            self._graph.add(word)
        for current, following in zip(words, words[1:]):
            weight = self._graph.targets(current).get(following, 0)
            self._graph.set(current, following, weight + 1)
        logger.info(
            "Built affinity graph: %d words, %d adjacent pairs.",
            len(self._graph), max(len(words) - 1, 0),
        )

    def _check_rep(self) -> None:
        for word in self._graph.vertices():
            assert isinstance(word, str) and word, "word must be a non-empty string"
            assert word == normalise(word), f"word {word!r} is not case-folded"
            assert not any(ch.isspace() for ch in word), f"word {word!r} has whitespace"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def bridge(self, word1: str, word2: str) -> Optional[str]:
        """Return the best bridge word between *word1* and *word2*.

        Both words are compared case-insensitively. Returns ``None`` when
        no two-edge path ``word1 -> b -> word2`` exists.
        """
        outgoing = self._graph.targets(normalise(word1))
        if not outgoing:
            return None
        incoming = self._graph.sources(normalise(word2))

        best: Optional[str] = None
        best_weight = 0
        for candidate in sorted(outgoing.keys() & incoming.keys()):
            weight = outgoing[candidate] + incoming[candidate]
            if weight > best_weight:
                best, best_weight = candidate, weight

        logger.debug(
            "Bridge %r -> %r: %r (weight %d).", word1, word2, best, best_weight
        )
        return best

    def poem(self, text: str) -> str:
        """Generate a poem from *text*.

        Returns:
            *text* stripped when it has fewer than two words; otherwise
            its words (original case) with lowercase bridge words
            inserted where one exists, joined by single spaces.
        """
        words = extract_words(text)
        if len(words) <= 1:
            return text.strip()

        out = [words[0]]
        for current, following in zip(words, words[1:]):
            bridge = self.bridge(current, following)
            if bridge is not None:
                out.append(bridge)
            out.append(following)
        return " ".join(out)

    def vocabulary(self) -> Set[str]:
        """Return a snapshot of the lowercase corpus words."""
        return self._graph.vertices()

    def metrics(self) -> CorpusMetrics:
        """Return summary metrics of the affinity graph."""
        return compute_metrics(self._graph)

    @property
    def representation(self) -> str:
        return self._representation

    def __str__(self) -> str:
        return f"GraphPoet with {len(self._graph)} words"

    def __repr__(self) -> str:
        return f"GraphPoet(representation={self._representation!r}, words={len(self._graph)})"
